"""
Shared fixtures: STL encoders used to build test files.
"""

import logging
import struct
from pathlib import Path

import numpy as np
import pytest

from stl_volume import config


class StlWriter:
    """Writes binary and ASCII STL files into a temporary directory."""

    def __init__(self, directory: Path):
        self.directory = directory

    @staticmethod
    def encode_binary(facets, comment=b"binary test", count=None, attribute=0) -> bytes:
        data = bytearray(comment.ljust(80, b"\0")[:80])
        data += struct.pack("<I", len(facets) if count is None else count)
        for facet in facets:
            data += struct.pack("<12f", *np.asarray(facet, dtype=float).reshape(12))
            data += struct.pack("<H", attribute)
        return bytes(data)

    @staticmethod
    def ascii_facet(facet) -> str:
        facet = np.asarray(facet, dtype=float)
        lines = ["  facet normal " + " ".join(repr(float(x)) for x in facet[0]),
                 "    outer loop"]
        for vertex in facet[1:4]:
            lines.append("      vertex " + " ".join(repr(float(x)) for x in vertex))
        lines += ["    endloop", "  endfacet"]
        return "\n".join(lines) + "\n"

    @classmethod
    def encode_ascii(cls, facets, name="test") -> str:
        body = "".join(cls.ascii_facet(f) for f in facets)
        return f"solid {name}\n{body}endsolid {name}\n"

    def binary(self, filename, facets, **kwargs) -> Path:
        path = self.directory / filename
        path.write_bytes(self.encode_binary(facets, **kwargs))
        return path

    def ascii(self, filename, facets=None, text=None, name="test") -> Path:
        path = self.directory / filename
        path.write_text(text if text is not None else self.encode_ascii(facets, name=name))
        return path


@pytest.fixture
def stl_writer(tmp_path):
    return StlWriter(tmp_path)


@pytest.fixture
def single_facet():
    """One triangle (0,0,0), (1,0,0), (0,1,0) with +z normal."""
    return np.array([[
        [0.0, 0.0, 1.0],
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
    ]])


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by the command-line runner."""
    yield
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
