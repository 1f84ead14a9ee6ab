"""
ASCII STL decoding.

The grammar is read as a stream of whitespace-separated, case-sensitive
tokens::

    solid <name>
      facet normal nx ny nz
        outer loop
          vertex x y z   (x3)
        endloop
      endfacet
    endsolid

Only the first solid of a file is read.
"""

from __future__ import annotations

import logging
import re
from typing import BinaryIO, Iterator, List

import numpy as np

from .data_classes import DiagnosticKind, Mesh, Triangle
from .diagnostics import DiagnosticLog
from .validation import push_triangle

logger = logging.getLogger(__name__)

# Separators are C-locale whitespace only; latin-1 NBSP, NEL etc. stay inside tokens
_WHITESPACE = " \t\n\r\v\f"
_TOKEN = re.compile(r"[^ \t\n\r\v\f]+")
_FIRST_TOKEN = re.compile(r"[ \t\n\r\v\f]*([^ \t\n\r\v\f]+)")
_NUMBER = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf|infinity)",
    re.IGNORECASE,
)


def _read_xyz(tokens: Iterator[str]) -> np.ndarray:
    """Read three floats; raises StopIteration at end of input."""
    values = []
    for _ in range(3):
        token = next(tokens)
        if _NUMBER.fullmatch(token) is None:
            raise ValueError(f"expected a number, got '{token}'")
        values.append(float(token))
    return np.array(values, dtype=np.float64)


def _empty_vertices() -> List[np.ndarray]:
    return [np.zeros(3), np.zeros(3), np.zeros(3)]


def read_ascii_stl(stream: BinaryIO, mesh: Mesh, log: DiagnosticLog) -> int:
    """Decode an ASCII STL stream into ``mesh``.

    Unknown keywords and surplus vertices are reported and skipped. Reaching
    ``endsolid`` or the end of input finishes the mesh. A token that is not a
    number where a coordinate is expected is reported and stops decoding; the
    facet being read at that point is discarded.

    Returns
    -------
    int
        Number of facets submitted to the validator.
    """
    text = stream.read().decode("latin-1")

    match = _FIRST_TOKEN.match(text)
    if match is None or match.group(1) != "solid":
        logger.debug("%s: no 'solid' keyword, not an ASCII STL file", log.source)
        return 0

    line_end = text.find("\n", match.end())
    if line_end < 0:
        mesh.comment = text[match.end():].strip(_WHITESPACE)
        body = ""
    else:
        mesh.comment = text[match.end():line_end].strip(_WHITESPACE)
        body = text[line_end + 1:]

    tokens = iter(_TOKEN.findall(body))
    normal = np.zeros(3)
    vertices = _empty_vertices()
    n_vertices = 0
    submitted = 0

    try:
        for token in tokens:
            if token == "facet":
                continue
            elif token == "normal":
                normal = _read_xyz(tokens)
            elif token in ("outer", "loop"):
                n_vertices = 0
            elif token == "vertex":
                if n_vertices < 3:
                    vertices[n_vertices] = _read_xyz(tokens)
                    n_vertices += 1
                else:
                    log.warn(DiagnosticKind.EXTRA_VERTEX,
                             f"non-triangle vertices in facet {len(mesh)}", len(mesh))
                    for _ in range(3):
                        next(tokens)
            elif token == "endloop":
                continue
            elif token == "endfacet":
                push_triangle(mesh, Triangle(normal=normal, vertices=np.stack(vertices)), log)
                submitted += 1
                normal = np.zeros(3)
                vertices = _empty_vertices()
            elif token == "endsolid":
                break
            else:
                log.warn(DiagnosticKind.UNKNOWN_TOKEN, f"unknown '{token}'")
    except StopIteration:
        logger.debug("%s: input ended inside a facet", log.source)
    except ValueError as exc:
        log.warn(DiagnosticKind.MALFORMED_NUMBER, f"{exc} in facet {len(mesh)}, stopping", len(mesh))

    return submitted
