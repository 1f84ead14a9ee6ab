"""
Binary STL decoding.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from .constants import ATTRIBUTE_SIZE, COMMENT_SIZE, HEADER_SIZE, HEADER_STRUCT, RECORD_SIZE, RECORD_STRUCT
from .data_classes import Mesh, Triangle
from .diagnostics import DiagnosticLog
from .validation import push_triangle

logger = logging.getLogger(__name__)


def read_binary_stl(stream: BinaryIO, mesh: Mesh, log: DiagnosticLog) -> int:
    """Decode a binary STL stream into ``mesh``.

    The header's 80-byte comment is stored verbatim (latin-1, so every byte
    maps to one character, padding included). Each 48-byte record is passed
    through the validator; the 2-byte attribute field that follows it is read
    and discarded. It is not a byte count and never sizes a read.

    Parameters
    ----------
    stream : BinaryIO
        Stream positioned at the start of the file.
    mesh : Mesh
        Destination for accepted triangles.
    log : DiagnosticLog
        Receives validator diagnostics.

    Returns
    -------
    int
        Number of complete records decoded (accepted or not).
    """
    header = stream.read(HEADER_SIZE)
    if len(header) < HEADER_SIZE:
        logger.debug("%s: file too short for a binary header (%d bytes)", log.source, len(header))
        return 0

    comment, ntri = HEADER_STRUCT.unpack(header)
    mesh.comment = comment[:COMMENT_SIZE].decode("latin-1")

    decoded = 0
    for _ in range(ntri):
        chunk = stream.read(RECORD_SIZE)
        if len(chunk) < RECORD_SIZE:
            logger.debug("%s: header declares %d triangles, file ends after %d",
                         log.source, ntri, decoded)
            break
        push_triangle(mesh, Triangle.from_values(RECORD_STRUCT.unpack(chunk)), log)
        decoded += 1
        stream.read(ATTRIBUTE_SIZE)
    return decoded
