"""
ASCII / binary detection for STL files.

Some exporters write binary files whose header starts with "solid", the
keyword that opens an ASCII file. The header prefix alone is therefore not
trusted: if the bytes following the header contain anything outside printable
7-bit ASCII (plus tab, CR and LF), the file is binary.
"""

from __future__ import annotations

from typing import BinaryIO

from .. import config
from .constants import ASCII_PREFIX, HEADER_SIZE
from .data_classes import StlFormat


def has_binary_bytes(data: bytes) -> bool:
    """Return True if ``data`` contains bytes that cannot appear in ASCII STL."""
    for byte in data:
        if byte < 0x20 and byte not in config.ASCII_WHITESPACE_BYTES:
            return True
        if byte > 0x7E:
            return True
    return False


def detect_format(stream: BinaryIO) -> StlFormat:
    """Classify an open STL stream as ASCII or binary.

    Reads the 84-byte binary header and up to ``config.BINARY_SNIFF_BYTES``
    bytes after it. The stream position is left wherever reading stopped; the
    caller rewinds before decoding.

    Parameters
    ----------
    stream : BinaryIO
        File opened in binary mode, positioned at the start.

    Returns
    -------
    StlFormat
        ``ASCII`` only when the header starts with ``solid`` and no binary
        bytes were seen; ``BINARY`` otherwise, including for files too short
        to hold a header.
    """
    header = stream.read(HEADER_SIZE)
    if len(header) < HEADER_SIZE:
        return StlFormat.BINARY

    sample = stream.read(config.BINARY_SNIFF_BYTES)
    if not has_binary_bytes(sample) and header.startswith(ASCII_PREFIX):
        return StlFormat.ASCII
    return StlFormat.BINARY
