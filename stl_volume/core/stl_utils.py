"""
STL file loading.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from .ascii_reader import read_ascii_stl
from .binary_reader import read_binary_stl
from .data_classes import DiagnosticKind, LoadResult, Mesh, StlFormat
from .detection import detect_format
from .diagnostics import DiagnosticLog

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_stl(file_path: PathLike, mesh: Optional[Mesh] = None) -> LoadResult:
    """Load an STL file, detecting whether it is ASCII or binary.

    Loading never raises for problems with the file or its contents. A file
    that cannot be opened gives an empty mesh and an ``UNREADABLE_FILE``
    diagnostic; bad triangles are dropped and reported; truncated files give
    whatever was read before the end.

    Parameters
    ----------
    file_path : str or path-like
        Path to the STL file on disk.
    mesh : Mesh, optional
        Existing mesh to append this file's triangles to. A new mesh is
        created when omitted.

    Returns
    -------
    LoadResult
        The mesh, the detected format (None if the file could not be read)
        and every diagnostic emitted while loading.

    Example
    -------
    >>> result = load_stl("part.stl")
    >>> if not result.mesh:
    ...     print("nothing loaded")
    """
    source = os.fspath(file_path)
    if mesh is None:
        mesh = Mesh()
    log = DiagnosticLog(source)
    stl_format = None

    try:
        with open(source, "rb") as stream:
            stl_format = detect_format(stream)
            stream.seek(0)
            if stl_format is StlFormat.ASCII:
                read_ascii_stl(stream, mesh, log)
            else:
                read_binary_stl(stream, mesh, log)
    except OSError as exc:
        log.warn(DiagnosticKind.UNREADABLE_FILE, f"cannot read file: {exc.strerror or exc}")

    logger.debug("%s: %s, %d triangles, %d diagnostics",
                 source, stl_format.value if stl_format else "unreadable", len(mesh), len(log))
    return LoadResult(mesh=mesh, format=stl_format, diagnostics=log.records)


def load_stl_mesh(file_path: PathLike) -> Mesh:
    """Load an STL file and return only its mesh.

    See :func:`load_stl` for the error handling policy; check ``len(mesh)``
    to tell an unreadable file from a loaded one.
    """
    return load_stl(file_path).mesh
