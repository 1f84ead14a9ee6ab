"""
Per-triangle sanity checks applied before a triangle joins a mesh.
"""

from __future__ import annotations

import numpy as np

from .. import config
from .data_classes import DiagnosticKind, Mesh, Triangle
from .diagnostics import DiagnosticLog


def _length(v: np.ndarray) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.linalg.norm(v))


def _format_xyz(v: np.ndarray) -> str:
    return f"{v[0]:g},{v[1]:g},{v[2]:g}"


def vertex_is_sane(vertex: np.ndarray, index: int, log: DiagnosticLog) -> bool:
    """Check one vertex position, reporting it if it is huge or NaN."""
    magnitude = _length(vertex)
    if magnitude > config.VERTEX_MAGNITUDE_LIMIT:
        log.warn(DiagnosticKind.HUGE_VERTEX,
                 f"skipping huge vertex {_format_xyz(vertex)} on triangle {index}", index)
        return False
    if np.isnan(magnitude):
        log.warn(DiagnosticKind.NAN_VERTEX,
                 f"skipping NaN vertex {_format_xyz(vertex)} on triangle {index}", index)
        return False
    return True


def validate_triangle(triangle: Triangle, index: int, log: DiagnosticLog) -> bool:
    """Decide whether a decoded triangle may be kept.

    A suspicious normal is only reported. Any bad vertex rejects the whole
    triangle; each bad vertex is reported separately.

    Parameters
    ----------
    triangle : Triangle
        Raw triangle from a decoder.
    index : int
        Position the triangle would take in the mesh, used in messages.
    log : DiagnosticLog
        Receives the diagnostics.

    Returns
    -------
    bool
        True if the triangle should be appended.
    """
    normal_length = _length(triangle.normal)
    if not normal_length < config.NORMAL_LENGTH_LIMIT:
        log.warn(DiagnosticKind.BAD_NORMAL,
                 f"bad normal length {normal_length:g} on triangle {index}", index)

    sane = [vertex_is_sane(v, index, log) for v in triangle.vertices]
    return all(sane)


def push_triangle(mesh: Mesh, triangle: Triangle, log: DiagnosticLog) -> bool:
    """Validate ``triangle`` and append it to ``mesh`` if it passes."""
    if validate_triangle(triangle, len(mesh), log):
        mesh.append(triangle)
        return True
    return False
