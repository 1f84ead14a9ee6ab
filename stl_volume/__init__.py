"""
STL Volume Package
==================

Loads binary and ASCII STL meshes and measures the volume they enclose.

Modules:
--------
- config: Sanity limits and tolerances
- core: Format detection, decoders, validation, volume integral
- runner: Command-line tool
- testing: Meshes with known volume for tests
"""

from . import config
from .core.data_classes import (
    StlFormat,
    DiagnosticKind,
    Triangle,
    Mesh,
    Diagnostic,
    LoadResult,
    ManifoldCheck,
)
from .core.detection import detect_format
from .core.stl_utils import load_stl, load_stl_mesh
from .core.volume import calculate_mesh_volume, check_manifold, reverse_winding
from .logging_config import setup_logging

__version__ = "1.0.0"
__all__ = [
    # Config module
    "config",
    # Data classes
    "StlFormat",
    "DiagnosticKind",
    "Triangle",
    "Mesh",
    "Diagnostic",
    "LoadResult",
    "ManifoldCheck",
    # Loading
    "detect_format",
    "load_stl",
    "load_stl_mesh",
    # Volume
    "calculate_mesh_volume",
    "check_manifold",
    "reverse_winding",
    # Logging
    "setup_logging",
]
