"""
STL core modules

- constants: binary STL layout
- data_classes: Triangle, Mesh, Diagnostic, LoadResult
- detection: ASCII / binary format detection
- binary_reader, ascii_reader: format decoders
- validation: per-triangle sanity checks
- stl_utils: file loading entry points
- volume: enclosed volume and manifold check
"""

# Data classes
from .data_classes import (
    StlFormat,
    DiagnosticKind,
    Triangle,
    Mesh,
    Diagnostic,
    LoadResult,
    ManifoldCheck,
)

# Format handling
from .detection import detect_format, has_binary_bytes
from .binary_reader import read_binary_stl
from .ascii_reader import read_ascii_stl
from .validation import validate_triangle, push_triangle
from .diagnostics import DiagnosticLog

# Loading
from .stl_utils import load_stl, load_stl_mesh

# Volume
from .volume import calculate_mesh_volume, check_manifold, reverse_winding

__all__ = [
    # Data classes
    'StlFormat',
    'DiagnosticKind',
    'Triangle',
    'Mesh',
    'Diagnostic',
    'LoadResult',
    'ManifoldCheck',
    # Format handling
    'detect_format',
    'has_binary_bytes',
    'read_binary_stl',
    'read_ascii_stl',
    'validate_triangle',
    'push_triangle',
    'DiagnosticLog',
    # Loading
    'load_stl',
    'load_stl_mesh',
    # Volume
    'calculate_mesh_volume',
    'check_manifold',
    'reverse_winding',
]
