"""
Configuration settings for STL loading and volume measurement.

This module contains the tunable thresholds used by the loader, the validator
and the command-line runner. Users can modify these values to customize the
sanity checks without changing the core code.
"""

from __future__ import annotations

import logging

# =============================================================================
# Format Detection
# =============================================================================

# Number of bytes after the binary header scanned for non-printable content
BINARY_SNIFF_BYTES = 1000

# Control characters that may legitimately appear in an ASCII STL file
ASCII_WHITESPACE_BYTES = frozenset(b"\n\r\t")

# =============================================================================
# Triangle Sanity Limits
# =============================================================================

# Normals at or above this length are reported (but the triangle is kept)
NORMAL_LENGTH_LIMIT = 1.0e5

# Vertices farther than this from the origin cause the triangle to be dropped
VERTEX_MAGNITUDE_LIMIT = 1.0e7

# =============================================================================
# Volume / Manifold Check
# =============================================================================

# Offset applied to every vertex when testing translation invariance
MANIFOLD_TEST_SHIFT = (10.0, -10.0, 20.0)

# Relative volume change above which a mesh is reported as not manifold
MANIFOLD_RELATIVE_TOLERANCE = 1.0e-4

# =============================================================================
# Unit Conversions
# =============================================================================

# STL files are typically in millimeters, 1 cc = 1000 mm³
MM3_PER_CC = 1000.0

# =============================================================================
# Logging
# =============================================================================

LOGGER_NAME = "stl_volume"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
CLI_LOG_LEVEL = logging.WARNING
