"""
Testing subpackage for STL volume measurement.

Provides closed meshes with known volume and a mesh sanity check:

    from stl_volume.testing import create_unit_cube, mesh_from_facets

    cube = mesh_from_facets(create_unit_cube())
"""

from .simple_geometry import (
    create_simple_box,
    create_unit_cube,
    create_simple_tetrahedron,
    mesh_from_facets,
    print_mesh_info,
)

from .validation import validate_mesh

__all__ = [
    # Simple geometry
    "create_simple_box",
    "create_unit_cube",
    "create_simple_tetrahedron",
    "mesh_from_facets",
    "print_mesh_info",
    # Validation
    "validate_mesh",
]
