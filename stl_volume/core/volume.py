"""
Enclosed volume of a triangle mesh.

The volume is the sum over all triangles of the signed volume of the
tetrahedron spanned by the origin and the triangle::

    V = sum(A · (B × C)) / 6

For a closed, consistently outward-oriented surface the origin terms cancel,
so the result does not depend on where the mesh sits. Open or inconsistently
wound meshes give a wrong number rather than an error; :func:`check_manifold`
uses the translation invariance to detect them.
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from .. import config
from .data_classes import ManifoldCheck, Mesh, Triangle

TriangleSource = Union[Mesh, Iterable[Triangle], np.ndarray]


def as_vertex_array(triangles: TriangleSource) -> np.ndarray:
    """Convert a mesh, triangle iterable or facet array to shape (n, 3, 3).

    Arrays of shape (n, 4, 3) are taken to be [normal, v0, v1, v2] facets.
    """
    if isinstance(triangles, Mesh):
        return triangles.vertex_array()
    if isinstance(triangles, np.ndarray):
        data = np.asarray(triangles, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[1] not in (3, 4):
            raise ValueError(f"Expected shape (n, 3, 3) or (n, 4, 3), got {data.shape}")
        return data[:, -3:, :]
    vertices = [t.vertices for t in triangles]
    if not vertices:
        return np.zeros((0, 3, 3), dtype=np.float64)
    return np.stack(vertices, axis=0)


def calculate_mesh_volume(triangles: TriangleSource) -> float:
    """Calculate the signed volume enclosed by a list of triangles.

    Assumes the triangles form a closed surface with consistent, outward
    facing orientation; reversing every triangle's winding negates the result.

    Parameters
    ----------
    triangles : Mesh, iterable of Triangle, or np.ndarray
        Triangles to integrate over.

    Returns
    -------
    float
        Signed volume in the cube of the input units.
    """
    vertices = as_vertex_array(triangles)
    if len(vertices) == 0:
        return 0.0
    a, b, c = vertices[:, 0], vertices[:, 1], vertices[:, 2]
    per_triangle = np.einsum("ij,ij->i", a, np.cross(b, c)) / 6.0
    return float(np.sum(per_triangle, dtype=np.float64))


def reverse_winding(mesh: Mesh) -> Mesh:
    """Return a copy of ``mesh`` with every triangle's orientation flipped."""
    return Mesh(
        (Triangle(normal=-t.normal, vertices=t.vertices[[0, 2, 1]]) for t in mesh),
        comment=mesh.comment,
    )


def check_manifold(
    mesh: Mesh,
    shift=config.MANIFOLD_TEST_SHIFT,
    tolerance: float = config.MANIFOLD_RELATIVE_TOLERANCE,
) -> ManifoldCheck:
    """Compare the volume of ``mesh`` with that of a translated copy.

    Parameters
    ----------
    mesh : Mesh
        Mesh to check; not modified.
    shift : sequence of 3 floats, optional
        Offset added to every vertex of the copy.
    tolerance : float, optional
        Largest accepted relative volume change.

    Returns
    -------
    ManifoldCheck
        Both volumes, their relative difference (|v - v'| / |v|) and whether
        it is within ``tolerance``. A zero volume counts as a difference of 0
        when the shifted volume is also zero and as infinite otherwise.
    """
    volume = calculate_mesh_volume(mesh)
    shifted_volume = calculate_mesh_volume(mesh.translated(shift))

    difference = abs(volume - shifted_volume)
    if volume != 0.0:
        relative = difference / abs(volume)
    else:
        relative = 0.0 if difference == 0.0 else float("inf")

    return ManifoldCheck(
        volume=volume,
        shifted_volume=shifted_volume,
        relative_difference=relative,
        is_manifold=bool(relative <= tolerance),
    )
