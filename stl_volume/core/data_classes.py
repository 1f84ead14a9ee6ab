"""
Data classes for STL meshes and load results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np


class StlFormat(Enum):
    """Encoding of an STL file."""

    ASCII = "ascii"
    BINARY = "binary"


class DiagnosticKind(Enum):
    """Category of a non-fatal problem found while loading."""

    UNREADABLE_FILE = "unreadable_file"
    BAD_NORMAL = "bad_normal"
    HUGE_VERTEX = "huge_vertex"
    NAN_VERTEX = "nan_vertex"
    EXTRA_VERTEX = "extra_vertex"
    UNKNOWN_TOKEN = "unknown_token"
    MALFORMED_NUMBER = "malformed_number"


@dataclass(frozen=True, eq=False)
class Triangle:
    """One facet: a normal plus three vertices.

    Attributes
    ----------
    normal : np.ndarray, shape (3,)
        Surface normal as stored in the file, or (0, 0, 0) when the exporter
        relies on the right hand rule.
    vertices : np.ndarray, shape (3, 3)
        Vertex positions, one per row, in file order.
    """

    normal: np.ndarray
    vertices: np.ndarray

    def __post_init__(self):
        normal = np.array(self.normal, dtype=np.float64).reshape(3)
        vertices = np.array(self.vertices, dtype=np.float64).reshape(3, 3)
        normal.setflags(write=False)
        vertices.setflags(write=False)
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "vertices", vertices)

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "Triangle":
        """Build a triangle from 12 floats ordered normal, v0, v1, v2."""
        data = np.asarray(values, dtype=np.float64).reshape(4, 3)
        return cls(normal=data[0], vertices=data[1:4])

    def translated(self, offset) -> "Triangle":
        """Return a copy with the vertices shifted by ``offset``; the normal is unchanged."""
        return Triangle(normal=self.normal, vertices=self.vertices + np.asarray(offset, dtype=np.float64))


class Mesh:
    """Ordered triangles loaded from an STL file, plus the file's comment.

    Triangles can only be appended; the mesh is treated as an immutable value
    once loading has finished. Transformations such as :meth:`translated`
    return a new mesh.
    """

    def __init__(self, triangles: Optional[Iterable[Triangle]] = None, comment: Optional[str] = None):
        self._triangles: List[Triangle] = list(triangles) if triangles is not None else []
        self.comment = comment

    def append(self, triangle: Triangle) -> None:
        self._triangles.append(triangle)

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self._triangles)

    def __getitem__(self, index: int) -> Triangle:
        return self._triangles[index]

    def __repr__(self) -> str:
        return f"Mesh({len(self._triangles)} triangles, comment={self.comment!r})"

    def vertex_array(self) -> np.ndarray:
        """Return vertices as an array of shape (n, 3, 3)."""
        if not self._triangles:
            return np.zeros((0, 3, 3), dtype=np.float64)
        return np.stack([t.vertices for t in self._triangles], axis=0)

    def to_array(self) -> np.ndarray:
        """Return facets as an array of shape (n, 4, 3): [normal, v0, v1, v2]."""
        if not self._triangles:
            return np.zeros((0, 4, 3), dtype=np.float64)
        return np.stack(
            [np.vstack([t.normal, t.vertices]) for t in self._triangles],
            axis=0,
        )

    def translated(self, offset) -> "Mesh":
        """Return a copy with every vertex shifted by ``offset``."""
        return Mesh((t.translated(offset) for t in self._triangles), comment=self.comment)


@dataclass
class Diagnostic:
    """A warning produced while loading; never an error."""

    kind: DiagnosticKind
    message: str
    source: Optional[str] = None
    triangle_index: Optional[int] = None

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


@dataclass
class LoadResult:
    """Best-effort outcome of loading one STL file.

    Attributes
    ----------
    mesh : Mesh
        Accepted triangles; empty if the file could not be read.
    format : StlFormat or None
        Detected encoding, or None when the file could not be opened.
    diagnostics : list of Diagnostic
        Everything that was reported while loading, in order.
    """

    mesh: Mesh
    format: Optional[StlFormat] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def diagnostics_of(self, kind: DiagnosticKind) -> List[Diagnostic]:
        """Return the diagnostics of one kind, in the order they were emitted."""
        return [d for d in self.diagnostics if d.kind is kind]


@dataclass
class ManifoldCheck:
    """Result of comparing a mesh's volume with a translated copy."""

    volume: float
    shifted_volume: float
    relative_difference: float
    is_manifold: bool
