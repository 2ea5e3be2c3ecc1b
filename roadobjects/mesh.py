"""Mesh3D — flat vertex/index buffer shared by all generators."""

import logging

import numpy as np
import trimesh

logger = logging.getLogger(__name__)


class Mesh3D:
    """Triangle mesh as an ordered vertex list plus a flat index list.

    Every three consecutive entries of ``indices`` form one triangle.
    The buffer only grows: ``add_mesh`` appends, nothing is ever removed.
    """

    def __init__(self, vertices=None, indices=None):
        if vertices is None:
            vertices = []
        if indices is None:
            indices = []
        self.vertices: list[list[float]] = np.asarray(vertices, dtype=float).reshape(-1, 3).tolist()
        self.indices: list[int] = np.asarray(indices, dtype=np.int64).ravel().tolist()

    def add_mesh(self, other: "Mesh3D") -> "Mesh3D":
        """Append *other*, shifting its indices past our current vertices."""
        off = len(self.vertices)
        self.vertices.extend(list(v) for v in other.vertices)
        self.indices.extend(i + off for i in other.indices)
        return self

    append = add_mesh

    @property
    def faces(self) -> list[list[int]]:
        idx = self.indices
        return [idx[i:i + 3] for i in range(0, len(idx), 3)]

    @property
    def is_empty(self) -> bool:
        return not self.indices

    def copy(self) -> "Mesh3D":
        return Mesh3D(self.vertices, self.indices)

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert to a trimesh object without merging coincident vertices."""
        verts = np.asarray(self.vertices, dtype=float).reshape(-1, 3)
        faces = np.asarray(self.indices, dtype=np.int64).reshape(-1, 3)
        return trimesh.Trimesh(vertices=verts, faces=faces, process=False)

    def __repr__(self):
        return (f"Mesh3D(vertices={len(self.vertices)}, "
                f"triangles={len(self.indices) // 3})")
