"""Vertices, meshes and tangent generation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from wfengine.colour import WHITE, Colour
from wfengine.vecmath import BoundingBox


def _array(values, size: int) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} components, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Vertex:
    """A single mesh vertex."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    colour: Colour = WHITE
    texcoord: np.ndarray = field(default_factory=lambda: np.zeros(2))
    tangent: np.ndarray = field(default_factory=lambda: np.zeros(4))

    def __post_init__(self) -> None:
        self.position = _array(self.position, 3)
        self.normal = _array(self.normal, 3)
        self.texcoord = _array(self.texcoord, 2)
        self.tangent = _array(self.tangent, 4)


@dataclass(eq=False)
class Mesh:
    """Vertex and triangle index data plus upload flags."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    is_dynamic: bool = False
    needs_update: bool = True
    auto_update: bool = True

    def bounding_box(self) -> BoundingBox:
        box = BoundingBox()
        for vertex in self.vertices:
            box.extend(vertex.position)
        return box


def generate_mesh_tangents(mesh: Mesh | None) -> None:
    """Compute per-vertex tangents (with handedness in w) from positions and UVs."""
    if mesh is None or not mesh.vertices or not mesh.indices:
        return

    vertex_count = len(mesh.vertices)
    positions = np.array([v.position for v in mesh.vertices])
    uvs = np.array([v.texcoord for v in mesh.vertices])
    normals = np.array([v.normal for v in mesh.vertices])

    triangle_count = len(mesh.indices) // 3
    tris = np.array(mesh.indices[: triangle_count * 3], dtype=np.int64).reshape(-1, 3)
    i0, i1, i2 = tris.T

    dp1 = positions[i1] - positions[i0]
    dp2 = positions[i2] - positions[i0]
    duv1 = uvs[i1] - uvs[i0]
    duv2 = uvs[i2] - uvs[i0]

    det = duv1[:, 0] * duv2[:, 1] - duv1[:, 1] * duv2[:, 0]
    inv = np.zeros_like(det)
    np.divide(1.0, det, out=inv, where=det != 0.0)

    sdir = (dp1 * duv2[:, 1:2] - dp2 * duv1[:, 1:2]) * inv[:, None]
    tdir = (dp2 * duv1[:, 0:1] - dp1 * duv2[:, 0:1]) * inv[:, None]

    tan1 = np.zeros((vertex_count, 3))
    tan2 = np.zeros((vertex_count, 3))
    for corner in (i0, i1, i2):
        np.add.at(tan1, corner, sdir)
        np.add.at(tan2, corner, tdir)

    projected = tan1 - normals * np.sum(normals * tan1, axis=1)[:, None]
    with np.errstate(divide="ignore", invalid="ignore"):
        tangents = projected / np.linalg.norm(projected, axis=1)[:, None]
    handedness = np.where(np.sum(np.cross(normals, tan1) * tan2, axis=1) < 0.0, -1.0, 1.0)

    for vertex, tangent, w in zip(mesh.vertices, tangents, handedness):
        vertex.tangent = np.append(tangent, w)