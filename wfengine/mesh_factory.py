"""Builders for simple primitive meshes."""

from __future__ import annotations

import math

import numpy as np

from wfengine.colour import WHITE, Colour
from wfengine.geometry import Mesh, Vertex, generate_mesh_tangents
from wfengine.vecmath import PI

_QUAD_UVS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))


def create_simple_plane(size: float = 50.0) -> Mesh:
    """A flat XZ quad centred on the origin, facing +Y, with tiled UVs."""
    w = size / 2.0
    positions = ((-w, 0.0, -w), (w, 0.0, -w), (w, 0.0, w), (-w, 0.0, w))
    uvs = ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0))
    vertices = [Vertex(position=p, normal=(0.0, 1.0, 0.0), texcoord=uv) for p, uv in zip(positions, uvs)]
    return Mesh(vertices=vertices, indices=[0, 2, 1, 2, 0, 3])


def create_circle(radius: float, segments: int) -> Mesh:
    """A triangle-fan disc in the XY plane facing +Z."""
    vertices = [Vertex(position=(0.0, 0.0, 0.0), normal=(0.0, 0.0, 1.0), colour=WHITE, texcoord=(0.5, 0.5))]
    for i in range(segments):
        angle = (2.0 * PI * i) / segments
        c, s = math.cos(angle), math.sin(angle)
        vertices.append(
            Vertex(
                position=(radius * c, radius * s, 0.0),
                normal=(0.0, 0.0, 1.0),
                colour=WHITE,
                texcoord=(c * 0.5 + 0.5, s * 0.5 + 0.5),
            )
        )

    indices: list[int] = []
    for i in range(segments):
        indices.extend((0, i + 1, 1 if i + 1 == segments else i + 2))

    mesh = Mesh(vertices=vertices, indices=indices)
    generate_mesh_tangents(mesh)
    return mesh


def _cube_extents(dimensions) -> tuple[np.ndarray, np.ndarray]:
    dx, dy = float(dimensions[0]), float(dimensions[1])
    half = np.array([dx * 0.5, dy * 0.5, dy * 0.5])
    return -half, half


def create_cube(dimensions, colour: Colour = WHITE) -> Mesh:
    """A cube of 8 shared vertices with corner normals."""
    lo, hi = _cube_extents(dimensions)
    signs = (
        (-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
        (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1),
    )
    vertices = [
        Vertex(
            position=[hi[axis] if sign > 0 else lo[axis] for axis, sign in enumerate(corner)],
            normal=corner,
            colour=colour,
            texcoord=_QUAD_UVS[n % 4],
        )
        for n, corner in enumerate(signs)
    ]
    indices = [
        4, 5, 6, 4, 6, 7,  # front
        1, 0, 3, 1, 3, 2,  # back
        0, 4, 7, 0, 7, 3,  # left
        5, 1, 2, 5, 2, 6,  # right
        3, 7, 6, 3, 6, 2,  # top
        0, 1, 5, 0, 5, 4,  # bottom
    ]
    mesh = Mesh(vertices=vertices, indices=indices)
    generate_mesh_tangents(mesh)
    return mesh


def create_cube_ext(dimensions, colour: Colour = WHITE) -> Mesh:
    """A cube of 24 vertices so that every face has its own normals and UVs."""
    (nx, ny, nz), (px, py, pz) = _cube_extents(dimensions)
    faces = (
        ((0.0, 0.0, 1.0), ((nx, ny, pz), (px, ny, pz), (px, py, pz), (ny, py, pz))),
        ((0.0, 0.0, -1.0), ((px, ny, nz), (nx, ny, nz), (nx, py, nz), (px, py, nz))),
        ((-1.0, 0.0, 0.0), ((nx, ny, nz), (nx, ny, pz), (nx, py, pz), (nx, py, nz))),
        ((1.0, 0.0, 0.0), ((px, ny, pz), (px, ny, nz), (px, py, nz), (px, py, pz))),
        ((0.0, 1.0, 0.0), ((nx, py, pz), (px, py, pz), (px, py, nz), (nx, py, nz))),
        ((0.0, -1.0, 0.0), ((nx, ny, nz), (px, ny, nz), (px, ny, pz), (nx, ny, pz))),
    )
    vertices: list[Vertex] = []
    indices: list[int] = []
    for face, (normal, corners) in enumerate(faces):
        base = face * 4
        vertices.extend(
            Vertex(position=p, normal=normal, colour=colour, texcoord=uv) for p, uv in zip(corners, _QUAD_UVS)
        )
        indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))

    mesh = Mesh(vertices=vertices, indices=indices)
    generate_mesh_tangents(mesh)
    return mesh


def create_sphere(radius: float, rings: int, slices: int) -> Mesh:
    """A UV sphere; ``rings`` and ``slices`` are raised to at least 3."""
    rings = max(rings, 3)
    slices = max(slices, 3)

    vertices: list[Vertex] = []
    for r in range(rings + 1):
        v = r / rings
        phi = v * PI
        for s in range(slices + 1):
            u = s / slices
            theta = u * PI * 2.0
            position = np.array([
                radius * math.sin(phi) * math.sin(theta),
                radius * math.cos(phi),
                -(radius * math.sin(phi) * math.cos(theta)),
            ])
            with np.errstate(divide="ignore", invalid="ignore"):
                normal = position / np.linalg.norm(position)
            vertices.append(Vertex(position=position, normal=normal, texcoord=(1.0 - u, 1.0 - v)))

    indices: list[int] = []
    for r in range(rings):
        for s in range(slices):
            i0 = r * (slices + 1) + s
            i1 = i0 + slices + 1
            indices.extend((i0, i0 + 1, i1, i1, i0 + 1, i1 + 1))

    mesh = Mesh(vertices=vertices, indices=indices)
    generate_mesh_tangents(mesh)
    return mesh


def create_hello_triangle() -> Mesh:
    """A single white test triangle in the XY plane."""
    positions = ((-0.5, -0.5, 0.0), (0.5, -0.5, 0.0), (0.0, 0.5, 0.0))
    uvs = ((0.0, 0.0), (1.0, 0.0), (0.5, 1.0))
    vertices = [
        Vertex(position=p, normal=(0.0, 0.0, 1.0), colour=WHITE, texcoord=uv) for p, uv in zip(positions, uvs)
    ]
    mesh = Mesh(vertices=vertices, indices=[0, 1, 2])
    generate_mesh_tangents(mesh)
    return mesh