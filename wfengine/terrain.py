"""Heightfield terrain: flat grids shaped by noise, offsets and edge falloff."""

from __future__ import annotations

from typing import Callable

import numpy as np

from wfengine.geometry import Mesh, Vertex, generate_mesh_tangents
from wfengine.noise import PerlinNoise, SimplexNoise

NoiseFunc = Callable[[float, float], float]


def create_plane(width: int, height: int, resolution: int, tile_factor: float) -> Mesh:
    """A flat XZ grid of ``resolution`` x ``resolution`` quads starting at the origin."""
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    count = resolution + 1
    dx = width / resolution
    dz = height / resolution

    vertices = [
        Vertex(
            position=(x * dx, 0.0, z * dz),
            normal=(0.0, 1.0, 0.0),
            texcoord=((x / resolution) * tile_factor, (z / resolution) * tile_factor),
        )
        for z in range(count)
        for x in range(count)
    ]

    indices: list[int] = []
    for z in range(resolution):
        for x in range(resolution):
            i0 = z * count + x
            i1 = i0 + 1
            i2 = i0 + count
            i3 = i2 + 1
            indices.extend((i0, i2, i1, i1, i2, i3))

    return Mesh(vertices=vertices, indices=indices)


def apply_center(mesh: Mesh, size) -> None:
    """Shift X and Z back by half of ``size`` so a grid of that size is centred."""
    offset_x = size[0] * 0.5
    offset_z = size[1] * 0.5
    for vertex in mesh.vertices:
        vertex.position[0] -= offset_x
        vertex.position[2] -= offset_z


def apply_min_y(mesh: Mesh, y: float) -> None:
    """Move the mesh vertically so its lowest vertex sits at ``y``."""
    if not mesh.vertices:
        return
    offset = y - min(v.position[1] for v in mesh.vertices)
    for vertex in mesh.vertices:
        vertex.position[1] += offset


def apply_adjust_y(mesh: Mesh, y_diff: float) -> None:
    """Move every vertex vertically by ``y_diff``."""
    for vertex in mesh.vertices:
        vertex.position[1] += y_diff


def _apply_heights(mesh: Mesh, height: Callable[[float, float], float]) -> None:
    for vertex in mesh.vertices:
        vertex.position[1] = height(vertex.position[0], vertex.position[2])


def apply_perlin_noise(mesh: Mesh, frequency: float, amplitude: float, seed: int) -> None:
    """Replace heights with Perlin noise sampled over XZ."""
    if not mesh.vertices:
        return
    perlin = PerlinNoise(seed)
    _apply_heights(mesh, lambda x, z: perlin.value(x * frequency, z * frequency) * amplitude)


def apply_simplex_noise(mesh: Mesh, frequency: float, amplitude: float, seed: int) -> None:
    """Replace heights with simplex noise sampled over XZ."""
    if not mesh.vertices:
        return
    simplex = SimplexNoise(seed)
    _apply_heights(mesh, lambda x, z: simplex.value(x * frequency, z * frequency) * amplitude)


def apply_fractal_simplex_noise(
    mesh: Mesh,
    base_freq: float,
    amplitude: float,
    seed: int,
    octaves: int,
    persistence: float,
    lacunarity: float,
) -> None:
    """Replace heights with several octaves of simplex noise."""
    if not mesh.vertices:
        return
    simplex = SimplexNoise(seed)

    def height(x: float, z: float) -> float:
        noise = fractal_noise_2d(simplex.value, x * base_freq, z * base_freq, octaves, persistence, lacunarity)
        return noise * amplitude

    _apply_heights(mesh, height)


def apply_masked_simplex(
    mesh: Mesh,
    base_freq: float,
    amplitude: float,
    seed: int,
    mask_seed: int,
    mask_freq: float,
    mask_strength: float,
) -> None:
    """Fractal simplex heights scaled by a second, low-frequency noise mask."""
    if not mesh.vertices:
        return
    simplex = SimplexNoise(seed)
    mask_simplex = SimplexNoise(mask_seed)

    def height(x: float, z: float) -> float:
        noise = fractal_noise_2d(simplex.value, x * base_freq, z * base_freq, 4, 0.5, 2.0)
        mask = mask_simplex.value(x * mask_freq, z * mask_freq) * 0.5 + 0.5
        return noise * (mask * mask_strength) * amplitude

    _apply_heights(mesh, height)


def apply_edging(mesh: Mesh, size, degree: float) -> None:
    """Lower vertices towards the edges of a centred grid of ``size``, quadratically."""
    half_width = size[0] * 0.5
    half_depth = size[1] * 0.5
    for vertex in mesh.vertices:
        edge_x = abs(vertex.position[0]) / half_width
        edge_z = abs(vertex.position[2]) / half_depth
        edge = min(max(edge_x, edge_z), 1.0)
        vertex.position[1] -= edge ** 2 * degree


def fix_normals_and_uvs(mesh: Mesh, flat_dimensions, tile_factor: float) -> None:
    """Accumulate face normals, reproject planar XZ UVs and regenerate tangents."""
    if not mesh.vertices:
        return

    positions = np.array([v.position for v in mesh.vertices])
    normals = np.array([v.normal for v in mesh.vertices])

    tri_count = len(mesh.indices) // 3
    tris = np.array(mesh.indices[: tri_count * 3], dtype=np.int64).reshape(-1, 3)
    if len(tris):
        i0, i1, i2 = tris.T
        faces = np.cross(positions[i1] - positions[i0], positions[i2] - positions[i0])
        with np.errstate(divide="ignore", invalid="ignore"):
            faces = faces / np.linalg.norm(faces, axis=1)[:, None]
        for corner in (i0, i1, i2):
            np.add.at(normals, corner, faces)

    with np.errstate(divide="ignore", invalid="ignore"):
        normals = normals / np.linalg.norm(normals, axis=1)[:, None]

    for vertex, normal in zip(mesh.vertices, normals):
        vertex.normal = normal
        vertex.texcoord = np.array([
            (vertex.position[0] / flat_dimensions[0]) * tile_factor,
            (vertex.position[2] / flat_dimensions[1]) * tile_factor,
        ])

    generate_mesh_tangents(mesh)


def fractal_noise_2d(
    noise_func: NoiseFunc,
    x: float,
    y: float,
    octaves: int,
    persistence: float,
    lacunarity: float,
) -> float:
    """Sum ``octaves`` layers of noise, normalised by the total amplitude."""
    total = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0
    for _ in range(octaves):
        total += noise_func(x * frequency, y * frequency) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= lacunarity
    return total / max_value