import numpy as np

from wfengine.colour import WHITE
from wfengine.geometry import Mesh, Vertex, generate_mesh_tangents


def _triangle(uvs):
    positions = [(0, 0, 0), (1, 0, 0), (0, 1, 0)]
    vertices = [Vertex(position=p, normal=(0, 0, 1), texcoord=uv) for p, uv in zip(positions, uvs)]
    return Mesh(vertices=vertices, indices=[0, 1, 2])


def test_vertex_defaults():
    v = Vertex()
    assert v.colour == WHITE
    assert np.array_equal(v.position, np.zeros(3))
    assert np.array_equal(v.tangent, np.zeros(4))


def test_mesh_flags_default():
    mesh = Mesh()
    assert (mesh.is_dynamic, mesh.needs_update, mesh.auto_update) == (False, True, True)


def test_bounding_box_spans_vertices():
    mesh = Mesh(vertices=[Vertex(position=(-1, 2, 3)), Vertex(position=(4, -5, 6)), Vertex(position=(0, 0, 0))])
    box = mesh.bounding_box()
    assert np.allclose(box.min, (-1, -5, 0))
    assert np.allclose(box.max, (4, 2, 6))
    assert box.is_valid


def test_bounding_box_of_empty_mesh_is_invalid():
    box = Mesh().bounding_box()
    assert not box.is_valid
    assert not box.contains((0.0, 0.0, 0.0))
    assert all(lo > hi for lo, hi in zip(box.min, box.max))


def test_tangent_follows_u_axis():
    mesh = _triangle([(0, 0), (1, 0), (0, 1)])
    generate_mesh_tangents(mesh)
    for v in mesh.vertices:
        assert np.allclose(v.tangent[:3], v.position[:0].tolist() + [1, 0, 0])
        assert v.tangent[3] == 1.0


def test_flipped_v_gives_negative_handedness():
    mesh = _triangle([(0, 0), (1, 0), (0, -1)])
    generate_mesh_tangents(mesh)
    assert all(v.tangent[3] == -1.0 for v in mesh.vertices)
    assert all(np.allclose(v.tangent[:3], (1, 0, 0)) for v in mesh.vertices)


def test_tangents_orthogonal_to_normals():
    positions = [(0, 0, 0), (2, 0.5, 0), (0.3, 1.5, 0.2)]
    vertices = [
        Vertex(position=p, normal=(0, 0.1, 1), texcoord=uv)
        for p, uv in zip(positions, [(0, 0), (0.8, 0.1), (0.2, 0.9)])
    ]
    mesh = Mesh(vertices=vertices, indices=[0, 1, 2])
    generate_mesh_tangents(mesh)
    for v in mesh.vertices:
        assert abs(np.dot(v.tangent[:3], v.normal)) < 1e-9
        assert np.linalg.norm(v.tangent[:3]) == np.float64(1.0) or abs(np.linalg.norm(v.tangent[:3]) - 1) < 1e-9


def test_mesh_without_indices_untouched():
    mesh = Mesh(vertices=[Vertex(position=(1, 2, 3))])
    generate_mesh_tangents(mesh)
    assert np.array_equal(mesh.vertices[0].tangent, np.zeros(4))