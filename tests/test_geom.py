import math

import numpy as np
import pytest

from meshedit import geom
from meshedit.mesh import Mesh, Vertex

UP = np.array([0.0, 0.0, 1.0])


def _triangle_vertices():
    return [Vertex([0, 0, 0]), Vertex([1, 0, 0]), Vertex([0, 1, 0])]


def _triangle_mesh(indices=(0, 1, 2)):
    indices = list(indices)
    return Mesh(_triangle_vertices(), indices, geom.generate_edges(indices))


def test_generate_edges_single_triangle():
    assert geom.generate_edges([0, 1, 2]) == [0, 1, 1, 2, 2, 0]


def test_generate_edges_two_triangles_length():
    indices = [0, 1, 2, 2, 1, 3]
    edges = geom.generate_edges(indices)
    assert len(edges) == 2 * len(indices)
    assert edges[6:] == [2, 1, 1, 3, 3, 2]


def test_generate_edges_ignores_incomplete_triangle():
    assert geom.generate_edges([0, 1, 2, 3]) == [0, 1, 1, 2, 2, 0]


def test_centroid_is_translation_equivariant():
    vertices = [Vertex([0.2, 1.0, -3.0]), Vertex([4.0, -2.0, 1.0]), Vertex([1.0, 1.0, 1.0])]
    shift = np.array([10.0, -5.0, 2.5])
    shifted = [Vertex(v.position + shift) for v in vertices]
    assert np.allclose(geom.centroid(shifted), geom.centroid(vertices) + shift)


def test_centroid_of_symmetric_points_is_origin():
    vertices = [Vertex([-1, 2, 3]), Vertex([1, -2, -3])]
    assert np.allclose(geom.centroid(vertices), np.zeros(3))


def test_centroid_of_nothing_raises():
    with pytest.raises(ValueError):
        geom.centroid([])


def test_average_normal_is_unit_and_along_sum():
    vertices = [Vertex(normal=[1, 0, 0]), Vertex(normal=[0, 1, 0]), Vertex(normal=[0, 1, 1])]
    result = geom.average_normal(vertices)
    total = sum(v.normal for v in vertices)
    assert math.isclose(np.linalg.norm(result), 1.0)
    assert np.allclose(np.cross(result, total), np.zeros(3))
    assert np.dot(result, total) > 0


def test_recalculate_normals_for_mesh_flat_triangle():
    mesh = _triangle_mesh()
    geom.recalculate_normals_for_mesh(mesh)
    for vertex in mesh.vertices:
        assert np.allclose(vertex.normal, UP)


def test_recalculate_normals_for_mesh_follows_winding():
    mesh = _triangle_mesh((0, 2, 1))
    geom.recalculate_normals_for_mesh(mesh)
    for vertex in mesh.vertices:
        assert np.allclose(vertex.normal, -UP)


def test_recalculate_normals_for_mesh_skips_degenerate():
    vertices = [Vertex([0, 0, 0], [5, 5, 5]), Vertex([1, 0, 0]), Vertex([2, 0, 0])]
    mesh = Mesh(vertices, [0, 1, 2])
    geom.recalculate_normals_for_mesh(mesh)
    for vertex in mesh.vertices:
        assert np.array_equal(vertex.normal, np.zeros(3))


def test_recalculate_normals_for_vertices():
    vertices = _triangle_vertices()
    geom.recalculate_normals_for_vertices(vertices)
    for vertex in vertices:
        assert np.allclose(vertex.normal, UP)


def test_recalculate_normals_for_vertex_only_touches_that_vertex():
    mesh = _triangle_mesh()
    for vertex in mesh.vertices:
        vertex.normal = np.array([1.0, 0.0, 0.0])
    geom.recalculate_normals_for_vertex(mesh, 0)
    assert np.allclose(mesh.vertices[0].normal, UP)
    assert np.array_equal(mesh.vertices[1].normal, [1.0, 0.0, 0.0])


def test_recalculate_normals_for_vertex_is_unit_length_on_shared_vertex():
    vertices = _triangle_vertices() + [Vertex([0, 0, 1])]
    mesh = Mesh(vertices, [0, 1, 2, 0, 3, 1])
    geom.recalculate_normals_for_vertex(mesh, 0)
    assert math.isclose(np.linalg.norm(mesh.vertices[0].normal), 1.0)


def test_recalculate_normals_for_affected_faces():
    vertices = _triangle_vertices() + [
        Vertex([5, 5, 5], [1, 0, 0]),
        Vertex([6, 5, 5], [1, 0, 0]),
        Vertex([5, 6, 5], [1, 0, 0]),
    ]
    for vertex in vertices[:3]:
        vertex.normal = np.array([1.0, 0.0, 0.0])
    mesh = Mesh(vertices, [0, 1, 2, 3, 4, 5])
    geom.recalculate_normals_for_affected_faces(mesh, vertices[1].position.copy())
    for vertex in mesh.vertices[:3]:
        assert np.allclose(vertex.normal, UP)
    for vertex in mesh.vertices[3:]:
        assert np.array_equal(vertex.normal, [1.0, 0.0, 0.0])