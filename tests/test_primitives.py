import math

import numpy as np
import pytest

from meshedit.geom import generate_edges
from meshedit.primitives import Cone, Cube, Grid, Plane, Sphere, Torus


def _only_mesh(model):
    assert len(model.meshes) == 1
    return model.meshes[0]


def _positions(mesh):
    return np.array([v.position for v in mesh.vertices])


@pytest.mark.parametrize(
    "model",
    [
        Cone(1, 2, 8, 3),
        Cube(1, 2),
        Plane(4, 2, 3, 2),
        Sphere(6, 8, 1),
        Torus(6, 5),
    ],
)
def test_triangle_meshes_are_consistent(model):
    mesh = _only_mesh(model)
    assert len(mesh.indices) % 3 == 0
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)
    assert mesh.edges == generate_edges(mesh.indices)


def test_cone_layout():
    radius, height, segments, divisions = 1.0, 2.0, 8, 3
    mesh = _only_mesh(Cone(radius, height, segments, divisions))
    assert len(mesh.vertices) == 1 + (divisions + 1) * segments + 1 + segments
    assert len(mesh.indices) == 3 * segments + 6 * segments * divisions
    assert np.allclose(mesh.vertices[0].position, (0, height, 0))
    base_center = 1 + (divisions + 1) * segments
    assert np.allclose(mesh.vertices[base_center].position, (0, 0, 0))
    for vertex in mesh.vertices[base_center + 1:]:
        assert math.isclose(np.hypot(vertex.position[0], vertex.position[2]), radius)
        assert vertex.position[1] == 0.0
    for vertex in mesh.vertices[1:base_center]:
        assert math.isclose(np.linalg.norm(vertex.normal), 1.0)


def test_cube_shares_vertices_on_surface():
    side, n = 1.0, 2
    mesh = _only_mesh(Cube(side, n))
    assert len(mesh.vertices) == (n + 1) ** 3 - (n - 1) ** 3
    assert len(mesh.indices) == 6 * n * n * 6
    positions = _positions(mesh)
    assert np.allclose(np.abs(positions).max(axis=1), side / 2)
    assert len({tuple(p) for p in positions}) == len(positions)


def test_cube_corner_normal_accumulates():
    mesh = _only_mesh(Cube(2.0, 1))
    assert len(mesh.vertices) == 8
    for vertex in mesh.vertices:
        # each corner touches three faces; the normal points outward
        assert np.all(np.sign(vertex.normal) == np.sign(vertex.position))


def test_grid_layout():
    divisions = 4
    mesh = _only_mesh(Grid(divisions))
    positions = _positions(mesh)
    assert len(positions) == 4 * (divisions + 1)
    assert np.all(positions[:, 1] == 0.0)
    half = Grid.SQUARE_SIZE * divisions / 2
    assert math.isclose(positions[:, 0].max(), half)
    assert math.isclose(positions[:, 2].min(), -half)
    assert len(mesh.indices) == 4 * (divisions + 1)


def test_plane_layout():
    width, depth, sx, sz = 4.0, 2.0, 3, 2
    mesh = _only_mesh(Plane(width, depth, sx, sz))
    positions = _positions(mesh)
    assert len(positions) == (sx + 1) * (sz + 1)
    assert len(mesh.indices) == 6 * sx * sz
    assert np.all(positions[:, 1] == 0.0)
    assert np.allclose(positions[0], (-width / 2, 0, -depth / 2))
    assert np.allclose(positions[-1], (width / 2, 0, depth / 2))
    assert all(np.allclose(v.normal, (0, 1, 0)) for v in mesh.vertices)


def test_sphere_points_on_radius():
    radius = 2.5
    mesh = _only_mesh(Sphere(6, 8, radius))
    assert len(mesh.vertices) == 7 * 9
    for vertex in mesh.vertices:
        assert math.isclose(np.linalg.norm(vertex.position), radius)
        assert np.allclose(vertex.normal * radius, vertex.position)


def test_torus_points_on_surface():
    gap, tube = 1.0, 0.4
    mesh = _only_mesh(Torus(6, 5))
    assert len(mesh.vertices) == 7 * 6
    assert len(mesh.indices) == 6 * 6 * 5
    for vertex in mesh.vertices:
        x, y, z = vertex.position
        assert math.isclose((math.hypot(x, z) - gap) ** 2 + y * y, tube * tube, abs_tol=1e-9)
        assert np.allclose(vertex.normal, vertex.position)


def test_torus_custom_radii():
    mesh = _only_mesh(Torus(4, 4, gap=3.0, tube=1.0))
    radial = [math.hypot(v.position[0], v.position[2]) for v in mesh.vertices]
    assert math.isclose(max(radial), 3.0 + 1.0)
    assert math.isclose(min(radial), 3.0 - 1.0)