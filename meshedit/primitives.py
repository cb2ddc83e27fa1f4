"""Procedurally generated models: cone, cube, grid, plane, sphere and torus."""

import math

import numpy as np

from .geom import generate_edges
from .mesh import Mesh, Model, Vertex


def _normalize(vector) -> np.ndarray:
    vector = np.asarray(vector, dtype=float)
    return vector / np.linalg.norm(vector)


def _mesh(vertices: list[Vertex], indices: list[int]) -> Mesh:
    return Mesh(vertices=vertices, indices=indices, edges=generate_edges(indices))


class Cone(Model):
    """Cone standing on the XZ plane with its apex at ``height``.

    Vertex layout: the apex, then ``vertical_divisions + 1`` side rings of
    ``segments`` vertices each, then the base centre and the base ring.
    """

    def __init__(self, radius: float, height: float, segments: int, vertical_divisions: int) -> None:
        super().__init__()
        vertices = [Vertex((0.0, height, 0.0), (0.0, 1.0, 0.0))]

        for j in range(vertical_divisions + 1):
            h = height * j / vertical_divisions
            r = radius * (1.0 - j / vertical_divisions)
            for i in range(segments):
                theta = 2.0 * math.pi * i / segments
                x = r * math.cos(theta)
                z = r * math.sin(theta)
                vertices.append(Vertex((x, h, z), _normalize((x, radius / height, z))))

        base_center = len(vertices)
        vertices.append(Vertex((0.0, 0.0, 0.0), (0.0, -1.0, 0.0)))
        for i in range(segments):
            theta = 2.0 * math.pi * i / segments
            vertices.append(
                Vertex((radius * math.cos(theta), 0.0, radius * math.sin(theta)), (0.0, -1.0, 0.0))
            )

        indices: list[int] = []
        for i in range(segments):
            following = (i + 1) % segments
            indices += [base_center, base_center + following + 1, base_center + i + 1]

        for j in range(vertical_divisions):
            ring = 1 + j * segments
            next_ring = ring + segments
            for i in range(segments):
                following = (i + 1) % segments
                indices += [ring + i, next_ring + i, ring + following]
                indices += [ring + following, next_ring + i, next_ring + following]

        self.add_mesh(_mesh(vertices, indices))


class Cube(Model):
    """Cube centred on the origin, each face split into a grid of quads.

    Vertices are shared between faces; each vertex normal is the sum of the
    normals of the quads touching it, plus the normal of the first quad.
    """

    def __init__(self, side_length: float, subdivisions: int) -> None:
        super().__init__()
        half = side_length / 2.0
        step = side_length / subdivisions
        n = subdivisions

        vertices: list[Vertex] = []
        lookup: dict[tuple[int, int, int], int] = {}
        indices: list[int] = []

        def vertex_index(cell: tuple[int, int, int], normal: tuple[float, float, float]) -> int:
            if cell not in lookup:
                lookup[cell] = len(vertices)
                position = tuple(-half + c * step for c in cell)
                vertices.append(Vertex(position, normal))
            return lookup[cell]

        def add_quad(corners, normal) -> None:
            i1, i2, i3, i4 = (vertex_index(c, normal) for c in corners)
            indices.extend((i1, i2, i4, i2, i3, i4))
            for idx in (i1, i2, i3, i4):
                vertices[idx].normal = vertices[idx].normal + np.asarray(normal, dtype=float)

        for i in range(n):
            for j in range(n):
                a, b = i + 1, j + 1
                # front (+Z)
                add_quad(((i, j, n), (a, j, n), (a, b, n), (i, b, n)), (0.0, 0.0, 1.0))
                # back (-Z)
                add_quad(((i, j, 0), (i, b, 0), (a, b, 0), (a, j, 0)), (0.0, 0.0, -1.0))
                # left (-X)
                add_quad(((0, j, i), (0, b, i), (0, b, a), (0, j, a)), (-1.0, 0.0, 0.0))
                # right (+X)
                add_quad(((n, j, i), (n, j, a), (n, b, a), (n, b, i)), (1.0, 0.0, 0.0))
                # top (+Y)
                add_quad(((i, n, j), (i, n, b), (a, n, b), (a, n, j)), (0.0, 1.0, 0.0))
                # bottom (-Y)
                add_quad(((i, 0, j), (a, 0, j), (a, 0, b), (i, 0, b)), (0.0, -1.0, 0.0))

        self.add_mesh(_mesh(vertices, indices))


class Grid(Model):
    """Flat floor grid of line endpoints on the XZ plane, 0.5 units per square."""

    SQUARE_SIZE = 0.5

    def __init__(self, divisions: int) -> None:
        super().__init__()
        grid_size = self.SQUARE_SIZE * divisions
        half = grid_size / 2.0
        up = (0.0, 1.0, 0.0)

        vertices: list[Vertex] = []
        for i in range(divisions + 1):
            offset = -half + (i / divisions) * grid_size
            vertices += [
                Vertex((offset, 0.0, -half), up),
                Vertex((offset, 0.0, half), up),
                Vertex((-half, 0.0, offset), up),
                Vertex((half, 0.0, offset), up),
            ]

        indices: list[int] = []
        for i in range(divisions + 1):
            indices += [i * 2, i * 2 + 1, divisions * 2 + i * 2, divisions * 2 + i * 2 + 1]

        self.add_mesh(_mesh(vertices, indices))


class Plane(Model):
    """Subdivided rectangle on the XZ plane centred on the origin."""

    def __init__(self, width: float, depth: float, subdivisions_x: int, subdivisions_z: int) -> None:
        super().__init__()
        count_x = subdivisions_x + 1
        half_width = width / 2.0
        half_depth = depth / 2.0

        vertices = [
            Vertex(
                (
                    -half_width + (x / subdivisions_x) * width,
                    0.0,
                    -half_depth + (z / subdivisions_z) * depth,
                ),
                (0.0, 1.0, 0.0),
            )
            for z in range(subdivisions_z + 1)
            for x in range(count_x)
        ]

        indices: list[int] = []
        for z in range(subdivisions_z):
            for x in range(subdivisions_x):
                top_left = z * count_x + x
                top_right = top_left + 1
                bottom_left = (z + 1) * count_x + x
                bottom_right = bottom_left + 1
                indices += [top_left, bottom_left, top_right]
                indices += [top_right, bottom_left, bottom_right]

        self.add_mesh(_mesh(vertices, indices))


class Sphere(Model):
    """UV sphere centred on the origin with outward unit normals."""

    def __init__(self, latitude: int, longitude: int, radius: float) -> None:
        super().__init__()
        vertices: list[Vertex] = []
        for lat in range(latitude + 1):
            theta = lat * math.pi / latitude
            sin_t, cos_t = math.sin(theta), math.cos(theta)
            for lon in range(longitude + 1):
                phi = lon * 2 * math.pi / longitude
                position = np.array(
                    (radius * math.cos(phi) * sin_t, radius * cos_t, radius * math.sin(phi) * sin_t)
                )
                vertices.append(Vertex(position, _normalize(position)))

        indices: list[int] = []
        for lat in range(latitude):
            for lon in range(longitude):
                first = lat * (longitude + 1) + lon
                second = first + longitude + 1
                indices += [first, first + 1, second]
                indices += [second, first + 1, second + 1]

        self.add_mesh(_mesh(vertices, indices))


class Torus(Model):
    """Torus around the Y axis; ``gap`` is the ring radius, ``tube`` the tube radius.

    Each vertex normal is set to its (unnormalized) position.
    """

    def __init__(self, rings: int, sectors: int, gap: float = 1.0, tube: float = 0.4) -> None:
        super().__init__()
        vertices: list[Vertex] = []
        for i in range(rings + 1):
            angle = math.radians(i / rings * 360.0)
            y = tube * math.sin(angle)
            circle_radius = gap + tube * math.cos(angle)
            for j in range(sectors + 1):
                sector = math.radians(j / sectors * 360.0)
                position = (circle_radius * math.cos(sector), y, circle_radius * math.sin(sector))
                vertices.append(Vertex(position, position))

        indices: list[int] = []
        for i in range(rings):
            for j in range(sectors):
                first = i * (sectors + 1) + j
                second = first + sectors + 1
                indices += [first, second, first + 1]
                indices += [second, second + 1, first + 1]

        self.add_mesh(_mesh(vertices, indices))