"""Geometry helpers: centroids, normals and edge lists."""

from collections.abc import Iterable, Sequence

import numpy as np

from .mesh import Mesh, Vertex


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def _triangles(indices: Sequence[int]):
    """Yield complete (i0, i1, i2) triples from a flat index list."""
    it = iter(indices)
    return zip(it, it, it)


def centroid(vertices: Iterable[Vertex]) -> np.ndarray:
    """Mean position of the given vertices."""
    positions = [v.position for v in vertices]
    if not positions:
        raise ValueError("centroid of no vertices")
    return np.sum(positions, axis=0) / len(positions)


def average_normal(vertices: Iterable[Vertex]) -> np.ndarray:
    """Normalized sum of the given vertices' normals."""
    return _normalize(np.sum([v.normal for v in vertices], axis=0))


def recalculate_normals_for_vertices(vertices: Sequence[Vertex]) -> None:
    """Recompute normals treating each run of three vertices as a triangle."""
    for vertex in vertices:
        vertex.normal = np.zeros(3)

    for v0, v1, v2 in _triangles(vertices):
        face = _normalize(np.cross(v1.position - v0.position, v2.position - v0.position))
        for vertex in (v0, v1, v2):
            vertex.normal = vertex.normal + face

    for vertex in vertices:
        vertex.normal = _normalize(vertex.normal)


def recalculate_normals_for_mesh(mesh: Mesh) -> None:
    """Recompute all vertex normals from the mesh's triangles, skipping degenerate ones."""
    vertices = mesh.vertices
    for vertex in vertices:
        vertex.normal = np.zeros(3)

    for i0, i1, i2 in _triangles(mesh.indices):
        v0, v1, v2 = vertices[i0], vertices[i1], vertices[i2]
        face = np.cross(v1.position - v0.position, v2.position - v0.position)
        if np.linalg.norm(face) == 0.0:
            continue
        for vertex in (v0, v1, v2):
            vertex.normal = vertex.normal + face

    for vertex in vertices:
        if np.linalg.norm(vertex.normal) != 0.0:
            vertex.normal = _normalize(vertex.normal)


def recalculate_normals_for_vertex(mesh: Mesh, vertex_index: int) -> None:
    """Recompute one vertex normal as the area-weighted sum of its faces' normals."""
    accumulated = np.zeros(3)
    for tri in _triangles(mesh.indices):
        if vertex_index not in tri:
            continue
        p0, p1, p2 = (mesh.vertices[i].position for i in tri)
        # unit normal times half the cross length is half the cross product
        accumulated += np.cross(p1 - p0, p2 - p0) * 0.5
    mesh.vertices[vertex_index].normal = _normalize(accumulated)


def recalculate_normals_for_affected_faces(mesh: Mesh, position) -> None:
    """Recompute normals of every face that has a vertex exactly at ``position``."""
    target = np.asarray(position, dtype=float)
    for tri in _triangles(mesh.indices):
        if any(np.array_equal(mesh.vertices[i].position, target) for i in tri):
            for i in tri:
                recalculate_normals_for_vertex(mesh, i)


def generate_edges(indices: Sequence[int]) -> list[int]:
    """Turn triangle indices into line pairs: three edges per triangle."""
    return [
        index
        for a, b, c in _triangles(indices)
        for index in (a, b, b, c, c, a)
    ]