"""Commands that add objects to the scene and pick vertices, edges and faces."""

from __future__ import annotations

import numpy as np

from .camera import Camera
from .command_manager import Command
from .events import RepositionGizmoEvent
from .mesh import Mesh, Model, Vertex
from .scene import SceneManager
from .selection import SelectionMode

_EDGE_THRESHOLD = 0.1
_FACE_THRESHOLD = 0.1
_VERTEX_THRESHOLD = 0.01


def _camera(scene: SceneManager) -> Camera:
    if scene.camera is None:
        raise RuntimeError("scene has no camera")
    return scene.camera


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


class CreateSceneObjectCommand(Command):
    """Adds a model to the scene; undo removes the most recently added model."""

    def __init__(self, scene: SceneManager, model: Model | None) -> None:
        self.scene = scene
        self.model = model

    def execute(self) -> bool:
        if self.model is None:
            return False
        self.scene.add_model(self.model)
        return True

    def undo(self) -> None:
        self.scene.models.pop()

    def redo(self) -> None:
        self.execute()


class SelectVertexCommand(Command):
    """Picks the first vertex lying on the camera's picking ray.

    The search runs on the already selected mesh, or else on the first mesh
    of every model in the scene.
    """

    def __init__(self, scene: SceneManager) -> None:
        self.scene = scene
        self.selected_vertex: Vertex | None = None

        if scene.selection.mesh is not None:
            self._select_vertex(scene.selection.mesh)
        else:
            for model in scene.models:
                if model.meshes:
                    self._select_vertex(model.meshes[0])

    def _select_vertex(self, mesh: Mesh) -> None:
        camera = _camera(self.scene)
        matrix = mesh.transform.matrix()
        origin = camera.ray_origin
        direction = camera.ray_direction

        for vertex in mesh.vertices:
            world = (matrix @ np.append(vertex.position, 1.0))[:3]
            t = float(np.dot(world - origin, direction))
            if t < 0.0:
                continue
            closest = origin + t * direction
            if np.linalg.norm(closest - world) < _VERTEX_THRESHOLD:
                self.selected_vertex = vertex
                self.scene.selection.mesh = mesh
                break

    def execute(self) -> bool:
        if self.selected_vertex is None:
            return False
        self.scene.selection.add_vertex(self.selected_vertex)
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.VERTICES))
        return True

    def undo(self) -> None:
        if self.scene.selection.vertices:
            self.scene.selection.pop_vertex()
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.VERTICES))

    def redo(self) -> None:
        self.execute()


class SelectEdgeCommand(Command):
    """Picks the edge passing closest to the camera's picking ray, within 0.1 units."""

    def __init__(self, scene: SceneManager) -> None:
        self.scene = scene
        self.selected_edge: tuple[Vertex, Vertex] | None = None

        if scene.selection.mesh is not None:
            self._select_edge(scene.selection.mesh)
        else:
            for model in scene.models:
                for mesh in model.meshes:
                    if self._select_edge(mesh):
                        break

    def _select_edge(self, mesh: Mesh) -> bool:
        camera = _camera(self.scene)
        origin = camera.ray_origin
        ray = _normalize(camera.ray_direction)
        closest_distance = _EDGE_THRESHOLD
        closest: tuple[Vertex, Vertex] | None = None

        pairs = iter(mesh.edges)
        for first, second in zip(pairs, pairs):
            v1, v2 = mesh.vertices[first], mesh.vertices[second]
            edge = v2.position - v1.position
            origin_to_edge = v1.position - origin

            a = np.dot(edge, edge)
            b = np.dot(edge, ray)
            c = np.dot(ray, ray)
            d = np.dot(edge, origin_to_edge)
            e = np.dot(ray, origin_to_edge)

            with np.errstate(invalid="ignore", divide="ignore"):
                denominator = a * c - b * b
                t_edge = (b * e - c * d) / denominator
                t_ray = (a * e - b * d) / denominator
                t_edge = np.clip(t_edge, 0.0, 1.0)
                on_edge = v1.position + t_edge * edge
                on_ray = origin + t_ray * ray
                distance = np.linalg.norm(on_edge - on_ray)

            if distance < closest_distance:
                closest_distance = distance
                closest = (v1, v2)

        if closest is not None:
            self.selected_edge = closest
            self.scene.selection.mesh = mesh
            return True
        return False

    def execute(self) -> bool:
        if self.selected_edge is None:
            return False
        self.scene.selection.add_edge(self.selected_edge)
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.EDGES))
        return True

    def undo(self) -> None:
        self.scene.selection.pop_edge()
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.EDGES))

    def redo(self) -> None:
        self.execute()


class SelectFaceCommand(Command):
    """Picks the front-facing triangle whose centroid lies closest to the picking ray."""

    def __init__(self, scene: SceneManager) -> None:
        self.scene = scene
        self.closest_face: list[Vertex] = []

        if scene.selection.mesh is not None:
            self._select_face(scene.selection.mesh)
        else:
            for model in scene.models:
                for mesh in model.meshes:
                    if self._select_face(mesh):
                        break

    def _select_face(self, mesh: Mesh) -> bool:
        camera = _camera(self.scene)
        origin = camera.ray_origin
        direction = camera.ray_direction
        closest_distance = _FACE_THRESHOLD

        indices = iter(mesh.indices)
        for tri in zip(indices, indices, indices):
            v1, v2, v3 = (mesh.vertices[i] for i in tri)
            normal = _normalize(np.cross(v2.position - v1.position, v3.position - v1.position))
            centre = (v1.position + v2.position + v3.position) / 3.0

            view_direction = _normalize(origin - centre)
            if np.dot(normal, view_direction) <= 0:
                continue

            projection = np.dot(centre - origin, direction)
            projected = origin + projection * direction
            distance = np.linalg.norm(centre - projected)

            if distance < closest_distance:
                closest_distance = distance
                self.closest_face = [v1, v2, v3]

        if self.closest_face:
            self.scene.selection.mesh = mesh
            return True
        return False

    def execute(self) -> bool:
        if not self.closest_face:
            return False
        self.scene.selection.add_face(self.closest_face)
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.FACES))
        return True

    def undo(self) -> None:
        self.scene.selection.pop_face()
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.FACES))

    def redo(self) -> None:
        self.execute()