"""Commands that move selected vertices, faces or whole meshes."""

from __future__ import annotations

import numpy as np

from .command_manager import Command
from .events import RepositionGizmoEvent
from .geom import centroid, recalculate_normals_for_affected_faces
from .mesh import Mesh, Vertex
from .scene import SceneManager
from .selection import SelectionMode


def _swap_positions(
    mesh: Mesh | None, vertices, last_positions: dict[Vertex, np.ndarray]
) -> dict[Vertex, np.ndarray]:
    """Put each vertex back at its remembered position; return the positions it had."""
    current: dict[Vertex, np.ndarray] = {}
    for vertex in vertices:
        current[vertex] = vertex.position.copy()
        vertex.position = np.array(last_positions.get(vertex, np.zeros(3)), dtype=float)
        if mesh is not None:
            recalculate_normals_for_affected_faces(mesh, vertex.position)
    return current


class TranslateVertexCommand(Command):
    """Moves the selected vertices so that their centroid follows the gizmo."""

    stackable = True

    def __init__(self, scene: SceneManager) -> None:
        self.scene = scene
        self.last_positions: dict[Vertex, np.ndarray] = {
            vertex: vertex.position.copy() for vertex in scene.selection.vertices
        }

    def execute(self) -> bool:
        selection = self.scene.selection
        mesh = selection.mesh
        vertices = selection.vertices
        if not vertices or mesh is None:
            return False

        offset = selection.gizmo[:3, 3] - centroid(vertices)
        for vertex in vertices:
            vertex.position = vertex.position + offset
            recalculate_normals_for_affected_faces(mesh, vertex.position)
        return True

    def _restore(self) -> None:
        selection = self.scene.selection
        self.last_positions = _swap_positions(
            selection.mesh, selection.vertices, self.last_positions
        )
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.VERTICES))

    def undo(self) -> None:
        self._restore()

    def redo(self) -> None:
        self._restore()


class TranslateFaceCommand(Command):
    """Moves the vertices of the selected faces so that their centroid follows the gizmo."""

    stackable = True

    def __init__(self, scene: SceneManager) -> None:
        self.scene = scene
        self.last_positions: dict[Vertex, np.ndarray] = {
            vertex: vertex.position.copy()
            for face in scene.selection.faces
            for vertex in face
        }

    def execute(self) -> bool:
        selection = self.scene.selection
        mesh = selection.mesh
        faces = selection.faces
        if not faces or mesh is None:
            return False

        unique = list(dict.fromkeys(vertex for face in faces for vertex in face))
        offset = selection.gizmo[:3, 3] - centroid(unique)
        for vertex in unique:
            vertex.position = vertex.position + offset
            recalculate_normals_for_affected_faces(mesh, vertex.position)
        return True

    def _restore(self) -> None:
        selection = self.scene.selection
        vertices = [vertex for face in selection.faces for vertex in face]
        current: dict[Vertex, np.ndarray] = {}
        for vertex in vertices:
            current.update(_swap_positions(selection.mesh, [vertex], self.last_positions))
        self.last_positions = current
        self.scene.events.dispatch(RepositionGizmoEvent(SelectionMode.FACES))

    def undo(self) -> None:
        self._restore()

    def redo(self) -> None:
        self._restore()


class TranslateMeshCommand(Command):
    """Moves the selected mesh's transform to the gizmo; baking happens on ``done``."""

    def __init__(self, scene: SceneManager) -> None:
        self.scene = scene

    def execute(self) -> bool:
        mesh = self.scene.selection.mesh
        if mesh is None:
            return False
        mesh.transform.translate(self.scene.selection.gizmo[:3, 3])
        return True

    def done(self) -> None:
        """Bake the mesh transform into its vertex positions."""
        mesh = self.scene.selection.mesh
        if mesh is None:
            return
        matrix = mesh.transform.matrix()
        for vertex in mesh.vertices:
            vertex.position = (matrix @ np.append(vertex.position, 1.0))[:3]

    def undo(self) -> None:
        """Mesh translations are not reverted."""

    def redo(self) -> None:
        """Mesh translations are not re-applied."""