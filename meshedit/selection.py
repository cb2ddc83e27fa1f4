"""Selection modes and the editor's current selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from .mesh import Mesh, Vertex


class SelectionMode(Enum):
    """What kind of element clicks in the viewport select."""

    NONE = auto()
    OBJECTS = auto()
    VERTICES = auto()
    EDGES = auto()
    FACES = auto()


@dataclass(eq=False)
class SelectionState:
    """The gizmo matrix, the selected mesh and the selected vertices, edges and faces.

    Edges are pairs of vertices; faces are lists of vertices.
    """

    gizmo: np.ndarray = field(default_factory=lambda: np.identity(4))
    mesh: Mesh | None = None
    vertices: list[Vertex] = field(default_factory=list)
    edges: list[tuple[Vertex, Vertex]] = field(default_factory=list)
    faces: list[list[Vertex]] = field(default_factory=list)

    def add_vertex(self, vertex: Vertex) -> None:
        self.vertices.append(vertex)

    def pop_vertex(self) -> Vertex:
        """Remove and return the last selected vertex; IndexError if none."""
        return self.vertices.pop()

    def add_edge(self, edge) -> None:
        first, second = edge
        self.edges.append((first, second))

    def pop_edge(self) -> None:
        """Drop the last selected edge, if any."""
        if self.edges:
            self.edges.pop()

    def add_face(self, face) -> None:
        self.faces.append(list(face))

    def pop_face(self) -> None:
        """Drop the last selected face, if any."""
        if self.faces:
            self.faces.pop()

    def clear(self) -> None:
        """Reset the gizmo to identity and forget every selection."""
        self.gizmo = np.identity(4)
        self.mesh = None
        self.vertices.clear()
        self.edges.clear()
        self.faces.clear()