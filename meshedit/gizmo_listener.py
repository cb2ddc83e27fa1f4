"""Moves the gizmo onto the current selection when asked to."""

from __future__ import annotations

import numpy as np

from .events import Event, RepositionGizmoEvent
from .geom import centroid
from .selection import SelectionMode, SelectionState


def _translation(offset) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


class GizmoListener:
    """Listens for RepositionGizmoEvent and writes the new gizmo matrix into the selection."""

    def __init__(self, selection: SelectionState) -> None:
        self.selection = selection

    def listen(self, event: Event) -> None:
        if not isinstance(event, RepositionGizmoEvent):
            return
        state = self.selection
        mode = event.mode

        if mode is SelectionMode.OBJECTS:
            if state.mesh is not None:
                state.gizmo = np.array(state.mesh.transform.transform, dtype=float)
            else:
                state.gizmo = np.identity(4)
        elif mode is SelectionMode.VERTICES:
            if state.vertices:
                state.gizmo = _translation(centroid(state.vertices))
            else:
                state.gizmo = np.identity(4)
        elif mode is SelectionMode.FACES:
            if state.faces:
                total = sum((v.position for face in state.faces for v in face), np.zeros(3))
                # every face is counted as a triangle
                state.gizmo = _translation(total / (len(state.faces) * 3))
            else:
                state.gizmo = np.identity(4)
        elif mode is SelectionMode.EDGES:
            total = sum(
                (v.position for edge in state.edges for v in edge), np.zeros(3)
            )
            # with no edges this divides by zero and yields NaN, as the editor always has
            with np.errstate(invalid="ignore", divide="ignore"):
                state.gizmo = _translation(total / float(len(state.edges) * 2))