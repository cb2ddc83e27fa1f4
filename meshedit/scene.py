"""The scene: models, camera, floor grid and the editing selection."""

from __future__ import annotations

from .camera import Camera
from .events import EventManager, RepositionGizmoEvent
from .gizmo_listener import GizmoListener
from .mesh import Model
from .primitives import Grid
from .selection import SelectionMode, SelectionState


class SceneManager:
    """Holds the scene contents and the current selection.

    A GizmoListener for the scene's selection is subscribed to its event
    manager, so changing the selection mode moves the gizmo.
    """

    def __init__(
        self,
        events: EventManager | None = None,
        selection: SelectionState | None = None,
    ) -> None:
        self.events = events if events is not None else EventManager()
        self.selection = selection if selection is not None else SelectionState()
        self.grid: Grid | None = None
        self.camera: Camera | None = None
        self.models: list[Model] = []
        self.selection_mode = SelectionMode.NONE
        self.textures_enabled = False
        self.events.subscribe(RepositionGizmoEvent, GizmoListener(self.selection).listen)

    def add_model(self, model: Model) -> None:
        self.models.append(model)

    def set_viewport(self, width: int, height: int) -> None:
        """Resize the camera's view; requires a camera."""
        if self.camera is None:
            raise RuntimeError("scene has no camera")
        self.camera.view_width = width
        self.camera.view_height = height

    def set_selection_mode(self, mode: SelectionMode) -> None:
        """Switch mode and ask for the gizmo to be repositioned for it."""
        self.selection_mode = mode
        self.events.dispatch(RepositionGizmoEvent(mode))

    def clear(self) -> None:
        """Drop all models and selections and return to no selection mode."""
        self.selection.clear()
        self.selection_mode = SelectionMode.NONE
        self.models.clear()