"""Editor events and a dispatcher that routes them to listeners by type."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass

from .selection import SelectionMode


class Event:
    """Base of all editor events."""


@dataclass(frozen=True)
class RepositionGizmoEvent(Event):
    """Asks for the gizmo to be moved onto the current selection of ``mode``."""

    mode: SelectionMode


@dataclass(frozen=True)
class SceneRenderedEvent(Event):
    """Sent after the scene has been drawn."""


Listener = Callable[[Event], None]


class EventManager:
    """Calls the listeners subscribed to an event's exact type, in subscription order."""

    def __init__(self) -> None:
        self.listeners: dict[type, list[Listener]] = defaultdict(list)

    def subscribe(self, event_type: type, listener: Listener) -> None:
        self.listeners[event_type].append(listener)

    def dispatch(self, event: Event) -> None:
        for listener in list(self.listeners.get(type(event), ())):
            listener(event)