"""Undoable commands and the undo/redo history that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """An editor action that can be undone and redone."""

    stackable: bool = False

    @abstractmethod
    def execute(self) -> bool:
        """Perform the action; return True if it took effect."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the action."""

    @abstractmethod
    def redo(self) -> None:
        """Re-apply the action after an undo."""

    def done(self) -> None:
        """Finish a continuous action; called once when it ends."""


class CommandManager:
    """Runs commands and keeps the undo and redo history.

    ``undo_stack`` and ``redo_stack`` are lists whose last element is the top.
    ``last_command`` is the continuous command being driven by ``loop``.
    """

    def __init__(self) -> None:
        self.undo_stack: list[Command] = []
        self.redo_stack: list[Command] = []
        self.last_command: Command | None = None

    def execute(self, command: Command, repeat: bool = False) -> None:
        """Run a command; if it takes effect, record it and drop the redo history."""
        if command.execute():
            self.undo_stack.append(command)
            self.redo_stack.clear()

    def loop(self, command: Command, flag: bool) -> None:
        """Drive a continuous command while ``flag`` holds.

        The first call only adopts ``command``; later calls re-execute the
        adopted command and ignore the one passed in.
        """
        if not flag:
            return
        if self.last_command is None:
            self.last_command = command
        else:
            self.last_command.execute()

    def done(self) -> None:
        """Finish the continuous command and record it in the history."""
        command, self.last_command = self.last_command, None
        if command is not None:
            command.done()
            self.undo_stack.append(command)
            self.redo_stack.clear()

    def undo(self) -> None:
        """Undo the most recent command, if any."""
        if self.undo_stack:
            command = self.undo_stack.pop()
            command.undo()
            self.redo_stack.append(command)

    def redo(self) -> None:
        """Redo the most recently undone command, if any."""
        if self.redo_stack:
            command = self.redo_stack.pop()
            command.redo()
            self.undo_stack.append(command)