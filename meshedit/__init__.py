"""Mesh editing core: meshes, primitives, camera picking, selection, events and undoable commands."""

__version__ = "0.1.0"