"""Vertices, meshes and models that hold meshes."""

from dataclasses import dataclass, field

import numpy as np

from .transform import Transform


@dataclass(eq=False)
class Vertex:
    """A mesh vertex. Compared and hashed by identity, so it can key selections."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float).reshape(3)
        self.normal = np.array(self.normal, dtype=float).reshape(3)
        self.tex_coords = np.array(self.tex_coords, dtype=float).reshape(2)


@dataclass(eq=False)
class Mesh:
    """Triangle mesh: vertices, triangle indices, line edge indices and textures.

    ``transform`` may be a Transform or a 4x4 matrix, which becomes the
    cached matrix of a fresh Transform.
    """

    vertices: list = field(default_factory=list)
    indices: list = field(default_factory=list)
    edges: list = field(default_factory=list)
    textures: list = field(default_factory=list)
    transform: Transform = field(default_factory=Transform)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = [int(i) for i in self.indices]
        self.edges = [int(i) for i in self.edges]
        self.textures = list(self.textures)
        if not isinstance(self.transform, Transform):
            self.transform = Transform(transform=self.transform)


class Model:
    """A scene object made of one or more meshes."""

    def __init__(self, meshes=()) -> None:
        self.meshes: list[Mesh] = list(meshes)

    def add_mesh(self, mesh: Mesh) -> None:
        """Append a mesh to the model."""
        self.meshes.append(mesh)