"""Position, rotation and scale of an object, composed into a 4x4 matrix."""

from dataclasses import dataclass, field

import numpy as np


def _vec3(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _rotation_matrix(euler) -> np.ndarray:
    """Build a 4x4 rotation matrix from Euler angles (radians, x/y/z)."""
    half = np.asarray(euler, dtype=float) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)

    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz

    rotation = np.identity(4)
    rotation[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return rotation


@dataclass(eq=False)
class Transform:
    """Translation, Euler rotation and scale, plus the cached composed matrix."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scaling: np.ndarray = field(default_factory=lambda: np.ones(3))
    transform: np.ndarray = field(default_factory=lambda: np.identity(4))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scaling = _vec3(self.scaling)
        self.transform = np.array(self.transform, dtype=float).reshape(4, 4)

    def translate(self, position) -> None:
        """Set the position and refresh the cached matrix."""
        self.position = _vec3(position)
        self.transform = self.matrix()

    def rotate(self, rotation) -> None:
        """Set the Euler rotation (radians) and refresh the cached matrix."""
        self.rotation = _vec3(rotation)
        self.transform = self.matrix()

    def scale(self, scale) -> None:
        """Set the scale factors and refresh the cached matrix."""
        self.scaling = _vec3(scale)
        self.transform = self.matrix()

    def matrix(self) -> np.ndarray:
        """Return translation * rotation * scale as a new 4x4 matrix."""
        translation = np.identity(4)
        translation[:3, 3] = self.position
        scaling = np.diag([*self.scaling, 1.0])
        return translation @ _rotation_matrix(self.rotation) @ scaling