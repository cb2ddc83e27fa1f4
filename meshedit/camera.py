"""Fly-through perspective camera and the matrices it produces."""

import math
from dataclasses import dataclass, field

import numpy as np


def _normalize(vector) -> np.ndarray:
    vector = np.asarray(vector, dtype=float)
    return vector / np.linalg.norm(vector)


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]; ``fov`` in radians."""
    f = 1.0 / math.tan(fov / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = f / aspect
    matrix[1, 1] = f
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def _vec3(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


@dataclass(eq=False)
class Camera:
    """Perspective camera steered by yaw and pitch (degrees).

    ``front`` is always derived from yaw and pitch, including at creation.
    """

    view_width: int
    view_height: int
    fov: float
    near: float
    far: float
    position: np.ndarray = field(default_factory=lambda: np.array([0.5, 0.5, 3.0]))
    front: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    right: np.ndarray = field(default_factory=lambda: np.zeros(3))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    ray_direction: np.ndarray = field(default_factory=lambda: np.zeros(3))
    ray_origin: np.ndarray = field(default_factory=lambda: np.zeros(3))
    yaw: float = -90.0
    pitch: float = 0.0
    speed: float = 0.01
    sensitivity: float = 0.25
    last_x: float = 0.0
    last_y: float = 0.0
    mouse_start: bool = True
    mouse_click: bool = False

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.right = _vec3(self.right)
        self.up = _vec3(self.up)
        self.ray_direction = _vec3(self.ray_direction)
        self.ray_origin = _vec3(self.ray_origin)
        self._update_front()

    def _update_front(self) -> None:
        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        self.front = _normalize(
            (math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch))
        )

    def track_mouse(self, mx: float, my: float) -> None:
        """Turn the camera by the mouse movement since the last call."""
        if self.mouse_start:
            self.last_x, self.last_y = mx, my
            self.mouse_start = False

        x_offset = (mx - self.last_x) * self.sensitivity
        y_offset = (self.last_y - my) * self.sensitivity
        self.last_x, self.last_y = mx, my

        self.yaw += x_offset
        self.pitch = min(max(self.pitch + y_offset, -89.0), 89.0)
        self._update_front()

    def move_forward(self) -> None:
        self.position = self.position + self.speed * self.front

    def move_backwards(self) -> None:
        self.position = self.position - self.speed * self.front

    def move_left(self) -> None:
        self.position = self.position - np.cross(self.front, self.up) * self.speed

    def move_right(self) -> None:
        self.position = self.position + np.cross(self.front, self.up) * self.speed

    def reset_mouse(self) -> None:
        """Make the next mouse sample the new reference point."""
        self.mouse_start = True

    def focus_at(self, position) -> None:
        """Place the camera five units behind ``position`` along the view direction."""
        self.position = _vec3(position) - self.front * 5.0

    def _aspect(self) -> float:
        return float(self.view_width) / float(self.view_height)

    def projection(self) -> np.ndarray:
        return perspective(self.fov, self._aspect(), self.near, self.far)

    def view(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def screen_to_world(self, mx: float, my: float) -> None:
        """Cast a picking ray through window coordinates into ``ray_origin``/``ray_direction``."""
        mouse_x = mx / (self.view_width * 0.5) - 1.0
        mouse_y = my / (self.view_height * 0.5) - 1.0

        view = look_at(np.zeros(3), self.front, self.up)
        inverse = np.linalg.inv(self.projection() @ view)
        world = inverse @ np.array([mouse_x, -mouse_y, 1.0, 1.0])

        self.ray_origin = self.position.copy()
        self.ray_direction = _normalize(world[:3])

    def transform(self) -> np.ndarray:
        """Model matrix of the camera: a translation to its position."""
        matrix = np.identity(4)
        matrix[:3, 3] = self.position
        return matrix