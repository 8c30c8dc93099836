"""Free-flying first-person camera."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np


class CamMovement(Enum):
    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0:
        raise ValueError("cannot normalise a zero-length vector")
    return vector / length


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye = np.asarray(eye, dtype=np.float64)
    center = np.asarray(center, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)

    view = np.eye(4)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[0, 3] = -np.dot(s, eye)
    view[1, 3] = -np.dot(u, eye)
    view[2, 3] = np.dot(f, eye)
    return view


class Camera:
    """Camera driven by yaw/pitch angles, keyboard movement and scroll zoom."""

    PITCH_LIMIT = 89.0
    ZOOM_MIN = 1.0
    ZOOM_MAX = 45.0

    def __init__(self) -> None:
        self.position = np.array([0.0, 0.0, 1000.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.yaw = -90.0
        self.pitch = 0.0
        self.movement_speed = 500.0
        self.mouse_sensitivity = 0.6
        self.zoom = 45.0
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CamMovement, dt: float) -> None:
        velocity = self.movement_speed * dt
        if direction is CamMovement.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is CamMovement.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is CamMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CamMovement.RIGHT:
            self.position = self.position + self.right * velocity
        else:
            raise ValueError(f"unknown camera movement: {direction!r}")

    def process_mouse(self, x_offset: float, y_offset: float, constrain_pitch: bool = True) -> None:
        self.yaw += x_offset * self.mouse_sensitivity
        self.pitch += y_offset * self.mouse_sensitivity

        if constrain_pitch:
            self.pitch = min(max(self.pitch, -self.PITCH_LIMIT), self.PITCH_LIMIT)

        self._update_vectors()

    def process_scroll(self, y_offset: float) -> None:
        self.zoom = min(max(self.zoom - y_offset, self.ZOOM_MIN), self.ZOOM_MAX)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(direction)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))