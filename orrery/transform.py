"""Position, orientation and scale of an object in the scene."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _vec3(value) -> np.ndarray:
    array = np.array(value, dtype=np.float64).reshape(3)
    return array


def _quat_to_mat3(quat: np.ndarray) -> np.ndarray:
    w, x, y, z = quat
    return np.array(
        [
            [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
            [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x)],
            [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y)],
        ]
    )


@dataclass
class Transform:
    """Translation, rotation quaternion (w, x, y, z) and per-axis scale."""

    pos: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rot: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.pos = _vec3(self.pos)
        self.rot = np.array(self.rot, dtype=np.float64).reshape(4)
        self.scale = _vec3(self.scale)

    def to_mat4(self) -> np.ndarray:
        """Model matrix: translate, then rotate, then scale (column vectors)."""
        model = np.eye(4)
        model[:3, :3] = _quat_to_mat3(self.rot) * self.scale
        model[:3, 3] = self.pos
        return model