"""Indexed vertex data with a primitive type."""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class DrawMode(IntEnum):
    """Primitive type; values are the matching OpenGL enum constants."""

    LINES = 0x0001
    TRIANGLES = 0x0004


class Mesh:
    """Interleaved vertex buffer plus index buffer.

    Each vertex holds ``stride`` floats, the first three being its position.
    """

    def __init__(self, vertices, indices, stride: int, dynamic: bool, mode: DrawMode) -> None:
        if stride < 3:
            raise ValueError("stride must hold at least a 3-component position")
        self.vertices = np.array(vertices, dtype=np.float32).ravel()
        if self.vertices.size % stride:
            raise ValueError("vertex data length is not a multiple of the stride")

        raw_indices = np.array(indices, dtype=np.int64).ravel()
        vertex_count = self.vertices.size // stride
        if raw_indices.size and (raw_indices.min() < 0 or raw_indices.max() >= vertex_count):
            raise ValueError("index refers to a vertex outside the buffer")
        self.indices = raw_indices.astype(np.uint32)

        self.stride = stride
        self.is_static = not dynamic
        self.draw_mode = DrawMode(mode)

    @property
    def index_count(self) -> int:
        return int(self.indices.size)

    @property
    def vertex_count(self) -> int:
        return self.vertices.size // self.stride

    def update_vertices(self, vertices) -> None:
        """Overwrite vertex data from the start of the buffer."""
        data = np.asarray(vertices, dtype=np.float32).ravel()
        if data.size > self.vertices.size:
            raise ValueError("update is larger than the vertex buffer")
        self.vertices[: data.size] = data