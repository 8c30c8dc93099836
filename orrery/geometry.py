"""Scene constants and procedural mesh geometry."""

from __future__ import annotations

import math

import numpy as np

SCR_WIDTH = 1280
SCR_HEIGHT = 720

# Gravitational constant and speed of light in simulation units.
G = 3.0
C = 1000.0

SUN_POSITION = np.array([-200.0, 0.0, 0.0])
SUN_POSITION.setflags(write=False)


def _frozen(values, dtype) -> np.ndarray:
    array = np.array(values, dtype=dtype)
    array.setflags(write=False)
    return array


# Interleaved position (x, y, z) and normal (nx, ny, nz) for each corner.
CUBE_VERTICES = _frozen(
    [
        # back face
        -0.5, -0.5, -0.5, 0.0, 0.0, -1.0,
        0.5, -0.5, -0.5, 0.0, 0.0, -1.0,
        0.5, 0.5, -0.5, 0.0, 0.0, -1.0,
        -0.5, 0.5, -0.5, 0.0, 0.0, -1.0,
        # front face
        -0.5, -0.5, 0.5, 0.0, 0.0, 1.0,
        0.5, -0.5, 0.5, 0.0, 0.0, 1.0,
        0.5, 0.5, 0.5, 0.0, 0.0, 1.0,
        -0.5, 0.5, 0.5, 0.0, 0.0, 1.0,
        # left face
        -0.5, 0.5, 0.5, -1.0, 0.0, 0.0,
        -0.5, 0.5, -0.5, -1.0, 0.0, 0.0,
        -0.5, -0.5, -0.5, -1.0, 0.0, 0.0,
        -0.5, -0.5, 0.5, -1.0, 0.0, 0.0,
        # right face
        0.5, 0.5, 0.5, 1.0, 0.0, 0.0,
        0.5, 0.5, -0.5, 1.0, 0.0, 0.0,
        0.5, -0.5, -0.5, 1.0, 0.0, 0.0,
        0.5, -0.5, 0.5, 1.0, 0.0, 0.0,
        # bottom face
        -0.5, -0.5, -0.5, 0.0, -1.0, 0.0,
        0.5, -0.5, -0.5, 0.0, -1.0, 0.0,
        0.5, -0.5, 0.5, 0.0, -1.0, 0.0,
        -0.5, -0.5, 0.5, 0.0, -1.0, 0.0,
        # top face
        -0.5, 0.5, -0.5, 0.0, 1.0, 0.0,
        0.5, 0.5, -0.5, 0.0, 1.0, 0.0,
        0.5, 0.5, 0.5, 0.0, 1.0, 0.0,
        -0.5, 0.5, 0.5, 0.0, 1.0, 0.0,
    ],
    np.float32,
)

CUBE_INDICES = _frozen(
    [
        0, 1, 2, 2, 3, 0,  # back
        4, 5, 6, 6, 7, 4,  # front
        8, 9, 10, 10, 11, 8,  # left
        12, 13, 14, 14, 15, 12,  # right
        16, 17, 18, 18, 19, 16,  # bottom
        20, 21, 22, 22, 23, 20,  # top
    ],
    np.uint32,
)


def generate_sphere(radius: float, stacks: int, slices: int) -> tuple[np.ndarray, np.ndarray]:
    """Build a UV sphere.

    Returns a flat float32 array of interleaved position and normal
    (six floats per vertex) and a flat uint32 array of triangle indices.
    """
    if stacks < 1 or slices < 1:
        raise ValueError("stacks and slices must both be at least 1")
    if radius == 0:
        raise ValueError("radius must be non-zero")

    phi = math.pi * np.arange(stacks + 1) / stacks
    theta = 2.0 * math.pi * np.arange(slices + 1) / slices
    phi_grid, theta_grid = np.meshgrid(phi, theta, indexing="ij")

    x = radius * np.sin(phi_grid) * np.cos(theta_grid)
    y = radius * np.cos(phi_grid)
    z = radius * np.sin(phi_grid) * np.sin(theta_grid)

    positions = np.stack([x, y, z], axis=-1).reshape(-1, 3)
    normals = positions / radius
    vertices = np.hstack([positions, normals]).astype(np.float32).ravel()

    stack_idx, slice_idx = np.meshgrid(np.arange(stacks), np.arange(slices), indexing="ij")
    top_left = stack_idx * (slices + 1) + slice_idx
    top_right = top_left + 1
    bottom_left = (stack_idx + 1) * (slices + 1) + slice_idx
    bottom_right = bottom_left + 1

    quads = np.stack(
        [top_left, bottom_left, top_right, top_right, bottom_left, bottom_right],
        axis=-1,
    )
    indices = quads.reshape(-1).astype(np.uint32)

    return vertices, indices