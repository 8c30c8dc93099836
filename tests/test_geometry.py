import numpy as np
import pytest

from orrery.geometry import (
    CUBE_INDICES,
    CUBE_VERTICES,
    generate_sphere,
)


@pytest.mark.parametrize("stacks,slices", [(1, 1), (2, 3), (20, 20), (7, 11)])
def test_sphere_sizes(stacks, slices):
    vertices, indices = generate_sphere(5.0, stacks, slices)
    assert vertices.size == (stacks + 1) * (slices + 1) * 6
    assert indices.size == stacks * slices * 6


def test_sphere_positions_lie_on_surface():
    radius = 12.0
    vertices, _ = generate_sphere(radius, 20, 20)
    positions = vertices.reshape(-1, 6)[:, :3]
    np.testing.assert_allclose(np.linalg.norm(positions, axis=1), radius, rtol=1e-5)


def test_sphere_normals_are_unit_and_radial():
    radius = 30.0
    vertices, _ = generate_sphere(radius, 10, 14)
    data = vertices.reshape(-1, 6)
    np.testing.assert_allclose(np.linalg.norm(data[:, 3:], axis=1), 1.0, rtol=1e-5)
    np.testing.assert_allclose(data[:, 3:], data[:, :3] / radius, atol=1e-6)


def test_sphere_poles():
    radius = 8.0
    vertices, _ = generate_sphere(radius, 6, 6)
    data = vertices.reshape(-1, 6)
    np.testing.assert_allclose(data[0, :3], [0.0, radius, 0.0], atol=1e-5)
    np.testing.assert_allclose(data[-1, :3], [0.0, -radius, 0.0], atol=1e-5)


def test_sphere_indices_in_range():
    vertices, indices = generate_sphere(1.0, 9, 13)
    vertex_count = vertices.size // 6
    assert indices.max() < vertex_count
    assert indices.dtype == np.uint32


def test_sphere_first_quad():
    _, indices = generate_sphere(1.0, 2, 3)
    assert indices[:6].tolist() == [0, 4, 1, 1, 4, 5]


@pytest.mark.parametrize("stacks,slices", [(0, 4), (4, 0), (-1, 3)])
def test_sphere_rejects_empty_subdivision(stacks, slices):
    with pytest.raises(ValueError):
        generate_sphere(1.0, stacks, slices)


def test_sphere_rejects_zero_radius():
    with pytest.raises(ValueError):
        generate_sphere(0.0, 4, 4)


def test_cube_data_is_consistent():
    assert CUBE_VERTICES.size % 6 == 0
    vertex_count = CUBE_VERTICES.size // 6
    assert int(CUBE_INDICES.max()) + 1 == vertex_count
    assert CUBE_INDICES.size % 3 == 0
    normals = CUBE_VERTICES.reshape(-1, 6)[:, 3:]
    np.testing.assert_allclose(np.linalg.norm(normals, axis=1), 1.0)