import math

import numpy as np
import pytest

from orrery.geometry import G, SUN_POSITION
from orrery.mesh import DrawMode
from orrery.simulation import (
    STARTING_GRID_Y,
    BodyType,
    Celestial,
    System,
    build_grid,
)
from orrery.transform import Transform


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw_lit(self, mesh, transform, color):
        self.calls.append(("lit", mesh, tuple(color)))

    def draw_unlit(self, mesh, transform, color):
        self.calls.append(("unlit", mesh, tuple(color)))


def make_body(name, x, mass=1.0):
    return Celestial(name, Transform(pos=[x, 0.0, 0.0]), BodyType.PLANET, mass, 1.0, (1, 1, 1))


def total_momentum(system):
    return sum(body.momentum for body in system.bodies)


def test_bodies_in_order():
    system = System()
    names = [body.name for body in system.bodies]
    assert names == [
        "sun", "mercury", "venus", "earth", "mars",
        "jupiter", "saturn", "uran", "neptun",
    ]
    assert system.bodies[0].body_type is BodyType.STAR
    assert all(body.body_type is BodyType.PLANET for body in system.bodies[1:])


def test_sun_at_fixed_position_and_at_rest():
    sun = System().bodies[0]
    np.testing.assert_allclose(sun.transform.pos, SUN_POSITION)
    np.testing.assert_array_equal(sun.velocity, np.zeros(3))
    assert sun.mass == 333000.0


def test_planets_start_on_circular_orbits():
    system = System()
    sun = system.bodies[0]
    for planet in system.bodies[1:]:
        r = np.linalg.norm(planet.transform.pos - sun.transform.pos)
        assert planet.velocity[0] == 0.0
        assert planet.velocity[2] ** 2 * r == pytest.approx(G * sun.mass)
        np.testing.assert_allclose(planet.momentum, planet.velocity * planet.rest_mass)


def test_celestial_mesh_and_rest_mass():
    body = make_body("probe", 0.0, mass=7.0)
    assert body.rest_mass == 7.0
    assert body.mesh.draw_mode is DrawMode.TRIANGLES
    assert body.mesh.stride == 6
    assert body.gamma == 1.0


def test_forces_equal_and_opposite():
    a = make_body("a", 0.0, mass=2.0)
    b = make_body("b", 10.0, mass=5.0)
    a.calculate_forces(b)
    np.testing.assert_allclose(a.acc * a.rest_mass, -b.acc * b.rest_mass)
    assert a.acc[0] > 0
    assert b.acc[0] < 0
    assert a.acc[1] == 0.0 and a.acc[2] == 0.0


def test_force_falls_with_distance():
    a = make_body("a", 0.0)
    near = make_body("near", 10.0)
    a.calculate_forces(near)
    near_acc = a.acc[0]
    b = make_body("b", 0.0)
    far = make_body("far", 20.0)
    b.calculate_forces(far)
    assert b.acc[0] < near_acc


def test_coincident_bodies_raise():
    a = make_body("a", 3.0)
    b = make_body("b", 3.0)
    with pytest.raises(ValueError):
        a.calculate_forces(b)


def test_update_without_force_moves_linearly():
    body = make_body("a", 0.0)
    body.momentum = np.array([0.0, 0.0, 10.0])
    body.update(2.0)
    assert body.gamma >= 1.0
    np.testing.assert_allclose(body.velocity, body.momentum / (body.gamma * body.rest_mass))
    np.testing.assert_allclose(body.transform.pos, body.velocity * 2.0)
    assert body.proper_time == pytest.approx(2.0 / body.gamma)


def test_gamma_grows_with_speed():
    slow = make_body("slow", 0.0)
    slow.momentum = np.array([1.0, 0.0, 0.0])
    slow.update(1.0)
    fast = make_body("fast", 0.0)
    fast.momentum = np.array([5000.0, 0.0, 0.0])
    fast.update(1.0)
    assert fast.gamma > slow.gamma
    assert math.sqrt(fast.velocity @ fast.velocity) < 1000.0


def test_set_mass_updates_rest_mass():
    body = make_body("a", 0.0)
    body.set_mass(42.0)
    assert body.mass == 42.0
    assert body.rest_mass == 42.0
    with pytest.raises(ValueError):
        body.set_mass(-1.0)


def test_build_grid_spans_plane():
    vertices, indices = build_grid(5, 4)
    points = vertices.reshape(-1, 3)
    assert points.shape[0] == 20
    assert points[:, 0].min() == -5000.0
    assert points[:, 0].max() == 5000.0
    assert points[:, 2].min() == -5000.0
    assert points[:, 2].max() == 5000.0
    assert np.all(points[:, 1] == 0.0)
    assert indices.max() < points.shape[0]


def test_build_grid_lines_join_neighbours():
    columns, rows = 4, 6
    vertices, indices = build_grid(columns, rows)
    points = vertices.reshape(-1, 3)
    for start, end in indices.reshape(-1, 2):
        step = np.abs(points[end] - points[start])
        changed = np.count_nonzero(step)
        assert changed == 1


def test_build_grid_too_small_raises():
    with pytest.raises(ValueError):
        build_grid(1, 5)


def test_simulate_conserves_total_momentum():
    system = System()
    before = total_momentum(system)
    for _ in range(3):
        system.simulate(0.01)
    np.testing.assert_allclose(total_momentum(system), before, atol=1e-6 * 333000.0)


def test_simulate_bends_grid_downwards():
    system = System()
    system.simulate(0.01)
    heights = system.grid_vertices.reshape(-1, 3)[:, 1]
    assert np.all(heights < STARTING_GRID_Y)
    np.testing.assert_allclose(system.grid_mesh.vertices, system.grid_vertices)


def test_vis_scale_scales_dip():
    low = System()
    high = System()
    low.vis_scale = 0.25
    high.vis_scale = 0.5
    low.simulate(0.0)
    high.simulate(0.0)
    low_dip = STARTING_GRID_Y - low.grid_vertices.reshape(-1, 3)[:, 1]
    high_dip = STARTING_GRID_Y - high.grid_vertices.reshape(-1, 3)[:, 1]
    np.testing.assert_allclose(high_dip, 2 * low_dip, rtol=1e-4)


def test_time_multiplier_scales_step():
    doubled = System()
    doubled.time_multiplier = 2.0
    plain = System()
    doubled.simulate(0.5)
    plain.simulate(1.0)
    for a, b in zip(doubled.bodies, plain.bodies):
        np.testing.assert_allclose(a.transform.pos, b.transform.pos)


def test_scale_settings_reject_out_of_range():
    system = System()
    with pytest.raises(ValueError):
        system.time_multiplier = 20.0
    with pytest.raises(ValueError):
        system.vis_scale = 0.0
    assert system.time_multiplier == 1.0
    assert system.vis_scale == 0.5


def test_renderer_receives_draw_calls():
    system = System()
    renderer = RecordingRenderer()
    system.simulate(0.01, renderer)
    kinds = [call[0] for call in renderer.calls]
    assert kinds.count("lit") == len(system.bodies) - 1
    assert kinds[0] == "unlit"
    assert renderer.calls[-1][0] == "unlit"
    assert renderer.calls[-1][1] is system.grid_mesh
    assert renderer.calls[0][1] is system.bodies[0].mesh


def test_reset_restores_start():
    system = System()
    start = [body.transform.pos.copy() for body in system.bodies]
    system.simulate(1.0)
    system.reset()
    for body, pos in zip(system.bodies, start):
        np.testing.assert_allclose(body.transform.pos, pos)
    assert np.all(system.grid_vertices.reshape(-1, 3)[:, 1] == 0.0)