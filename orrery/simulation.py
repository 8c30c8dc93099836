"""Relativistically corrected N-body solar system with a gravity-well grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from .geometry import C, G, SUN_POSITION, generate_sphere
from .mesh import DrawMode, Mesh
from .transform import Transform

STANDARD_STACKS = 20
STANDARD_SLICES = 20

TIME_MULT_MIN = 0.01
TIME_MULT_MAX = 10.0

VIS_SCALE_MIN = 0.0001
VIS_SCALE_MAX = 1.0

MASS_MIN = 0.0
MASS_MAX = 1_000_000.0

STARTING_GRID_Y = -250.0
SOFTENING = 50.0

GRID_SIZE = 50
GRID_HALF_EXTENT = 5000.0
GRID_COLOR = (0.3, 0.3, 0.3)


class BodyType(Enum):
    PLANET = auto()
    STAR = auto()


@dataclass(eq=False)
class Celestial:
    """A body with a sphere mesh, integrated with relativistic momentum."""

    name: str
    transform: Transform
    body_type: BodyType
    mass: float
    radius: float
    color: np.ndarray = field(default_factory=lambda: np.array([0.3, 0.3, 0.0]))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3), init=False)
    momentum: np.ndarray = field(default_factory=lambda: np.zeros(3), init=False)
    acc: np.ndarray = field(default_factory=lambda: np.zeros(3), init=False)
    gamma: float = field(default=1.0, init=False)
    proper_time: float = field(default=0.0, init=False)
    rest_mass: float = field(init=False)
    mesh: Mesh = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.color = np.array(self.color, dtype=np.float64).reshape(3)
        self.rest_mass = self.mass
        vertices, indices = generate_sphere(self.radius, STANDARD_STACKS, STANDARD_SLICES)
        self.mesh = Mesh(vertices, indices, 6, False, DrawMode.TRIANGLES)

    def calculate_forces(self, body: Celestial) -> None:
        """Add the mutual attraction of this body and another to both accelerations."""
        direction = body.transform.pos - self.transform.pos
        distance = float(np.linalg.norm(direction))
        if distance == 0.0:
            raise ValueError(f"{self.name} and {body.name} occupy the same position")
        direction = direction / distance

        v_avg = (np.linalg.norm(self.velocity) + np.linalg.norm(body.velocity)) / 2.0
        correction = (
            1.0
            + (3.0 * v_avg * v_avg) / (C * C)
            + (2.0 * G * (self.mass + body.mass)) / (distance * C * C)
        )
        magnitude = self.rest_mass * body.rest_mass * G / (distance * distance) * correction
        force = direction * magnitude

        self.acc = self.acc + force / self.rest_mass
        body.acc = body.acc - force / body.rest_mass

    def update(self, dt: float) -> None:
        """Advance momentum, velocity, position and proper time by dt."""
        self.momentum = self.momentum + self.acc * self.rest_mass * dt
        p2 = float(np.dot(self.momentum, self.momentum))
        self.gamma = math.sqrt(1.0 + p2 / (self.rest_mass * self.rest_mass * C * C))
        self.velocity = self.momentum / (self.gamma * self.rest_mass)
        self.transform.pos = self.transform.pos + self.velocity * dt
        self.proper_time += dt / self.gamma

    def set_mass(self, mass: float) -> None:
        """Change both the mass and the rest mass."""
        if not MASS_MIN <= mass <= MASS_MAX:
            raise ValueError(f"mass must lie in [{MASS_MIN}, {MASS_MAX}]")
        self.mass = mass
        self.rest_mass = mass


def build_grid(columns: int, rows: int) -> tuple[np.ndarray, np.ndarray]:
    """Flat grid of columns x rows points spanning the plane, and its line indices."""
    if columns < 2 or rows < 2:
        raise ValueError("grid needs at least two columns and two rows")

    xs = -GRID_HALF_EXTENT + np.arange(columns) / (columns - 1) * 2.0 * GRID_HALF_EXTENT
    zs = -GRID_HALF_EXTENT + np.arange(rows) / (rows - 1) * 2.0 * GRID_HALF_EXTENT
    x_grid, z_grid = np.meshgrid(xs, zs, indexing="ij")
    vertices = np.stack(
        [x_grid, np.zeros_like(x_grid), z_grid], axis=-1
    ).astype(np.float32).ravel()

    index = np.arange(columns * rows).reshape(columns, rows)
    along_rows = np.stack([index[:, :-1], index[:, 1:]], axis=-1).reshape(-1)
    along_columns = np.stack([index[:-1, :].T, index[1:, :].T], axis=-1).reshape(-1)
    indices = np.concatenate([along_rows, along_columns]).astype(np.uint32)

    return vertices, indices


def _solar_bodies() -> list[Celestial]:
    def planet(name, x, mass, radius, color):
        return Celestial(name, Transform(pos=[x, 0.0, 0.0]), BodyType.PLANET, mass, radius, color)

    sun = Celestial(
        "sun", Transform(pos=SUN_POSITION), BodyType.STAR, 333000.0, 30.0, (1.0, 1.0, 0.0)
    )
    planets = [
        planet("mercury", -142.1, 0.0553, 8.0, (0.55, 0.50, 0.48)),
        planet("venus", -91.8, 0.815, 12.0, (1.0, 0.5, 0.0)),
        planet("earth", -50.4, 1.0, 12.0, (0.0, 0.75, 0.0)),
        planet("mars", 27.9, 0.107, 8.0, (1.0, 0.0, 0.0)),
        planet("jupiter", 578.5, 317.8, 200.0, (0.76, 0.60, 0.42)),
        planet("saturn", 1226.7, 95.2, 180.0, (0.87, 0.78, 0.57)),
        planet("uran", 2671.0, 14.5, 100.0, (0.56, 0.84, 0.86)),
        planet("neptun", 4298.3, 17.1, 100.0, (0.25, 0.41, 0.88)),
    ]

    for body in planets:
        r = float(np.linalg.norm(body.transform.pos - sun.transform.pos))
        body.velocity = np.array([0.0, 0.0, math.sqrt(G * sun.mass / r)])
        body.momentum = body.velocity * body.rest_mass

    return [sun, *planets]


class System:
    """The solar system: its bodies, the deformed grid and the user-set scales."""

    def __init__(self) -> None:
        self._time_multiplier = 1.0
        self._vis_scale = 0.5
        self.bodies: list[Celestial] = []
        self.grid_vertices = np.zeros(0, dtype=np.float32)
        self.grid_mesh: Mesh | None = None
        self.reset()

    @property
    def time_multiplier(self) -> float:
        return self._time_multiplier

    @time_multiplier.setter
    def time_multiplier(self, value: float) -> None:
        if not TIME_MULT_MIN <= value <= TIME_MULT_MAX:
            raise ValueError(f"time multiplier must lie in [{TIME_MULT_MIN}, {TIME_MULT_MAX}]")
        self._time_multiplier = value

    @property
    def vis_scale(self) -> float:
        return self._vis_scale

    @vis_scale.setter
    def vis_scale(self, value: float) -> None:
        if not VIS_SCALE_MIN <= value <= VIS_SCALE_MAX:
            raise ValueError(f"visual scale must lie in [{VIS_SCALE_MIN}, {VIS_SCALE_MAX}]")
        self._vis_scale = value

    def reset(self) -> None:
        """Place the sun and planets in their starting orbits and flatten the grid."""
        self.bodies = _solar_bodies()
        self.grid_vertices, grid_indices = build_grid(GRID_SIZE, GRID_SIZE)
        self.grid_mesh = Mesh(self.grid_vertices, grid_indices, 3, True, DrawMode.LINES)

    def simulate(self, dt: float, renderer=None) -> None:
        """Advance every body by dt scaled by the time multiplier, then bend the grid.

        When a renderer is given, planets go to its draw_lit, the star and the
        grid to its draw_unlit, each as (mesh, transform, color).
        """
        dt *= self._time_multiplier

        for body in self.bodies:
            body.acc = np.zeros(3)

        for i, body in enumerate(self.bodies):
            for other in self.bodies[i + 1:]:
                body.calculate_forces(other)

        for body in self.bodies:
            body.update(dt)
            if renderer is None:
                continue
            if body.body_type is BodyType.PLANET:
                renderer.draw_lit(body.mesh, body.transform, body.color)
            else:
                renderer.draw_unlit(body.mesh, body.transform, body.color)

        self._bend_grid()
        self.grid_mesh.update_vertices(self.grid_vertices)
        if renderer is not None:
            renderer.draw_unlit(self.grid_mesh, Transform(), np.array(GRID_COLOR))

    def _bend_grid(self) -> None:
        points = self.grid_vertices.reshape(-1, 3)
        positions = np.array([body.transform.pos for body in self.bodies])
        masses = np.array([body.mass for body in self.bodies])

        dx = points[:, 0:1].astype(np.float64) - positions[:, 0]
        dz = points[:, 2:3].astype(np.float64) - positions[:, 2]
        horizontal = np.sqrt(dx * dx + dz * dz) + SOFTENING
        dip = (masses / horizontal).sum(axis=1)

        points[:, 1] = STARTING_GRID_Y - dip * self._vis_scale