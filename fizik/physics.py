"""Two-dimensional particle simulation with gravity, charge and collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from fizik.shapes import Grid, shape

GRID_SIZE = 508
LOWER_WALL = 4
UPPER_WALL = 503

DEFAULT_TIME_STEP = 0.0001
COULOMB_CONSTANT = 0.899
GRAVITATIONAL_CONSTANT = 0.674

_FIELD_COUNT = 10


@dataclass(eq=False)
class Body:
    """A point mass with charge, size and a shape mask."""

    mass: float
    shape: Grid
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    charge: float = 0.0
    size: int = 0

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "Body":
        """Build a body from a row: mass, shape, x, y, vx, vy, ax, ay, charge, size."""
        if len(values) < _FIELD_COUNT:
            raise ValueError(
                f"a body needs {_FIELD_COUNT} values, got {len(values)}"
            )
        mass, shape_index, x, y, vx, vy, ax, ay, charge, size = values[:_FIELD_COUNT]
        return cls(
            mass=float(mass),
            shape=shape(int(shape_index)),
            x=float(x),
            y=float(y),
            vx=float(vx),
            vy=float(vy),
            ax=float(ax),
            ay=float(ay),
            charge=float(charge),
            size=int(size),
        )


def _empty_space() -> list[list[int]]:
    return [[0] * GRID_SIZE for _ in range(GRID_SIZE)]


@dataclass
class Simulation:
    """Steps a set of bodies inside a walled square grid."""

    gravity_x: float = 0.0
    gravity_y: float = 0.0
    time_step: float = DEFAULT_TIME_STEP
    coulomb_constant: float = COULOMB_CONSTANT
    gravitational_constant: float = GRAVITATIONAL_CONSTANT
    bodies: list[Body] = field(default_factory=list)
    space: list[list[int]] = field(default_factory=_empty_space)

    def add_bodies(self, rows: Iterable[Sequence[int]]) -> list[Body]:
        """Create bodies from value rows and add them to the simulation."""
        new = [Body.from_values(row) for row in rows]
        self.bodies.extend(new)
        return new

    def step_count(self, seconds: float) -> int:
        """Scale the time step by the fastest body and return the number of steps."""
        max_speed = max(
            (max(body.vx, body.vy) for body in self.bodies), default=0.0
        )
        max_speed = max(max_speed, 0.0)
        if max_speed == 0.0:
            self.time_step = math.inf
            return 0
        self.time_step /= max_speed
        return int(seconds / self.time_step)

    def run(self, seconds: float, rows: Iterable[Sequence[int]]) -> int:
        """Add bodies, then advance the simulation for the given time."""
        self.add_bodies(rows)
        steps = self.step_count(seconds)
        for _ in range(steps):
            self.step()
        return steps

    def step(self) -> None:
        """Advance every body by one time step."""
        for body in self.bodies:
            self._advance_position(body)
            self._advance_velocity(body)

    def distance(self, a: Body, b: Body) -> float:
        """Euclidean distance between two bodies."""
        return math.hypot(a.x - b.x, a.y - b.y)

    def apply_force(self, a: Body, b: Body) -> None:
        """Change a's velocity by the gravitational and electric pull of b."""
        dx = b.x - a.x
        dy = b.y - a.y
        r_squared = dx * dx + dy * dy
        electric = self.coulomb_constant * a.charge * b.charge / r_squared
        gravity = self.gravitational_constant * b.mass * a.mass / r_squared
        dist = self.distance(a, b)
        total = gravity + electric
        a.vy += self.gravity_y + self.time_step * (total * dy / dist) / a.mass
        a.vx += self.gravity_x + self.time_step * (total * dx / dist) / a.mass

    def collide(self, a: Body, b: Body) -> bool:
        """Resolve an elastic collision if the bodies overlap; return whether they did."""
        if self.distance(a, b) > a.size + b.size:
            return False
        total_mass = a.mass + b.mass
        if total_mass != 0.0:
            diff = a.mass - b.mass
            avx = (a.vx * diff + 2 * b.mass * b.vx) / total_mass
            avy = (a.vy * diff + 2 * b.mass * b.vy) / total_mass
            bvx = (b.vx * -diff + 2 * a.mass * a.vx) / total_mass
            bvy = (b.vy * -diff + 2 * a.mass * a.vy) / total_mass
            a.vx, a.vy, b.vx, b.vy = avx, avy, bvx, bvy
        charge_per_mass = (a.charge + b.charge) / total_mass
        a.charge = charge_per_mass * a.mass
        b.charge = charge_per_mass * b.mass
        return True

    def bounce(self, body: Body) -> None:
        """Reflect a body that has crossed a wall back inside it."""
        if body.y < LOWER_WALL:
            body.y = 2 * LOWER_WALL - body.y
            body.vy = -body.vy
        elif body.y > UPPER_WALL:
            body.y = 2 * UPPER_WALL - body.y
            body.vy = -body.vy
        if body.x < LOWER_WALL:
            body.x = 2 * LOWER_WALL - body.x
            body.vx = -body.vx
        elif body.x > UPPER_WALL:
            body.x = 2 * UPPER_WALL - body.x
            body.vx = -body.vx

    def _advance_position(self, body: Body) -> None:
        body.y += body.vy * self.time_step
        body.x += body.vx * self.time_step
        self.bounce(body)
        row, col = int(body.y), int(body.x)
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise IndexError(f"body left the grid at ({body.x}, {body.y})")
        self.space[row][col] = int(body.mass)

    def _advance_velocity(self, body: Body) -> None:
        for other in self.bodies:
            if other is body:
                continue
            self.apply_force(body, other)
            self.collide(body, other)
        body.vy += body.ay * self.time_step
        body.vx += body.ax * self.time_step