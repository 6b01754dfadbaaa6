"""Reading simulation input files and writing the rendered grid."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from fizik.physics import Simulation

OUTPUT_NAME = "output.txt"

GLYPHS: tuple[str, ...] = (
    "\u2588",  # full block
    "\u2587",  # lower seven eighths block
    "\u2586",  # lower three quarters block
    "\u2585",  # lower five eighths block
    "\u2584",  # lower half block
    "\u2583",  # lower three eighths block
    "\u2582",  # lower one quarter block
    "\u2581",  # lower one eighth block
    "\u2580",  # upper half block
    "\u2593",  # dark shade
    "\u2592",  # medium shade
    "\u2591",  # light shade
    "\u25A0",  # black square
    "\u25A1",  # white square
    "\u25A3",  # white square containing black small square
    "\u25A4",  # square with horizontal fill
    "\u25A5",  # square with vertical fill
    "\u25A6",  # square with orthogonal crosshatch fill
    "\u25A7",  # square with upper left to lower right fill
    "\u25A8",  # square with upper right to lower left fill
    "\u25A9",  # square with diagonal crosshatch fill
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class SimulationInput:
    """The contents of an input file: duration, gravity and body rows."""

    seconds: int
    gravity_x: int
    gravity_y: int
    rows: list[list[int]] = field(default_factory=list)


def _to_int(token: str) -> int:
    """Parse the leading integer of a token, ignoring anything after it."""
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"expected an integer, got {token!r}")
    return int(match.group(1))


def parse_input(text: str) -> SimulationInput:
    """Parse input text: three header lines, then one line of integers per body."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if len(lines) < 3:
        raise ValueError(
            "input needs a duration line and two gravity lines before the bodies"
        )
    seconds, gravity_x, gravity_y = (_to_int(line) for line in lines[:3])
    rows = [[_to_int(token) for token in line.split(" ")] for line in lines[3:]]
    return SimulationInput(seconds, gravity_x, gravity_y, rows)


def read_input(path: str | Path) -> SimulationInput:
    """Read and parse an input file."""
    return parse_input(Path(path).read_text(encoding="utf-8"))


def render(space: Sequence[Sequence[int]]) -> str:
    """Draw the grid top row last, two glyphs per cell."""
    lines = [
        "".join(GLYPHS[value % len(GLYPHS)] * 2 for value in row)
        for row in reversed(space)
    ]
    return "".join(line + "\n" for line in lines) + "\n\n"


def write_output(space: Sequence[Sequence[int]], path: str | Path) -> Path:
    """Write the rendered grid to a file and return its path."""
    target = Path(path)
    target.write_text(render(space), encoding="utf-8")
    return target


def run_file(
    input_path: str | Path, output_path: str | Path | None = None
) -> Simulation:
    """Run the simulation described by an input file and write the result."""
    data = read_input(input_path)
    simulation = Simulation(gravity_x=data.gravity_x, gravity_y=data.gravity_y)
    simulation.run(data.seconds, data.rows)
    if output_path is None:
        output_path = Path.cwd() / OUTPUT_NAME
    write_output(simulation.space, output_path)
    return simulation