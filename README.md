# fizik

fizik simulates point bodies that move inside a 508 × 508 grid. The bodies pull on each other through gravity and Coulomb forces. They collide elastically and bounce off the walls at 4 and 503 on each axis. When a body moves, its mass, truncated to an integer, is stamped into the grid cell it is in. At the end of a run the grid is written to a text file made of Unicode block characters.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Running a simulation

```
fizik [INPUT] [-o OUTPUT] [--no-open]
```

- `INPUT` is the path of the input file. If you leave it out, the command prints `Enter the input txt path:` and reads the path from standard input.
- `-o`, `--output` sets the output file. The default is `output.txt` in the current directory.
- `--no-open` writes the output without opening it. Without this option, the command asks the operating system to open the file: `start` on Windows, `open` on macOS, and `xdg-open` elsewhere.

The command exits with status 1 in these cases:

- no path is given;
- a file cannot be read or written;
- the input is invalid, for example a bad number, a shape index outside 0–8, or a body with fewer than ten values;
- a body leaves the grid.

It prints a message to standard error in each of these cases.

## Input format

The input is a plain text file:

```
<simulated seconds>
<gravity x>
<gravity y>
<mass> <shape> <x> <y> <vx> <vy> <ax> <ay> <charge> <size>
...
```

- The first three lines are integers.
- Each of the following lines describes one body. It holds ten integers separated by single spaces.
- `shape` selects one of the nine built-in 9 × 9 shape masks (0–8).
- `size` is the collision radius.

The time step starts at 0.0001. It is divided by the largest velocity component of any body. The number of steps is then the simulated seconds divided by that step. If no body has a positive velocity component, no steps are run.

Example:

```
1
0
0
5 0 100 100 20 0 0 0 1 3
8 1 300 120 -15 4 0 0 -1 3
```

## Output

The grid is written from its last row to its first, so the highest `y` comes first. Each cell is drawn as two copies of one of 21 block or shade characters, chosen by the cell's value modulo 21. Two blank lines follow the grid.

## Library use

```python
from fizik.io import read_input, render
from fizik.physics import Simulation

data = read_input("input.txt")
sim = Simulation(gravity_x=data.gravity_x, gravity_y=data.gravity_y)
sim.run(data.seconds, data.rows)
print(render(sim.space))
```

The modules are:

- `fizik.shapes`: `shape(index)` returns a 9 × 9 mask. It raises `IndexError` if the index is outside 0–8.
- `fizik.physics`: `Body` (with `Body.from_values(values)`) and `Simulation`. The methods of `Simulation` are `add_bodies`, `step_count`, `run`, `step`, `distance`, `apply_force`, `collide` and `bounce`.
- `fizik.io`: `parse_input(text)`, `read_input(path)`, `render(space)`, `write_output(space, path)` and `run_file(input_path, output_path=None)`. `run_file` reads, simulates and writes in one call, and returns the `Simulation`.

## Limitations

Each body's shape mask is stored on the body but is not drawn. Only the single cell under the body's position is marked in the grid. The output is a single final snapshot, not an animation.