# lifeboids

Two small artificial-life simulations in one package:

- **Game of Life** (`lifeboids.life`): a square colony of cells that advances
  by Conway's rules. It can be stepped in four modes: sequentially, split
  across worker threads, and two whole-grid modes computed with numpy (one
  working on a 2D image-like grid, one on a flat board updated per cell).
  Each mode times its steps and can run a benchmark that grows the colony and
  writes the average step time per size to a CSV file. The modes are held in
  a state machine and the `c` key moves from one mode to the next.
- **Flocking boids** (`lifeboids.boids`): a group of boids steered by
  alignment, separation and cohesion, kept inside a rectangular area.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### `lifeboids-life`

```
lifeboids-life [--frames N] [--clock-samples N] [--data-dir DIR]
               [--state {OM,SM,CL,GLSL}] [--benchmark]
```

First measures and prints the average cost of reading the processor clock
(`--clock-samples` reads, 10,000,000 by default). Then it builds the state
machine with all four modes (starting in the `GLSL` mode, or the one given by
`--state`), runs `--frames` updates (1 by default) and prints the name of the
current mode and its statistics lines. With `--data-dir`, each mode writes its
benchmark CSV file (`dimension,elapsed` rows) into that directory;
`--benchmark` turns benchmark mode on.

### `lifeboids-boids`

```
lifeboids-boids [--width W] [--height H] [--frames N] [--batches N] [--seed S]
```

Creates a flock of 600 boids in a `W` x `H` area (800 x 600 by default),
presses `+` `--batches` times (each adds 20 boids), runs `--frames` steps
(100 by default) and prints the scene's labels: the update time and the
number of boids.

## Library use

### Game of Life

`Colony(dimension, random_chance=0.2, rng=None)` holds a `dimension` x
`dimension` grid of `Cell`s. Border cells never receive a neighbour count, so
live cells on the outer ring die and dead ones stay dead.

- `Colony.cell(x, y)` / `Colony.set_cell(x, y, alive)` read and write cells;
  coordinates outside the grid raise `IndexError`.
- `Colony.populate()` advances one generation on a single worker;
  `Colony.populate_parallel(workers)` splits the work between worker threads.
  Rows or cells left over when the work does not divide evenly are skipped.
- `Colony.randomize()` refills the grid, making each cell alive with
  `random_chance`; `Colony.clear()` kills every cell.
- `Colony.alive_count()` counts the living cells; `Colony.rows()` yields each
  row's life status.

`Timer` measures processor time in milliseconds: `start()`, `stop()`,
`store()` keep a measurement, `latest()` returns the last one,
`average_time()` the mean of the stored ones (NaN when none are stored), and
`clear()` forgets them.

The modes `SequentialMode`, `OpenMpMode` (in `lifeboids.life.modes`),
`GLSLMode` (in `lifeboids.life.glsl`) and `OpenCLMode` (in
`lifeboids.life.opencl`) are `State`s run by a `StateMachine`
(`lifeboids.life.state`); `lifeboids.life.app.build_state_machine` sets all of
them up. Their `handle_gui_event(widget, value)` accepts the controls
`RESOLUTION`, `RANDOMCHANCE`, `RUNNING`, `REINIT` and `RANDOM`.

The stepping functions are also available on their own:

- `shader_step(grid)` advances a 2D boolean array, treating cells beyond the
  edge as dead.
- `kernel_step(board, width, height)` advances a flat row-major board and
  kills every cell on its outer ring.
- `round_up(group_size, global_size)` and `format_board(board, dimension)`
  are small helpers next to `kernel_step`.

### Boids

```python
from lifeboids.boids.vector import Vector2D, deg_to_rad

v = Vector2D(3.0, 4.0)
print(v.length())          # 5.0
print(v.normalized())      # Vector2D(x=0.6, y=0.8)
print(v.rotated(deg_to_rad(90.0)))
```

A `BoidGroup` holds `BoidEntity` objects and delegates its `update()` to a
behaviour. `FlockBehavior(area_width, area_height)` is the flocking behaviour:
each update it combines `alignment`, `separation`, `cohesion` and
`keep_inside_area` into a new heading for every boid and moves it.

`FlockingBoidScene(width, height, rng)` ties it together: `init()` creates the
group with 600 boids, `update()` steps the flock, `render()` describes each
boid and label to draw, and `handle_pressed_key("+")` adds 20 more boids
(Escape raises `SystemExit`).

## What this package does not do

There is no window or graphics output. The `draw()` methods of the modes and
`FlockingBoidScene.render()` return plain data (rectangles, sprites, text
lines) for a caller to display; the command-line tools print text only. No
GPU is used: the whole-grid modes compute on the CPU with numpy.