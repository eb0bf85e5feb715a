"""Colony mode that steps a whole grid at once, as a fragment shader would."""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Callable

import numpy as np

from lifeboids.life.colony import Colony
from lifeboids.life.modes import (
    BENCHMARK_DIMENSION_LIMIT,
    BENCHMARK_DIMENSION_STEP,
    BENCHMARK_FINAL_DIMENSION,
    BENCHMARK_FRAMES,
    Frame,
    _BenchmarkLog,
    _key_char,
)
from lifeboids.life.state import State, StateName
from lifeboids.life.timer import Timer


def shader_step(grid: np.ndarray) -> np.ndarray:
    """One generation of a boolean grid; cells beyond the edge count as dead.

    Fewer than two or more than three live neighbours kill a cell, exactly
    three bring it to life, and two keep it as it was.
    """
    cells = np.asarray(grid, dtype=bool)
    if cells.ndim != 2:
        raise ValueError("grid must be two-dimensional")
    padded = np.pad(cells.astype(np.uint8), 1)
    rows, cols = cells.shape
    total = sum(
        padded[1 + dy:1 + dy + rows, 1 + dx:1 + dx + cols]
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if (dx, dy) != (0, 0)
    )
    return (total == 3) | (cells & (total == 2))


class GLSLMode(State):
    """Runs the colony as a whole-grid image update."""

    INITIAL_DIMENSION = 1000

    def __init__(
        self,
        benchmark_path: str | Path | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.dimension = self.INITIAL_DIMENSION
        self.running = True
        self.elapsed_frames = 0
        self.window_width = 1000.0
        self.window_height = 1000.0
        self.draw_timer: Timer | None = None
        self.update_timer: Timer | None = None
        self._rng = rng if rng is not None else random.Random()
        self._benchmark = _BenchmarkLog(benchmark_path)
        self._colony: Colony | None = None
        self._grid: np.ndarray | None = None
        self._clock: Callable[[], float] = time.monotonic
        self._reset_time = self._clock()

    @property
    def colony(self) -> Colony:
        if self._colony is None:
            raise RuntimeError("mode is not active")
        return self._colony

    @property
    def grid(self) -> np.ndarray:
        """The current generation as a boolean array indexed [y, x]."""
        if self._grid is None:
            raise RuntimeError("mode is not active")
        return self._grid

    def name(self) -> str:
        return StateName.GLSL.value

    def state_enter(self) -> None:
        """Create the colony and timers and start a fresh grid."""
        self.draw_timer = Timer()
        self.update_timer = Timer()
        self.restart()

    def _random_grid(self) -> np.ndarray:
        d = self.dimension
        return np.fromiter(
            (self._rng.uniform(-1.0, 1.0) <= 0.0 for _ in range(d * d)),
            dtype=bool,
            count=d * d,
        ).reshape(d, d)

    def restart(self) -> None:
        """Start over: new colony, new timers, a random grid stepped once."""
        self._colony = Colony(self.dimension, rng=self._rng)
        self._colony.randomize()
        self.draw_timer = Timer()
        self.update_timer = Timer()
        self._reset_time = self._clock()
        self.running = True
        self._grid = shader_step(self._random_grid())

    def update(self) -> None:
        """Run one frame; in benchmark mode, grow the grid every few frames."""
        if self.update_timer is None:
            raise RuntimeError("mode is not active")
        benchmark = self.shared_data.is_benchmark_mode
        if benchmark:
            self.running = self.elapsed_frames <= BENCHMARK_FRAMES

        if self.running:
            self.update_timer.start()
            self._grid = shader_step(self.grid)
            self.update_timer.stop()
            self.update_timer.store()
            self.elapsed_frames += 1
        elif benchmark and self.dimension < BENCHMARK_DIMENSION_LIMIT:
            print(self.dimension)
            self.dimension += BENCHMARK_DIMENSION_STEP
            self.elapsed_frames = 0
            self._benchmark.write(self.dimension, self.update_timer.average_time())
            if self.dimension == BENCHMARK_FINAL_DIMENSION:
                self._benchmark.close()
                print("Finished Benchmark for GLSL mode.")
            self.restart()

    def draw(self) -> Frame:
        """Lay out a rectangle for every live cell of the grid, scaled to the window."""
        if self.draw_timer is None or self.update_timer is None:
            raise RuntimeError("mode is not active")
        self.draw_timer.start()
        grid = self.grid
        rows, cols = grid.shape
        w = self.window_width / cols
        h = self.window_height / rows
        ys, xs = np.nonzero(grid)
        frame = Frame(
            rectangles=[
                (float(x) * w, float(y) * h, w, h)
                for y, x in zip(ys.tolist(), xs.tolist())
            ]
        )
        self.draw_timer.stop()
        self.draw_timer.store()
        frame.lines.append(f"update average: {self.update_timer.average_time()} ms")
        frame.lines.append(f"drawing average: {self.draw_timer.average_time()} ms")
        frame.lines.append(f"elapsed time: {self._clock() - self._reset_time} s")
        return frame

    def key_pressed(self, key: int | str) -> None:
        """'c' moves on to the sequential mode, 'r' restarts."""
        char = _key_char(key)
        if char == "c":
            self.change_state(StateName.SEQUENTIAL.value)
        elif char == "r":
            self.restart()

    def handle_gui_event(self, widget: str, value: float | bool) -> None:
        """React to a control change; unknown widgets are ignored."""
        if widget == "RESOLUTION":
            self.dimension = int(value)
        elif widget == "RANDOMCHANCE":
            self.colony.random_chance = float(value)
        elif widget == "RUNNING":
            self.running = bool(value)
        elif widget == "REINIT":
            self.restart()
        elif widget == "RANDOM":
            if not value:
                self.colony.randomize()