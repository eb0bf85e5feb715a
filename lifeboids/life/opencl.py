"""Colony mode that steps a flat boolean board with a per-cell kernel."""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Callable, Sequence

import numpy as np

from lifeboids.life.colony import Colony
from lifeboids.life.modes import Frame, _BenchmarkLog, _key_char
from lifeboids.life.state import State, StateName
from lifeboids.life.timer import Timer

BENCHMARK_FRAMES = 50
BENCHMARK_DIMENSION_STEP = 128
BENCHMARK_DIMENSION_LIMIT = 4097


def round_up(group_size: int, global_size: int) -> int:
    """Smallest multiple of group_size that is not below global_size."""
    if group_size <= 0:
        raise ValueError("group size must be positive")
    remainder = global_size % group_size
    if remainder == 0:
        return global_size
    return global_size + group_size - remainder


def kernel_step(
    board: Sequence[bool] | np.ndarray, width: int, height: int
) -> np.ndarray:
    """One generation of a row-major flat board.

    Every cell on the outer ring becomes dead; an interior cell lives when it
    has three live neighbours, or two and was alive already.
    """
    cells = np.asarray(board, dtype=bool).ravel()
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    if cells.size != width * height:
        raise ValueError(
            f"board holds {cells.size} cells, expected {width * height}"
        )
    grid = cells.reshape(height, width)
    out = np.zeros((height, width), dtype=bool)
    if height >= 3 and width >= 3:
        counts = grid.astype(np.uint8)
        total = sum(
            counts[1 + dy:height - 1 + dy, 1 + dx:width - 1 + dx]
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if (dx, dy) != (0, 0)
        )
        inner = grid[1:-1, 1:-1]
        out[1:-1, 1:-1] = (total == 3) | (inner & (total == 2))
    return out.ravel()


def format_board(board: Sequence[bool] | np.ndarray, dimension: int) -> str:
    """Text dump of a square board: one line per row, each cell as '1 ' or '0 '."""
    cells = np.asarray(board, dtype=bool).ravel()
    if cells.size != dimension * dimension:
        raise ValueError(
            f"board holds {cells.size} cells, expected {dimension * dimension}"
        )
    rows = cells.reshape(dimension, dimension) if dimension else []
    return "".join(
        "".join(f"{int(value)} " for value in row) + "\n" for row in rows
    )


class OpenCLMode(State):
    """Runs the colony on a flat board updated cell by cell as a kernel would."""

    INITIAL_DIMENSION = 128

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
        self.calculation_timer: Timer | None = None
        self._rng = rng if rng is not None else random.Random()
        self._benchmark = _BenchmarkLog(benchmark_path)
        self._colony: Colony | None = None
        self._board: np.ndarray | None = None
        self._board_dimension = 0
        self._clock: Callable[[], float] = time.monotonic
        self._reset_time = self._clock()

    @property
    def colony(self) -> Colony:
        if self._colony is None:
            raise RuntimeError("mode is not active")
        return self._colony

    @property
    def board(self) -> np.ndarray:
        """The current generation as a flat row-major boolean array."""
        if self._board is None:
            raise RuntimeError("mode is not active")
        return self._board

    @property
    def board_dimension(self) -> int:
        """Side length of the current board."""
        return self._board_dimension

    def name(self) -> str:
        return StateName.OPENCL.value

    def state_enter(self) -> None:
        """Create the timers and start with a fresh colony and board."""
        self.draw_timer = Timer()
        self.calculation_timer = Timer()
        self.restart()

    def state_exit(self) -> None:
        """Drop the colony, board and draw timer."""
        self._colony = None
        self._board = None
        self.draw_timer = None

    def _init_board(self) -> None:
        d = self.dimension
        self._board = np.fromiter(
            (self._rng.uniform(-1.0, 1.0) > 0.5 for _ in range(d * d)),
            dtype=bool,
            count=d * d,
        )
        self._board_dimension = d

    def restart(self) -> None:
        """Start over: new colony, new timers and a new random board."""
        self._colony = Colony(self.dimension, rng=self._rng)
        self._colony.randomize()
        self.draw_timer = Timer()
        self.calculation_timer = Timer()
        self._reset_time = self._clock()
        self._init_board()

    def _copy_board_to_colony(self) -> None:
        d = self._board_dimension
        board = self.board
        colony = self.colony
        for i in range(d):
            for j in range(d):
                colony.set_cell(i, j, bool(board[i * d + j]))

    def update(self) -> None:
        """Run one frame; in benchmark mode, grow the board every few frames."""
        if self.calculation_timer is None:
            raise RuntimeError("mode is not active")
        benchmark = self.shared_data.is_benchmark_mode
        if benchmark:
            self.running = self.elapsed_frames <= BENCHMARK_FRAMES

        if self.running:
            d = self._board_dimension
            self.calculation_timer.start()
            self._board = kernel_step(self.board, d, d)
            self.calculation_timer.stop()
            self.calculation_timer.store()
            self._copy_board_to_colony()
            self.elapsed_frames += 1
        elif benchmark and self.dimension < BENCHMARK_DIMENSION_LIMIT:
            print(f"New Dimension: {self.dimension}")
            self.elapsed_frames = 0
            self._benchmark.write(
                self.dimension, self.calculation_timer.average_time()
            )
            self.dimension += BENCHMARK_DIMENSION_STEP
            if self.dimension > BENCHMARK_DIMENSION_LIMIT:
                self._benchmark.close()
                print("Finished Benchmark for OpenCL mode.")
            self.restart()

    def draw(self) -> Frame:
        """Lay out a rectangle for every live colony cell, scaled to the window."""
        if self.draw_timer is None or self.calculation_timer is None:
            raise RuntimeError("mode is not active")
        self.draw_timer.start()
        colony = self.colony
        frame = Frame()
        if colony.dimension:
            w = self.window_width / colony.dimension
            h = self.window_height / colony.dimension
            for y, row in enumerate(colony.rows()):
                frame.rectangles.extend(
                    (x * w, y * h, w, h) for x, alive in enumerate(row) if alive
                )
        frame.lines.append(
            "OpenCL calculation took: "
            f"{self.calculation_timer.average_time()} ms"
        )
        self.draw_timer.stop()
        self.draw_timer.store()
        frame.lines.append(f"drawing average: {self.draw_timer.average_time()} ms")
        frame.lines.append(f"elapsed time: {self._clock() - self._reset_time} s")
        return frame

    def key_pressed(self, key: int | str) -> None:
        """'c' moves on to the GLSL mode."""
        if _key_char(key) == "c":
            self.change_state(StateName.GLSL.value)

    def handle_gui_event(self, widget: str, value: float | bool) -> None:
        """React to a control change; unknown widgets are ignored."""
        if widget == "RESOLUTION":
            self.dimension = int(value)
        elif widget == "RANDOMCHANCE":
            self.colony.random_chance = float(value)
        elif widget == "RUNNING":
            self.running = bool(value)
        elif widget == "REINIT":
            if not value:
                self.restart()
        elif widget == "RANDOM":
            if not value:
                self.colony.randomize()