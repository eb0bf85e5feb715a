"""CPU colony modes: one stepping on a single worker, one on all cores."""

from __future__ import annotations

import time
from abc import abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Callable
import random

from lifeboids.life.colony import Colony
from lifeboids.life.state import State, StateName
from lifeboids.life.timer import Timer

BENCHMARK_FRAMES = 50
BENCHMARK_DIMENSION_STEP = 50
BENCHMARK_DIMENSION_LIMIT = 4100
BENCHMARK_FINAL_DIMENSION = 4000


@dataclass
class Frame:
    """What one draw call produces: rectangles of live cells and status lines."""

    rectangles: list[tuple[float, float, float, float]] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)


class _BenchmarkLog:
    """CSV sink of "dimension,elapsed" rows; writes after closing are dropped."""

    def __init__(self, path: str | Path | None) -> None:
        self._path = Path(path) if path is not None else None
        self._handle: IO[str] | None = None
        self._closed = path is None

    def write(self, dimension: int, elapsed: float) -> None:
        if self._closed:
            return
        if self._handle is None:
            self._handle = open(self._path, "w", encoding="utf-8")
        self._handle.write(f"{dimension},{elapsed}\n")
        self._handle.flush()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
        self._closed = True


def _key_char(key: int | str) -> str:
    if isinstance(key, str):
        return key
    try:
        return chr(key)
    except (ValueError, OverflowError):
        return ""


class ColonyMode(State):
    """A state that runs a Game of Life colony on the CPU."""

    INITIAL_DIMENSION = 50
    TITLE = "Game of Life"
    ELAPSED_LABEL = "elapsed time"

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
        self._rng = rng if rng is not None else random.Random()
        self._benchmark = _BenchmarkLog(benchmark_path)
        self._colony: Colony | None = None
        self._clock: Callable[[], float] = time.monotonic
        self._reset_time = self._clock()

    @property
    def colony(self) -> Colony:
        """The colony of the active mode."""
        if self._colony is None:
            raise RuntimeError("mode is not active")
        return self._colony

    @abstractmethod
    def step(self) -> None:
        """Advance the colony by one generation."""

    def state_enter(self) -> None:
        """Build a fresh colony and start timing."""
        self.draw_timer = Timer()
        self.restart()

    def state_exit(self) -> None:
        """Drop the colony and timers."""
        self._colony = None
        self.draw_timer = None

    def restart(self) -> None:
        """Start over with a new random colony of the current dimension."""
        self._colony = Colony(self.dimension, rng=self._rng)
        self._colony.randomize()
        self.draw_timer = Timer()
        self._reset_time = self._clock()

    def update(self) -> None:
        """Run one frame; in benchmark mode, grow the colony every few frames."""
        benchmark = self.shared_data.is_benchmark_mode
        if benchmark:
            self.running = self.elapsed_frames <= BENCHMARK_FRAMES

        if self.running:
            self.step()
            self.elapsed_frames += 1
        elif benchmark and self.dimension < BENCHMARK_DIMENSION_LIMIT:
            print(f"New dimension: {self.dimension}")
            self.dimension += BENCHMARK_DIMENSION_STEP
            self.elapsed_frames = 0
            colony = self.colony
            elapsed = (
                colony.update_neighbours_timer.average_time()
                + colony.advance_timer.average_time()
            )
            self._benchmark.write(self.dimension, elapsed)
            if self.dimension == BENCHMARK_FINAL_DIMENSION:
                self._benchmark.close()
                print(f"Finished Benchmark for {self.TITLE} mode.")
            self.restart()

    def _statistics(self) -> list[str]:
        colony = self.colony
        return [
            "neighbourCount average: "
            f"{colony.update_neighbours_timer.average_time()} ms",
            f"advance average: {colony.advance_timer.average_time()} ms",
        ]

    def draw(self) -> Frame:
        """Lay out a rectangle for every live cell, scaled to the window."""
        if self.draw_timer is None:
            raise RuntimeError("mode is not active")
        self.draw_timer.start()
        colony = self.colony
        w = self.window_width / colony.dimension
        h = self.window_height / colony.dimension
        frame = Frame()
        for y, row in enumerate(colony.rows()):
            frame.rectangles.extend(
                (x * w, y * h, w, h) for x, alive in enumerate(row) if alive
            )
        self.draw_timer.stop()
        self.draw_timer.store()
        frame.lines.extend(self._statistics())
        frame.lines.append(
            f"drawing average: {self.draw_timer.average_time()} ms"
        )
        frame.lines.append(
            f"{self.ELAPSED_LABEL}: {self._clock() - self._reset_time} s"
        )
        return frame

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


class SequentialMode(ColonyMode):
    """Steps the colony on a single worker."""

    TITLE = "Sequential"
    ELAPSED_LABEL = "elapsed time since restart"

    def name(self) -> str:
        return StateName.SEQUENTIAL.value

    def step(self) -> None:
        self.colony.populate()

    def key_pressed(self, key: int | str) -> None:
        """'r' randomizes, 's' toggles running, 'c' moves on to the parallel mode."""
        print(f"keyPressed: {key}")
        char = _key_char(key)
        if char == "r":
            self.colony.randomize()
        if char == "s":
            self.running = not self.running
        if char == "c":
            self.change_state(StateName.OPENMP.value)


class OpenMpMode(ColonyMode):
    """Steps the colony split among as many workers as there are cores."""

    TITLE = "OpenMP"

    def name(self) -> str:
        return StateName.OPENMP.value

    def step(self) -> None:
        self.colony.populate_parallel(self.shared_data.number_of_cores)

    def key_pressed(self, key: int | str) -> None:
        """'c' moves on to the OpenCL mode."""
        if _key_char(key) == "c":
            self.change_state(StateName.OPENCL.value)