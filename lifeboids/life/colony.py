"""A square Game of Life colony with row-partitioned parallel stepping."""

from __future__ import annotations

import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterator

from lifeboids.life.timer import Timer

_NEIGHBOUR_OFFSETS = (
    (-1, -1), (-1, 0), (0, -1), (-1, 1),
    (1, -1), (1, 1), (0, 1), (1, 0),
)


@dataclass
class Cell:
    """One cell: whether it lives and how many live neighbours it has."""

    alive: bool = False
    neighbours: int = 0


class Colony:
    """A dimension x dimension grid of cells.

    Border cells are never given a neighbour count, so the outermost ring
    only ever dies out.
    """

    def __init__(
        self,
        dimension: int,
        random_chance: float = 0.2,
        rng: random.Random | None = None,
    ) -> None:
        if dimension < 0:
            raise ValueError("dimension must not be negative")
        self._dimension = dimension
        self.random_chance = random_chance
        self._rng = rng if rng is not None else random.Random()
        self._cells = [Cell() for _ in range(dimension * dimension)]
        self.update_neighbours_timer = Timer()
        self.advance_timer = Timer()

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def width(self) -> int:
        return self._dimension

    @property
    def height(self) -> int:
        return self._dimension

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._dimension and 0 <= y < self._dimension):
            raise IndexError(f"cell ({x}, {y}) is outside the colony")
        return x + y * self._dimension

    def cell(self, x: int, y: int) -> Cell:
        """The cell at column x, row y."""
        return self._cells[self._index(x, y)]

    def set_cell(self, x: int, y: int, alive: bool | Cell) -> None:
        """Set a cell's life status, from a flag or from another cell."""
        if isinstance(alive, Cell):
            alive = alive.alive
        self._cells[self._index(x, y)].alive = bool(alive)

    def neighbours_for_cell(self, x: int, y: int) -> int:
        """Number of live cells among the eight around (x, y)."""
        return sum(
            self.cell(x + dx, y + dy).alive for dx, dy in _NEIGHBOUR_OFFSETS
        )

    @staticmethod
    def _run_partitioned(workers: int, job: Callable[[int, int], None]) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        if workers == 1:
            job(0, 1)
            return
        with ThreadPoolExecutor(max_workers=workers) as pool:
            list(pool.map(lambda t: job(t, workers), range(workers)))

    def _update_rows(self, thread: int, workers: int) -> None:
        per_thread = self._dimension // workers
        start = per_thread * thread
        end = per_thread * (thread + 1)
        if thread == 0:
            start += 1
        if thread == workers - 1:
            end -= 1
        for y in range(start, end):
            for x in range(1, self._dimension - 1):
                self._cells[x + y * self._dimension].neighbours = (
                    self.neighbours_for_cell(x, y)
                )

    def _advance_cells(self, thread: int, workers: int) -> None:
        per_thread = self._dimension * self._dimension // workers
        start = per_thread * thread
        for cell in self._cells[start:start + per_thread]:
            if cell.alive:
                cell.alive = cell.neighbours in (2, 3)
            elif cell.neighbours == 3:
                cell.alive = True

    def update_neighbours(self, workers: int = 1) -> None:
        """Recount live neighbours of interior cells, rows split among workers.

        Rows left over when the dimension does not divide evenly are skipped.
        """
        self.update_neighbours_timer.start()
        self._run_partitioned(workers, self._update_rows)
        self.update_neighbours_timer.stop()
        self.update_neighbours_timer.store()

    def advance(self, workers: int = 1) -> None:
        """Apply the life rules using the stored neighbour counts.

        Cells left over when the cell count does not divide evenly are skipped.
        """
        self.advance_timer.start()
        self._run_partitioned(workers, self._advance_cells)
        self.advance_timer.stop()
        self.advance_timer.store()

    def populate(self) -> None:
        """Advance one generation on a single worker."""
        self.update_neighbours(1)
        self.advance(1)

    def populate_parallel(self, workers: int) -> None:
        """Advance one generation split among the given number of workers."""
        self.update_neighbours(workers)
        self.advance(workers)

    def clear(self) -> None:
        """Kill every cell."""
        for cell in self._cells:
            cell.alive = False

    def randomize(self) -> None:
        """Replace all cells with fresh ones, each alive with random_chance."""
        self._cells = [
            Cell(alive=self._rng.random() < self.random_chance)
            for _ in range(self._dimension * self._dimension)
        ]

    def alive_count(self) -> int:
        """Number of living cells."""
        return sum(cell.alive for cell in self._cells)

    def rows(self) -> Iterator[tuple[bool, ...]]:
        """Life status of each row, top to bottom."""
        d = self._dimension
        for y in range(d):
            yield tuple(cell.alive for cell in self._cells[y * d:(y + 1) * d])