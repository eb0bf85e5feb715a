import random

import pytest

from lifeboids.life.colony import Cell, Colony


def make_colony(dimension, alive):
    colony = Colony(dimension)
    for x, y in alive:
        colony.set_cell(x, y, True)
    return colony


def alive_set(colony):
    return {
        (x, y)
        for y in range(colony.dimension)
        for x in range(colony.dimension)
        if colony.cell(x, y).alive
    }


def test_new_colony_is_dead():
    colony = Colony(6)
    assert colony.alive_count() == 0
    assert colony.width == colony.height == colony.dimension == 6


def test_blinker_oscillates():
    horizontal = {(1, 2), (2, 2), (3, 2)}
    vertical = {(2, 1), (2, 2), (2, 3)}
    colony = make_colony(5, horizontal)
    colony.populate()
    assert alive_set(colony) == vertical
    colony.populate()
    assert alive_set(colony) == horizontal


def test_block_is_still_life():
    block = {(2, 2), (3, 2), (2, 3), (3, 3)}
    colony = make_colony(6, block)
    for _ in range(3):
        colony.populate()
    assert alive_set(colony) == block


def test_border_cell_dies():
    colony = make_colony(5, {(0, 0)})
    colony.populate()
    assert not colony.cell(0, 0).alive


def test_neighbours_for_cell_counts_surrounding():
    colony = make_colony(5, {(1, 1), (2, 1), (3, 3), (2, 2)})
    assert colony.neighbours_for_cell(2, 2) == 3


def test_parallel_matches_sequential_when_evenly_divided():
    seq = Colony(8, random_chance=0.4, rng=random.Random(7))
    par = Colony(8, random_chance=0.4, rng=random.Random(7))
    seq.randomize()
    par.randomize()
    for _ in range(4):
        seq.populate()
        par.populate_parallel(2)
    assert list(seq.rows()) == list(par.rows())


def test_uneven_partition_skips_leftover_row():
    alive = {(2, 4), (3, 4), (4, 4)}
    seq = make_colony(7, alive)
    par = make_colony(7, alive)
    seq.update_neighbours(1)
    par.update_neighbours(2)
    assert seq.cell(3, 5).neighbours == 3
    assert par.cell(3, 5).neighbours == 0


def test_set_cell_from_cell_copies_status():
    colony = Colony(3)
    colony.set_cell(1, 1, Cell(alive=True, neighbours=5))
    assert colony.cell(1, 1).alive
    assert colony.cell(1, 1).neighbours == 0


def test_clear_kills_all():
    colony = make_colony(4, {(1, 1), (2, 2)})
    colony.clear()
    assert colony.alive_count() == 0


def test_randomize_with_zero_chance_is_empty():
    colony = Colony(5, random_chance=0.0, rng=random.Random(1))
    colony.randomize()
    assert colony.alive_count() == 0


def test_randomize_with_full_chance_fills_grid():
    colony = Colony(5, random_chance=1.0, rng=random.Random(1))
    colony.randomize()
    assert colony.alive_count() == 25


def test_randomize_is_reproducible_with_seed():
    a = Colony(10, random_chance=0.5, rng=random.Random(3))
    b = Colony(10, random_chance=0.5, rng=random.Random(3))
    a.randomize()
    b.randomize()
    assert list(a.rows()) == list(b.rows())


def test_cell_out_of_range_raises():
    colony = Colony(3)
    with pytest.raises(IndexError):
        colony.cell(3, 0)
    with pytest.raises(IndexError):
        colony.cell(0, -1)


def test_zero_workers_raises():
    with pytest.raises(ValueError):
        Colony(4).populate_parallel(0)


def test_negative_dimension_raises():
    with pytest.raises(ValueError):
        Colony(-1)


def test_populate_records_one_time_per_timer():
    colony = Colony(5)
    colony.populate()
    colony.populate()
    assert len(colony.update_neighbours_timer.saved_times) == 2
    assert len(colony.advance_timer.saved_times) == 2