import math

import pytest

from lifeboids.boids.entity import BoidEntity
from lifeboids.boids.flock import FlockBehavior
from lifeboids.boids.group import BoidGroup
from lifeboids.boids.vector import Vector2D


def make_boid(x, y, dx=0.0, dy=1.0, velocity=1.0):
    boid = BoidEntity(10, 20)
    boid.position = Vector2D(x, y)
    boid.set_direction(Vector2D(dx, dy))
    boid.velocity = velocity
    return boid


def make_flock(*boids, width=800.0, height=600.0):
    group = BoidGroup()
    for boid in boids:
        group.add(boid)
    behavior = FlockBehavior(width, height)
    group.set_behavior(behavior)
    return behavior


def test_default_neighbor_area():
    behavior = FlockBehavior(100, 100)
    assert behavior.neighbor_area == 40.0


def test_set_area_size():
    behavior = FlockBehavior(100, 100)
    behavior.set_area_size(320, 240)
    assert (behavior.area_width, behavior.area_height) == (320.0, 240.0)


def test_alone_boid_gets_zero_vectors():
    boid = make_boid(100, 100, velocity=3.0)
    behavior = make_flock(boid)
    assert behavior.alignment(boid) == Vector2D()
    assert behavior.separation(boid) == Vector2D()
    assert behavior.cohesion(boid) == Vector2D()
    assert boid.velocity == 3.0


def test_alignment_follows_neighbour():
    boid = make_boid(100, 100, 0.0, 1.0, velocity=1.0)
    other = make_boid(110, 100, 1.0, 0.0, velocity=5.0)
    behavior = make_flock(boid, other)
    result = behavior.alignment(boid)
    assert result.x == pytest.approx(other.direction.x)
    assert result.y == pytest.approx(other.direction.y)
    assert boid.velocity == other.velocity


def test_far_boids_are_ignored():
    boid = make_boid(100, 100)
    other = make_boid(300, 300, 1.0, 0.0)
    behavior = make_flock(boid, other)
    assert behavior.alignment(boid) == Vector2D()
    assert behavior.cohesion(boid) == Vector2D()


def test_separation_opposes_cohesion_for_close_neighbour():
    boid = make_boid(100, 100)
    other = make_boid(110, 105)
    behavior = make_flock(boid, other)
    sep = behavior.separation(boid)
    coh = behavior.cohesion(boid)
    assert coh.length() == pytest.approx(1.0)
    assert sep.x == pytest.approx(-coh.x)
    assert sep.y == pytest.approx(-coh.y)


def test_separation_only_within_its_distance():
    boid = make_boid(100, 100)
    other = make_boid(135, 100)
    behavior = make_flock(boid, other)
    assert behavior.separation(boid) == Vector2D()
    assert behavior.cohesion(boid).length() == pytest.approx(1.0)


def test_keep_inside_flips_at_right_edge():
    boid = make_boid(95, 50, 1.0, 0.0, velocity=1.0)
    behavior = make_flock(boid, width=100, height=100)
    result = behavior.keep_inside_area(boid)
    assert result.x == -boid.direction.x
    assert result.y == boid.direction.y


def test_keep_inside_flips_at_top_and_bottom():
    boid = make_boid(50, 0.5, 0.0, -1.0, velocity=1.0)
    behavior = make_flock(boid, width=100, height=100)
    result = behavior.keep_inside_area(boid)
    assert result.y == -boid.direction.y


def test_keep_inside_keeps_direction_in_middle():
    boid = make_boid(50, 50, 1.0, 1.0, velocity=1.0)
    behavior = make_flock(boid, width=100, height=100)
    assert behavior.keep_inside_area(boid) == boid.direction


def test_update_moves_boids_with_unit_directions():
    a = make_boid(100, 100, 1.0, 0.0, velocity=2.0)
    b = make_boid(120, 110, 0.0, 1.0, velocity=2.0)
    start = [a.position, b.position]
    behavior = make_flock(a, b)
    behavior.update()
    for boid, before in zip((a, b), start):
        assert boid.direction.length() == pytest.approx(1.0)
        assert boid.position != before
        moved = (boid.position - before).length()
        assert moved == pytest.approx(boid.velocity)


def test_update_without_group_raises():
    with pytest.raises(RuntimeError):
        FlockBehavior(100, 100).update()


def test_group_update_drives_flock():
    boid = make_boid(50, 50, 0.0, 1.0, velocity=1.0)
    make_flock(boid)
    group = BoidGroup()
    group.add(boid)
    group.set_behavior(FlockBehavior(800, 600))
    group.update()
    assert boid.position.y > 50
    assert math.isclose(boid.direction.length(), 1.0)