"""Tests for collision geometry."""

import pytest

from conftest import make_asteroid, make_ship
from utils.helpers import asteroid_circle, clamp, is_colliding, ship_hit_circle


def test_ship_hit_circle_is_inset_and_centered():
    cx, cy, r = ship_hit_circle(make_ship(x=0, y=0))

    # 50% x 60% of a 60x40 box is 30x24, centered at (30, 20)
    assert cx == pytest.approx(30)
    assert cy == pytest.approx(20)
    assert r == pytest.approx(12)


def test_asteroid_circle_is_centered_on_its_box():
    assert asteroid_circle(make_asteroid(x=100, y=50, size=40)) == (120, 70, 20)


def _touching_asteroid(ship, offset=0.0):
    """Asteroid of size 20 to the right of the ship, exactly touching when offset is 0."""
    cx, cy, r = ship_hit_circle(ship)
    return make_asteroid(x=cx + r + offset, y=cy - 10, size=20)


def test_touching_circles_do_not_collide():
    ship = make_ship()
    assert not is_colliding(ship, _touching_asteroid(ship))


def test_just_inside_touching_distance_collides():
    ship = make_ship()
    assert is_colliding(ship, _touching_asteroid(ship, offset=-1e-6))


def test_just_outside_touching_distance_misses():
    ship = make_ship()
    assert not is_colliding(ship, _touching_asteroid(ship, offset=1e-6))


def test_bounding_box_overlap_alone_is_not_a_hit():
    ship = make_ship(x=0, y=0)
    # Asteroid overlaps the ship's top-left corner but not the inset circle
    assert not is_colliding(ship, make_asteroid(x=-10, y=-10, size=20))


def test_clamp():
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(5, 0, 10) == 5
