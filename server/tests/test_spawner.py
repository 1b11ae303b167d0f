"""Tests for asteroid spawning and the spawn interval curve."""

import random

import pytest

from config.settings import (
    ASTEROID_MIN_SIZE,
    ASTEROID_SIZE_VARIATION,
    ASTEROID_SPEED_GROWTH,
    BASE_SPAWN_INTERVAL,
    MIN_SPAWN_INTERVAL,
)
from services.spawner import AsteroidSpawner, create_star_field, spawn_interval


@pytest.mark.parametrize("width,height", [(800, 600), (320, 240), (1920, 1080), (800, 60)])
def test_spawned_asteroids_stay_inside_vertical_bounds(width, height):
    asteroids = []
    spawner = AsteroidSpawner(asteroids, random.Random(7))

    for elapsed in range(200):
        asteroid = spawner.spawn(width, height, elapsed * 0.5)
        assert 0 <= asteroid.y <= height - asteroid.size
        assert ASTEROID_MIN_SIZE <= asteroid.size < ASTEROID_MIN_SIZE + ASTEROID_SIZE_VARIATION

    assert len(asteroids) == 200


def test_spawn_starts_fully_off_screen_to_the_right():
    asteroids = []
    asteroid = AsteroidSpawner(asteroids, random.Random(3)).spawn(800, 600, 0)

    assert asteroids == [asteroid]
    assert asteroid.x == 800 + asteroid.size
    assert asteroid.color.startswith("hsl(")


def test_speed_grows_with_survival_time():
    early = AsteroidSpawner([], random.Random(42)).spawn(800, 600, 1.0)
    late = AsteroidSpawner([], random.Random(42)).spawn(800, 600, 10.0)

    assert late.speed >= early.speed
    assert late.speed - early.speed == pytest.approx(9.0 * ASTEROID_SPEED_GROWTH)


def test_spawn_interval_shrinks_to_a_floor():
    assert spawn_interval(0) == BASE_SPAWN_INTERVAL

    previous = spawn_interval(0)
    for t in range(1, 500):
        current = spawn_interval(t)
        assert current <= previous
        assert current >= MIN_SPAWN_INTERVAL
        previous = current

    assert spawn_interval(10_000) == MIN_SPAWN_INTERVAL


def test_star_field_covers_canvas():
    stars = create_star_field(800, 600, random.Random(5), count=50)

    assert len(stars) == 50
    assert all(0 <= s.x < 800 and 0 <= s.y < 600 for s in stars)
