# server/services/spawner.py
"""Asteroid spawning and the difficulty curve."""

import math
import random
from typing import List

from models.entities import Asteroid, Star
from config.settings import (
    ASTEROID_MIN_SIZE,
    ASTEROID_ROTATION_SPEED_VARIATION,
    ASTEROID_SIZE_VARIATION,
    ASTEROID_SPEED_BASE,
    ASTEROID_SPEED_GROWTH,
    ASTEROID_SPEED_VARIATION,
    BASE_SPAWN_INTERVAL,
    MIN_SPAWN_INTERVAL,
    SPAWN_INTERVAL_DECAY,
    STAR_COUNT,
    STAR_MAX_SIZE,
)


def spawn_interval(elapsed_time: float) -> float:
    """Seconds between spawns after surviving elapsed_time seconds."""
    return max(MIN_SPAWN_INTERVAL, BASE_SPAWN_INTERVAL - elapsed_time * SPAWN_INTERVAL_DECAY)


def create_star_field(
    width: float, height: float, rng: random.Random = None, count: int = STAR_COUNT
) -> List[Star]:
    """Scatter background stars over the canvas."""
    rng = rng or random
    return [
        Star(x=rng.random() * width, y=rng.random() * height, size=rng.random() * STAR_MAX_SIZE)
        for _ in range(count)
    ]


class AsteroidSpawner:
    """Creates asteroids just beyond the right edge of the play area."""

    def __init__(self, asteroids: List[Asteroid], rng: random.Random = None):
        self.asteroids = asteroids
        self.rng = rng or random

    def spawn(self, canvas_width: float, canvas_height: float, elapsed_time: float) -> Asteroid:
        """Append one asteroid; faster the longer the session has lasted."""
        rng = self.rng
        size = rng.random() * ASTEROID_SIZE_VARIATION + ASTEROID_MIN_SIZE
        y = rng.random() * max(canvas_height - size, 0)
        speed = (
            rng.random() * ASTEROID_SPEED_VARIATION
            + ASTEROID_SPEED_BASE
            + elapsed_time * ASTEROID_SPEED_GROWTH
        )

        asteroid = Asteroid(
            x=canvas_width + size,
            y=y,
            size=size,
            speed=speed,
            rotation=rng.random() * 2 * math.pi,
            rotationSpeed=(rng.random() - 0.5) * ASTEROID_ROTATION_SPEED_VARIATION,
            color=f"hsl({rng.randint(20, 40)},{rng.randint(20, 45)}%,{rng.randint(35, 55)}%)",
        )
        self.asteroids.append(asteroid)
        return asteroid
