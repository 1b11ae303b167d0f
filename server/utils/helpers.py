# server/utils/helpers.py
"""Utility functions and helpers."""

import math
from typing import Tuple

from config.settings import HITBOX_HEIGHT_RATIO, HITBOX_WIDTH_RATIO
from models.entities import Asteroid, Ship


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(value, upper))


def is_collision(
    x1: float, y1: float, r1: float, x2: float, y2: float, r2: float
) -> bool:
    """Check if two circles are colliding. Touching circles do not collide."""
    return calculate_distance(x1, y1, x2, y2) < (r1 + r2)


def ship_hit_circle(ship: Ship) -> Tuple[float, float, float]:
    """Return (cx, cy, radius) of the ship's inset hit circle."""
    hit_width = ship.width * HITBOX_WIDTH_RATIO
    hit_height = ship.height * HITBOX_HEIGHT_RATIO
    hit_x = ship.x + (ship.width - hit_width) / 2
    hit_y = ship.y + (ship.height - hit_height) / 2
    return (
        hit_x + hit_width / 2,
        hit_y + hit_height / 2,
        min(hit_width, hit_height) / 2,
    )


def asteroid_circle(asteroid: Asteroid) -> Tuple[float, float, float]:
    """Return (cx, cy, radius) of an asteroid's circular footprint."""
    radius = asteroid.size / 2
    return asteroid.x + radius, asteroid.y + radius, radius


def is_colliding(ship: Ship, asteroid: Asteroid) -> bool:
    """Check whether an asteroid hits the ship."""
    sx, sy, sr = ship_hit_circle(ship)
    ax, ay, ar = asteroid_circle(asteroid)
    return is_collision(sx, sy, sr, ax, ay, ar)
