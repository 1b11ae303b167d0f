# server/services/game_service.py
"""Core game logic and state management."""

import random
from dataclasses import replace
from typing import List, Optional, Tuple

from models.entities import Asteroid, InputState, SessionMeta, SessionState, Ship, Star
from config.settings import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    SHIP_HEIGHT,
    SHIP_SPEED,
    SHIP_WIDTH,
    SHIP_X,
    STAR_SPEED,
    TIME_SCALE,
)
from services.spawner import AsteroidSpawner, create_star_field, spawn_interval
from utils.helpers import clamp, is_colliding


class GameSession:
    """All transient state of one play-through, advanced by update()."""

    def __init__(
        self,
        canvas_width: float = CANVAS_WIDTH,
        canvas_height: float = CANVAS_HEIGHT,
        rng: random.Random = None,
    ):
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.rng = rng or random.Random()

        self.ship = Ship(
            x=SHIP_X,
            y=canvas_height / 2 - SHIP_HEIGHT / 2,
            width=SHIP_WIDTH,
            height=SHIP_HEIGHT,
            speed=SHIP_SPEED,
        )
        self.asteroids: List[Asteroid] = []
        self.stars: List[Star] = create_star_field(canvas_width, canvas_height, self.rng)
        self.spawner = AsteroidSpawner(self.asteroids, self.rng)
        self.input = InputState()

        self.state = SessionState.NOT_STARTED
        self.elapsed_time = 0.0
        self.spawn_timer = 0.0
        self.high_score = 0.0
        self.spawn_count = 0

    @property
    def score(self) -> int:
        """Whole seconds survived, the value reported at game over."""
        return round(self.elapsed_time)

    def reset(self):
        """Clear transient state and land in RUNNING."""
        self.asteroids.clear()
        self.ship.y = self.canvas_height / 2 - self.ship.height / 2
        self.elapsed_time = 0.0
        self.spawn_timer = 0.0
        self.spawn_count = 0
        self.state = SessionState.RUNNING

    def update(self, delta_time: float):
        """Advance the session by delta_time seconds."""
        if self.state is not SessionState.RUNNING:
            return

        self.elapsed_time += delta_time
        self._move_ship(delta_time)
        self._update_stars(delta_time)
        self._update_asteroids(delta_time)

        if self.find_collision() is not None:
            self.state = SessionState.GAME_OVER
            return

        self.spawn_timer += delta_time
        if self.spawn_timer >= spawn_interval(self.elapsed_time):
            self.spawner.spawn(self.canvas_width, self.canvas_height, self.elapsed_time)
            self.spawn_count += 1
            self.spawn_timer = 0.0

    def find_collision(self) -> Optional[Asteroid]:
        """Return the first asteroid hitting the ship, if any."""
        for asteroid in self.asteroids:
            if is_colliding(self.ship, asteroid):
                return asteroid
        return None

    def snapshot(self) -> Tuple[Ship, Tuple[Asteroid, ...], Tuple[Star, ...], SessionMeta]:
        """Copies of the live state for rendering."""
        meta = SessionMeta(
            elapsedTime=self.elapsed_time,
            highScore=self.high_score,
            state=self.state,
            canvasWidth=self.canvas_width,
            canvasHeight=self.canvas_height,
        )
        return (
            replace(self.ship),
            tuple(replace(a) for a in self.asteroids),
            tuple(replace(s) for s in self.stars),
            meta,
        )

    def _move_ship(self, dt: float):
        """Move the ship vertically per input, kept inside the canvas."""
        step = self.ship.speed * TIME_SCALE * dt
        y = self.ship.y
        if self.input.up:
            y -= step
        if self.input.down:
            y += step
        self.ship.y = clamp(y, 0, max(self.canvas_height - self.ship.height, 0))

    def _update_stars(self, dt: float):
        for star in self.stars:
            star.x -= STAR_SPEED * dt
            if star.x < 0:
                star.x = self.canvas_width

    def _update_asteroids(self, dt: float):
        """Scroll asteroids left and drop the ones that left the screen."""
        for asteroid in self.asteroids:
            asteroid.x -= asteroid.speed * TIME_SCALE * dt
            asteroid.rotation += asteroid.rotationSpeed * dt

        # Slice assignment keeps the spawner's reference to the same list
        self.asteroids[:] = [a for a in self.asteroids if a.x + a.size > 0]
