# server/models/entities.py
"""Game entity models and data classes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SessionState(str, Enum):
    """Lifecycle of a single play-through."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class Ship:
    """Represents the player's ship."""

    x: float
    y: float
    width: float
    height: float
    speed: float


@dataclass
class Asteroid:
    """Represents a live asteroid drifting across the play area."""

    x: float
    y: float
    size: float
    speed: float
    rotation: float
    rotationSpeed: float
    color: str


@dataclass
class Star:
    """Represents a background star."""

    x: float
    y: float
    size: float


@dataclass
class InputState:
    """Directional keys currently held by the client."""

    up: bool = False
    down: bool = False

    @classmethod
    def from_message(cls, data: Any) -> "InputState":
        """Build an input state from a client message, treating junk as no key pressed."""
        if not isinstance(data, dict):
            return cls()
        return cls(up=data.get("up") is True, down=data.get("down") is True)


@dataclass(frozen=True)
class SessionMeta:
    """Read-only session summary handed to the render sink."""

    elapsedTime: float
    highScore: float
    state: SessionState
    canvasWidth: float
    canvasHeight: float

    @property
    def gameStarted(self) -> bool:
        return self.state is not SessionState.NOT_STARTED

    @property
    def gameOver(self) -> bool:
        return self.state is SessionState.GAME_OVER

    @property
    def paused(self) -> bool:
        return self.state is SessionState.PAUSED
