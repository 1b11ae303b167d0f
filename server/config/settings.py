# server/config/settings.py
"""Game configuration constants and settings."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Canvas settings
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

# Ship settings
SHIP_X = 50
SHIP_WIDTH = 60
SHIP_HEIGHT = 40
SHIP_SPEED = 3

# Asteroid settings
ASTEROID_MIN_SIZE = 20
ASTEROID_SIZE_VARIATION = 30
ASTEROID_SPEED_BASE = 2
ASTEROID_SPEED_VARIATION = 2
ASTEROID_SPEED_GROWTH = 0.05
ASTEROID_ROTATION_SPEED_VARIATION = 2.0  # rad/s, centered on zero

# Speeds are expressed per 60Hz frame
TIME_SCALE = 60

# Spawn cadence (seconds)
BASE_SPAWN_INTERVAL = 0.45
MIN_SPAWN_INTERVAL = 0.15
SPAWN_INTERVAL_DECAY = 0.005

# Ship hit box, relative to the sprite box
HITBOX_WIDTH_RATIO = 0.5
HITBOX_HEIGHT_RATIO = 0.6

# Star field settings
STAR_COUNT = 100
STAR_SPEED = 50  # px/s
STAR_MAX_SIZE = 2

# Loop settings
UPDATE_RATE = 60  # FPS
MAX_FRAME_DELTA = 0.25  # s, caps the step after a stall

# Audio settings
DEFAULT_VOLUME = 0.75
VOLUME_STEP = 0.1

# Backend settings
TOP_SCORES_LIMIT = 5
PLAYER_NAME_MAX_LENGTH = 100


def get_game_config():
    """Get the complete game configuration as a dictionary."""
    return {
        "canvasWidth": CANVAS_WIDTH,
        "canvasHeight": CANVAS_HEIGHT,
        "shipWidth": SHIP_WIDTH,
        "shipHeight": SHIP_HEIGHT,
        "shipSpeed": SHIP_SPEED,
        "asteroidMinSize": ASTEROID_MIN_SIZE,
        "asteroidSizeVariation": ASTEROID_SIZE_VARIATION,
        "asteroidSpeedBase": ASTEROID_SPEED_BASE,
        "asteroidSpeedVariation": ASTEROID_SPEED_VARIATION,
        "asteroidSpeedGrowth": ASTEROID_SPEED_GROWTH,
        "timeScale": TIME_SCALE,
        "baseSpawnInterval": BASE_SPAWN_INTERVAL,
        "minSpawnInterval": MIN_SPAWN_INTERVAL,
        "spawnIntervalDecay": SPAWN_INTERVAL_DECAY,
        "starCount": STAR_COUNT,
        "starSpeed": STAR_SPEED,
        "updateRate": UPDATE_RATE,
        "volumeStep": VOLUME_STEP,
    }


class ServerSettings(BaseSettings):
    """Deployment settings read from ASTEROIDS_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="ASTEROIDS_", env_file=".env", extra="ignore")

    database_url: str = Field(default="sqlite:///./asteroid_dodger.db", description="SQLAlchemy database URL")
    cors_origins: List[str] = Field(default=["http://localhost:8000"], description="Allowed CORS origins")
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=5000, description="Server port")
    log_level: str = Field(default="INFO", description="Root log level")


@lru_cache
def get_settings() -> ServerSettings:
    """Return the process-wide server settings."""
    return ServerSettings()
