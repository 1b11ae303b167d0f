# server/models/schemas.py
"""Request and response bodies for the HTTP API."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.settings import PLAYER_NAME_MAX_LENGTH


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _require_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Player name is required")
    return value


class AsteroidSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class AsteroidMaterial(str, Enum):
    ROCK = "Rock"
    IRON = "Iron"
    CRYSTAL = "Crystal"


class AsteroidType(str, Enum):
    NORMAL = "Normal"
    RARE = "Rare"
    BOSS = "Boss"


class PlayerCreate(ApiModel):
    name: str = Field(..., max_length=PLAYER_NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_name(v)


class PlayerRename(ApiModel):
    old_name: str = Field(..., max_length=PLAYER_NAME_MAX_LENGTH)
    new_name: str = Field(..., max_length=PLAYER_NAME_MAX_LENGTH)

    @field_validator("old_name", "new_name")
    @classmethod
    def validate_names(cls, v: str) -> str:
        return _require_name(v)


class ScoreSubmit(ApiModel):
    score: int = Field(..., ge=0)


class PlayerOut(ApiModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class ScoreOut(ApiModel):
    id: int
    score: int
    scored_at: datetime


class TopScore(ApiModel):
    name: str
    high_score: int


class AsteroidCreate(ApiModel):
    size: AsteroidSize
    speed: int = Field(..., ge=1, le=10)
    material: AsteroidMaterial
    type: AsteroidType
    spawn_rate: int = Field(..., ge=1, le=100)


class AsteroidOut(ApiModel):
    id: int
    size: str
    speed: int
    material: str
    type: str
    spawn_rate: int
    created_at: datetime


class ErrorResponse(ApiModel):
    status_code: int
    message: str
    details: Optional[str] = None
