# server/services/asteroid_service.py
"""Asteroid archetype catalog."""

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from api.errors import AsteroidNotFoundError
from models.records import AsteroidArchetype
from models.schemas import AsteroidCreate
from utils.logging_config import get_logger

logger = get_logger(__name__)


class AsteroidService:
    """CRUD over the asteroid archetype catalog."""

    def __init__(self, db: Session):
        self.db = db

    def list_asteroids(self) -> List[AsteroidArchetype]:
        return list(self.db.scalars(select(AsteroidArchetype).order_by(AsteroidArchetype.id)))

    def get_asteroid(self, asteroid_id: int) -> AsteroidArchetype:
        asteroid = self.db.get(AsteroidArchetype, asteroid_id)
        if asteroid is None:
            raise AsteroidNotFoundError(asteroid_id)
        return asteroid

    def add_asteroid(self, data: AsteroidCreate) -> AsteroidArchetype:
        asteroid = AsteroidArchetype(
            size=data.size.value,
            speed=data.speed,
            material=data.material.value,
            type=data.type.value,
            spawn_rate=data.spawn_rate,
        )
        self.db.add(asteroid)
        self.db.commit()
        logger.info("Asteroid archetype created", asteroid_id=asteroid.id, size=asteroid.size, type=asteroid.type)
        return asteroid

    def delete_asteroid(self, asteroid_id: int) -> bool:
        """Delete an archetype; unknown ids are ignored."""
        asteroid = self.db.get(AsteroidArchetype, asteroid_id)
        if asteroid is None:
            return False
        self.db.delete(asteroid)
        self.db.commit()
        logger.info("Asteroid archetype deleted", asteroid_id=asteroid_id)
        return True
