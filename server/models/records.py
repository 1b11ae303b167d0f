# server/models/records.py
"""Persisted players, scores and the asteroid archetype catalog."""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.settings import PLAYER_NAME_MAX_LENGTH
from models.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GamePlayer(Base):
    """A named player. Names are unique ignoring case."""

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(PLAYER_NAME_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    scores: Mapped[List["PlayerScore"]] = relationship(
        back_populates="player", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<GamePlayer id={self.id} name={self.name!r}>"


# Case-insensitive uniqueness of player names
Index("ix_players_name_lower", func.lower(GamePlayer.name), unique=True)


class PlayerScore(Base):
    """One finished session. Inserted, never updated."""

    __tablename__ = "scores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    player_id: Mapped[int] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    scored_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    player: Mapped[GamePlayer] = relationship(back_populates="scores")


class AsteroidArchetype(Base):
    """Catalog entry describing a kind of asteroid."""

    __tablename__ = "asteroids"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    size: Mapped[str] = mapped_column(String(50), nullable=False)
    speed: Mapped[int] = mapped_column(Integer, nullable=False)
    material: Mapped[str] = mapped_column(String(50), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    spawn_rate: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
