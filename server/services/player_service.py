# server/services/player_service.py
"""Player and score persistence."""

from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from api.errors import PlayerAlreadyExistsError, PlayerNotFoundError
from config.settings import TOP_SCORES_LIMIT
from models.records import GamePlayer, PlayerScore
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _name_key(name: str) -> str:
    return name.strip().lower()


class PlayerService:
    """CRUD over players and their score history."""

    def __init__(self, db: Session):
        self.db = db

    def list_players(self) -> List[GamePlayer]:
        """Get all players ordered by id."""
        return list(self.db.scalars(select(GamePlayer).order_by(GamePlayer.id)))

    def find_player(self, name: str) -> Optional[GamePlayer]:
        """Look a player up by name, ignoring case."""
        stmt = select(GamePlayer).where(func.lower(GamePlayer.name) == _name_key(name))
        return self.db.scalars(stmt).first()

    def get_player(self, name: str) -> GamePlayer:
        player = self.find_player(name)
        if player is None:
            raise PlayerNotFoundError(name.strip())
        return player

    def add_player(self, name: str) -> GamePlayer:
        """Create a player; the name must be unused ignoring case."""
        name = name.strip()
        if self.find_player(name) is not None:
            raise PlayerAlreadyExistsError(name)

        try:
            player = self._create(name)
            self.db.commit()
        except IntegrityError:
            # Another request inserted the same name in between
            self.db.rollback()
            raise PlayerAlreadyExistsError(name)
        logger.info("Player created", player=name, player_id=player.id)
        return player

    def delete_player(self, name: str) -> int:
        """Delete the player with this name, if any, with their scores."""
        player = self.find_player(name)
        if player is None:
            return 0
        self.db.delete(player)
        self.db.commit()
        logger.info("Player deleted", player=player.name)
        return 1

    def rename_player(self, old_name: str, new_name: str) -> GamePlayer:
        player = self.get_player(old_name)
        new_name = new_name.strip()

        existing = self.find_player(new_name)
        if existing is not None and existing.id != player.id:
            raise PlayerAlreadyExistsError(new_name)

        player.name = new_name
        player.updated_at = datetime.now(timezone.utc)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise PlayerAlreadyExistsError(new_name)
        logger.info("Player renamed", old_name=old_name.strip(), new_name=new_name)
        return player

    def add_score(self, name: str, score: int) -> PlayerScore:
        """Record a finished session, creating the player on first score."""
        player = self.find_player(name)
        if player is None:
            try:
                player = self._create(name.strip())
            except IntegrityError:
                # Created concurrently; use that row
                self.db.rollback()
                player = self.get_player(name)

        record = PlayerScore(player=player, score=score)
        self.db.add(record)
        self.db.commit()
        logger.info("Score submitted", player=player.name, score=score)
        return record

    def get_scores(self, name: str) -> List[PlayerScore]:
        """A player's scores, newest first."""
        player = self.get_player(name)
        stmt = (
            select(PlayerScore)
            .where(PlayerScore.player_id == player.id)
            .order_by(PlayerScore.scored_at.desc(), PlayerScore.id.desc())
        )
        return list(self.db.scalars(stmt))

    def top_scores(self, limit: int = TOP_SCORES_LIMIT) -> List[dict]:
        """Players ranked by best score; players without scores rank at 0."""
        best = func.coalesce(func.max(PlayerScore.score), 0).label("high_score")
        stmt = (
            select(GamePlayer.name, best)
            .outerjoin(PlayerScore, PlayerScore.player_id == GamePlayer.id)
            .group_by(GamePlayer.id, GamePlayer.name)
            .order_by(best.desc(), GamePlayer.id)
            .limit(limit)
        )
        return [{"name": name, "high_score": high_score} for name, high_score in self.db.execute(stmt)]

    def _create(self, name: str) -> GamePlayer:
        player = GamePlayer(name=name)
        self.db.add(player)
        self.db.flush()
        return player


class DatabaseScoreBoard:
    """The game controller's view of the score tables.

    Each call opens and closes its own session so it can be shared by
    every connection.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def fetch_top_scores(self, limit: int = TOP_SCORES_LIMIT) -> List[dict]:
        with self.session_factory() as db:
            return PlayerService(db).top_scores(limit)

    def fetch_high_score(self) -> int:
        scores = self.fetch_top_scores()
        return max((s["high_score"] for s in scores), default=0)

    def submit_score(self, name: str, score: int):
        with self.session_factory() as db:
            PlayerService(db).add_score(name, score)
