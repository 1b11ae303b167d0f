# server/api/routes.py
"""API routes for the game server."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from config.settings import get_game_config
from models.database import Database
from models.schemas import (
    AsteroidCreate,
    AsteroidOut,
    PlayerCreate,
    PlayerOut,
    PlayerRename,
    ScoreOut,
    ScoreSubmit,
    TopScore,
)
from services.asteroid_service import AsteroidService
from services.player_service import PlayerService

API_VERSION = "1.0"


class GameAPI:
    """API routes for players, scores and the asteroid catalog."""

    def __init__(self, database: Database):
        self.database = database
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Set up all API routes."""
        get_db = self.database.get_db

        def player_service(db: Session = Depends(get_db)) -> PlayerService:
            return PlayerService(db)

        def asteroid_service(db: Session = Depends(get_db)) -> AsteroidService:
            return AsteroidService(db)

        @self.router.get("/")
        async def root():
            """Health check."""
            return {
                "status": "ok",
                "version": API_VERSION,
                "database": self.database.dialect,
            }

        @self.router.get("/api/game/config")
        async def get_game_config_endpoint():
            """Get game configuration including canvas size, speeds, spawn cadence."""
            return get_game_config()

        # Players

        @self.router.get("/api/players", response_model=List[PlayerOut])
        def get_players(ps: PlayerService = Depends(player_service)):
            return ps.list_players()

        @self.router.get("/api/players/top", response_model=List[TopScore])
        def get_top_scores(ps: PlayerService = Depends(player_service)):
            """Best score of the top players."""
            return ps.top_scores()

        @self.router.post("/api/players", response_model=PlayerOut, status_code=status.HTTP_201_CREATED)
        def add_player(body: PlayerCreate, ps: PlayerService = Depends(player_service)):
            return ps.add_player(body.name)

        @self.router.put("/api/players/rename", response_model=PlayerOut)
        def rename_player(body: PlayerRename, ps: PlayerService = Depends(player_service)):
            return ps.rename_player(body.old_name, body.new_name)

        @self.router.delete("/api/players/{name}")
        def delete_player(name: str, ps: PlayerService = Depends(player_service)):
            return {"deleted": ps.delete_player(name)}

        @self.router.get("/api/players/{name}/scores", response_model=List[ScoreOut])
        def get_player_scores(name: str, ps: PlayerService = Depends(player_service)):
            return ps.get_scores(name)

        @self.router.post("/api/players/{name}/score", response_model=ScoreOut, status_code=status.HTTP_201_CREATED)
        def submit_score(name: str, body: ScoreSubmit, ps: PlayerService = Depends(player_service)):
            return ps.add_score(name, body.score)

        # Asteroid catalog

        @self.router.get("/api/asteroids", response_model=List[AsteroidOut])
        def get_asteroids(asvc: AsteroidService = Depends(asteroid_service)):
            return asvc.list_asteroids()

        @self.router.get("/api/asteroids/{asteroid_id}", response_model=AsteroidOut)
        def get_asteroid(asteroid_id: int, asvc: AsteroidService = Depends(asteroid_service)):
            return asvc.get_asteroid(asteroid_id)

        @self.router.post("/api/asteroids", response_model=AsteroidOut, status_code=status.HTTP_201_CREATED)
        def add_asteroid(body: AsteroidCreate, asvc: AsteroidService = Depends(asteroid_service)):
            return asvc.add_asteroid(body)

        @self.router.delete("/api/asteroids/{asteroid_id}")
        def delete_asteroid(asteroid_id: int, asvc: AsteroidService = Depends(asteroid_service)):
            return {"deleted": asvc.delete_asteroid(asteroid_id)}
