from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, WebSocket
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.routes import GameAPI
from config.settings import ServerSettings, get_settings
from models.database import Database
from services.player_service import DatabaseScoreBoard
from services.websocket_service import WebSocketService
from utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[ServerSettings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the FastAPI application with its database and game services."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.init_db()
        logger.info("Asteroid Dodger server started", database=database.dialect)
        yield
        database.dispose()
        logger.info("Asteroid Dodger server stopped")

    app = FastAPI(title="Asteroid Dodger", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    game_api = GameAPI(database)
    app.include_router(game_api.router)

    websocket_service = WebSocketService(scoreboard=DatabaseScoreBoard(database.session_factory))

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        await websocket_service.handle_connection(websocket)

    app.state.database = database
    app.state.websocket_service = websocket_service
    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
