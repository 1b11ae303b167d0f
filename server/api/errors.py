# server/api/errors.py
"""Domain exceptions and their HTTP error responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from models.schemas import ErrorResponse
from utils.logging_config import get_logger

logger = get_logger(__name__)


class GameServiceError(Exception):
    """Base class for errors raised by the backend services."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"


class InvalidRequestError(GameServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class PlayerNotFoundError(GameServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"

    def __init__(self, name: str):
        super().__init__(f"Player '{name}' not found")
        self.name = name


class PlayerAlreadyExistsError(GameServiceError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"

    def __init__(self, name: str):
        super().__init__(f"Player '{name}' already exists")
        self.name = name


class AsteroidNotFoundError(GameServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"

    def __init__(self, asteroid_id: int):
        super().__init__(f"Asteroid {asteroid_id} not found")
        self.asteroid_id = asteroid_id


def _error_response(status_code: int, message: str, details: str) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def game_service_error_handler(request: Request, exc: GameServiceError) -> JSONResponse:
    logger.info("Request failed", path=request.url.path, error=type(exc).__name__, details=str(exc))
    return _error_response(exc.status_code, exc.message, str(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", path=request.url.path, error=str(exc), exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        "An error occurred while processing your request",
    )


def register_exception_handlers(app: FastAPI):
    """Attach the JSON error handlers to an application."""
    app.add_exception_handler(GameServiceError, game_service_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
