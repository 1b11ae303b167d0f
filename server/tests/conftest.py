"""Shared fixtures for the game server tests."""

import random

import pytest
from fastapi.testclient import TestClient

from config.settings import ServerSettings
from main import create_app
from models.database import Database
from models.entities import Asteroid, Ship


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeScoreBoard:
    """In-memory scoreboard recording submitted scores."""

    def __init__(self, high_score: int = 0):
        self.high_score = high_score
        self.submitted = []

    def fetch_high_score(self) -> int:
        return self.high_score

    def submit_score(self, name: str, score: int):
        self.submitted.append((name, score))


class BrokenScoreBoard:
    """Scoreboard whose backend is unreachable."""

    def fetch_high_score(self):
        raise ConnectionError("backend unreachable")

    def submit_score(self, name, score):
        raise ConnectionError("backend unreachable")


def make_asteroid(x: float, y: float, size: float = 20, speed: float = 3) -> Asteroid:
    return Asteroid(x=x, y=y, size=size, speed=speed, rotation=0.0, rotationSpeed=0.0, color="hsl(30,30%,45%)")


def make_ship(x: float = 0, y: float = 0) -> Ship:
    return Ship(x=x, y=y, width=60, height=40, speed=3)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    with database.session_factory() as session:
        yield session


@pytest.fixture
def settings():
    return ServerSettings(database_url="sqlite://", log_level="WARNING")


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database)
    with TestClient(app) as test_client:
        yield test_client
