# server/models/database.py
"""Database engine and session management."""

from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Shared declarative base for all persisted models."""


def create_db_engine(database_url: str) -> Engine:
    """Create an engine; SQLite URLs get thread-safe settings for the ASGI server."""
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


class Database:
    """Owns the engine and the session factory for one database URL."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_db_engine(database_url)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def init_db(self):
        """Create all tables that do not exist yet."""
        # Registers the mapped classes on Base.metadata
        import models.records  # noqa: F401

        Base.metadata.create_all(self.engine)

    def get_db(self) -> Iterator[Session]:
        """FastAPI dependency yielding one session per request."""
        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()

    def dispose(self):
        self.engine.dispose()

    @property
    def dialect(self) -> Optional[str]:
        return self.engine.dialect.name
