"""Database configuration and session management."""

from sqlite3 import Connection as SQLiteConnection
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from provisioner.config import Settings


class Base(DeclarativeBase):
    """Base class for all database models."""


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Enforce foreign keys on SQLite connections, which ignore them by default."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ANN401
        if isinstance(dbapi_connection, SQLiteConnection):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()


def create_database_engine(settings: Settings) -> Engine:
    """
    Create the process-wide engine and its bounded connection pool.

    Called once at startup by the container; the engine is shared by
    reference with every repository through the session factory.
    """
    if settings.DATABASE_URL.startswith("sqlite"):
        engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(
        settings.DATABASE_URL,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=0,  # pool size is the hard connection cap
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=settings.DATABASE_IDLE_TIMEOUT,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create the session factory bound to the shared engine."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
