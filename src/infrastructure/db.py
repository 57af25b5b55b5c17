"""Database infrastructure for the club manager.

This module exposes the SQLAlchemy engine adapter injected into the
repositories. The adapter is built once by the composition root and
disposed at process teardown.
"""

from collections.abc import Iterator
from contextlib import contextmanager
import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.domain.errors import AlreadyExistsError, TransientError


DB_URL_ENV = "CLUB_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable (after loading ``.env``) or raise.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for a PostgreSQL database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into domain errors.

    Args:
        action: Short description of the storage operation.

    Raises:
        AlreadyExistsError: On integrity (unique or foreign key) conflicts.
        TransientError: On any other database failure.
    """
    try:
        yield
    except IntegrityError as exc:
        raise AlreadyExistsError(f"{action}: conflicting record") from exc
    except SQLAlchemyError as exc:
        raise TransientError(f"{action} failed") from exc


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation owning one SQLAlchemy engine.

    Either an already built engine or a database URL may be given; without
    both, the URL is read from ``CLUB_DB_URL`` on first use.
    """

    def __init__(
        self,
        db_url: str | None = None,
        engine: Engine | None = None,
    ) -> None:
        self._db_url = db_url
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the club database.

        Returns:
            Engine: Lazily initialized engine connected to the club backend.
        """
        if self._engine is None:
            db_url = self._db_url or _get_env_var(DB_URL_ENV)
            self._engine = _create_engine(db_url)
        return self._engine

    def dispose(self) -> None:
        """Close pooled connections; the next call recreates the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = [
    "DB_URL_ENV",
    "storage_errors",
    "SqlAlchemyDatabaseEngineAdapter",
]
