"""Database ports for the club manager.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port and is injected into repositories.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the club database engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the club database.

        Returns:
            Engine: SQLAlchemy engine connected to the club backend.
        """

    def dispose(self) -> None:
        """Release pooled connections at process teardown."""


__all__ = ["DatabaseEnginePort"]
