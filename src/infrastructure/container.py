"""Composition root for wiring infrastructure adapters."""

from src.application.ports.blob_store import BlobStorePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.fees_repository import MonthlyFeesRepositoryPort
from src.application.ports.games_repository import GamesRepositoryPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.members_repository import MembersRepositoryPort
from src.infrastructure.blob_store import FileSystemBlobStore
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.fees_repository import SqlAlchemyMonthlyFeesRepository
from src.infrastructure.games_repository import SqlAlchemyGamesRepository
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.members_repository import SqlAlchemyMembersRepository
from src.infrastructure.settings import ClubSettings


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(db_url=db_url)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the accounts and postings repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_fees_repository(
    db_port: DatabaseEnginePort | None = None,
) -> MonthlyFeesRepositoryPort:
    """Return the monthly fees repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyMonthlyFeesRepository(resolved_db)


def build_members_repository(
    db_port: DatabaseEnginePort | None = None,
) -> MembersRepositoryPort:
    """Return the member registry repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyMembersRepository(resolved_db)


def build_games_repository(
    db_port: DatabaseEnginePort | None = None,
) -> GamesRepositoryPort:
    """Return the games and confirmations repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyGamesRepository(resolved_db)


def build_blob_store(settings: ClubSettings | None = None) -> BlobStorePort:
    """Return the blob store configured by ``CLUB_BLOB_*`` settings."""
    resolved = settings or ClubSettings.from_env()
    return FileSystemBlobStore(
        resolved.blob_dir,
        resolved.blob_base_url,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_fees_repository",
    "build_members_repository",
    "build_games_repository",
    "build_blob_store",
]
