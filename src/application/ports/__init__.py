"""Application ports package."""

from .blob_store import BlobStorePort
from .database import DatabaseEnginePort
from .fees_repository import FeeRecord, MonthlyFeesRepositoryPort
from .games_repository import GamesRepositoryPort
from .ledger_repository import LedgerRepositoryPort, PostingRecord
from .members_repository import MemberRecord, MembersRepositoryPort
from .session import SessionPort

__all__ = [
    "BlobStorePort",
    "DatabaseEnginePort",
    "FeeRecord",
    "MonthlyFeesRepositoryPort",
    "GamesRepositoryPort",
    "LedgerRepositoryPort",
    "PostingRecord",
    "MemberRecord",
    "MembersRepositoryPort",
    "SessionPort",
]
