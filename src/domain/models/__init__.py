"""Domain models package."""

from .fees import MonthlyFee
from .games import (
    ConfirmationStatus,
    Game,
    GameStatus,
    ParticipationConfirmation,
)
from .ledger import (
    Account,
    AccountBreakdown,
    AccountGroup,
    AccountTotal,
    LedgerFilter,
    LedgerSummary,
    LedgerView,
    Posting,
    PostingDraft,
)
from .members import (
    AuthorizationContext,
    Member,
    MemberCategory,
    MemberStatus,
)

__all__ = [
    "Account",
    "AccountBreakdown",
    "AccountGroup",
    "AccountTotal",
    "LedgerFilter",
    "LedgerSummary",
    "LedgerView",
    "Posting",
    "PostingDraft",
    "MonthlyFee",
    "ConfirmationStatus",
    "Game",
    "GameStatus",
    "ParticipationConfirmation",
    "AuthorizationContext",
    "Member",
    "MemberCategory",
    "MemberStatus",
]
