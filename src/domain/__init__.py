"""Domain package for business rules and core models."""

from .errors import (
    AlreadyExistsError,
    ClubError,
    ErrorKind,
    NotFoundError,
    TransientError,
    UnavailableError,
    ValidationError,
)
from .models import (
    Account,
    AccountGroup,
    AuthorizationContext,
    Game,
    GameStatus,
    LedgerFilter,
    LedgerSummary,
    Member,
    MonthlyFee,
    ParticipationConfirmation,
    Posting,
)
from .policies import ensure_admin
from .services import compute_summary, resolve_nickname, select_window

__all__ = [
    "AlreadyExistsError",
    "ClubError",
    "ErrorKind",
    "NotFoundError",
    "TransientError",
    "UnavailableError",
    "ValidationError",
    "Account",
    "AccountGroup",
    "AuthorizationContext",
    "Game",
    "GameStatus",
    "LedgerFilter",
    "LedgerSummary",
    "Member",
    "MonthlyFee",
    "ParticipationConfirmation",
    "Posting",
    "ensure_admin",
    "compute_summary",
    "resolve_nickname",
    "select_window",
]
