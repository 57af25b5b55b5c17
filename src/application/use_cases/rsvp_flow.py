"""Public RSVP flow letting a member confirm attendance at a game once.

The flow is a small state machine owned by one browsing session::

    LOADING -> ERROR (not found | unavailable, terminal)
    LOADING -> FORM_READY -> SUBMITTING -> CONFIRMED
                                        -> ERROR (recoverable)

A blank nickname is rejected without leaving ``FORM_READY``. Any other
submission failure lands in a recoverable ``ERROR`` from which ``submit``
may be called again. Submitting again after ``CONFIRMED`` runs the same
checks, so a repeated confirmation ends in "already confirmed".
Uniqueness of a confirmation is guaranteed by storage; the existence check
only gives an early, friendlier answer.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum

from src.application.ports.games_repository import GamesRepositoryPort
from src.application.ports.members_repository import MembersRepositoryPort
from src.domain.constants import (
    RSVP_ALREADY_CONFIRMED,
    RSVP_MEMBER_NOT_FOUND,
    RSVP_NICKNAME_REQUIRED,
    RSVP_NOT_FOUND,
    RSVP_TRY_AGAIN,
    RSVP_UNAVAILABLE,
)
from src.domain.errors import AlreadyExistsError, ErrorKind
from src.domain.models.games import (
    ConfirmationStatus,
    Game,
    ParticipationConfirmation,
)
from src.domain.models.members import Member
from src.domain.services.nicknames import resolve_nickname
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class RsvpPhase(str, Enum):
    LOADING = "loading"
    FORM_READY = "form_ready"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
    ERROR = "error"


@dataclass(frozen=True)
class RsvpState:
    """Snapshot of the flow shown by the RSVP page.

    Attributes:
        phase: Current phase.
        game: Loaded game, None until loading succeeds.
        error_kind: Kind of the last failure, if any.
        message: User-facing error message, if any.
        recoverable: Whether the user may act again after an error.
        member: Member confirmed, set in ``CONFIRMED``.
    """

    phase: RsvpPhase
    game: Game | None = None
    error_kind: ErrorKind | None = None
    message: str | None = None
    recoverable: bool = False
    member: Member | None = None

    @property
    def can_submit(self) -> bool:
        if self.game is None:
            return False
        if self.phase in (RsvpPhase.FORM_READY, RsvpPhase.CONFIRMED):
            return True
        return self.phase is RsvpPhase.ERROR and self.recoverable

    @property
    def can_reload(self) -> bool:
        if self.phase is RsvpPhase.LOADING:
            return True
        return (
            self.phase is RsvpPhase.ERROR
            and self.recoverable
            and self.game is None
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RsvpConfirmationFlow:
    """State machine guarding the public confirmation link of a game."""

    def __init__(
        self,
        game_id: str,
        games_repository: GamesRepositoryPort,
        members_repository: MembersRepositoryPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the flow in ``LOADING``.

        Args:
            game_id: Game referenced by the public link.
            games_repository: Port providing games and confirmations.
            members_repository: Port providing nickname candidates.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
            clock: Source of confirmation timestamps.
        """
        self._game_id = (game_id or "").strip()
        self._games_repository = games_repository
        self._members_repository = members_repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock
        self._state = RsvpState(phase=RsvpPhase.LOADING)

    @property
    def game_id(self) -> str:
        return self._game_id

    def current_state(self) -> RsvpState:
        """Return the current immutable state."""
        return self._state

    def load(self) -> RsvpState:
        """Fetch the game and open the form when it accepts confirmations.

        Returns:
            RsvpState: ``FORM_READY`` or ``ERROR``.
        """
        if not self._state.can_reload:
            return self._state
        self._state = RsvpState(phase=RsvpPhase.LOADING)
        if not self._game_id:
            return self._terminal(ErrorKind.NOT_FOUND, RSVP_NOT_FOUND)

        try:
            game = self._games_repository.fetch_game(self._game_id)
        except Exception:
            self._logger.exception(f"Loading game {self._game_id} failed")
            return self._recoverable(ErrorKind.TRANSIENT, RSVP_TRY_AGAIN)

        if game is None:
            return self._terminal(ErrorKind.NOT_FOUND, RSVP_NOT_FOUND)
        if not game.accepts_confirmations:
            self._state = RsvpState(phase=RsvpPhase.LOADING, game=game)
            return self._terminal(ErrorKind.UNAVAILABLE, RSVP_UNAVAILABLE)

        self._state = RsvpState(phase=RsvpPhase.FORM_READY, game=game)
        return self._state

    def submit(self, nickname: str) -> RsvpState:
        """Confirm attendance of the member identified by ``nickname``.

        Args:
            nickname: Text typed in the form.

        Returns:
            RsvpState: ``CONFIRMED`` on success, otherwise the error state.
        """
        if not self._state.can_submit:
            return self._state

        game = self._state.game
        cleaned = (nickname or "").strip()
        if not cleaned:
            self._state = RsvpState(
                phase=RsvpPhase.FORM_READY,
                game=game,
                error_kind=ErrorKind.VALIDATION,
                message=RSVP_NICKNAME_REQUIRED,
                recoverable=True,
            )
            return self._state

        self._state = RsvpState(phase=RsvpPhase.SUBMITTING, game=game)
        try:
            candidates = self._members_repository.fetch_nickname_candidates(
                cleaned
            )
            member = resolve_nickname(candidates, cleaned)
            if member is None:
                return self._recoverable(
                    ErrorKind.NOT_FOUND,
                    RSVP_MEMBER_NOT_FOUND,
                )
            existing = self._games_repository.fetch_confirmation(
                game.id,
                member.id,
            )
            if existing is not None:
                return self._recoverable(
                    ErrorKind.ALREADY_EXISTS,
                    RSVP_ALREADY_CONFIRMED,
                )
            self._games_repository.insert_confirmation(
                ParticipationConfirmation(
                    game_id=game.id,
                    member_id=member.id,
                    status=ConfirmationStatus.CONFIRMED,
                    created_at=self._clock(),
                )
            )
        except AlreadyExistsError:
            self._logger.warning(
                f"Concurrent confirmation rejected for game {game.id}"
            )
            return self._recoverable(
                ErrorKind.ALREADY_EXISTS,
                RSVP_ALREADY_CONFIRMED,
            )
        except Exception:
            self._logger.exception(f"Confirmation for game {game.id} failed")
            return self._recoverable(ErrorKind.TRANSIENT, RSVP_TRY_AGAIN)

        self._usage_logger.info(
            f"Attendance confirmed: game={game.id}, member={member.id}"
        )
        self._state = RsvpState(
            phase=RsvpPhase.CONFIRMED,
            game=game,
            member=member,
        )
        return self._state

    def _recoverable(self, kind: ErrorKind, message: str) -> RsvpState:
        self._state = replace(
            self._state,
            phase=RsvpPhase.ERROR,
            error_kind=kind,
            message=message,
            recoverable=True,
        )
        return self._state

    def _terminal(self, kind: ErrorKind, message: str) -> RsvpState:
        self._state = replace(
            self._state,
            phase=RsvpPhase.ERROR,
            error_kind=kind,
            message=message,
            recoverable=False,
        )
        return self._state


__all__ = ["RsvpPhase", "RsvpState", "RsvpConfirmationFlow"]
