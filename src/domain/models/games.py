"""Domain models for games and attendance confirmations."""

from dataclasses import dataclass
from datetime import date, datetime, time as clock_time
from enum import Enum


class GameStatus(str, Enum):
    """Lifecycle status of a game. Only scheduled games accept RSVPs."""

    SCHEDULED = "scheduled"
    PLAYED = "played"
    CANCELLED = "cancelled"
    OTHER = "other"

    @classmethod
    def from_raw(cls, raw: str | None) -> "GameStatus":
        """Parse a stored status, case-insensitively.

        Args:
            raw: Value read from storage.

        Returns:
            GameStatus: Matching status, ``OTHER`` for unknown values.
        """
        cleaned = (raw or "").strip().lower()
        for status in cls:
            if status.value == cleaned:
                return status
        return cls.OTHER


class ConfirmationStatus(str, Enum):
    """Status stored on a participation record."""

    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class Game:
    """Scheduled match or event."""

    id: str
    date: date
    location: str
    status: GameStatus
    time: clock_time | None = None

    @property
    def accepts_confirmations(self) -> bool:
        return self.status is GameStatus.SCHEDULED


@dataclass(frozen=True)
class ParticipationConfirmation:
    """Attendance acknowledgment of a member for a game."""

    game_id: str
    member_id: str
    status: ConfirmationStatus
    created_at: datetime


__all__ = [
    "GameStatus",
    "ConfirmationStatus",
    "Game",
    "ParticipationConfirmation",
]
