"""Port for games and participation confirmations."""

from datetime import date, time
from typing import Protocol

from src.domain.models.games import Game, ParticipationConfirmation


class GamesRepositoryPort(Protocol):
    """Port exposing games and RSVP records."""

    def fetch_game(self, game_id: str) -> Game | None:
        """Return one game, or None when absent."""

    def fetch_games(self) -> list[Game]:
        """Return games, most recent first."""

    def insert_game(
        self,
        game_date: date,
        game_time: time | None,
        location: str,
    ) -> Game:
        """Create a scheduled game."""

    def fetch_confirmation(
        self,
        game_id: str,
        member_id: str,
    ) -> ParticipationConfirmation | None:
        """Return the confirmation of a member for a game, if any."""

    def insert_confirmation(
        self,
        confirmation: ParticipationConfirmation,
    ) -> None:
        """Store a confirmation.

        Raises:
            AlreadyExistsError: If the pair is already confirmed.
        """

    def count_confirmations(self, game_id: str) -> int:
        """Return how many members confirmed a game."""


__all__ = ["GamesRepositoryPort"]
