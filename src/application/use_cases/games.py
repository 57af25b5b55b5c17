"""Use cases to schedule games and share their RSVP links."""

from dataclasses import dataclass
from datetime import date, time
from urllib.parse import urlencode

from src.application.ports.games_repository import GamesRepositoryPort
from src.domain.errors import ValidationError
from src.domain.models.games import Game
from src.domain.models.members import AuthorizationContext
from src.domain.policies.authorization import ensure_admin
from src.domain.services.validation import require_text
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class GameListing:
    """Game with its public confirmation link and attendance count."""

    game: Game
    rsvp_url: str
    confirmed_count: int


def build_rsvp_url(public_base_url: str, game_id: str) -> str:
    """Return the public link members open to confirm attendance."""
    return f"{public_base_url.rstrip('/')}/?{urlencode({'game': game_id})}"


class ScheduleGameUseCase:
    """Create a scheduled game."""

    def __init__(
        self,
        games_repository: GamesRepositoryPort,
        logger=None,
    ) -> None:
        self._games_repository = games_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        context: AuthorizationContext,
        game_date: date | None,
        game_time: time | None,
        location: str,
    ) -> Game:
        ensure_admin(context, "schedule games")
        if game_date is None:
            raise ValidationError("Game date is required")
        game = self._games_repository.insert_game(
            game_date,
            game_time,
            require_text(location, "Location"),
        )
        self._logger.info(f"Game {game.id} scheduled on {game.date}")
        return game


class ListGamesUseCase:
    """List games with their RSVP links."""

    def __init__(
        self,
        games_repository: GamesRepositoryPort,
        public_base_url: str,
    ) -> None:
        self._games_repository = games_repository
        self._public_base_url = public_base_url

    def execute(self) -> list[GameListing]:
        games = self._games_repository.fetch_games()
        return [
            GameListing(
                game=game,
                rsvp_url=build_rsvp_url(self._public_base_url, game.id),
                confirmed_count=self._games_repository.count_confirmations(
                    game.id
                ),
            )
            for game in sorted(games, key=lambda g: (g.date, g.id), reverse=True)
        ]


__all__ = [
    "GameListing",
    "build_rsvp_url",
    "ScheduleGameUseCase",
    "ListGamesUseCase",
]
