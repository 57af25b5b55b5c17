"""SQLAlchemy-backed repository for games and RSVP confirmations."""

from datetime import date, time
from uuid import uuid4

from sqlalchemy import func, insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.games_repository import GamesRepositoryPort
from src.domain.errors import AlreadyExistsError
from src.domain.models.games import (
    ConfirmationStatus,
    Game,
    GameStatus,
    ParticipationConfirmation,
)
from src.infrastructure.db import storage_errors
from src.infrastructure.schema import game_participants, games
from src.utils.decimal_utils import coerce_date


def _to_game(row) -> Game:
    return Game(
        id=row.id,
        date=coerce_date(row.date),
        location=row.location,
        status=GameStatus.from_raw(row.status),
        time=row.time,
    )


class SqlAlchemyGamesRepository(GamesRepositoryPort):
    """Repository backed by SQLAlchemy for games.

    ``game_participants`` carries a unique constraint on
    ``(game_id, member_id)``; a violation surfaces as ``AlreadyExistsError``.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_game(self, game_id: str) -> Game | None:
        query = select(games).where(games.c.id == game_id)
        engine = self._db_port.get_engine()
        with storage_errors("Loading game"):
            with engine.connect() as conn:
                row = conn.execute(query).first()
        return _to_game(row) if row is not None else None

    def fetch_games(self) -> list[Game]:
        query = select(games).order_by(games.c.date.desc(), games.c.id)
        engine = self._db_port.get_engine()
        with storage_errors("Loading games"):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [_to_game(row) for row in rows]

    def insert_game(
        self,
        game_date: date,
        game_time: time | None,
        location: str,
    ) -> Game:
        game = Game(
            id=str(uuid4()),
            date=game_date,
            location=location,
            status=GameStatus.SCHEDULED,
            time=game_time,
        )
        engine = self._db_port.get_engine()
        with storage_errors("Scheduling game"):
            with engine.begin() as conn:
                conn.execute(
                    insert(games).values(
                        id=game.id,
                        date=game.date,
                        time=game.time,
                        location=game.location,
                        status=game.status.value,
                    )
                )
        return game

    def fetch_confirmation(
        self,
        game_id: str,
        member_id: str,
    ) -> ParticipationConfirmation | None:
        query = (
            select(game_participants)
            .where(game_participants.c.game_id == game_id)
            .where(game_participants.c.member_id == member_id)
        )
        engine = self._db_port.get_engine()
        with storage_errors("Loading confirmation"):
            with engine.connect() as conn:
                row = conn.execute(query).first()
        if row is None:
            return None
        return ParticipationConfirmation(
            game_id=row.game_id,
            member_id=row.member_id,
            status=ConfirmationStatus(row.status),
            created_at=row.created_at,
        )

    def insert_confirmation(
        self,
        confirmation: ParticipationConfirmation,
    ) -> None:
        """Store a confirmation.

        Raises:
            AlreadyExistsError: If the member already confirmed this game.
            TransientError: On any other storage failure.
        """
        engine = self._db_port.get_engine()
        try:
            with storage_errors("Confirming attendance"):
                with engine.begin() as conn:
                    conn.execute(
                        insert(game_participants).values(
                            id=str(uuid4()),
                            game_id=confirmation.game_id,
                            member_id=confirmation.member_id,
                            status=confirmation.status.value,
                            created_at=confirmation.created_at,
                        )
                    )
        except AlreadyExistsError as exc:
            raise AlreadyExistsError(
                f"Member {confirmation.member_id} already confirmed "
                f"game {confirmation.game_id}"
            ) from exc.__cause__

    def count_confirmations(self, game_id: str) -> int:
        query = (
            select(func.count())
            .select_from(game_participants)
            .where(game_participants.c.game_id == game_id)
        )
        engine = self._db_port.get_engine()
        with storage_errors("Counting confirmations"):
            with engine.connect() as conn:
                return conn.execute(query).scalar_one()


__all__ = ["SqlAlchemyGamesRepository"]
