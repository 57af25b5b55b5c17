"""Tests for the RSVP confirmation flow."""

from datetime import date, datetime, timezone
from unittest.mock import MagicMock

from src.application.use_cases.rsvp_flow import (
    RsvpConfirmationFlow,
    RsvpPhase,
)
from src.domain.errors import AlreadyExistsError, ErrorKind, TransientError
from src.domain.models.games import ConfirmationStatus, Game, GameStatus
from src.domain.models.members import Member


NOW = datetime(2024, 6, 1, 18, 30, tzinfo=timezone.utc)


class _FakeGamesRepository:
    def __init__(self, games=()):
        self.games = {game.id: game for game in games}
        self.confirmations = []
        self.fetch_error = None
        self.insert_error = None

    def fetch_game(self, game_id):
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.games.get(game_id)

    def fetch_confirmation(self, game_id, member_id):
        for confirmation in self.confirmations:
            if (confirmation.game_id, confirmation.member_id) == (
                game_id,
                member_id,
            ):
                return confirmation
        return None

    def insert_confirmation(self, confirmation):
        if self.insert_error is not None:
            raise self.insert_error
        self.confirmations.append(confirmation)


class _FakeMembersRepository:
    def __init__(self, members=()):
        self.members = list(members)

    def fetch_nickname_candidates(self, nickname):
        wanted = nickname.strip().lower()
        return [m for m in self.members if m.nickname.lower() == wanted]


def _game(status: GameStatus = GameStatus.SCHEDULED) -> Game:
    return Game(
        id="g1",
        date=date(2024, 6, 8),
        location="North field",
        status=status,
    )


def _flow(games_repository, members_repository, game_id="g1"):
    return RsvpConfirmationFlow(
        game_id,
        games_repository,
        members_repository,
        logger=MagicMock(),
        usage_logger=MagicMock(),
        clock=lambda: NOW,
    )


def test_flow_starts_loading():
    flow = _flow(_FakeGamesRepository(), _FakeMembersRepository())

    state = flow.current_state()

    assert state.phase is RsvpPhase.LOADING
    assert state.game is None


def test_submit_confirms_once_and_rejects_second_submit():
    games = _FakeGamesRepository([_game()])
    members = _FakeMembersRepository([Member("m1", "José", "Ze")])
    flow = _flow(games, members)

    assert flow.load().phase is RsvpPhase.FORM_READY
    confirmed = flow.submit("Ze")

    assert confirmed.phase is RsvpPhase.CONFIRMED
    assert confirmed.member.id == "m1"
    assert len(games.confirmations) == 1
    record = games.confirmations[0]
    assert record.game_id == "g1"
    assert record.member_id == "m1"
    assert record.status is ConfirmationStatus.CONFIRMED
    assert record.created_at == NOW

    again = flow.submit("Ze")

    assert again.phase is RsvpPhase.ERROR
    assert again.error_kind is ErrorKind.ALREADY_EXISTS
    assert again.message == "already confirmed"
    assert len(games.confirmations) == 1


def test_new_session_for_confirmed_member_reports_already_confirmed():
    games = _FakeGamesRepository([_game()])
    members = _FakeMembersRepository([Member("m1", "José", "Ze")])
    first = _flow(games, members)
    first.load()
    first.submit("Ze")

    second = _flow(games, members)
    second.load()
    state = second.submit("ze")

    assert state.message == "already confirmed"
    assert state.recoverable is True
    assert len(games.confirmations) == 1


def test_game_not_scheduled_is_unavailable_regardless_of_nickname():
    for status in (GameStatus.PLAYED, GameStatus.CANCELLED, GameStatus.OTHER):
        games = _FakeGamesRepository([_game(status)])
        members = _FakeMembersRepository([Member("m1", "José", "Ze")])
        flow = _flow(games, members)

        loaded = flow.load()
        after_submit = flow.submit("Ze")

        assert loaded.phase is RsvpPhase.ERROR
        assert loaded.error_kind is ErrorKind.UNAVAILABLE
        assert loaded.message == "unavailable"
        assert loaded.recoverable is False
        assert loaded.game.status is status
        assert after_submit == loaded
        assert games.confirmations == []


def test_unknown_game_is_not_found():
    flow = _flow(_FakeGamesRepository(), _FakeMembersRepository(), "zzz")

    state = flow.load()

    assert state.phase is RsvpPhase.ERROR
    assert state.error_kind is ErrorKind.NOT_FOUND
    assert state.message == "not found"
    assert state.can_reload is False


def test_blank_game_id_is_not_found_without_storage_access():
    games = MagicMock()
    flow = _flow(games, _FakeMembersRepository(), "  ")

    state = flow.load()

    assert state.message == "not found"
    games.fetch_game.assert_not_called()


def test_nickname_found_with_case_insensitive_fallback():
    games = _FakeGamesRepository([_game()])
    members = _FakeMembersRepository([Member("m9", "José", "Ze")])
    flow = _flow(games, members)
    flow.load()

    state = flow.submit("ze")

    assert state.phase is RsvpPhase.CONFIRMED
    assert state.member.nickname == "Ze"


def test_blank_nickname_keeps_form_ready():
    games = _FakeGamesRepository([_game()])
    flow = _flow(games, _FakeMembersRepository())
    flow.load()

    state = flow.submit("   ")

    assert state.phase is RsvpPhase.FORM_READY
    assert state.error_kind is ErrorKind.VALIDATION
    assert state.message == "nickname required"
    assert state.can_submit is True
    assert games.confirmations == []


def test_unknown_nickname_is_recoverable():
    games = _FakeGamesRepository([_game()])
    members = _FakeMembersRepository([Member("m1", "José", "Ze")])
    flow = _flow(games, members)
    flow.load()

    missing = flow.submit("Zeca")
    retried = flow.submit("Ze")

    assert missing.phase is RsvpPhase.ERROR
    assert missing.error_kind is ErrorKind.NOT_FOUND
    assert missing.message == "member not found"
    assert missing.recoverable is True
    assert retried.phase is RsvpPhase.CONFIRMED


def test_storage_conflict_on_insert_reports_already_confirmed():
    games = _FakeGamesRepository([_game()])
    games.insert_error = AlreadyExistsError("duplicate")
    members = _FakeMembersRepository([Member("m1", "José", "Ze")])
    flow = _flow(games, members)
    flow.load()

    state = flow.submit("Ze")

    assert state.phase is RsvpPhase.ERROR
    assert state.error_kind is ErrorKind.ALREADY_EXISTS
    assert state.message == "already confirmed"


def test_backend_fault_on_submit_is_retryable():
    games = _FakeGamesRepository([_game()])
    games.insert_error = TransientError("connection lost")
    members = _FakeMembersRepository([Member("m1", "José", "Ze")])
    flow = _flow(games, members)
    flow.load()

    failed = flow.submit("Ze")
    games.insert_error = None
    retried = flow.submit("Ze")

    assert failed.phase is RsvpPhase.ERROR
    assert failed.error_kind is ErrorKind.TRANSIENT
    assert failed.message == "try again"
    assert failed.recoverable is True
    assert retried.phase is RsvpPhase.CONFIRMED
    assert len(games.confirmations) == 1


def test_unexpected_exception_never_escapes_submit():
    games = _FakeGamesRepository([_game()])
    members = MagicMock()
    members.fetch_nickname_candidates.side_effect = RuntimeError("boom")
    flow = _flow(games, members)
    flow.load()

    state = flow.submit("Ze")

    assert state.phase is RsvpPhase.ERROR
    assert state.message == "try again"


def test_backend_fault_on_load_allows_reload():
    games = _FakeGamesRepository([_game()])
    games.fetch_error = TransientError("timeout")
    flow = _flow(games, _FakeMembersRepository())

    failed = flow.load()
    games.fetch_error = None
    reloaded = flow.load()

    assert failed.phase is RsvpPhase.ERROR
    assert failed.message == "try again"
    assert failed.can_reload is True
    assert failed.can_submit is False
    assert reloaded.phase is RsvpPhase.FORM_READY


def test_confirmation_is_written_to_usage_log():
    games = _FakeGamesRepository([_game()])
    members = _FakeMembersRepository([Member("m1", "José", "Ze")])
    usage_logger = MagicMock()
    flow = RsvpConfirmationFlow(
        "g1",
        games,
        members,
        logger=MagicMock(),
        usage_logger=usage_logger,
        clock=lambda: NOW,
    )
    flow.load()

    flow.submit("Ze")

    usage_logger.info.assert_called_once()
    assert "member=m1" in usage_logger.info.call_args.args[0]
