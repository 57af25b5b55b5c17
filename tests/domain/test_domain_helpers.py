"""Tests for domain models, validation and normalization helpers."""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from src.domain.errors import ErrorKind, UnavailableError, ValidationError
from src.domain.models.games import Game, GameStatus
from src.domain.models.ledger import AccountGroup, Posting
from src.domain.models.members import AuthorizationContext
from src.domain.policies.authorization import ensure_admin
from src.domain.services.normalization import (
    first_day_of_month,
    normalize_optional_text,
)
from src.domain.services.validation import parse_posting_value, require_text
from src.utils.decimal_utils import (
    coerce_date,
    coerce_decimal,
    parse_decimal_input,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12,50", Decimal("12.50")),
        ("12.50", Decimal("12.50")),
        ("1.234,56", Decimal("1234.56")),
        ("1,234.56", Decimal("1234.56")),
        ("1,5", Decimal("1.5")),
        (" 7 ", Decimal("7")),
    ],
)
def test_parse_decimal_input_accepts_both_separators(raw, expected):
    assert parse_decimal_input(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "NaN", "Infinity", None])
def test_parse_decimal_input_rejects_invalid_text(raw):
    assert parse_decimal_input(raw) is None


def test_coerce_helpers_normalize_driver_values():
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(1.5) == Decimal("1.5")
    assert coerce_decimal("2.25") == Decimal("2.25")
    assert coerce_date("2024-02-03") == date(2024, 2, 3)
    assert coerce_date(datetime(2024, 2, 3, 10, 0)) == date(2024, 2, 3)
    assert coerce_date(None) is None


def test_parse_posting_value_rejects_invalid_and_negative_values():
    assert parse_posting_value("10,00") == Decimal("10.00")
    with pytest.raises(ValidationError, match="Invalid value"):
        parse_posting_value("ten")
    with pytest.raises(ValidationError) as excinfo:
        parse_posting_value("-1")
    assert excinfo.value.kind is ErrorKind.VALIDATION


def test_parse_posting_value_limits_scale_and_magnitude():
    assert parse_posting_value("12.5") == Decimal("12.50")
    assert parse_posting_value("12.500") == Decimal("12.50")
    assert parse_posting_value("9999999999.99") == Decimal("9999999999.99")
    with pytest.raises(ValidationError, match="two decimal places"):
        parse_posting_value("12.345")
    with pytest.raises(ValidationError, match="too large"):
        parse_posting_value("10000000000")
    with pytest.raises(ValidationError, match="too large"):
        parse_posting_value("1e40")


def test_require_text_trims_and_rejects_blank():
    assert require_text("  Field  ", "Location") == "Field"
    with pytest.raises(ValidationError, match="Location is required"):
        require_text("  ", "Location")


def test_normalization_helpers():
    assert normalize_optional_text("  ") is None
    assert normalize_optional_text(None) is None
    assert normalize_optional_text(" Ana ") == "Ana"
    assert first_day_of_month(date(2024, 5, 17)) == date(2024, 5, 1)
    assert first_day_of_month(None) is None


def test_signed_value_follows_account_group():
    day = date(2024, 1, 1)
    revenue = Posting("1", "a", day, Decimal("5"), AccountGroup.REVENUE)
    expense = Posting("2", "a", day, Decimal("5"), AccountGroup.EXPENSE)

    assert revenue.signed_value == Decimal("5")
    assert expense.signed_value == Decimal("-5")


def test_game_status_parsing_and_confirmation_window():
    assert GameStatus.from_raw(" Scheduled ") is GameStatus.SCHEDULED
    assert GameStatus.from_raw("postponed") is GameStatus.OTHER
    assert GameStatus.from_raw(None) is GameStatus.OTHER

    open_game = Game("g1", date(2024, 6, 1), "Field", GameStatus.SCHEDULED)
    played = Game("g2", date(2024, 6, 1), "Field", GameStatus.PLAYED)
    assert open_game.accepts_confirmations is True
    assert played.accepts_confirmations is False


def test_game_kickoff_time_is_optional():
    game = Game("g1", date(2024, 6, 1), "Field", GameStatus.SCHEDULED)
    timed = Game(
        "g2", date(2024, 6, 1), "Field", GameStatus.SCHEDULED, time(19, 30)
    )

    assert game.time is None
    assert timed.time == time(19, 30)


def test_ensure_admin_rejects_members_and_visitors():
    ensure_admin(AuthorizationContext(member_id="1", is_admin=True), "edit")

    with pytest.raises(UnavailableError, match="Admin access required"):
        ensure_admin(AuthorizationContext(member_id="1"), "edit")
    with pytest.raises(UnavailableError):
        ensure_admin(AuthorizationContext.anonymous(), "edit")
    assert AuthorizationContext.anonymous().is_authenticated is False
