"""Tests for the schema and fee generation command line adapters."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, inspect, select

from src.adapters import generate_fees_cli, init_schema_cli
from src.domain.models.members import Member
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import BASE_INITIAL_BALANCE_KEY, club_settings


@pytest.fixture()
def sqlite_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'club.db'}"
    monkeypatch.setattr(
        init_schema_cli,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: SqlAlchemyDatabaseEngineAdapter(engine=create_engine(url)),
    )
    monkeypatch.setattr(init_schema_cli, "get_app_logger", MagicMock)
    return url


def _stored_balance(url):
    engine = create_engine(url)
    try:
        with engine.connect() as conn:
            return conn.execute(
                select(club_settings.c.value).where(
                    club_settings.c.key == BASE_INITIAL_BALANCE_KEY
                )
            ).scalar_one_or_none()
    finally:
        engine.dispose()


def test_init_schema_creates_tables(sqlite_url, capsys):
    init_schema_cli.main([])

    engine = create_engine(sqlite_url)
    tables = set(inspect(engine).get_table_names())
    engine.dispose()
    assert {
        "accounts",
        "transactions",
        "members",
        "monthly_fees",
        "games",
        "game_participants",
        "club_settings",
    } <= tables
    assert _stored_balance(sqlite_url) is None
    assert "Club schema is up to date." in capsys.readouterr().out


def test_init_schema_stores_and_updates_base_balance(sqlite_url):
    init_schema_cli.main(["--base-balance", "1.500,25"])
    assert _stored_balance(sqlite_url) == "1500.25"

    init_schema_cli.main(["--base-balance", "20"])
    assert _stored_balance(sqlite_url) == "20"


def test_init_schema_rejects_invalid_balance(sqlite_url):
    with pytest.raises(SystemExit):
        init_schema_cli.main(["--base-balance", "lots"])


class _FakeFees:
    def __init__(self) -> None:
        self.records = []

    def insert_fees(self, records):
        self.records.extend(records)
        return len(records)


class _FakeMembers:
    def __init__(self, members) -> None:
        self._members = members

    def fetch_contributing_members(self):
        return list(self._members)


def _patch_generate(monkeypatch, members):
    adapter = MagicMock()
    fees = _FakeFees()
    monkeypatch.setattr(
        generate_fees_cli,
        "build_database_adapter",
        lambda: adapter,
    )
    monkeypatch.setattr(
        generate_fees_cli,
        "build_fees_repository",
        lambda db_port: fees,
    )
    monkeypatch.setattr(
        generate_fees_cli,
        "build_members_repository",
        lambda db_port: _FakeMembers(members),
    )
    monkeypatch.setattr(generate_fees_cli, "get_app_logger", MagicMock)
    return adapter, fees


def test_generate_fees_creates_one_fee_per_member(monkeypatch, capsys):
    adapter, fees = _patch_generate(
        monkeypatch,
        [Member("m2", "José", "Ze"), Member("m1", "Maria", "Boss")],
    )

    generate_fees_cli.main(["2024-05", "2024-05-10", "50,00"])

    assert [record.member_id for record in fees.records] == ["m1", "m2"]
    assert fees.records[0].reference_month == date(2024, 5, 1)
    assert fees.records[0].due_date == date(2024, 5, 10)
    assert fees.records[0].value == Decimal("50.00")
    adapter.dispose.assert_called_once()
    assert "Generated 2 fees for 2 contributing members." in (
        capsys.readouterr().out
    )


def test_generate_fees_exits_when_no_member_contributes(monkeypatch):
    adapter, fees = _patch_generate(monkeypatch, [])

    with pytest.raises(SystemExit):
        generate_fees_cli.main(["2024-05", "2024-05-10", "50"])

    assert fees.records == []
    adapter.dispose.assert_called_once()


def test_generate_fees_rejects_malformed_month(monkeypatch):
    adapter, _ = _patch_generate(monkeypatch, [])

    with pytest.raises(SystemExit):
        generate_fees_cli.main(["May", "2024-05-10", "50"])

    adapter.dispose.assert_not_called()
