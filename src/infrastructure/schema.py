"""Relational schema of the club database.

Tables are declared with SQLAlchemy Core so the same definitions create the
PostgreSQL schema and the SQLite databases used in tests, and so Decimal and
date values are bound with the right column types on both backends.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    MetaData,
    Numeric,
    String,
    Table,
    Time,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine


BASE_INITIAL_BALANCE_KEY = "initial_balance"

metadata = MetaData()

accounts = Table(
    "accounts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("description", String(200), nullable=False),
    Column("account_group", String(20), nullable=False),
)

transactions = Table(
    "transactions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("account_id", String(36), ForeignKey("accounts.id"), nullable=False),
    Column("date", Date, nullable=False),
    Column("value", Numeric(12, 2, asdecimal=True), nullable=False),
    Column("description", String(500)),
    Column("beneficiary", String(200)),
    Column("reference_month", Date),
)

members = Table(
    "members",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("nickname", String(100), nullable=False),
    Column("status", String(20), nullable=False, default="active"),
    Column("category", String(20), nullable=False, default="contributor"),
    Column("is_admin", Boolean, nullable=False, default=False),
    Column("user_email", String(320), unique=True),
    Column("photo_url", String(1000)),
)

monthly_fees = Table(
    "monthly_fees",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("member_id", String(36), ForeignKey("members.id"), nullable=False),
    Column("reference_month", Date, nullable=False),
    Column("due_date", Date, nullable=False),
    Column("value", Numeric(12, 2, asdecimal=True), nullable=False),
    Column("payment_date", Date),
    Column("transaction_id", String(36), ForeignKey("transactions.id")),
)

games = Table(
    "games",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("date", Date, nullable=False),
    Column("time", Time),
    Column("location", String(300), nullable=False),
    Column("status", String(20), nullable=False, default="scheduled"),
)

game_participants = Table(
    "game_participants",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("game_id", String(36), ForeignKey("games.id"), nullable=False),
    Column("member_id", String(36), ForeignKey("members.id"), nullable=False),
    Column("status", String(20), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint(
        "game_id",
        "member_id",
        name="uq_game_participants_game_member",
    ),
)

club_settings = Table(
    "club_settings",
    metadata,
    Column("key", String(100), primary_key=True),
    Column("value", String(200), nullable=False),
)


def create_schema(engine: Engine) -> None:
    """Create missing tables; existing tables are left untouched."""
    metadata.create_all(engine)


__all__ = [
    "BASE_INITIAL_BALANCE_KEY",
    "metadata",
    "accounts",
    "transactions",
    "members",
    "monthly_fees",
    "games",
    "game_participants",
    "club_settings",
    "create_schema",
]
