"""CLI adapter creating the club tables and the base balance setting."""

import argparse
from decimal import Decimal

from sqlalchemy import insert, select, update

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import (
    BASE_INITIAL_BALANCE_KEY,
    club_settings,
    create_schema,
)
from src.utils.decimal_utils import parse_decimal_input


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--base-balance",
        help="Balance before the first posting (e.g. 1500,00).",
    )
    return parser.parse_args(argv)


def _store_base_balance(engine, value: Decimal) -> None:
    with engine.begin() as conn:
        exists = conn.execute(
            select(club_settings.c.key).where(
                club_settings.c.key == BASE_INITIAL_BALANCE_KEY
            )
        ).first()
        if exists is None:
            conn.execute(
                insert(club_settings).values(
                    key=BASE_INITIAL_BALANCE_KEY,
                    value=str(value),
                )
            )
        else:
            conn.execute(
                update(club_settings)
                .where(club_settings.c.key == BASE_INITIAL_BALANCE_KEY)
                .values(value=str(value))
            )


def main(argv: list[str] | None = None) -> None:
    """Create missing tables and optionally set the base balance."""
    args = _parse_args(argv)
    logger = get_app_logger()
    adapter = SqlAlchemyDatabaseEngineAdapter()
    engine = adapter.get_engine()
    try:
        create_schema(engine)
        logger.info("Club schema is up to date.")
        if args.base_balance is not None:
            value = parse_decimal_input(args.base_balance)
            if value is None:
                raise SystemExit(f"Invalid base balance: {args.base_balance}")
            _store_base_balance(engine, value)
            logger.info(f"Base initial balance set to {value}")
    finally:
        adapter.dispose()

    print("Club schema is up to date.")


if __name__ == "__main__":  # pragma: no cover
    main()
