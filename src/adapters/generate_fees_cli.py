"""CLI adapter generating the monthly fees of a reference month.

The command runs with administrator rights; it is meant for scheduled jobs
on the server, not for members.
"""

import argparse
from datetime import date

from src.application.use_cases.monthly_fees import GenerateMonthlyFeesUseCase
from src.domain.errors import ClubError
from src.domain.models.members import AuthorizationContext
from src.infrastructure.container import (
    build_database_adapter,
    build_fees_repository,
    build_members_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("month", help="Reference month as YYYY-MM.")
    parser.add_argument("due_date", help="Due date as YYYY-MM-DD.")
    parser.add_argument("value", help="Fee amount, e.g. 50,00.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Generate one fee per active contributing member."""
    args = _parse_args(argv)
    logger = get_app_logger()
    try:
        reference_month = date.fromisoformat(f"{args.month}-01")
        due_date = date.fromisoformat(args.due_date)
    except ValueError as exc:
        raise SystemExit(f"Invalid date: {exc}") from exc

    db_adapter = build_database_adapter()
    use_case = GenerateMonthlyFeesUseCase(
        fees_repository=build_fees_repository(db_adapter),
        members_repository=build_members_repository(db_adapter),
        logger=logger,
    )
    try:
        result = use_case.execute(
            AuthorizationContext(is_admin=True),
            reference_month,
            due_date,
            args.value,
        )
    except ClubError as exc:
        logger.error(f"Fee generation failed: {exc.message}")
        raise SystemExit(exc.message) from exc
    finally:
        db_adapter.dispose()

    print(
        f"Generated {result.inserted_count} fees "
        f"for {result.member_count} contributing members."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
