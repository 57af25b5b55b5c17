"""Use case to compute per-account totals for the financial dashboard."""

import calendar
from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import ValidationError
from src.domain.models.ledger import AccountBreakdown
from src.domain.services.ledger import compute_account_breakdown
from src.infrastructure.logging.logger import get_app_logger


def period_bounds(year: int, month: int | None = None) -> tuple[date, date]:
    """Return the first and last day of a year or of one of its months.

    Args:
        year: Calendar year.
        month: Month number, or None for the whole year.

    Returns:
        tuple[date, date]: Inclusive period bounds.
    """
    if month is None:
        return date(year, 1, 1), date(year, 12, 31)
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month {month}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


class GetAccountBreakdownUseCase:
    """Aggregate revenue and expense per account for a period."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def available_years(self) -> list[int]:
        """Return years having postings, most recent first."""
        postings = self._ledger_repository.fetch_postings()
        return sorted({posting.date.year for posting in postings}, reverse=True)

    def execute(self, year: int, month: int | None = None) -> AccountBreakdown:
        """Return the breakdown of a full year or of a single month."""
        start_date, end_date = period_bounds(year, month)
        postings = self._ledger_repository.fetch_postings()
        accounts = self._ledger_repository.fetch_accounts()
        breakdown = compute_account_breakdown(
            postings,
            accounts,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Breakdown {start_date}..{end_date}: "
            f"revenue={breakdown.total_revenue}, "
            f"expense={breakdown.total_expense}"
        )
        return breakdown


__all__ = ["GetAccountBreakdownUseCase", "period_bounds"]
