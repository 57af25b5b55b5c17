"""Use case to compute the transactions view for a reporting window."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import LedgerFilter, LedgerView
from src.domain.services.ledger import (
    compute_summary,
    list_beneficiaries,
    select_window,
)
from src.infrastructure.logging.logger import get_app_logger


class GetLedgerSummaryUseCase:
    """Load postings and compute the balances of a filtered window."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing postings and the base balance.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        ledger_filter: LedgerFilter,
        *,
        descending: bool = True,
    ) -> LedgerView:
        """Return the summary and the listed postings.

        Args:
            ledger_filter: Window and optional filters chosen in the UI.
            descending: Sort order of the listed postings.

        Returns:
            LedgerView: Summary (None until a start date is chosen), the
            postings inside the window and the beneficiary choices.
        """
        postings = self._ledger_repository.fetch_postings()
        base_balance = self._ledger_repository.fetch_base_initial_balance()
        self._logger.info(f"Fetched {len(postings)} postings")

        summary = compute_summary(postings, base_balance, ledger_filter)
        listed = select_window(postings, ledger_filter, descending=descending)
        if summary is not None:
            self._logger.info(
                f"Ledger summary computed: opening={summary.opening_balance}, "
                f"revenue={summary.total_revenue}, "
                f"expense={summary.total_expense}, "
                f"closing={summary.closing_balance}"
            )
        return LedgerView(
            summary=summary,
            postings=listed,
            beneficiaries=list_beneficiaries(postings),
        )


__all__ = ["GetLedgerSummaryUseCase", "LedgerView"]
