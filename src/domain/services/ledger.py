"""Domain services for ledger balances and breakdowns."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models.ledger import (
    Account,
    AccountBreakdown,
    AccountGroup,
    AccountTotal,
    LedgerFilter,
    LedgerSummary,
    Posting,
)


def compute_opening_balance(
    postings: Iterable[Posting],
    base_initial_balance: Decimal,
    start_date: date,
) -> Decimal:
    """Fold every posting dated strictly before ``start_date``.

    Args:
        postings: All recorded postings, unfiltered.
        base_initial_balance: Balance before the earliest posting.
        start_date: First day of the reporting window.

    Returns:
        Decimal: Balance at the start of ``start_date``.
    """
    balance = base_initial_balance
    for posting in postings:
        if posting.date < start_date:
            balance += posting.signed_value
    return balance


def matches_filter(posting: Posting, ledger_filter: LedgerFilter) -> bool:
    """Return True when the posting belongs to the filtered window.

    Args:
        posting: Posting to test.
        ledger_filter: Window and optional account, group, beneficiary.

    Returns:
        bool: Whether the posting is kept.
    """
    if ledger_filter.start_date and posting.date < ledger_filter.start_date:
        return False
    if ledger_filter.end_date and posting.date > ledger_filter.end_date:
        return False
    if ledger_filter.account_id and posting.account_id != ledger_filter.account_id:
        return False
    if ledger_filter.group and posting.account_group is not ledger_filter.group:
        return False
    if ledger_filter.beneficiary:
        if not posting.beneficiary:
            return False
        if posting.beneficiary != ledger_filter.beneficiary:
            return False
    return True


def select_window(
    postings: Iterable[Posting],
    ledger_filter: LedgerFilter,
    *,
    descending: bool = True,
) -> list[Posting]:
    """Return the postings kept by the filter, sorted by date.

    Args:
        postings: All recorded postings.
        ledger_filter: Window and optional filters.
        descending: Newest first when True.

    Returns:
        list[Posting]: Kept postings; empty when no start date is set.
    """
    if ledger_filter.start_date is None:
        return []
    kept = [p for p in postings if matches_filter(p, ledger_filter)]
    return sorted(
        kept,
        key=lambda posting: (posting.date, posting.id),
        reverse=descending,
    )


def compute_summary(
    postings: Iterable[Posting],
    base_initial_balance: Decimal,
    ledger_filter: LedgerFilter,
) -> LedgerSummary | None:
    """Compute opening, revenue, expense and closing for a window.

    The opening balance moves with ``start_date``: postings before the
    window are folded into it, regardless of the account, group and
    beneficiary filters.

    Args:
        postings: All recorded postings.
        base_initial_balance: Balance before the earliest posting.
        ledger_filter: Window and optional filters.

    Returns:
        LedgerSummary | None: None when no start date is selected yet.
    """
    if ledger_filter.start_date is None:
        return None
    all_postings = list(postings)
    opening = compute_opening_balance(
        all_postings,
        base_initial_balance,
        ledger_filter.start_date,
    )
    total_revenue = Decimal("0")
    total_expense = Decimal("0")
    for posting in all_postings:
        if not matches_filter(posting, ledger_filter):
            continue
        if posting.account_group is AccountGroup.REVENUE:
            total_revenue += posting.value
        else:
            total_expense += posting.value
    return LedgerSummary(
        opening_balance=opening,
        total_revenue=total_revenue,
        total_expense=total_expense,
        closing_balance=opening + total_revenue - total_expense,
    )


def list_beneficiaries(postings: Iterable[Posting]) -> list[str]:
    """Return distinct non-empty beneficiaries, sorted."""
    return sorted({p.beneficiary for p in postings if p.beneficiary})


def compute_account_breakdown(
    postings: Iterable[Posting],
    accounts: Iterable[Account],
    start_date: date,
    end_date: date,
) -> AccountBreakdown:
    """Aggregate postings per account inside ``[start_date, end_date]``.

    Args:
        postings: All recorded postings.
        accounts: Chart of accounts, used for descriptions.
        start_date: First day of the period.
        end_date: Last day of the period.

    Returns:
        AccountBreakdown: Revenue and expense totals, largest first.
    """
    descriptions = {account.id: account.description for account in accounts}
    totals: dict[str, Decimal] = {}
    groups: dict[str, AccountGroup] = {}
    for posting in postings:
        if posting.date < start_date or posting.date > end_date:
            continue
        totals[posting.account_id] = (
            totals.get(posting.account_id, Decimal("0")) + posting.value
        )
        groups[posting.account_id] = posting.account_group

    items = [
        AccountTotal(
            account_id=account_id,
            description=descriptions.get(account_id, account_id),
            group=groups[account_id],
            total=total,
        )
        for account_id, total in totals.items()
    ]
    items.sort(key=lambda item: (-item.total, item.description))
    return AccountBreakdown(
        start_date=start_date,
        end_date=end_date,
        revenue_accounts=[i for i in items if i.group is AccountGroup.REVENUE],
        expense_accounts=[i for i in items if i.group is AccountGroup.EXPENSE],
    )


__all__ = [
    "compute_opening_balance",
    "matches_filter",
    "select_window",
    "compute_summary",
    "list_beneficiaries",
    "compute_account_breakdown",
]
