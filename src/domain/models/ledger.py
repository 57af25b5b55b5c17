"""Domain models for the club ledger."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class AccountGroup(str, Enum):
    """Ledger side of an account; fixes the sign of its postings."""

    REVENUE = "revenue"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Account:
    """Entry of the chart of accounts."""

    id: str
    description: str
    group: AccountGroup


@dataclass(frozen=True)
class Posting:
    """Dated ledger record. ``value`` is never negative.

    Attributes:
        id: Posting identifier.
        account_id: Account the posting belongs to.
        date: Calendar date of the posting.
        value: Non-negative amount in currency units.
        account_group: Group of the account, gives the sign.
        description: Optional free text.
        beneficiary: Optional payer or payee name.
        reference_month: Optional first day of the month the posting refers to.
    """

    id: str
    account_id: str
    date: date
    value: Decimal
    account_group: AccountGroup
    description: str | None = None
    beneficiary: str | None = None
    reference_month: date | None = None

    @property
    def signed_value(self) -> Decimal:
        """Return the value with the sign implied by the account group."""
        if self.account_group is AccountGroup.REVENUE:
            return self.value
        return -self.value


@dataclass(frozen=True)
class PostingDraft:
    """Raw form input for creating or editing a posting."""

    account_id: str
    date: date | None
    value: str
    description: str = ""
    beneficiary: str = ""
    reference_month: date | None = None


@dataclass(frozen=True)
class LedgerFilter:
    """Reporting window and optional filters for the transactions view."""

    start_date: date | None
    end_date: date | None = None
    account_id: str | None = None
    group: AccountGroup | None = None
    beneficiary: str | None = None


@dataclass(frozen=True)
class LedgerSummary:
    """Balances for a reporting window.

    Attributes:
        opening_balance: Balance right before ``start_date``.
        total_revenue: Revenue inside the window.
        total_expense: Expense inside the window.
        closing_balance: opening + revenue - expense.
    """

    opening_balance: Decimal
    total_revenue: Decimal
    total_expense: Decimal
    closing_balance: Decimal


@dataclass(frozen=True)
class LedgerView:
    """Summary plus the postings listed in the transactions table."""

    summary: LedgerSummary | None
    postings: list[Posting]
    beneficiaries: list[str]


@dataclass(frozen=True)
class AccountTotal:
    """Amount aggregated for one account over a period."""

    account_id: str
    description: str
    group: AccountGroup
    total: Decimal


@dataclass(frozen=True)
class AccountBreakdown:
    """Per-account revenue and expense totals for a period."""

    start_date: date
    end_date: date
    revenue_accounts: list[AccountTotal]
    expense_accounts: list[AccountTotal]

    @property
    def total_revenue(self) -> Decimal:
        return sum((item.total for item in self.revenue_accounts), Decimal("0"))

    @property
    def total_expense(self) -> Decimal:
        return sum((item.total for item in self.expense_accounts), Decimal("0"))

    @property
    def result(self) -> Decimal:
        """Return revenue minus expense."""
        return self.total_revenue - self.total_expense


__all__ = [
    "AccountGroup",
    "Account",
    "Posting",
    "PostingDraft",
    "LedgerFilter",
    "LedgerSummary",
    "LedgerView",
    "AccountTotal",
    "AccountBreakdown",
]
