"""Port for chart of accounts and postings storage."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.ledger import Account, AccountGroup, Posting


@dataclass(frozen=True)
class PostingRecord:
    """Validated posting fields ready to be written."""

    account_id: str
    date: date
    value: Decimal
    description: str | None = None
    beneficiary: str | None = None
    reference_month: date | None = None


class LedgerRepositoryPort(Protocol):
    """Port exposing read and write access to the ledger."""

    def fetch_accounts(self) -> list[Account]:
        """Return the chart of accounts ordered by description."""

    def fetch_account(self, account_id: str) -> Account | None:
        """Return one account, or None when absent."""

    def find_account_by_keyword(self, keyword: str) -> Account | None:
        """Return the first account whose description contains keyword."""

    def insert_account(self, description: str, group: AccountGroup) -> Account:
        """Create an account."""

    def update_account(
        self,
        account_id: str,
        description: str,
        group: AccountGroup,
    ) -> None:
        """Rename or regroup an account."""

    def delete_account(self, account_id: str) -> None:
        """Remove an account without postings."""

    def fetch_postings(self) -> list[Posting]:
        """Return every posting joined with its account group."""

    def fetch_posting(self, posting_id: str) -> Posting | None:
        """Return one posting, or None when absent."""

    def insert_posting(self, record: PostingRecord) -> Posting:
        """Create a posting."""

    def insert_fee_payment(
        self,
        fee_id: str,
        payment_date: date,
        record: PostingRecord,
    ) -> Posting:
        """Create the payment posting of an unpaid fee and link the fee.

        Both writes succeed or neither does.
        """

    def update_posting(self, posting_id: str, record: PostingRecord) -> None:
        """Replace the fields of a posting."""

    def delete_posting(self, posting_id: str) -> None:
        """Unlink any monthly fee paid by the posting, then delete it."""

    def fetch_base_initial_balance(self) -> Decimal:
        """Return the balance before the earliest posting."""


__all__ = ["LedgerRepositoryPort", "PostingRecord"]
