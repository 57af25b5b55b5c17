"""Port for monthly fee storage."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.fees import MonthlyFee


@dataclass(frozen=True)
class FeeRecord:
    """Fee fields ready to be written."""

    member_id: str
    reference_month: date
    due_date: date
    value: Decimal


class MonthlyFeesRepositoryPort(Protocol):
    """Port exposing read and write access to monthly fees."""

    def fetch_fees(self) -> list[MonthlyFee]:
        """Return fees, newest reference month first."""

    def fetch_fee(self, fee_id: str) -> MonthlyFee | None:
        """Return one fee, or None when absent."""

    def insert_fees(self, records: list[FeeRecord]) -> int:
        """Create fees and return how many were written."""

    def update_fee(self, fee_id: str, due_date: date, value: Decimal) -> None:
        """Change the due date and value of a fee."""

    def delete_fee(self, fee_id: str) -> None:
        """Remove a fee."""


__all__ = ["MonthlyFeesRepositoryPort", "FeeRecord"]
