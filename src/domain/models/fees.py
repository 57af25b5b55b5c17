"""Domain models for monthly membership fees."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyFee:
    """Fee owed by a member for a reference month.

    A paid fee carries both ``payment_date`` and ``posting_id``; the posting
    is the revenue record created when the payment was confirmed.
    """

    id: str
    member_id: str
    reference_month: date
    due_date: date
    value: Decimal
    payment_date: date | None = None
    posting_id: str | None = None
    member_nickname: str | None = None

    @property
    def is_paid(self) -> bool:
        return self.payment_date is not None


__all__ = ["MonthlyFee"]
