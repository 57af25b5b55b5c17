"""SQLAlchemy-backed repository for monthly fees."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import delete, insert, select, update

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.fees_repository import (
    FeeRecord,
    MonthlyFeesRepositoryPort,
)
from src.domain.models.fees import MonthlyFee
from src.infrastructure.db import storage_errors
from src.infrastructure.schema import members, monthly_fees
from src.utils.decimal_utils import coerce_date, coerce_decimal


def _fees_query():
    return select(monthly_fees, members.c.nickname).outerjoin(
        members,
        members.c.id == monthly_fees.c.member_id,
    )


def _to_fee(row) -> MonthlyFee:
    return MonthlyFee(
        id=row.id,
        member_id=row.member_id,
        reference_month=coerce_date(row.reference_month),
        due_date=coerce_date(row.due_date),
        value=coerce_decimal(row.value),
        payment_date=coerce_date(row.payment_date),
        posting_id=row.transaction_id,
        member_nickname=row.nickname,
    )


class SqlAlchemyMonthlyFeesRepository(MonthlyFeesRepositoryPort):
    """Repository backed by SQLAlchemy for monthly fees."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_fees(self) -> list[MonthlyFee]:
        """Return fees, newest reference month first."""
        query = _fees_query().order_by(
            monthly_fees.c.reference_month.desc(),
            members.c.nickname,
        )
        engine = self._db_port.get_engine()
        with storage_errors("Loading monthly fees"):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [_to_fee(row) for row in rows]

    def fetch_fee(self, fee_id: str) -> MonthlyFee | None:
        query = _fees_query().where(monthly_fees.c.id == fee_id)
        engine = self._db_port.get_engine()
        with storage_errors("Loading monthly fee"):
            with engine.connect() as conn:
                row = conn.execute(query).first()
        return _to_fee(row) if row is not None else None

    def insert_fees(self, records: list[FeeRecord]) -> int:
        """Create fees in a single transaction.

        Args:
            records: Fees to write.

        Returns:
            int: Number of fees written.
        """
        if not records:
            return 0
        rows = [
            {
                "id": str(uuid4()),
                "member_id": record.member_id,
                "reference_month": record.reference_month,
                "due_date": record.due_date,
                "value": record.value,
            }
            for record in records
        ]
        engine = self._db_port.get_engine()
        with storage_errors("Generating monthly fees"):
            with engine.begin() as conn:
                conn.execute(insert(monthly_fees), rows)
        return len(rows)

    def update_fee(self, fee_id: str, due_date: date, value: Decimal) -> None:
        engine = self._db_port.get_engine()
        with storage_errors("Updating monthly fee"):
            with engine.begin() as conn:
                conn.execute(
                    update(monthly_fees)
                    .where(monthly_fees.c.id == fee_id)
                    .values(due_date=due_date, value=value)
                )

    def delete_fee(self, fee_id: str) -> None:
        engine = self._db_port.get_engine()
        with storage_errors("Deleting monthly fee"):
            with engine.begin() as conn:
                conn.execute(
                    delete(monthly_fees).where(monthly_fees.c.id == fee_id)
                )


__all__ = ["SqlAlchemyMonthlyFeesRepository"]
