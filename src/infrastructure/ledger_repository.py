"""SQLAlchemy-backed repository for accounts and postings."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import delete, func, insert, select, update

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    PostingRecord,
)
from src.domain.errors import AlreadyExistsError, ValidationError
from src.domain.models.ledger import Account, AccountGroup, Posting
from src.infrastructure.db import storage_errors
from src.infrastructure.schema import (
    BASE_INITIAL_BALANCE_KEY,
    accounts,
    club_settings,
    monthly_fees,
    transactions,
)
from src.utils.decimal_utils import coerce_date, coerce_decimal


def _to_account(row) -> Account:
    return Account(
        id=row.id,
        description=row.description,
        group=AccountGroup(row.account_group),
    )


def _to_posting(row) -> Posting:
    return Posting(
        id=row.id,
        account_id=row.account_id,
        date=coerce_date(row.date),
        value=coerce_decimal(row.value),
        account_group=AccountGroup(row.account_group),
        description=row.description,
        beneficiary=row.beneficiary,
        reference_month=coerce_date(row.reference_month),
    )


def _posting_values(record: PostingRecord) -> dict:
    return {
        "account_id": record.account_id,
        "date": record.date,
        "value": record.value,
        "description": record.description,
        "beneficiary": record.beneficiary,
        "reference_month": record.reference_month,
    }


def _insert_posting_row(conn, record: PostingRecord) -> Posting:
    posting_id = str(uuid4())
    conn.execute(
        insert(transactions).values(id=posting_id, **_posting_values(record))
    )
    group = conn.execute(
        select(accounts.c.account_group).where(
            accounts.c.id == record.account_id
        )
    ).scalar_one()
    return Posting(
        id=posting_id,
        account_id=record.account_id,
        date=record.date,
        value=record.value,
        account_group=AccountGroup(group),
        description=record.description,
        beneficiary=record.beneficiary,
        reference_month=record.reference_month,
    )

class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for the club ledger."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the club engine.
        """
        self._db_port = db_port

    def fetch_accounts(self) -> list[Account]:
        """Return the chart of accounts ordered by description."""
        query = select(accounts).order_by(accounts.c.description, accounts.c.id)
        engine = self._db_port.get_engine()
        with storage_errors("Loading accounts"):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [_to_account(row) for row in rows]

    def fetch_account(self, account_id: str) -> Account | None:
        query = select(accounts).where(accounts.c.id == account_id)
        engine = self._db_port.get_engine()
        with storage_errors("Loading account"):
            with engine.connect() as conn:
                row = conn.execute(query).first()
        return _to_account(row) if row is not None else None

    def find_account_by_keyword(self, keyword: str) -> Account | None:
        """Return the first account (by description) containing keyword."""
        query = (
            select(accounts)
            .where(accounts.c.description.ilike(f"%{keyword}%"))
            .order_by(accounts.c.description, accounts.c.id)
            .limit(1)
        )
        engine = self._db_port.get_engine()
        with storage_errors("Looking up account"):
            with engine.connect() as conn:
                row = conn.execute(query).first()
        return _to_account(row) if row is not None else None

    def insert_account(self, description: str, group: AccountGroup) -> Account:
        account = Account(id=str(uuid4()), description=description, group=group)
        engine = self._db_port.get_engine()
        with storage_errors("Creating account"):
            with engine.begin() as conn:
                conn.execute(
                    insert(accounts).values(
                        id=account.id,
                        description=account.description,
                        account_group=account.group.value,
                    )
                )
        return account

    def update_account(
        self,
        account_id: str,
        description: str,
        group: AccountGroup,
    ) -> None:
        engine = self._db_port.get_engine()
        with storage_errors("Updating account"):
            with engine.begin() as conn:
                conn.execute(
                    update(accounts)
                    .where(accounts.c.id == account_id)
                    .values(description=description, account_group=group.value)
                )

    def delete_account(self, account_id: str) -> None:
        """Remove an account.

        Raises:
            ValidationError: If postings still reference the account.
        """
        used = (
            select(func.count())
            .select_from(transactions)
            .where(transactions.c.account_id == account_id)
        )
        engine = self._db_port.get_engine()
        with storage_errors("Deleting account"):
            with engine.begin() as conn:
                if conn.execute(used).scalar_one():
                    raise ValidationError(
                        "Account has postings and cannot be deleted"
                    )
                conn.execute(delete(accounts).where(accounts.c.id == account_id))

    def fetch_postings(self) -> list[Posting]:
        """Return every posting joined with its account group."""
        query = (
            select(transactions, accounts.c.account_group)
            .join(accounts, accounts.c.id == transactions.c.account_id)
            .order_by(transactions.c.date, transactions.c.id)
        )
        engine = self._db_port.get_engine()
        with storage_errors("Loading postings"):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [_to_posting(row) for row in rows]

    def fetch_posting(self, posting_id: str) -> Posting | None:
        query = (
            select(transactions, accounts.c.account_group)
            .join(accounts, accounts.c.id == transactions.c.account_id)
            .where(transactions.c.id == posting_id)
        )
        engine = self._db_port.get_engine()
        with storage_errors("Loading posting"):
            with engine.connect() as conn:
                row = conn.execute(query).first()
        return _to_posting(row) if row is not None else None

    def insert_posting(self, record: PostingRecord) -> Posting:
        engine = self._db_port.get_engine()
        with storage_errors("Recording posting"):
            with engine.begin() as conn:
                return _insert_posting_row(conn, record)

    def insert_fee_payment(
        self,
        fee_id: str,
        payment_date: date,
        record: PostingRecord,
    ) -> Posting:
        """Insert the payment posting of a fee and link it in one transaction.

        The link only applies while the fee is unpaid. Otherwise the
        transaction rolls back and no posting is left behind.

        Raises:
            AlreadyExistsError: If the fee is missing or already paid.
        """
        engine = self._db_port.get_engine()
        with storage_errors("Recording fee payment"):
            with engine.begin() as conn:
                posting = _insert_posting_row(conn, record)
                linked = conn.execute(
                    update(monthly_fees)
                    .where(monthly_fees.c.id == fee_id)
                    .where(monthly_fees.c.transaction_id.is_(None))
                    .values(
                        payment_date=payment_date,
                        transaction_id=posting.id,
                    )
                ).rowcount
                if linked != 1:
                    raise AlreadyExistsError(
                        f"Monthly fee {fee_id} is already paid"
                    )
        return posting

    def update_posting(self, posting_id: str, record: PostingRecord) -> None:
        engine = self._db_port.get_engine()
        with storage_errors("Updating posting"):
            with engine.begin() as conn:
                conn.execute(
                    update(transactions)
                    .where(transactions.c.id == posting_id)
                    .values(**_posting_values(record))
                )

    def delete_posting(self, posting_id: str) -> None:
        """Unlink any fee paid by the posting, then delete it.

        Both statements run in one transaction: if the fee cannot be
        released, the posting is kept.
        """
        engine = self._db_port.get_engine()
        with storage_errors("Deleting posting"):
            with engine.begin() as conn:
                conn.execute(
                    update(monthly_fees)
                    .where(monthly_fees.c.transaction_id == posting_id)
                    .values(payment_date=None, transaction_id=None)
                )
                conn.execute(
                    delete(transactions).where(transactions.c.id == posting_id)
                )

    def fetch_base_initial_balance(self) -> Decimal:
        """Return the configured balance before the first posting, or 0."""
        query = select(club_settings.c.value).where(
            club_settings.c.key == BASE_INITIAL_BALANCE_KEY
        )
        engine = self._db_port.get_engine()
        with storage_errors("Loading base balance"):
            with engine.connect() as conn:
                value = conn.execute(query).scalar_one_or_none()
        return coerce_decimal(value)


__all__ = ["SqlAlchemyLedgerRepository"]
