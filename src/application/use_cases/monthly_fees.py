"""Use cases for monthly membership fees."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.fees_repository import (
    FeeRecord,
    MonthlyFeesRepositoryPort,
)
from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    PostingRecord,
)
from src.application.ports.members_repository import MembersRepositoryPort
from src.domain.constants import DEFAULT_FEE_ACCOUNT_KEYWORD
from src.domain.errors import (
    AlreadyExistsError,
    NotFoundError,
    ValidationError,
)
from src.domain.models.fees import MonthlyFee
from src.domain.models.members import AuthorizationContext
from src.domain.policies.authorization import ensure_admin
from src.domain.services.normalization import first_day_of_month
from src.domain.services.validation import parse_posting_value
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class GenerateFeesResult:
    """Result of a fee generation run.

    Attributes:
        member_count: Active contributing members found.
        inserted_count: Fees written to storage.
    """

    member_count: int
    inserted_count: int


def _require_fee(
    fees_repository: MonthlyFeesRepositoryPort,
    fee_id: str,
) -> MonthlyFee:
    fee = fees_repository.fetch_fee(fee_id)
    if fee is None:
        raise NotFoundError(f"Monthly fee {fee_id} not found")
    return fee


class ListMonthlyFeesUseCase:
    """Return fees, newest reference month first."""

    def __init__(self, fees_repository: MonthlyFeesRepositoryPort) -> None:
        self._fees_repository = fees_repository

    def execute(self) -> list[MonthlyFee]:
        fees = self._fees_repository.fetch_fees()
        return sorted(
            fees,
            key=lambda fee: (fee.reference_month, fee.member_nickname or ""),
            reverse=True,
        )


class GenerateMonthlyFeesUseCase:
    """Create one fee per active contributing member."""

    def __init__(
        self,
        fees_repository: MonthlyFeesRepositoryPort,
        members_repository: MembersRepositoryPort,
        logger=None,
    ) -> None:
        self._fees_repository = fees_repository
        self._members_repository = members_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        context: AuthorizationContext,
        reference_month: date | None,
        due_date: date | None,
        value: str,
    ) -> GenerateFeesResult:
        """Generate the fees of a month.

        Args:
            context: Authorization context of the session.
            reference_month: Any day of the month the fees refer to.
            due_date: Payment deadline.
            value: Amount typed by the user.

        Returns:
            GenerateFeesResult: How many members and fees were processed.

        Raises:
            ValidationError: If a field is missing or no member contributes.
        """
        ensure_admin(context, "generate monthly fees")
        if reference_month is None or due_date is None:
            raise ValidationError("Reference month and due date are required")
        amount = parse_posting_value(value)

        members = self._members_repository.fetch_contributing_members()
        if not members:
            raise ValidationError("No active contributing member found")

        month = first_day_of_month(reference_month)
        records = [
            FeeRecord(
                member_id=member.id,
                reference_month=month,
                due_date=due_date,
                value=amount,
            )
            for member in sorted(members, key=lambda member: member.id)
        ]
        inserted = self._fees_repository.insert_fees(records)
        self._logger.info(
            f"Generated {inserted} monthly fees for {month:%m/%Y}"
        )
        return GenerateFeesResult(
            member_count=len(members),
            inserted_count=inserted,
        )


class ConfirmFeePaymentUseCase:
    """Record the revenue posting of a fee payment and link it to the fee.

    The ledger repository writes the posting and the link in one
    transaction, so a failed link never leaves an orphan posting.
    """

    def __init__(
        self,
        fees_repository: MonthlyFeesRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        fee_account_keyword: str = DEFAULT_FEE_ACCOUNT_KEYWORD,
    ) -> None:
        self._fees_repository = fees_repository
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._fee_account_keyword = fee_account_keyword

    def execute(
        self,
        context: AuthorizationContext,
        fee_id: str,
        payment_date: date,
    ) -> str:
        """Confirm the payment of a fee.

        Args:
            context: Authorization context of the session.
            fee_id: Fee being paid.
            payment_date: Date the payment was received.

        Returns:
            str: Id of the created posting.

        Raises:
            NotFoundError: If the fee or the fee account is missing.
            AlreadyExistsError: If the fee is already paid.
        """
        ensure_admin(context, "confirm fee payments")
        fee = _require_fee(self._fees_repository, fee_id)
        if fee.is_paid:
            raise AlreadyExistsError(f"Monthly fee {fee_id} is already paid")

        account = self._ledger_repository.find_account_by_keyword(
            self._fee_account_keyword
        )
        if account is None:
            raise NotFoundError(
                "No fee account found; create an account whose description "
                f"contains '{self._fee_account_keyword}'"
            )

        posting = self._ledger_repository.insert_fee_payment(
            fee.id,
            payment_date,
            PostingRecord(
                account_id=account.id,
                date=payment_date,
                value=fee.value,
                description=f"Monthly fee {fee.reference_month:%m/%Y}",
                beneficiary=fee.member_nickname,
                reference_month=fee.reference_month,
            ),
        )

        self._logger.info(f"Fee {fee.id} paid by posting {posting.id}")
        return posting.id


class UpdateMonthlyFeeUseCase:
    """Edit a fee and keep its payment posting in sync."""

    def __init__(
        self,
        fees_repository: MonthlyFeesRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._fees_repository = fees_repository
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        context: AuthorizationContext,
        fee_id: str,
        due_date: date | None,
        value: str,
    ) -> None:
        ensure_admin(context, "update monthly fees")
        if due_date is None:
            raise ValidationError("Due date is required")
        amount = parse_posting_value(value)
        fee = _require_fee(self._fees_repository, fee_id)

        self._fees_repository.update_fee(fee.id, due_date, amount)
        if fee.posting_id:
            posting = self._ledger_repository.fetch_posting(fee.posting_id)
            if posting is not None:
                self._ledger_repository.update_posting(
                    posting.id,
                    PostingRecord(
                        account_id=posting.account_id,
                        date=posting.date,
                        value=amount,
                        description=posting.description,
                        beneficiary=posting.beneficiary,
                        reference_month=posting.reference_month,
                    ),
                )
        self._logger.info(f"Fee {fee.id} updated to {amount}")


class DeleteMonthlyFeeUseCase:
    """Remove a fee. Its payment posting, if any, stays in the ledger."""

    def __init__(
        self,
        fees_repository: MonthlyFeesRepositoryPort,
        logger=None,
    ) -> None:
        self._fees_repository = fees_repository
        self._logger = logger or get_app_logger()

    def execute(self, context: AuthorizationContext, fee_id: str) -> None:
        ensure_admin(context, "delete monthly fees")
        _require_fee(self._fees_repository, fee_id)
        self._fees_repository.delete_fee(fee_id)
        self._logger.info(f"Fee {fee_id} deleted")


__all__ = [
    "GenerateFeesResult",
    "ListMonthlyFeesUseCase",
    "GenerateMonthlyFeesUseCase",
    "ConfirmFeePaymentUseCase",
    "UpdateMonthlyFeeUseCase",
    "DeleteMonthlyFeeUseCase",
]
