"""Use cases to record, edit and delete postings."""

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    PostingRecord,
)
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models.ledger import Posting, PostingDraft
from src.domain.models.members import AuthorizationContext
from src.domain.policies.authorization import ensure_admin
from src.domain.services.normalization import (
    first_day_of_month,
    normalize_optional_text,
)
from src.domain.services.validation import parse_posting_value
from src.infrastructure.logging.logger import get_app_logger


class SavePostingUseCase:
    """Validate a posting form and insert or update the posting."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        context: AuthorizationContext,
        draft: PostingDraft,
        posting_id: str | None = None,
    ) -> Posting | None:
        """Save the posting described by ``draft``.

        Args:
            context: Authorization context of the session.
            draft: Raw form input.
            posting_id: Posting to update; None creates a new one.

        Returns:
            Posting | None: The created posting, None after an update.

        Raises:
            UnavailableError: If the session is not an admin session.
            ValidationError: If the account, date or value is invalid.
            NotFoundError: If the posting to update does not exist.
        """
        ensure_admin(context, "save postings")
        record = self._build_record(draft)

        if posting_id is None:
            posting = self._ledger_repository.insert_posting(record)
            self._logger.info(
                f"Posting {posting.id} recorded: {record.value} "
                f"on account {record.account_id}"
            )
            return posting

        if self._ledger_repository.fetch_posting(posting_id) is None:
            raise NotFoundError(f"Posting {posting_id} not found")
        self._ledger_repository.update_posting(posting_id, record)
        self._logger.info(f"Posting {posting_id} updated")
        return None

    def _build_record(self, draft: PostingDraft) -> PostingRecord:
        if not draft.account_id:
            raise ValidationError("Account is required")
        if draft.date is None:
            raise ValidationError("Date is required")
        if self._ledger_repository.fetch_account(draft.account_id) is None:
            raise ValidationError(f"Unknown account {draft.account_id}")
        return PostingRecord(
            account_id=draft.account_id,
            date=draft.date,
            value=parse_posting_value(draft.value),
            description=normalize_optional_text(draft.description),
            beneficiary=normalize_optional_text(draft.beneficiary),
            reference_month=first_day_of_month(draft.reference_month),
        )


class DeletePostingUseCase:
    """Delete a posting, releasing any monthly fee it paid.

    The repository clears the fee payment link before removing the posting
    and abandons the deletion when the link cannot be cleared, so a fee
    never references a deleted posting.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, context: AuthorizationContext, posting_id: str) -> None:
        """Delete the posting.

        Args:
            context: Authorization context of the session.
            posting_id: Posting to delete.

        Raises:
            UnavailableError: If the session is not an admin session.
            NotFoundError: If the posting does not exist.
            TransientError: If storage fails; nothing is deleted then.
        """
        ensure_admin(context, "delete postings")
        if self._ledger_repository.fetch_posting(posting_id) is None:
            raise NotFoundError(f"Posting {posting_id} not found")
        self._ledger_repository.delete_posting(posting_id)
        self._logger.info(f"Posting {posting_id} deleted")


__all__ = ["SavePostingUseCase", "DeletePostingUseCase"]
