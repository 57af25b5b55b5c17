"""Use case to maintain the chart of accounts."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import NotFoundError
from src.domain.models.ledger import Account, AccountGroup
from src.domain.models.members import AuthorizationContext
from src.domain.policies.authorization import ensure_admin
from src.domain.services.validation import require_text
from src.infrastructure.logging.logger import get_app_logger


class ManageAccountsUseCase:
    """List, create, update and delete ledger accounts."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing account storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def list_accounts(self) -> list[Account]:
        """Return accounts ordered by description."""
        accounts = self._ledger_repository.fetch_accounts()
        return sorted(
            accounts,
            key=lambda account: (account.description.lower(), account.id),
        )

    def create(
        self,
        context: AuthorizationContext,
        description: str,
        group: AccountGroup,
    ) -> Account:
        ensure_admin(context, "create accounts")
        account = self._ledger_repository.insert_account(
            require_text(description, "Description"),
            group,
        )
        self._logger.info(f"Account {account.id} created: {account.description}")
        return account

    def update(
        self,
        context: AuthorizationContext,
        account_id: str,
        description: str,
        group: AccountGroup,
    ) -> None:
        ensure_admin(context, "update accounts")
        self._require_account(account_id)
        self._ledger_repository.update_account(
            account_id,
            require_text(description, "Description"),
            group,
        )
        self._logger.info(f"Account {account_id} updated")

    def delete(self, context: AuthorizationContext, account_id: str) -> None:
        """Delete an account.

        Raises:
            NotFoundError: If the account does not exist.
            ValidationError: If postings still reference the account.
        """
        ensure_admin(context, "delete accounts")
        self._require_account(account_id)
        self._ledger_repository.delete_account(account_id)
        self._logger.info(f"Account {account_id} deleted")

    def _require_account(self, account_id: str) -> Account:
        account = self._ledger_repository.fetch_account(account_id)
        if account is None:
            raise NotFoundError(f"Account {account_id} not found")
        return account


__all__ = ["ManageAccountsUseCase"]
