"""Authorization policies applied to write operations."""

from src.domain.errors import UnavailableError
from src.domain.models.members import AuthorizationContext


def ensure_admin(context: AuthorizationContext, action: str) -> None:
    """Reject an action for non-admin sessions.

    Args:
        context: Authorization context resolved for the session.
        action: Human readable action name for the error message.

    Raises:
        UnavailableError: If the session is not an admin session.
    """
    if not context.is_admin:
        raise UnavailableError(f"Admin access required to {action}")


__all__ = ["ensure_admin"]
