"""Use case resolving the authorization context of a session."""

from src.application.ports.members_repository import MembersRepositoryPort
from src.application.ports.session import SessionPort
from src.domain.models.members import AuthorizationContext
from src.infrastructure.logging.logger import get_app_logger


class GetAuthorizationContextUseCase:
    """Map the signed-in identity to member capabilities, once per session."""

    def __init__(
        self,
        session: SessionPort,
        members_repository: MembersRepositoryPort,
        logger=None,
    ) -> None:
        self._session = session
        self._members_repository = members_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> AuthorizationContext:
        """Return the context; anonymous when nobody or no member matches."""
        identity = self._session.current_identity()
        if not identity:
            return AuthorizationContext.anonymous()
        member = self._members_repository.fetch_member_by_email(identity)
        if member is None:
            self._logger.warning(f"No member linked to identity {identity}")
            return AuthorizationContext.anonymous()
        self._logger.info(
            f"Session resolved for member {member.id} (admin={member.is_admin})"
        )
        return AuthorizationContext(
            member_id=member.id,
            nickname=member.nickname,
            is_admin=member.is_admin,
        )


__all__ = ["GetAuthorizationContextUseCase"]
