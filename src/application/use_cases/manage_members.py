"""Use case to maintain the member registry."""

from src.application.ports.members_repository import (
    MemberRecord,
    MembersRepositoryPort,
)
from src.domain.errors import NotFoundError
from src.domain.models.members import (
    AuthorizationContext,
    Member,
    MemberCategory,
    MemberStatus,
)
from src.domain.policies.authorization import ensure_admin
from src.domain.services.normalization import normalize_optional_text
from src.domain.services.validation import require_text
from src.infrastructure.logging.logger import get_app_logger


class ManageMembersUseCase:
    """Register members and edit their registry fields.

    Nicknames are not unique; the RSVP flow disambiguates duplicates. The
    sign-in e-mail is stored lowercased and must belong to one member only.
    """

    def __init__(
        self,
        members_repository: MembersRepositoryPort,
        logger=None,
    ) -> None:
        self._members_repository = members_repository
        self._logger = logger or get_app_logger()

    def create(
        self,
        context: AuthorizationContext,
        name: str,
        nickname: str,
        category: MemberCategory = MemberCategory.CONTRIBUTOR,
        status: MemberStatus = MemberStatus.ACTIVE,
        is_admin: bool = False,
        user_email: str | None = None,
    ) -> Member:
        """Register a new member.

        Raises:
            UnavailableError: If the session is not an admin session.
            ValidationError: If the name or nickname is blank.
            AlreadyExistsError: If the e-mail belongs to another member.
        """
        ensure_admin(context, "register members")
        record = _build_record(
            name, nickname, category, status, is_admin, user_email
        )
        member = self._members_repository.insert_member(record)
        self._logger.info(f"Member {member.id} registered: {member.nickname}")
        return member

    def update(
        self,
        context: AuthorizationContext,
        member_id: str,
        name: str,
        nickname: str,
        category: MemberCategory,
        status: MemberStatus,
        is_admin: bool = False,
        user_email: str | None = None,
    ) -> None:
        """Replace the registry fields of an existing member.

        Raises:
            UnavailableError: If the session is not an admin session.
            NotFoundError: If the member does not exist.
            ValidationError: If the name or nickname is blank.
            AlreadyExistsError: If the e-mail belongs to another member.
        """
        ensure_admin(context, "edit members")
        if self._members_repository.fetch_member(member_id) is None:
            raise NotFoundError(f"Member {member_id} not found")
        record = _build_record(
            name, nickname, category, status, is_admin, user_email
        )
        self._members_repository.update_member(member_id, record)
        self._logger.info(f"Member {member_id} updated")


def _build_record(
    name: str,
    nickname: str,
    category: MemberCategory,
    status: MemberStatus,
    is_admin: bool,
    user_email: str | None,
) -> MemberRecord:
    email = normalize_optional_text(user_email)
    return MemberRecord(
        name=require_text(name, "Name"),
        nickname=require_text(nickname, "Nickname"),
        status=status,
        category=category,
        is_admin=is_admin,
        user_email=email.lower() if email else None,
    )


__all__ = ["ManageMembersUseCase"]
