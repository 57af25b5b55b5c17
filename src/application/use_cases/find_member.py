"""Use case to look a member up by nickname."""

from src.application.ports.members_repository import MembersRepositoryPort
from src.domain.models.members import Member
from src.domain.services.nicknames import resolve_nickname
from src.infrastructure.logging.logger import get_app_logger


class FindMemberByNicknameUseCase:
    """Resolve a typed nickname: exact match first, then ignoring case."""

    def __init__(
        self,
        members_repository: MembersRepositoryPort,
        logger=None,
    ) -> None:
        self._members_repository = members_repository
        self._logger = logger or get_app_logger()

    def execute(self, nickname: str) -> Member | None:
        """Return the member, or None when the nickname is unknown."""
        cleaned = (nickname or "").strip()
        if not cleaned:
            return None
        candidates = self._members_repository.fetch_nickname_candidates(cleaned)
        member = resolve_nickname(candidates, cleaned)
        if member is None:
            self._logger.info(f"No member found for nickname '{cleaned}'")
        return member


__all__ = ["FindMemberByNicknameUseCase"]
