"""Port for the member registry."""

from dataclasses import dataclass
from typing import Protocol

from src.domain.models.members import Member, MemberCategory, MemberStatus


@dataclass(frozen=True)
class MemberRecord:
    """Validated member fields ready to be written."""

    name: str
    nickname: str
    status: MemberStatus = MemberStatus.ACTIVE
    category: MemberCategory = MemberCategory.CONTRIBUTOR
    is_admin: bool = False
    user_email: str | None = None


class MembersRepositoryPort(Protocol):
    """Port exposing the member registry."""

    def fetch_members(self) -> list[Member]:
        """Return all members ordered by nickname."""

    def fetch_member(self, member_id: str) -> Member | None:
        """Return one member, or None when absent."""

    def fetch_nickname_candidates(self, nickname: str) -> list[Member]:
        """Return members whose nickname equals ``nickname`` ignoring case."""

    def fetch_member_by_email(self, email: str) -> Member | None:
        """Return the member linked to an authenticated e-mail."""

    def fetch_contributing_members(self) -> list[Member]:
        """Return active members who pay monthly fees."""

    def insert_member(self, record: MemberRecord) -> Member:
        """Register a member and return it with its new id.

        Raises:
            AlreadyExistsError: If the e-mail is linked to another member.
        """

    def update_member(self, member_id: str, record: MemberRecord) -> None:
        """Replace the registry fields of a member, keeping its photo."""

    def update_photo_url(self, member_id: str, photo_url: str) -> None:
        """Store the public URL of the member photo."""


__all__ = ["MemberRecord", "MembersRepositoryPort"]
