"""Domain models for club members and session authorization."""

from dataclasses import dataclass
from enum import Enum


class MemberStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class MemberCategory(str, Enum):
    """Whether the member pays monthly fees."""

    CONTRIBUTOR = "contributor"
    NON_CONTRIBUTOR = "non_contributor"


@dataclass(frozen=True)
class Member:
    """Registered club member."""

    id: str
    name: str
    nickname: str
    status: MemberStatus = MemberStatus.ACTIVE
    category: MemberCategory = MemberCategory.CONTRIBUTOR
    is_admin: bool = False
    user_email: str | None = None
    photo_url: str | None = None


@dataclass(frozen=True)
class AuthorizationContext:
    """Capabilities of the current session, resolved once at sign-in.

    Attributes:
        member_id: Member linked to the signed-in identity, if any.
        nickname: Nickname of that member.
        is_admin: Whether write operations are allowed.
    """

    member_id: str | None = None
    nickname: str | None = None
    is_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.member_id is not None

    @classmethod
    def anonymous(cls) -> "AuthorizationContext":
        return cls()


__all__ = [
    "MemberStatus",
    "MemberCategory",
    "Member",
    "AuthorizationContext",
]
