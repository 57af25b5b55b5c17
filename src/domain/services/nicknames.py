"""Nickname resolution shared by the RSVP flow and member lookups."""

from collections.abc import Iterable

from src.domain.models.members import Member


def resolve_nickname(
    candidates: Iterable[Member],
    nickname: str,
) -> Member | None:
    """Map a typed nickname to a single member.

    An exact match wins. Otherwise a case-insensitive match is used and,
    when several members differ only by case, the lowest id is returned.

    Args:
        candidates: Members to search (usually pre-filtered by storage).
        nickname: Text typed by the user.

    Returns:
        Member | None: Resolved member, None when nothing matches.
    """
    wanted = nickname.strip()
    if not wanted:
        return None
    members = sorted(candidates, key=lambda member: member.id)
    for member in members:
        if member.nickname == wanted:
            return member
    folded = wanted.casefold()
    for member in members:
        if member.nickname.strip().casefold() == folded:
            return member
    return None


__all__ = ["resolve_nickname"]
