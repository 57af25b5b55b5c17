"""Domain constants for the club manager."""

DEFAULT_FEE_ACCOUNT_KEYWORD = "monthly fee"

RSVP_NOT_FOUND = "not found"
RSVP_UNAVAILABLE = "unavailable"
RSVP_NICKNAME_REQUIRED = "nickname required"
RSVP_MEMBER_NOT_FOUND = "member not found"
RSVP_ALREADY_CONFIRMED = "already confirmed"
RSVP_TRY_AGAIN = "try again"


__all__ = [
    "DEFAULT_FEE_ACCOUNT_KEYWORD",
    "RSVP_NOT_FOUND",
    "RSVP_UNAVAILABLE",
    "RSVP_NICKNAME_REQUIRED",
    "RSVP_MEMBER_NOT_FOUND",
    "RSVP_ALREADY_CONFIRMED",
    "RSVP_TRY_AGAIN",
]
