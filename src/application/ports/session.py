"""Port for the authenticated identity of the current session."""

from typing import Protocol


class SessionPort(Protocol):
    """Port returning who is signed in."""

    def current_identity(self) -> str | None:
        """Return the signed-in e-mail, or None for anonymous visitors."""


__all__ = ["SessionPort"]
