"""Session adapter reading the signed-in user from Streamlit."""

from src.application.ports.session import SessionPort


class StreamlitSessionAdapter(SessionPort):
    """Return the e-mail of the user signed in through ``st.login``.

    When no identity provider is configured, ``fallback_email`` stands in
    for the signed-in user (local development only).
    """

    def __init__(self, st_module, fallback_email: str | None = None) -> None:
        self._st = st_module
        self._fallback_email = fallback_email

    def current_identity(self) -> str | None:
        user = getattr(self._st, "user", None)
        if user is not None and user.get("is_logged_in", False):
            email = user.get("email")
            if email:
                return str(email).strip().lower()
        if self._fallback_email:
            return self._fallback_email.strip().lower()
        return None


__all__ = ["StreamlitSessionAdapter"]
