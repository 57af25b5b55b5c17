"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from src.domain.constants import DEFAULT_FEE_ACCOUNT_KEYWORD
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


DEFAULT_PUBLIC_BASE_URL = "http://localhost:8501"
# Streamlit serves the static/ folder next to app.py under /app/static.
STATIC_DIR = Path("src", "adapters", "interface", "streamlit", "static")


@dataclass(frozen=True)
class ClubSettings:
    """Runtime settings of the club manager.

    Attributes:
        public_base_url: Base URL of the Streamlit app, used in RSVP links.
        blob_dir: Directory where uploaded files are written.
        blob_base_url: Public URL prefix of ``blob_dir``.
        fee_account_keyword: Text identifying the monthly fee account.
        currency_code: Currency shown in the UI.
        rsvp_redirect_seconds: Delay before leaving a confirmed RSVP page.
        dev_user_email: Identity used when no sign-in provider is set up.
    """

    public_base_url: str = DEFAULT_PUBLIC_BASE_URL
    blob_dir: Path = STATIC_DIR / "blobs"
    blob_base_url: str = f"{DEFAULT_PUBLIC_BASE_URL}/app/static/blobs"
    fee_account_keyword: str = DEFAULT_FEE_ACCOUNT_KEYWORD
    currency_code: str = "BRL"
    rsvp_redirect_seconds: float = 2.0
    dev_user_email: str | None = None

    @classmethod
    def from_env(cls) -> "ClubSettings":
        """Build settings from environment variables (and ``.env``).

        Returns:
            ClubSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        public_base_url = os.getenv(
            "CLUB_PUBLIC_BASE_URL",
            DEFAULT_PUBLIC_BASE_URL,
        ).strip().rstrip("/")
        blob_dir = cls._resolve_blob_dir(os.getenv("CLUB_BLOB_DIR"))
        blob_base_url = os.getenv(
            "CLUB_BLOB_BASE_URL",
            f"{public_base_url}/app/static/blobs",
        ).strip().rstrip("/")
        return cls(
            public_base_url=public_base_url,
            blob_dir=blob_dir,
            blob_base_url=blob_base_url,
            fee_account_keyword=os.getenv(
                "CLUB_FEE_ACCOUNT_KEYWORD",
                DEFAULT_FEE_ACCOUNT_KEYWORD,
            ).strip(),
            currency_code=os.getenv("CLUB_CURRENCY", "BRL").strip().upper(),
            rsvp_redirect_seconds=cls._parse_seconds(
                os.getenv("CLUB_RSVP_REDIRECT_SECONDS"),
                logger=logger,
            ),
            dev_user_email=os.getenv("CLUB_DEV_USER_EMAIL") or None,
        )

    @staticmethod
    def _resolve_blob_dir(raw_path: str | None) -> Path:
        """Resolve the blob directory, relative paths from the project root.

        Args:
            raw_path: Raw directory from the environment.

        Returns:
            Path: Absolute directory path.
        """
        if not raw_path:
            return get_project_root() / STATIC_DIR / "blobs"
        path = Path(raw_path).expanduser()
        if not path.is_absolute():
            path = get_project_root() / path
        return path.resolve()

    @staticmethod
    def _parse_seconds(raw: str | None, logger) -> float:
        """Parse the RSVP redirect delay, falling back to two seconds.

        Args:
            raw: Raw value from the environment.
            logger: Logger used for warnings.

        Returns:
            float: Non-negative delay in seconds.
        """
        if not raw:
            return 2.0
        try:
            seconds = float(raw)
        except ValueError:
            logger.warning(f"Invalid CLUB_RSVP_REDIRECT_SECONDS: {raw}")
            return 2.0
        return max(seconds, 0.0)


__all__ = ["ClubSettings", "STATIC_DIR"]
