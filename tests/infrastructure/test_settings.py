from unittest.mock import MagicMock

import pytest

import src.infrastructure.settings as settings_module
from src.domain.constants import DEFAULT_FEE_ACCOUNT_KEYWORD
from src.infrastructure.settings import STATIC_DIR, ClubSettings


ENV_VARS = (
    "CLUB_PUBLIC_BASE_URL",
    "CLUB_BLOB_DIR",
    "CLUB_BLOB_BASE_URL",
    "CLUB_FEE_ACCOUNT_KEYWORD",
    "CLUB_CURRENCY",
    "CLUB_RSVP_REDIRECT_SECONDS",
    "CLUB_DEV_USER_EMAIL",
)


@pytest.fixture()
def logger(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    fake_logger = MagicMock()
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: fake_logger,
    )
    return fake_logger


def test_from_env_uses_defaults(logger, tmp_path):
    settings = ClubSettings.from_env()

    assert settings.public_base_url == "http://localhost:8501"
    assert settings.blob_dir == tmp_path / STATIC_DIR / "blobs"
    assert settings.blob_base_url == (
        "http://localhost:8501/app/static/blobs"
    )
    assert settings.fee_account_keyword == DEFAULT_FEE_ACCOUNT_KEYWORD
    assert settings.currency_code == "BRL"
    assert settings.rsvp_redirect_seconds == 2.0
    assert settings.dev_user_email is None
    logger.warning.assert_not_called()


def test_from_env_reads_overrides(logger, monkeypatch, tmp_path):
    monkeypatch.setenv("CLUB_PUBLIC_BASE_URL", " https://club.example/ ")
    monkeypatch.setenv("CLUB_BLOB_DIR", "uploads")
    monkeypatch.setenv("CLUB_FEE_ACCOUNT_KEYWORD", " Dues ")
    monkeypatch.setenv("CLUB_CURRENCY", "eur")
    monkeypatch.setenv("CLUB_RSVP_REDIRECT_SECONDS", "0.5")
    monkeypatch.setenv("CLUB_DEV_USER_EMAIL", "dev@example.com")

    settings = ClubSettings.from_env()

    assert settings.public_base_url == "https://club.example"
    assert settings.blob_dir == (tmp_path / "uploads").resolve()
    assert settings.blob_base_url == "https://club.example/app/static/blobs"
    assert settings.fee_account_keyword == "Dues"
    assert settings.currency_code == "EUR"
    assert settings.rsvp_redirect_seconds == 0.5
    assert settings.dev_user_email == "dev@example.com"


def test_from_env_keeps_absolute_blob_settings(logger, monkeypatch, tmp_path):
    blob_dir = tmp_path / "elsewhere"
    monkeypatch.setenv("CLUB_BLOB_DIR", str(blob_dir))
    monkeypatch.setenv("CLUB_BLOB_BASE_URL", "https://cdn.example/files/")

    settings = ClubSettings.from_env()

    assert settings.blob_dir == blob_dir.resolve()
    assert settings.blob_base_url == "https://cdn.example/files"


def test_invalid_redirect_delay_falls_back_with_warning(logger, monkeypatch):
    monkeypatch.setenv("CLUB_RSVP_REDIRECT_SECONDS", "soon")

    settings = ClubSettings.from_env()

    assert settings.rsvp_redirect_seconds == 2.0
    logger.warning.assert_called_once()


def test_negative_redirect_delay_is_clamped(logger, monkeypatch):
    monkeypatch.setenv("CLUB_RSVP_REDIRECT_SECONDS", "-3")

    assert ClubSettings.from_env().rsvp_redirect_seconds == 0.0


def test_default_instance_is_usable_without_environment():
    settings = ClubSettings()

    assert settings.blob_dir == STATIC_DIR / "blobs"
    assert settings.currency_code == "BRL"
