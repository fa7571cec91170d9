"""Tests for environment configuration."""

import pytest

from zephyr.config import Settings


CREDENTIAL_VARS = (
    "FIREBASE_CREDENTIALS_PATH",
    "FIREBASE_PROJECT_ID",
    "FIREBASE_CLIENT_EMAIL",
    "FIREBASE_PRIVATE_KEY",
    "GROQ_API_KEY",
    "TURNSTILE_SECRET_KEY",
    "CSC_API_KEY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.GROQ_MODEL == "llama-3.3-70b-versatile"
    assert settings.GROQ_BASE_URL == "https://api.groq.com/openai/v1"
    assert settings.LLM_TEMPERATURE == 0.7
    assert settings.PROFILE_COLLECTION == "profiles"
    assert settings.CHAT_REQUIRE_COMPLETE_PROFILE is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_live")
    monkeypatch.setenv("CHAT_REQUIRE_COMPLETE_PROFILE", "false")

    settings = Settings(_env_file=None)

    assert settings.GROQ_API_KEY == "gsk_live"
    assert settings.CHAT_REQUIRE_COMPLETE_PROFILE is False


def test_missing_credentials_listed():
    missing = Settings(_env_file=None).get_missing_credentials()

    assert "GROQ_API_KEY" in missing
    assert "TURNSTILE_SECRET_KEY" in missing
    assert "CSC_API_KEY" in missing
    assert any(name.startswith("FIREBASE_CREDENTIALS_PATH") for name in missing)


def test_inline_firebase_credentials_are_enough():
    settings = Settings(
        _env_file=None,
        FIREBASE_PROJECT_ID="zephyr-prod",
        FIREBASE_CLIENT_EMAIL="sa@zephyr-prod.iam.gserviceaccount.com",
        FIREBASE_PRIVATE_KEY="key",
    )

    assert settings.has_firebase_credentials() is True


def test_validate_required_raises():
    with pytest.raises(ValueError, match="GROQ_API_KEY is required"):
        Settings(_env_file=None).validate_required()


def test_validate_required_passes_when_configured():
    Settings(
        _env_file=None,
        FIREBASE_CREDENTIALS_PATH="/secrets/firebase.json",
        GROQ_API_KEY="gsk",
        TURNSTILE_SECRET_KEY="secret",
        CSC_API_KEY="csc",
    ).validate_required()


def test_cors_origins_split():
    settings = Settings(_env_file=None, CORS_ORIGINS="https://zephyr.app, http://localhost:5173")

    assert settings.get_cors_origins() == ["https://zephyr.app", "http://localhost:5173"]
