"""
Zephyr application settings.

Extends the base settings with Zephyr-specific configuration.
"""

from typing import List, Optional
from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Zephyr-specific settings."""

    # ==========================================================================
    # LLM (Groq, OpenAI-compatible API)
    # ==========================================================================
    GROQ_API_KEY: Optional[str] = None
    GROQ_MODEL: str = "llama-3.3-70b-versatile"
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    LLM_TEMPERATURE: float = 0.7
    LLM_TIMEOUT: float = 60.0

    # ==========================================================================
    # Cloudflare Turnstile
    # ==========================================================================
    TURNSTILE_SECRET_KEY: Optional[str] = None
    TURNSTILE_SITE_KEY: Optional[str] = None  # Public, handed to the UI
    TURNSTILE_VERIFY_URL: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"

    # ==========================================================================
    # Geo lookups
    # ==========================================================================
    CSC_API_KEY: Optional[str] = None
    CSC_BASE_URL: str = "https://api.countrystatecity.in/v1"
    ZIPPOPOTAM_BASE_URL: str = "https://api.zippopotam.us"

    # ==========================================================================
    # Application Settings
    # ==========================================================================
    PROFILE_COLLECTION: str = "profiles"

    # Refuse chat until the profile wizard is finished
    CHAT_REQUIRE_COMPLETE_PROFILE: bool = True

    def get_missing_credentials(self) -> List[str]:
        """List unset credentials, including Zephyr's external services."""
        missing = super().get_missing_credentials()
        if not self.GROQ_API_KEY:
            missing.append("GROQ_API_KEY")
        if not self.TURNSTILE_SECRET_KEY:
            missing.append("TURNSTILE_SECRET_KEY")
        if not self.CSC_API_KEY:
            missing.append("CSC_API_KEY")
        return missing


# Global settings instance
settings = Settings()
