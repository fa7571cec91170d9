"""
FastAPI dependencies for the Zephyr application.

Provides dependency injection for all services. Services that only need
configuration are built lazily on first use, so a missing credential
surfaces as a configuration error on the request that needs it instead
of stopping the whole API from starting.
"""

import logging
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.ai import OpenAIProvider
from common.auth import (
    AuthProvider,
    AuthConfigurationError,
    FirebaseAuth,
    build_credentials_dict,
    create_auth_dependency,
)
from common.utils.exceptions import ConfigurationException

from zephyr.config import settings
from zephyr.services.chat.chat_service import ChatService
from zephyr.services.captcha.turnstile_service import TurnstileService
from zephyr.services.geo.geo_service import GeoService
from zephyr.services.profile.profile_service import ProfileService

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_firebase_auth: Optional[AuthProvider] = None
_profile_service: Optional[ProfileService] = None
_chat_service: Optional[ChatService] = None
_turnstile_service: Optional[TurnstileService] = None
_geo_service: Optional[GeoService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization functions
# ─────────────────────────────────────────────────────────────────

def init_profile_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize profile services."""
    global _profile_service

    _profile_service = ProfileService(db=db, collection_name=settings.PROFILE_COLLECTION)


def init_geo_services() -> None:
    """Initialize geo lookup services."""
    global _geo_service

    _geo_service = GeoService(
        csc_api_key=settings.CSC_API_KEY,
        csc_base_url=settings.CSC_BASE_URL,
        zippopotam_base_url=settings.ZIPPOPOTAM_BASE_URL,
        timeout=settings.HTTP_TIMEOUT,
    )


def init_all_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize every service that does not depend on a credential."""
    init_profile_services(db)
    init_geo_services()


# ─────────────────────────────────────────────────────────────────
# Auth
# ─────────────────────────────────────────────────────────────────

def get_firebase_auth() -> AuthProvider:
    """
    Get the Firebase auth client, creating it on first use.

    Raises:
        ConfigurationException: If Firebase Admin credentials are missing
    """
    global _firebase_auth

    if _firebase_auth is None:
        try:
            _firebase_auth = FirebaseAuth(
                credentials_path=settings.FIREBASE_CREDENTIALS_PATH,
                credentials_dict=build_credentials_dict(
                    settings.FIREBASE_PROJECT_ID,
                    settings.FIREBASE_CLIENT_EMAIL,
                    settings.FIREBASE_PRIVATE_KEY,
                ),
                project_id=settings.FIREBASE_PROJECT_ID,
                api_key=settings.FIREBASE_API_KEY,
                timeout=settings.HTTP_TIMEOUT,
            )
        except AuthConfigurationError as e:
            raise ConfigurationException(str(e))

    return _firebase_auth


require_auth = create_auth_dependency(get_firebase_auth)


def get_client_ip(request: Request) -> Optional[str]:
    """Extract client IP address from request."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip
    if request.client:
        return request.client.host
    return None


# ─────────────────────────────────────────────────────────────────
# Service getters
# ─────────────────────────────────────────────────────────────────

def get_profile_service() -> ProfileService:
    """Get profile service instance."""
    if _profile_service is None:
        raise RuntimeError("Profile services not initialized.")
    return _profile_service


def get_geo_service() -> GeoService:
    """Get geo lookup service instance."""
    if _geo_service is None:
        init_geo_services()
    return _geo_service


def get_chat_service() -> ChatService:
    """
    Get chat service instance, creating it on first use.

    Raises:
        ConfigurationException: If GROQ_API_KEY is missing
    """
    global _chat_service

    if _chat_service is None:
        if not settings.GROQ_API_KEY:
            raise ConfigurationException("Missing GROQ_API_KEY")

        provider = OpenAIProvider(
            api_key=settings.GROQ_API_KEY,
            model=settings.GROQ_MODEL,
            base_url=settings.GROQ_BASE_URL,
            timeout=settings.LLM_TIMEOUT,
        )
        _chat_service = ChatService(provider=provider, temperature=settings.LLM_TEMPERATURE)

    return _chat_service


def get_turnstile_service() -> TurnstileService:
    """
    Get Turnstile verification service, creating it on first use.

    Raises:
        ConfigurationException: If TURNSTILE_SECRET_KEY is missing
    """
    global _turnstile_service

    if _turnstile_service is None:
        if not settings.TURNSTILE_SECRET_KEY:
            raise ConfigurationException("Missing TURNSTILE_SECRET_KEY")

        _turnstile_service = TurnstileService(
            secret_key=settings.TURNSTILE_SECRET_KEY,
            verify_url=settings.TURNSTILE_VERIFY_URL,
            timeout=settings.HTTP_TIMEOUT,
        )

    return _turnstile_service
