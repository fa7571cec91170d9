"""
Zephyr Services.

All service classes organized by feature.
"""

# Chat
from zephyr.services.chat.chat_service import ChatService

# CAPTCHA
from zephyr.services.captcha.turnstile_service import TurnstileService

# Geo lookups
from zephyr.services.geo.geo_service import GeoService

# Profile
from zephyr.services.profile.profile_service import ProfileService

__all__ = [
    "ChatService",
    "TurnstileService",
    "GeoService",
    "ProfileService",
]
