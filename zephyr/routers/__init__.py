"""
Zephyr API Routers.

All routers are imported here for easy access.
"""

from zephyr.routers.auth import router as auth_router
from zephyr.routers.captcha import router as captcha_router
from zephyr.routers.chat import router as chat_router
from zephyr.routers.geo import router as geo_router
from zephyr.routers.profile import router as profile_router
from zephyr.routers.session import router as session_router

__all__ = [
    "auth_router",
    "captcha_router",
    "chat_router",
    "geo_router",
    "profile_router",
    "session_router",
]
