"""
Pydantic schemas for Zephyr request/response validation.
"""

from zephyr.schemas.chat import ChatMessage, ChatRequest
from zephyr.schemas.captcha import TurnstileVerifyRequest
from zephyr.schemas.geo import GeoOption, PostalPlace, PostalValidation
from zephyr.schemas.profile import ProfileForm
from zephyr.schemas.auth import LoginRequest, RegisterRequest

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "TurnstileVerifyRequest",
    "GeoOption",
    "PostalPlace",
    "PostalValidation",
    "ProfileForm",
    "LoginRequest",
    "RegisterRequest",
]
