"""
Pydantic models for sign-in and sign-up requests.
"""

from typing import Optional
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """POST /api/auth/login"""
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1)
    captchaToken: Optional[str] = Field(None, description="Turnstile token from the widget")


class RegisterRequest(BaseModel):
    """POST /api/auth/register"""
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1)
    captchaToken: Optional[str] = Field(None, description="Turnstile token from the widget")
    displayName: Optional[str] = Field(None, max_length=100)
