"""
Pydantic models for CAPTCHA verification.
"""

from typing import Optional
from pydantic import BaseModel


class TurnstileVerifyRequest(BaseModel):
    """POST /api/verify-turnstile"""
    token: Optional[str] = None
