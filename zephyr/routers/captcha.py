"""
FastAPI router for CAPTCHA verification.

Always answers with a ``success`` flag so the UI can branch on one field.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from common.utils import success_response, error_response
from common.utils.exceptions import ConfigurationException
from zephyr.dependencies import get_turnstile_service, get_client_ip
from zephyr.schemas.captcha import TurnstileVerifyRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["captcha"])


@router.post("/verify-turnstile")
async def verify_turnstile(
    request: Request,
    body: Optional[TurnstileVerifyRequest] = None,
):
    """Verify a Turnstile token and relay the verdict."""
    token = body.token if body else None
    if not token:
        return JSONResponse(
            status_code=400,
            content=error_response("Missing token", code="MISSING_TOKEN"),
        )

    try:
        turnstile = get_turnstile_service()
    except ConfigurationException as e:
        return JSONResponse(
            status_code=e.status_code,
            content=error_response(e.message, code=e.code),
        )

    try:
        verified = await turnstile.verify(token, remote_ip=get_client_ip(request))
    except Exception:
        logger.exception("Turnstile verification failed")
        return JSONResponse(
            status_code=500,
            content=error_response("Unexpected error", code="CAPTCHA_VERIFICATION_ERROR"),
        )

    if not verified:
        return error_response("Captcha verification failed", code="CAPTCHA_FAILED")

    return success_response(message="Captcha verified")
