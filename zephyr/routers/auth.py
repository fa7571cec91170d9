"""
FastAPI router for Auth endpoints.

Email/password sign-in and sign-up go through Firebase, each behind a
Turnstile check. Google sign-in happens entirely in the browser.
"""

import logging
from typing import Annotated, Optional

import httpx
from fastapi import APIRouter, Depends, Request

from common.auth import AuthConfigurationError
from common.utils import success_response
from common.utils.exceptions import (
    BadGatewayException,
    BadRequestException,
    ConfigurationException,
    UnauthorizedException,
)
from zephyr.dependencies import (
    get_client_ip,
    get_firebase_auth,
    get_turnstile_service,
    require_auth,
)
from zephyr.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


async def require_captcha(request: Request, token: Optional[str]) -> None:
    """
    Reject the request unless the Turnstile token verifies.

    Raises:
        BadRequestException: Token missing or rejected
        BadGatewayException: Verification service unreachable
    """
    if not token:
        raise BadRequestException("Complete the captcha first", code="CAPTCHA_REQUIRED")

    turnstile = get_turnstile_service()
    try:
        verified = await turnstile.verify(token, remote_ip=get_client_ip(request))
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Turnstile verification unavailable: {e}")
        raise BadGatewayException("Captcha could not be verified", code="CAPTCHA_UNAVAILABLE")

    if not verified:
        raise BadRequestException("Captcha verification failed", code="CAPTCHA_FAILED")


@router.post("/register")
async def register(request: Request, body: RegisterRequest):
    """
    Create an email/password account.

    Returns the new user's ID token so the browser is signed in right away.
    """
    await require_captcha(request, body.captchaToken)

    firebase_auth = get_firebase_auth()
    try:
        session = await firebase_auth.sign_up_with_password(body.email, body.password)
    except AuthConfigurationError as e:
        raise ConfigurationException(str(e))
    except ValueError as e:
        raise BadRequestException(str(e), code="REGISTRATION_FAILED")

    display_name = (body.displayName or "").strip()
    if display_name:
        try:
            await firebase_auth.update_user(session["uid"], display_name=display_name)
            session["displayName"] = display_name
        except ValueError as e:
            logger.warning(f"Failed to set display name for {session['uid']}: {e}")

    logger.info(f"Registered user {session['uid']}")
    return success_response(session)


@router.post("/login")
async def login(request: Request, body: LoginRequest):
    """Sign in with email and password."""
    await require_captcha(request, body.captchaToken)

    firebase_auth = get_firebase_auth()
    try:
        session = await firebase_auth.sign_in_with_password(body.email, body.password)
    except AuthConfigurationError as e:
        raise ConfigurationException(str(e))
    except ValueError as e:
        raise UnauthorizedException(str(e), code="INVALID_CREDENTIALS")

    return success_response(session)


@router.post("/logout")
async def logout(user: Annotated[dict, Depends(require_auth)]):
    """Revoke the user's refresh tokens."""
    firebase_auth = get_firebase_auth()
    try:
        await firebase_auth.revoke_token(user["token"])
    except ValueError as e:
        logger.warning(f"Failed to revoke tokens for {user['uid']}: {e}")
        raise BadGatewayException("Failed to sign out", code="LOGOUT_FAILED")

    return success_response(message="Signed out")
