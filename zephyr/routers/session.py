"""
FastAPI router for session state and UI configuration.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from zephyr.config import settings
from zephyr.dependencies import require_auth, get_profile_service
from zephyr.prompts import AGREEMENT_TEXT, ASSISTANT_NAME, EMPTY_REPLY, QUICK_PROMPTS
from zephyr.services.profile.profile_service import ProfileService

router = APIRouter(tags=["session"])


@router.get("/session")
async def get_session(
    user: Annotated[dict, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """
    Everything the UI needs to pick a screen after sign-in.

    ``chatEnabled`` is false until the profile is complete, unless the
    profile gate is switched off.
    """
    state = await profile_service.get_profile_state(user["uid"])
    profile = state["profile"]
    complete = state["profileComplete"]

    return success_response({
        "user": {
            "uid": user["uid"],
            "email": user.get("email"),
            "displayName": user.get("name"),
        },
        "profile": profile,
        "agreementAccepted": profile["agreementAccepted"],
        "profileComplete": complete,
        "chatEnabled": complete or not settings.CHAT_REQUIRE_COMPLETE_PROFILE,
    })


@router.get("/app-config")
async def get_app_config():
    """Public texts and keys for the UI."""
    return success_response({
        "assistantName": ASSISTANT_NAME,
        "quickPrompts": QUICK_PROMPTS,
        "agreementText": AGREEMENT_TEXT,
        "emptyReply": EMPTY_REPLY,
        "turnstileSiteKey": settings.TURNSTILE_SITE_KEY,
    })
