"""
FastAPI router for Profile endpoints.

The profile wizard's form is saved whole; the agreement can be accepted
on its own before the address is filled in.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from zephyr.dependencies import require_auth, get_firebase_auth, get_profile_service
from zephyr.schemas.profile import ProfileForm
from zephyr.services.profile.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    user: Annotated[dict, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Get the current user's profile."""
    state = await profile_service.get_profile_state(user["uid"])
    return success_response(state)


@router.put("")
async def save_profile(
    body: ProfileForm,
    user: Annotated[dict, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """
    Save the full profile form.

    A non-empty nickname also becomes the account's display name.
    """
    state = await profile_service.save_profile(user["uid"], body)

    if body.nickname:
        try:
            await get_firebase_auth().update_user(user["uid"], display_name=body.nickname)
        except ValueError as e:
            logger.warning(f"Failed to update display name for {user['uid']}: {e}")

    return success_response(state)


@router.post("/agreement")
async def accept_agreement(
    user: Annotated[dict, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Record acceptance of the usage agreement."""
    state = await profile_service.accept_agreement(user["uid"])
    return success_response(state)
