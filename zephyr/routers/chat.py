"""
FastAPI router for the chat proxy.

Relays the browser-held conversation to the LLM provider behind a fixed
system prompt.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends

from common.ai import AIProviderError
from common.utils import success_response
from common.utils.exceptions import (
    APIException,
    ForbiddenException,
    InternalServerException,
)
from zephyr.config import settings
from zephyr.dependencies import require_auth, get_chat_service, get_profile_service
from zephyr.schemas.chat import ChatRequest
from zephyr.services.profile.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat")
async def chat(
    user: Annotated[dict, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
    body: Optional[ChatRequest] = None,
):
    """
    Get the assistant's next reply.

    Upstream error statuses are mirrored with the upstream body as details.
    """
    chat_service = get_chat_service()

    if settings.CHAT_REQUIRE_COMPLETE_PROFILE:
        try:
            state = await profile_service.get_profile_state(user["uid"])
        except Exception:
            logger.exception(f"Profile lookup failed for user {user['uid']}")
            raise InternalServerException("Unexpected server error")

        if not state["profileComplete"]:
            raise ForbiddenException(
                message="Complete your profile before chatting",
                code="PROFILE_INCOMPLETE",
            )

    history = body.history() if body else []

    try:
        content = await chat_service.reply(history)
    except AIProviderError as e:
        raise APIException(
            status_code=e.status_code,
            message="Groq request failed",
            code="LLM_REQUEST_FAILED",
            details=e.details,
        )
    except Exception:
        logger.exception(f"Chat completion failed for user {user['uid']}")
        raise InternalServerException("Unexpected server error")

    return success_response({"content": content})
