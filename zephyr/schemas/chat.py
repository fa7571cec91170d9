"""
Pydantic models for the chat proxy.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """One turn of the browser-held conversation."""
    role: Literal["user", "assistant", "system"]
    content: str


class ChatRequest(BaseModel):
    """POST /api/chat"""
    # A missing or null list is treated as an empty conversation
    messages: Optional[List[ChatMessage]] = Field(default=None)

    def history(self) -> List[dict]:
        """Messages as plain dicts, ready for the completion API."""
        return [message.model_dump() for message in self.messages or []]
