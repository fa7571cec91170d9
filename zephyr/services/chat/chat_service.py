"""
Chat service.

Prepends the fixed system prompt to the browser-held history and asks
the LLM provider for the next assistant turn.
"""

import logging
from typing import Dict, List

from common.ai.base import AIProvider
from zephyr.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class ChatService:
    """Builds the outgoing message list and relays the completion."""

    def __init__(
        self,
        provider: AIProvider,
        system_prompt: str = SYSTEM_PROMPT,
        temperature: float = 0.7,
    ):
        self._provider = provider
        self._system_prompt = system_prompt
        self._temperature = temperature

    def build_messages(self, history: List[Dict[str, str]]) -> List[Dict[str, str]]:
        """System prompt first, then the history verbatim."""
        return [{"role": "system", "content": self._system_prompt}, *history]

    async def reply(self, history: List[Dict[str, str]]) -> str:
        """
        Get the assistant's reply to a conversation.

        Raises:
            AIProviderError: If the provider answers with an error status
        """
        messages = self.build_messages(history)
        logger.debug(f"Requesting completion for {len(messages)} messages")
        return await self._provider.complete(messages, temperature=self._temperature)
