"""
Abstract AI provider interface.

Defines the contract that LLM completion providers must implement.
This allows swapping between different AI services without changing
application code.

Example:
    from common.ai import AIProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        return OpenAIProvider(
            api_key=settings.GROQ_API_KEY,
            model=settings.GROQ_MODEL,
            base_url=settings.GROQ_BASE_URL,
        )
"""

from abc import ABC, abstractmethod
from typing import List, Dict


class AIProviderError(Exception):
    """
    Raised when the upstream LLM API answers with an error status.

    Carries the upstream status code and raw body so callers can mirror
    them to their own clients.
    """

    def __init__(self, status_code: int, details: str = ""):
        super().__init__(f"AI provider returned {status_code}")
        self.status_code = status_code
        self.details = details


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services.
    """

    @abstractmethod
    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
    ) -> str:
        """
        Run a chat completion over a full message list.

        Args:
            messages: Messages in order, system prompt included
                Format: [{"role": "system"|"user"|"assistant", "content": "..."}]
            temperature: Sampling temperature

        Returns:
            Text of the first choice, or "" when the provider returned none

        Raises:
            AIProviderError: If the provider answers with an error status
        """
        pass
