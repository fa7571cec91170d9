"""
OpenAI-compatible chat completion provider.

Works against any service that speaks the OpenAI chat completions API.
Groq is reached by pointing ``base_url`` at its OpenAI-compatible endpoint.

Example:
    from common.ai import OpenAIProvider

    groq = OpenAIProvider(
        api_key="your-api-key",
        model="llama-3.3-70b-versatile",
        base_url="https://api.groq.com/openai/v1",
    )
    text = await groq.complete([
        {"role": "system", "content": "You are a helpful assistant."},
        {"role": "user", "content": "Hello"},
    ])
"""

import logging
from typing import Optional, List, Dict

from common.ai.base import AIProvider, AIProviderError

logger = logging.getLogger(__name__)


class OpenAIProvider(AIProvider):
    """
    OpenAI-compatible provider.

    Uses the OpenAI async client for API calls. Requests are not retried.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: Optional[str] = None,
        max_retries: int = 0,
        timeout: float = 60.0,
        http_client=None,
    ):
        """
        Initialize the provider.

        Args:
            api_key: API key sent as a Bearer token
            model: Chat model to use
            base_url: API base URL (None for api.openai.com)
            max_retries: Number of SDK-level retries for failed requests
            timeout: Request timeout in seconds
            http_client: Optional httpx.AsyncClient for the SDK to use
        """
        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError(
                "openai package is required for OpenAI-compatible providers. "
                "Install with: pip install openai"
            )

        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=max_retries,
            timeout=timeout,
            http_client=http_client,
        )
        self.model = model

    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
    ) -> str:
        """Send the message list and return the first choice's text."""
        from openai import APIStatusError

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
            )
        except APIStatusError as e:
            logger.warning(f"Completion request failed with status {e.status_code}")
            raise AIProviderError(e.status_code, e.response.text) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
