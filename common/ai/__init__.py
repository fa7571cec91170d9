"""
AI module - Pluggable chat completion providers.
"""

from common.ai.base import AIProvider, AIProviderError
from common.ai.openai import OpenAIProvider

__all__ = ["AIProvider", "AIProviderError", "OpenAIProvider"]
