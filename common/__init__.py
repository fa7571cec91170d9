"""
Common library for reusable infrastructure components.

- database: Async MongoDB connection with Motor
- auth: Pluggable authentication (Firebase)
- ai: Pluggable chat completion providers (OpenAI-compatible)
- utils: Standard responses and exceptions
- config: Base settings class
"""

from common.database import MongoDB
from common.auth import AuthProvider, FirebaseAuth, create_auth_dependency
from common.ai import AIProvider, AIProviderError, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    ValidationException,
    ConfigurationException,
    BadGatewayException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Auth
    "AuthProvider",
    "FirebaseAuth",
    "create_auth_dependency",
    # AI
    "AIProvider",
    "AIProviderError",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "ValidationException",
    "ConfigurationException",
    "BadGatewayException",
    # Config
    "BaseAppSettings",
]
