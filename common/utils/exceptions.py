"""
HTTP exceptions with machine-readable error codes.

Every exception renders as ``{"detail": {"message", "code", "details"?}}``
through FastAPI's default HTTPException handler.

Example:
    from common.utils import ConfigurationException

    @app.post("/api/chat")
    async def chat():
        if not settings.GROQ_API_KEY:
            raise ConfigurationException("Missing GROQ_API_KEY")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception.

    Also used directly when the status code is only known at runtime,
    e.g. when mirroring an upstream error.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        detail: Dict[str, Any] = {"message": message}
        if code:
            detail["code"] = code
        if details is not None:
            detail["details"] = details

        self.message = message
        self.code = code

        super().__init__(status_code=status_code, detail=detail, headers=headers)


class BadRequestException(APIException):
    """400 - Malformed or rejected input."""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST", details: Optional[Any] = None):
        super().__init__(400, message, code, details)


class UnauthorizedException(APIException):
    """401 - Missing or invalid ID token."""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED", details: Optional[Any] = None):
        super().__init__(401, message, code, details)


class ForbiddenException(APIException):
    """403 - Signed in, but not allowed yet."""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN", details: Optional[Any] = None):
        super().__init__(403, message, code, details)


class ValidationException(APIException):
    """422 - Well-formed input that breaks a business rule."""

    def __init__(self, message: str = "Validation error", code: str = "VALIDATION_ERROR", details: Optional[Any] = None):
        super().__init__(422, message, code, details)


class InternalServerException(APIException):
    """500 - Unexpected server error."""

    def __init__(self, message: str = "Internal server error", code: str = "INTERNAL_ERROR", details: Optional[Any] = None):
        super().__init__(500, message, code, details)


class ConfigurationException(InternalServerException):
    """500 - A credential or setting the request needs is not configured."""

    def __init__(self, message: str = "Server is not configured", code: str = "CONFIGURATION_ERROR", details: Optional[Any] = None):
        super().__init__(message, code, details)


class BadGatewayException(APIException):
    """502 - An upstream service failed."""

    def __init__(self, message: str = "Upstream service error", code: str = "BAD_GATEWAY", details: Optional[Any] = None):
        super().__init__(502, message, code, details)
