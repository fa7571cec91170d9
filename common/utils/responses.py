"""
Response envelopes.

Success bodies are ``{"success": true, "data"?, "message"?}``. Endpoints
that must answer 200 with a negative verdict (captcha) use the error
envelope ``{"success": false, "error": {"message", "code"?, "details"?}}``.

Example:
    from common.utils import success_response, error_response

    @app.post("/api/verify-turnstile")
    async def verify(body: TurnstileVerifyRequest):
        if not await verifier.verify(body.token):
            return error_response("Captcha verification failed", code="CAPTCHA_FAILED")
        return success_response(message="Captcha verified")
"""

from typing import Any, Optional, Dict


def success_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Wrap a payload in the success envelope. ``None`` data is omitted."""
    response: Dict[str, Any] = {"success": True}
    if data is not None:
        response["data"] = data
    if message:
        response["message"] = message
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """Build the error envelope for a JSONResponse body."""
    error: Dict[str, Any] = {"message": message}
    if code:
        error["code"] = code
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error}
