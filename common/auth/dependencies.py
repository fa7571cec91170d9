"""
FastAPI authentication dependencies.

Provides a factory that turns any AuthProvider into a route dependency.

Example:
    from common.auth import create_auth_dependency

    require_auth = create_auth_dependency(get_firebase_auth)

    @app.get("/api/session")
    async def session(user: dict = Depends(require_auth)):
        return {"uid": user["uid"]}
"""

from typing import Any, Callable, Dict, Optional
from fastapi import Header

from common.auth.base import AuthProvider
from common.utils.exceptions import UnauthorizedException


def create_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create FastAPI auth dependencies.

    The provider is only requested once a token has been extracted, so a
    request without credentials is rejected with 401 even when the
    provider itself is not configured.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        header_name: Header to extract token from (default: Authorization)
        scheme: Auth scheme prefix (default: Bearer)

    Returns:
        A FastAPI dependency returning the verified user
        (uid, email, name and the raw token)
    """

    async def get_current_user(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> Dict[str, Any]:
        """
        Extract and verify the user from the authorization header.

        Raises:
            UnauthorizedException: If token is missing, invalid, or expired
        """
        if not authorization:
            raise UnauthorizedException("Missing authorization header")

        # Extract token from header
        prefix = f"{scheme} "
        if not authorization.startswith(prefix):
            raise UnauthorizedException(
                f"Invalid authorization scheme. Expected: {scheme}",
                code="INVALID_AUTH_SCHEME",
            )

        token = authorization[len(prefix):].strip()

        if not token:
            raise UnauthorizedException("Token is empty", code="EMPTY_TOKEN")

        # Verify token
        auth = get_auth_provider()
        try:
            payload = await auth.verify_token(token)
        except ValueError as e:
            raise UnauthorizedException(str(e), code="INVALID_TOKEN")

        user_id = payload.get("sub") or payload.get("uid")
        if not user_id:
            raise UnauthorizedException("Token missing user ID", code="INVALID_TOKEN")

        return {
            "uid": user_id,
            "email": payload.get("email"),
            "name": payload.get("name"),
            "token": token,
        }

    return get_current_user
