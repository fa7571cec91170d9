"""
Abstract authentication provider interface.

Defines the contract that identity providers must implement.
Routes and dependencies only talk to this interface, so tests and
alternative identity platforms can stand in for Firebase.

Example:
    from common.auth import AuthProvider, FirebaseAuth

    def get_auth_provider(settings) -> AuthProvider:
        return FirebaseAuth(credentials_path=settings.FIREBASE_CREDENTIALS_PATH)
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    All methods are async to support both sync and async implementations.
    """

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: sub/uid)

        Raises:
            ValueError: If token is invalid, expired, or revoked
        """
        pass

    @abstractmethod
    async def sign_in_with_password(
        self,
        email: str,
        password: str,
    ) -> Dict[str, Any]:
        """
        Sign in with email and password.

        Returns:
            Dict containing uid, email, idToken, refreshToken, expiresIn

        Raises:
            ValueError: If credentials are invalid
        """
        pass

    @abstractmethod
    async def sign_up_with_password(
        self,
        email: str,
        password: str,
    ) -> Dict[str, Any]:
        """
        Create an account with email and password and sign it in.

        Returns:
            Dict containing uid, email, idToken, refreshToken, expiresIn

        Raises:
            ValueError: If the email is taken or the password is rejected
        """
        pass

    @abstractmethod
    async def revoke_token(self, token: str) -> None:
        """
        Revoke all sessions belonging to the token's user.

        Args:
            token: A currently valid ID token
        """
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get user information by ID.

        Returns:
            User info dict or None if not found
        """
        pass

    @abstractmethod
    async def update_user(
        self,
        user_id: str,
        **updates: Any,
    ) -> Dict[str, Any]:
        """
        Update user information.

        Args:
            user_id: The user's ID
            **updates: Fields to update (display_name, photo_url, ...)

        Returns:
            Updated user info

        Raises:
            ValueError: If user is not found
        """
        pass


class AuthConfigurationError(RuntimeError):
    """Raised when a provider is missing the credentials it needs."""
