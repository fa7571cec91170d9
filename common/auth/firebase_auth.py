"""
Firebase Admin SDK authentication provider.

Uses Firebase Authentication for token verification and user management,
and the Identity Toolkit REST API for email/password sign-in and sign-up.

Example:
    auth = FirebaseAuth(
        credentials_dict=build_credentials_dict(project_id, client_email, private_key),
        api_key="web-api-key",
    )

    # Verify ID token from client
    claims = await auth.verify_token(id_token)
    print(claims["uid"])  # Firebase user ID

    # Sign in with email/password (via REST API)
    session = await auth.sign_in_with_password("user@example.com", "password123")
"""

import logging
from typing import Dict, Any, Optional

import httpx

from common.auth.base import AuthProvider, AuthConfigurationError

logger = logging.getLogger(__name__)

# REST error codes that all mean "wrong email or password"
_INVALID_LOGIN_ERRORS = {"EMAIL_NOT_FOUND", "INVALID_PASSWORD", "INVALID_LOGIN_CREDENTIALS"}


def build_credentials_dict(
    project_id: Optional[str],
    client_email: Optional[str],
    private_key: Optional[str],
) -> Optional[Dict[str, Any]]:
    """
    Build a service account dict from the three inline credential values.

    Environment files usually carry the private key on one line with
    literal ``\\n`` sequences; those are turned back into newlines.

    Returns:
        Credentials dict, or None if any value is missing
    """
    if not project_id or not client_email or not private_key:
        return None

    return {
        "type": "service_account",
        "project_id": project_id.strip(),
        "client_email": client_email.strip(),
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": "https://oauth2.googleapis.com/token",
    }


class FirebaseAuth(AuthProvider):
    """
    Firebase Admin SDK authentication provider.

    Handles:
    - ID token verification and revocation
    - Email/password sign-in and sign-up
    - Display name updates
    """

    # Firebase REST API base URL
    FIREBASE_AUTH_URL = "https://identitytoolkit.googleapis.com/v1/accounts"

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        credentials_dict: Optional[Dict[str, Any]] = None,
        project_id: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Firebase auth provider.

        Args:
            credentials_path: Path to service account JSON file
            credentials_dict: Service account credentials as dict (alternative to path)
            project_id: Firebase project ID (optional, can be inferred from credentials)
            api_key: Firebase Web API Key (for REST API authentication)
            timeout: Timeout for REST calls in seconds
            transport: Optional httpx transport for the REST calls

        Raises:
            AuthConfigurationError: If no admin credentials are given
        """
        try:
            import firebase_admin
            from firebase_admin import credentials, auth
        except ImportError:
            raise ImportError(
                "firebase-admin package is required for Firebase authentication. "
                "Install with: pip install firebase-admin"
            )

        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

        # Initialize Firebase app if not already done
        if not firebase_admin._apps:
            if credentials_path:
                cred = credentials.Certificate(credentials_path)
            elif credentials_dict:
                cred = credentials.Certificate(credentials_dict)
            else:
                raise AuthConfigurationError("Missing Firebase Admin credentials")

            options = {}
            if project_id:
                options["projectId"] = project_id

            firebase_admin.initialize_app(cred, options)
            logger.info("Firebase Admin app initialized")

        self._auth = auth

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify a Firebase ID token, rejecting tokens of signed-out users."""
        try:
            decoded = self._auth.verify_id_token(token, check_revoked=True)
            # Add 'sub' field so callers can read either key
            decoded["sub"] = decoded.get("uid")
            return decoded
        except self._auth.RevokedIdTokenError:
            raise ValueError("Token has been revoked")
        except self._auth.ExpiredIdTokenError:
            raise ValueError("Token has expired")
        except self._auth.InvalidIdTokenError as e:
            raise ValueError(f"Invalid token: {e}")
        except Exception as e:
            raise ValueError(f"Token verification failed: {e}")

    async def sign_in_with_password(
        self,
        email: str,
        password: str,
    ) -> Dict[str, Any]:
        """
        Sign in with email and password using Firebase REST API.

        Raises:
            ValueError: If credentials are invalid
            AuthConfigurationError: If the web API key is missing
        """
        return await self._password_request("signInWithPassword", email, password)

    async def sign_up_with_password(
        self,
        email: str,
        password: str,
    ) -> Dict[str, Any]:
        """
        Create an email/password account using Firebase REST API.

        Raises:
            ValueError: If the email is taken or the password is rejected
            AuthConfigurationError: If the web API key is missing
        """
        return await self._password_request("signUp", email, password)

    async def _password_request(
        self,
        action: str,
        email: str,
        password: str,
    ) -> Dict[str, Any]:
        if not self._api_key:
            raise AuthConfigurationError(
                "Firebase API key is required for email/password authentication. "
                "Set FIREBASE_API_KEY environment variable."
            )

        url = f"{self.FIREBASE_AUTH_URL}:{action}?key={self._api_key}"

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                url,
                json={
                    "email": email,
                    "password": password,
                    "returnSecureToken": True,
                },
            )

        if response.status_code != 200:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            error_message = error_data.get("error", {}).get("message", "Unknown error")
            raise ValueError(self._describe_error(error_message))

        data = response.json()

        return {
            "uid": data.get("localId"),
            "email": data.get("email"),
            "displayName": data.get("displayName"),
            "idToken": data.get("idToken"),
            "refreshToken": data.get("refreshToken"),
            "expiresIn": data.get("expiresIn"),
        }

    @staticmethod
    def _describe_error(error_message: str) -> str:
        """Turn an Identity Toolkit error code into a user-facing message."""
        if error_message in _INVALID_LOGIN_ERRORS:
            return "Invalid email or password"
        if error_message == "USER_DISABLED":
            return "Account has been disabled"
        if error_message == "TOO_MANY_ATTEMPTS_TRY_LATER":
            return "Too many failed attempts. Please try again later."
        if error_message == "EMAIL_EXISTS":
            return "Email already registered"
        if error_message == "INVALID_EMAIL":
            return "Invalid email address"
        if error_message.startswith("WEAK_PASSWORD"):
            return "Password should be at least 6 characters"
        return f"Authentication failed: {error_message}"

    async def revoke_token(self, token: str) -> None:
        """Revoke all refresh tokens for a user."""
        try:
            # First verify the token to get the user ID
            decoded = self._auth.verify_id_token(token)
            uid = decoded.get("uid")
            if uid:
                self._auth.revoke_refresh_tokens(uid)
        except Exception as e:
            raise ValueError(f"Failed to revoke token: {e}")

    async def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get Firebase user by UID."""
        try:
            user = self._auth.get_user(user_id)
            return self._user_to_dict(user)
        except self._auth.UserNotFoundError:
            return None
        except Exception as e:
            raise ValueError(f"Failed to get user: {e}")

    async def update_user(
        self,
        user_id: str,
        **updates: Any,
    ) -> Dict[str, Any]:
        """Update Firebase user."""
        allowed = {"email", "password", "display_name", "photo_url", "disabled", "email_verified"}
        firebase_updates = {key: value for key, value in updates.items() if key in allowed}

        try:
            user = self._auth.update_user(user_id, **firebase_updates)
            return self._user_to_dict(user)
        except self._auth.UserNotFoundError:
            raise ValueError("User not found")
        except Exception as e:
            raise ValueError(f"Failed to update user: {e}")

    @staticmethod
    def _user_to_dict(user) -> Dict[str, Any]:
        return {
            "id": user.uid,
            "uid": user.uid,
            "email": user.email,
            "email_verified": user.email_verified,
            "display_name": user.display_name,
            "photo_url": user.photo_url,
            "disabled": user.disabled,
        }
