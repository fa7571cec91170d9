"""
Authentication module - Pluggable auth providers (Firebase).
"""

from common.auth.base import AuthProvider, AuthConfigurationError
from common.auth.firebase_auth import FirebaseAuth, build_credentials_dict
from common.auth.dependencies import create_auth_dependency

__all__ = [
    "AuthProvider",
    "AuthConfigurationError",
    "FirebaseAuth",
    "build_credentials_dict",
    "create_auth_dependency",
]
