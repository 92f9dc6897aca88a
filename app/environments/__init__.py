"""
Environments Module - External OAuth provider integrations.

Architecture Overview:
======================
environments/
├── __init__.py           # Module exports
├── base.py               # Error taxonomy shared by provider clients
└── google/
    ├── __init__.py
    └── auth/             # Google OAuth authorization code flow
        ├── __init__.py
        ├── client.py     # Token exchange + userinfo calls
        └── schemas.py    # Token request/response models
"""

from app.environments.base import (
    OAuthError,
    OAuthNotConfiguredError,
    ProviderTransportError,
    ProviderRejectedError,
    MalformedResponseError,
    MissingAccessTokenError,
)

__all__ = [
    "OAuthError",
    "OAuthNotConfiguredError",
    "ProviderTransportError",
    "ProviderRejectedError",
    "MalformedResponseError",
    "MissingAccessTokenError",
]
