"""
Google Auth Module - OAuth 2.0 authorization code exchange.

Flow handled here:
==================
1. Google redirects the user to the frontend with ?code=...
2. The frontend posts the code to POST /auth/callback
3. The code is exchanged for an access token at the token endpoint
4. The access token is used once to read the userinfo endpoint
5. The profile is returned to the frontend; no token is stored
"""

from app.environments.google.auth.client import GoogleAuthClient
from app.environments.google.auth.schemas import (
    GoogleTokenRequest,
    GoogleTokenResponse,
)

__all__ = [
    "GoogleAuthClient",
    "GoogleTokenRequest",
    "GoogleTokenResponse",
]
