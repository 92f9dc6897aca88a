"""
Google Environment Module - Google sign-in for the Expense Tracking Hub.

Usage:
======
    from app.environments.google import GoogleAuthClient

    auth_client = GoogleAuthClient()
    tokens = await auth_client.exchange_code_for_token(code)
    profile = await auth_client.get_user_info(tokens.access_token)
"""

from app.environments.google.auth import GoogleAuthClient, GoogleTokenResponse

__all__ = [
    "GoogleAuthClient",
    "GoogleTokenResponse",
]
