"""
Auth router - Google sign-in callback for the Expense Tracking Hub frontends.

Endpoints:
==========
- POST /auth/callback → Exchange an authorization code for the Google profile

The frontend receives `?code=...` from Google's redirect and posts it here.
The response is the userinfo JSON exactly as Google returns it.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from app.deps import get_authorization_code, get_google_auth_client
from app.environments.base import OAuthError, OAuthNotConfiguredError
from app.environments.google import GoogleAuthClient
from app.services.oauth_callback import handle_callback


logger = logging.getLogger("expense_auth.routers.auth")

# Prefix of every error body returned by the callback
ERROR_PREFIX = "Error during Google OAuth"


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/auth", tags=["auth"])


# ---------------------------------------------------------------------------
# POST /auth/callback - Authorization code → Google profile
# ---------------------------------------------------------------------------
@router.post(
    "/callback",
    responses={
        200: {"description": "Google userinfo profile, unmodified"},
        500: {"description": "Token exchange or profile fetch failed", "content": {"text/plain": {}}},
        503: {"description": "Google OAuth credentials not configured", "content": {"text/plain": {}}},
    },
)
async def oauth_callback(
    code: str = Depends(get_authorization_code),
    auth_client: GoogleAuthClient = Depends(get_google_auth_client),
):
    """
    Exchange a Google authorization code for the user's profile.

    Args:
        code: Authorization code from the query string or form body
        auth_client: Google OAuth client

    Returns:
        200 JSON: the userinfo response body
        500 text: "Error during Google OAuth: <error_code>[: <provider detail>]"
        503 text: OAuth credentials are missing on the server
    """
    logger.info("OAuth callback received")

    try:
        profile = await handle_callback(code, auth_client)
    except OAuthNotConfiguredError as e:
        logger.error(f"Google OAuth not configured: {e.detail}")
        return PlainTextResponse(
            "Google OAuth is not configured",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    except OAuthError as e:
        logger.error(f"Google OAuth callback failed [{e.error_code}]: {e.detail}")
        return PlainTextResponse(
            f"{ERROR_PREFIX}: {e.public_message}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return JSONResponse(content=profile)
