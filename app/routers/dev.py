"""
Development router - manual testing aid for the Google redirect.

Point the OAuth client's redirect URI at /auth/callbacks to see the
authorization code Google hands back, without running the exchange.
Only mounted when ENABLE_DEV_ROUTES is on.
"""

import logging

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse


logger = logging.getLogger("expense_auth.routers.dev")

ACKNOWLEDGEMENT = "Authorization code received! You can close this page."


router = APIRouter(prefix="/auth", tags=["dev"])


@router.get("/callbacks", response_class=PlainTextResponse)
def log_callback(code: str = Query(..., description="Authorization code from Google")):
    """Log the authorization code and acknowledge it. No outbound calls."""
    logger.info(f"Authorization code: {code}")
    return ACKNOWLEDGEMENT
