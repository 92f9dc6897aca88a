"""
OAuth callback service - turns an authorization code into a Google profile.

Flow:
1. Exchange the code for an access token (token endpoint)
2. Read the profile with that token (userinfo endpoint)
3. Return the profile unchanged

The second call is never made when the first one fails. Errors are
raised as OAuthError subclasses; converting them to HTTP responses is
the router's job.
"""

import logging
from typing import Any, Dict

from app.environments.google import GoogleAuthClient


logger = logging.getLogger("expense_auth.services.oauth_callback")


async def handle_callback(code: str, auth_client: GoogleAuthClient) -> Dict[str, Any]:
    """
    Run the authorization code exchange and return the user's profile.

    Args:
        code: Authorization code, forwarded without validation
        auth_client: Google OAuth client to use for both calls

    Returns:
        The userinfo JSON object exactly as Google returned it

    Raises:
        OAuthError: Any failure in either call (see app.environments.base)
    """
    tokens = await auth_client.exchange_code_for_token(code)
    profile = await auth_client.get_user_info(tokens.access_token)

    logger.info(f"Google sign-in completed (profile fields: {', '.join(sorted(profile))})")
    return profile
