"""
Google OAuth Client - Server side of the authorization code flow.

Two outbound calls, both made with httpx:
1. exchange_code_for_token() → POST form to the token endpoint
2. get_user_info()           → GET userinfo with the Bearer token

Every failure is raised as one of the OAuthError subclasses from
app.environments.base; nothing is retried.

References:
===========
- OAuth 2.0: https://developers.google.com/identity/protocols/oauth2
- Token endpoint: https://oauth2.googleapis.com/token
- Userinfo: https://www.googleapis.com/oauth2/v2/userinfo
"""

import logging
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings
from app.environments.base import (
    MalformedResponseError,
    MissingAccessTokenError,
    OAuthNotConfiguredError,
    ProviderRejectedError,
    ProviderTransportError,
)
from app.environments.google.auth.schemas import (
    GoogleTokenRequest,
    GoogleTokenResponse,
)


logger = logging.getLogger("expense_auth.environments.google.auth")

# Longest slice of a non-JSON error body written to the log
_MAX_LOGGED_BODY = 500


def _provider_error_detail(response: httpx.Response) -> Optional[str]:
    """
    Pull a short error description out of a failed Google reply.

    Token endpoint errors look like:
        {"error": "invalid_grant", "error_description": "Bad Request"}
    Userinfo errors look like:
        {"error": {"code": 401, "message": "...", "status": "UNAUTHENTICATED"}}

    Bodies that are not JSON (proxy error pages and the like) are only
    logged; callers get the HTTP reason phrase.
    """
    try:
        body = response.json()
    except ValueError:
        logger.warning(
            f"Non-JSON error body from {response.request.url} "
            f"(HTTP {response.status_code}): {response.text[:_MAX_LOGGED_BODY]!r}"
        )
        return response.reason_phrase or None

    if not isinstance(body, dict):
        return response.reason_phrase or None

    error = body.get("error")
    if isinstance(error, dict):
        return error.get("message") or error.get("status")
    if error:
        description = body.get("error_description")
        return f"{error}: {description}" if description else str(error)
    return response.reason_phrase or None


def _json_object(response: httpx.Response, what: str) -> Dict[str, Any]:
    """Decode a reply body that must be a JSON object."""
    try:
        body = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"{what} reply is not valid JSON: {e}")
    if not isinstance(body, dict):
        raise MalformedResponseError(
            f"{what} reply is a JSON {type(body).__name__}, expected an object"
        )
    return body


class GoogleAuthClient:
    """
    Google OAuth 2.0 client for the callback flow.

    Example Usage:
        client = GoogleAuthClient()
        tokens = await client.exchange_code_for_token(code="4/0Ab...")
        profile = await client.get_user_info(tokens.access_token)

    Credentials default to the values in settings. `transport` lets tests
    substitute an httpx.MockTransport for the network.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        token_url: Optional[str] = None,
        userinfo_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id or settings.GOOGLE_CLIENT_ID
        self.client_secret = client_secret or settings.GOOGLE_CLIENT_SECRET.get_secret_value()
        self.redirect_uri = redirect_uri or settings.GOOGLE_REDIRECT_URI
        self.token_url = token_url or settings.GOOGLE_TOKEN_URL
        self.userinfo_url = userinfo_url or settings.GOOGLE_USERINFO_URL
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        """
        True when this client has both a client ID and secret.

        Checks the instance's own credentials, which may have been passed
        to the constructor instead of coming from settings.
        """
        return bool(self.client_id and self.client_secret)

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    # -------------------------------------------------------------------------
    # TOKEN EXCHANGE
    # -------------------------------------------------------------------------

    async def exchange_code_for_token(self, code: str) -> GoogleTokenResponse:
        """
        Exchange an authorization code for an access token.

        The code is forwarded as-is; Google is the one that rejects
        empty or malformed codes.

        Args:
            code: Authorization code from the OAuth redirect

        Returns:
            GoogleTokenResponse with a non-empty access_token

        Raises:
            OAuthNotConfiguredError: Client ID or secret missing
            ProviderTransportError: Google could not be reached
            ProviderRejectedError: Token endpoint answered non-2xx
            MalformedResponseError: Reply is not a JSON object
            MissingAccessTokenError: Reply has no usable access_token
        """
        if not self.is_configured:
            raise OAuthNotConfiguredError("GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET not set")

        token_request = GoogleTokenRequest(
            code=code,
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
        )

        logger.info("Exchanging authorization code for tokens")

        async with self._http_client() as client:
            try:
                response = await client.post(self.token_url, data=token_request.to_form())
            except httpx.RequestError as e:
                raise ProviderTransportError(f"Network error during token exchange: {e!r}")

        if not response.is_success:
            raise ProviderRejectedError(
                stage="token_exchange",
                status_code=response.status_code,
                provider_detail=_provider_error_detail(response),
            )

        body = _json_object(response, "Token endpoint")

        access_token = body.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise MissingAccessTokenError(
                f"Token endpoint reply has no access_token (keys: {sorted(body)})"
            )

        token_response = GoogleTokenResponse.from_reply(body)

        logger.info(
            f"Obtained Google access token (expires_in={token_response.expires_in}, "
            f"scopes={' '.join(token_response.get_scopes_list()) or 'none'})"
        )
        return token_response

    # -------------------------------------------------------------------------
    # USER INFO
    # -------------------------------------------------------------------------

    async def get_user_info(self, access_token: str) -> Dict[str, Any]:
        """
        Fetch the user's profile from the userinfo endpoint.

        Args:
            access_token: Access token from exchange_code_for_token()

        Returns:
            The userinfo JSON object, unmodified

        Raises:
            ProviderTransportError: Google could not be reached
            ProviderRejectedError: Userinfo endpoint answered non-2xx
            MalformedResponseError: Reply is not a JSON object
        """
        logger.info("Fetching user info from Google")

        async with self._http_client() as client:
            try:
                response = await client.get(
                    self.userinfo_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
            except httpx.RequestError as e:
                raise ProviderTransportError(f"Network error fetching user info: {e!r}")

        if not response.is_success:
            raise ProviderRejectedError(
                stage="userinfo",
                status_code=response.status_code,
                provider_detail=_provider_error_detail(response),
            )

        return _json_object(response, "Userinfo endpoint")
