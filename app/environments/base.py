"""
Error types for calls to external OAuth providers.

Each failure kind in the authorization code flow has its own exception,
so the callback route can tell a network failure from a rejected code or
a malformed provider reply without parsing message text.

Hierarchy:
==========
OAuthError
├── OAuthNotConfiguredError   client credentials missing
├── ProviderTransportError    network error / timeout
├── ProviderRejectedError     non-2xx reply (token exchange or userinfo)
├── MalformedResponseError    reply body is not a JSON object
└── MissingAccessTokenError   token reply has no usable access_token
"""

from typing import Optional


class OAuthError(Exception):
    """
    Base exception for all OAuth provider errors.

    Attributes:
        error_code: Stable, machine-readable identifier safe to return to callers
        detail: Internal description, for logs only
    """

    error_code: str = "oauth_error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.error_code)
        self.detail = detail

    @property
    def public_message(self) -> str:
        """Message that may be shown to API callers."""
        return self.error_code


class OAuthNotConfiguredError(OAuthError):
    """Raised when the OAuth client ID or secret is not configured."""

    error_code = "oauth_not_configured"


class ProviderTransportError(OAuthError):
    """Raised when the provider cannot be reached (connect/read error, timeout)."""

    error_code = "provider_unreachable"


class ProviderRejectedError(OAuthError):
    """
    Raised when the provider answers with a non-2xx status.

    provider_detail holds the provider's own error text (e.g.
    "invalid_grant: Bad Request"), which is passed on to callers.
    """

    def __init__(
        self,
        stage: str,
        status_code: int,
        provider_detail: Optional[str] = None,
    ):
        self.stage = stage
        self.status_code = status_code
        self.provider_detail = provider_detail
        self.error_code = f"provider_rejected_{stage}"
        super().__init__(
            f"{stage} returned HTTP {status_code}: {provider_detail or 'no detail'}"
        )

    @property
    def public_message(self) -> str:
        if self.provider_detail:
            return f"{self.error_code}: {self.provider_detail}"
        return self.error_code


class MalformedResponseError(OAuthError):
    """Raised when a provider reply cannot be decoded as a JSON object."""

    error_code = "malformed_provider_response"


class MissingAccessTokenError(OAuthError):
    """Raised when the token endpoint reply carries no usable access_token."""

    error_code = "missing_access_token"
