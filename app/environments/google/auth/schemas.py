"""
Google OAuth Schemas - Data structures for the Google token exchange.

The userinfo reply has no schema here on purpose: it is passed through
to the caller exactly as Google returns it.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# TOKEN REQUEST
# ---------------------------------------------------------------------------

class GoogleTokenRequest(BaseModel):
    """
    Form body sent to Google's token endpoint.

    Only `code` comes from the caller; the rest is deployment configuration.
    """
    code: str = Field(..., description="Authorization code from the redirect")
    client_id: str = Field(..., description="Google OAuth Client ID")
    client_secret: str = Field(..., description="Google OAuth Client Secret")
    redirect_uri: str = Field(..., description="Redirect URI used in authorization")
    grant_type: str = Field(default="authorization_code")

    def to_form(self) -> dict[str, str]:
        """Return the request as form fields."""
        return self.model_dump()


# ---------------------------------------------------------------------------
# TOKEN RESPONSE
# ---------------------------------------------------------------------------

class GoogleTokenResponse(BaseModel):
    """
    Response from Google's token endpoint.

    Example response from Google:
    {
        "access_token": "ya29.a0AfB_byC...",
        "expires_in": 3599,
        "scope": "openid https://www.googleapis.com/auth/userinfo.email",
        "token_type": "Bearer",
        "id_token": "eyJhbGciOiJSUzI1NiIs..."
    }
    """
    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1, description="OAuth access token")
    token_type: str = Field(default="Bearer", description="Token type (usually Bearer)")
    expires_in: Optional[int] = Field(None, description="Seconds until expiration")
    refresh_token: Optional[str] = Field(None, description="Refresh token (unused)")
    scope: Optional[str] = Field(None, description="Space-separated scopes granted")
    id_token: Optional[str] = Field(None, description="JWT with user info (OpenID)")

    @classmethod
    def from_reply(cls, body: Dict[str, Any]) -> "GoogleTokenResponse":
        """
        Build from a token endpoint reply, keeping only access_token strict.

        Optional fields of an unexpected type are dropped rather than
        rejected, since nothing here depends on them.
        """
        def typed(key: str, kind: type) -> Any:
            value = body.get(key)
            if isinstance(value, bool) or not isinstance(value, kind):
                return None
            return value

        return cls(
            access_token=body["access_token"],
            token_type=typed("token_type", str) or "Bearer",
            expires_in=typed("expires_in", int),
            refresh_token=typed("refresh_token", str),
            scope=typed("scope", str),
            id_token=typed("id_token", str),
        )

    def get_scopes_list(self) -> List[str]:
        """Convert space-separated scope string to list."""
        if self.scope:
            return self.scope.split()
        return []
