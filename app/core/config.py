"""
Configuration module - centralized settings for the auth service.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CORS_ORIGINS = [
    "https://expensetrackinghub.expense-tracking.com",
    "https://expensetrackinghub-95d6abf7a695.herokuapp.com",
    "http://localhost:8080",
]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Settings are frozen: they are read once at process startup and
    shared by every request. Each deployment (local, staging, production)
    provides its own environment, e.g.:
        export GOOGLE_CLIENT_ID=1234-abc.apps.googleusercontent.com
        export GOOGLE_CLIENT_SECRET=GOCSPX-...
        export GOOGLE_REDIRECT_URI=https://your-domain.com/auth/callback
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "Expense Tracking Hub Auth"

    # ENVIRONMENT: development / staging / production (logged at startup)
    ENVIRONMENT: str = "development"

    DEBUG: bool = False

    # LOG_LEVEL: Level for the expense_auth logger hierarchy
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # GOOGLE OAUTH SETTINGS
    # ---------------------------------------------------------------------------
    # Google Cloud Console: https://console.cloud.google.com/apis/credentials
    # The redirect URI must match exactly what's configured for the client.
    GOOGLE_CLIENT_ID: str = ""

    # Never logged; read with .get_secret_value()
    GOOGLE_CLIENT_SECRET: SecretStr = SecretStr("")

    GOOGLE_REDIRECT_URI: str = "http://localhost:8080/auth/callback"

    GOOGLE_TOKEN_URL: str = "https://oauth2.googleapis.com/token"
    GOOGLE_USERINFO_URL: str = "https://www.googleapis.com/oauth2/v2/userinfo"

    # Timeout applied to each outbound call to Google
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # ---------------------------------------------------------------------------
    # CORS SETTINGS
    # ---------------------------------------------------------------------------
    # CORS_ORIGINS: Web origins allowed to call the API from a browser.
    # Set as a JSON list in the environment:
    #   export CORS_ORIGINS='["https://app.example.com"]'
    CORS_ORIGINS: list[str] = DEFAULT_CORS_ORIGINS

    # ---------------------------------------------------------------------------
    # DEVELOPMENT TOOLS
    # ---------------------------------------------------------------------------
    # ENABLE_DEV_ROUTES: Mount GET /auth/callbacks, which echoes the
    # authorization code to the log for manual redirect testing.
    # Keep disabled in production.
    ENABLE_DEV_ROUTES: bool = False

    @property
    def google_oauth_configured(self) -> bool:
        """True when both the client ID and secret are set."""
        return bool(self.GOOGLE_CLIENT_ID and self.GOOGLE_CLIENT_SECRET.get_secret_value())


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from app.core.config import settings
settings = Settings()
