"""
Main application entry point - FastAPI app instance and configuration.
This is where the ASGI application is created and configured.
Run with: uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI

from app.core.config import Settings, settings
from app.core.cors import install_cors
from app.core.logger import configure_logging
from app.routers import auth, dev


logger = logging.getLogger("expense_auth.main")


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Build the ASGI application.

    Args:
        app_settings: Settings to build with (defaults to the global instance)

    Returns:
        Configured FastAPI application
    """
    configure_logging(app_settings.LOG_LEVEL)

    application = FastAPI(
        title=app_settings.APP_NAME,
        debug=app_settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ---------------------------------------------------------------------------
    # CORS
    # ---------------------------------------------------------------------------
    # Only the Expense Tracking Hub web origins may call the API from a browser.
    allowed_origins = install_cors(application, app_settings.CORS_ORIGINS)

    # ---------------------------------------------------------------------------
    # REGISTER ROUTERS
    # ---------------------------------------------------------------------------
    # auth.router: POST /auth/callback
    # dev.router:  GET /auth/callbacks (development only)
    application.include_router(auth.router)
    if app_settings.ENABLE_DEV_ROUTES:
        application.include_router(dev.router)
        logger.warning("Development routes enabled: GET /auth/callbacks logs authorization codes")

    # ---------------------------------------------------------------------------
    # HEALTH CHECK ENDPOINT
    # ---------------------------------------------------------------------------
    @application.get("/health", tags=["health"])
    def health_check():
        """
        Simple health check endpoint for platform probes.

        Does NOT call Google; only reports whether credentials are set.
        """
        return {"status": "ok", "oauth_configured": app_settings.google_oauth_configured}

    if not app_settings.google_oauth_configured:
        logger.warning(
            "Google OAuth not configured. Set GOOGLE_CLIENT_ID and "
            "GOOGLE_CLIENT_SECRET in environment variables."
        )

    logger.info(
        f"{app_settings.APP_NAME} started (environment={app_settings.ENVIRONMENT}, "
        f"redirect_uri={app_settings.GOOGLE_REDIRECT_URI}, "
        f"cors_origins={', '.join(allowed_origins)})"
    )

    return application


app = create_app()
