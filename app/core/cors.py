"""
Cross-origin policy for browser callers.

Starlette's CORSMiddleware only decides which CORS headers to send; a
simple cross-origin POST from an unknown site would still reach the
route. install_cors() adds CORSMiddleware for allowed origins and an
outer guard that answers 403 to any request whose Origin header is
neither allowed nor the service's own origin.
"""

import logging
from typing import Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse


logger = logging.getLogger("expense_auth.cors")

REJECTION_MESSAGE = "Invalid CORS request"


def normalize_origins(origins: Iterable[str]) -> List[str]:
    """Strip trailing slashes and drop duplicates, keeping order."""
    normalized: List[str] = []
    for origin in origins:
        origin = str(origin).strip().removesuffix("/")
        if origin and origin not in normalized:
            normalized.append(origin)
    return normalized


def is_origin_allowed(origin: str, request: Request, allowed: List[str]) -> bool:
    """An origin passes if it is allow-listed or is the service itself."""
    if origin in allowed:
        return True
    own_origin = f"{request.url.scheme}://{request.url.netloc}"
    return origin == own_origin


def install_cors(app: FastAPI, origins: Iterable[str]) -> List[str]:
    """
    Attach the CORS policy to the application.

    Args:
        app: FastAPI application
        origins: Allowed browser origins

    Returns:
        The normalized allow-list
    """
    allowed = normalize_origins(origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Registered after CORSMiddleware, so it runs first
    @app.middleware("http")
    async def reject_disallowed_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and not is_origin_allowed(origin, request, allowed):
            logger.warning(f"Rejected {request.method} {request.url.path} from origin {origin}")
            return PlainTextResponse(REJECTION_MESSAGE, status_code=status.HTTP_403_FORBIDDEN)
        return await call_next(request)

    return allowed
