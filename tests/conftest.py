"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Google OAuth credentials in the environment (set before app import)
- FakeGoogle: an httpx.MockTransport standing in for Google's endpoints
- Test client (FastAPI TestClient) wired to the fake
"""

import os
from typing import Any, Callable, Generator, List, Optional
from urllib.parse import parse_qs

# Settings are read once at import time, so credentials must be in place
# before anything under app/ is imported.
os.environ.setdefault("GOOGLE_CLIENT_ID", "test-client-id.apps.googleusercontent.com")
os.environ.setdefault("GOOGLE_CLIENT_SECRET", "test-client-secret")
os.environ.setdefault("GOOGLE_REDIRECT_URI", "https://app.example.com/auth/callback")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.deps import get_google_auth_client  # noqa: E402
from app.environments.google import GoogleAuthClient  # noqa: E402
from app.main import app  # noqa: E402


TOKEN_URL = settings.GOOGLE_TOKEN_URL
USERINFO_URL = settings.GOOGLE_USERINFO_URL


# ---------------------------------------------------------------------------
# FAKE GOOGLE
# ---------------------------------------------------------------------------

class FakeGoogle:
    """
    Scriptable stand-in for Google's token and userinfo endpoints.

    Set `token_response` / `userinfo_response` to an httpx.Response, or to
    a callable taking the request (e.g. one that raises httpx.ConnectError).
    Every request that reaches the fake is recorded in `requests`.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.token_response: Any = httpx.Response(
            200,
            json={
                "access_token": "T1",
                "expires_in": 3599,
                "scope": "openid https://www.googleapis.com/auth/userinfo.email",
                "token_type": "Bearer",
            },
        )
        self.userinfo_response: Any = httpx.Response(
            200, json={"email": "a@b.com", "name": "A"}
        )

    token_url = TOKEN_URL
    userinfo_url = USERINFO_URL

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == self.token_url:
            response = self.token_response
        elif str(request.url) == self.userinfo_url:
            response = self.userinfo_response
        else:
            return httpx.Response(404, text="unexpected URL")
        if callable(response):
            return response(request)
        # Fresh copy so a scripted reply can be served more than once
        return httpx.Response(
            response.status_code,
            headers=response.headers,
            content=response.content,
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls_to(self, url: str) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url) == url]

    @staticmethod
    def form_of(request: httpx.Request) -> dict:
        """Decode a form-encoded request body into a flat dict."""
        return {k: v[0] for k, v in parse_qs(request.content.decode(), keep_blank_values=True).items()}


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_google() -> FakeGoogle:
    """A fresh fake Google for each test."""
    return FakeGoogle()


@pytest.fixture
def auth_client(fake_google: FakeGoogle) -> GoogleAuthClient:
    """GoogleAuthClient whose network calls go to fake_google."""
    return GoogleAuthClient(transport=fake_google.transport)


@pytest.fixture
def client_factory(
    fake_google: FakeGoogle,
) -> Generator[Callable[..., TestClient], None, None]:
    """
    Build TestClients for a given app, wired to fake_google.

    Overrides the get_google_auth_client dependency so no test ever
    reaches the real Google.
    """
    built = []

    def factory(application=app, auth: Optional[GoogleAuthClient] = None) -> TestClient:
        google_client = auth or GoogleAuthClient(transport=fake_google.transport)
        application.dependency_overrides[get_google_auth_client] = lambda: google_client
        test_client = TestClient(application)
        built.append((application, test_client))
        return test_client

    yield factory

    for application, test_client in built:
        test_client.close()
        application.dependency_overrides.clear()


@pytest.fixture
def client(client_factory) -> TestClient:
    """Test client for the default application."""
    return client_factory()
