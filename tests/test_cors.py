"""
Tests for the cross-origin policy.

These tests verify:
- Allow-listed origins get CORS headers
- Other origins are rejected before any route runs
- Requests without an Origin header are unaffected
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import DEFAULT_CORS_ORIGINS, Settings
from app.core.cors import REJECTION_MESSAGE, normalize_origins
from app.main import create_app


ALLOWED = "https://expensetrackinghub.expense-tracking.com"
FOREIGN = "https://evil.example.com"


class TestAllowedOrigins:

    @pytest.mark.parametrize("origin", DEFAULT_CORS_ORIGINS)
    def test_allowed_origin_gets_cors_headers(self, client: TestClient, origin):
        response = client.post("/auth/callback?code=VALIDCODE", headers={"Origin": origin})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == origin
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_allowed_preflight(self, client: TestClient, fake_google):
        response = client.options(
            "/auth/callback",
            headers={
                "Origin": ALLOWED,
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == ALLOWED
        assert fake_google.requests == []

    def test_no_origin_header(self, client: TestClient):
        """Server-to-server calls carry no Origin and are not CORS requests."""
        response = client.post("/auth/callback?code=VALIDCODE")

        assert response.status_code == 200

    def test_same_origin(self, client: TestClient):
        response = client.get("/health", headers={"Origin": "http://testserver"})

        assert response.status_code == 200


class TestRejectedOrigins:

    def test_foreign_origin_rejected_before_handler(self, client: TestClient, fake_google):
        """The callback never runs, so Google is never called."""
        response = client.post("/auth/callback?code=VALIDCODE", headers={"Origin": FOREIGN})

        assert response.status_code == 403
        assert response.text == REJECTION_MESSAGE
        assert "access-control-allow-origin" not in response.headers
        assert fake_google.requests == []

    def test_foreign_preflight_rejected(self, client: TestClient):
        response = client.options(
            "/auth/callback",
            headers={
                "Origin": FOREIGN,
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 403

    def test_lookalike_origin_rejected(self, client: TestClient, fake_google):
        response = client.post(
            "/auth/callback?code=VALIDCODE",
            headers={"Origin": ALLOWED + ".evil.example.com"},
        )

        assert response.status_code == 403
        assert fake_google.requests == []

    def test_custom_allow_list(self, client_factory, fake_google):
        """Origins outside a configured allow-list are rejected, defaults included."""
        custom = create_app(Settings(CORS_ORIGINS=["https://staging.example.com/"]))
        client = client_factory(custom)

        allowed = client.post(
            "/auth/callback?code=VALIDCODE",
            headers={"Origin": "https://staging.example.com"},
        )
        rejected = client.post("/auth/callback?code=VALIDCODE", headers={"Origin": ALLOWED})

        assert allowed.status_code == 200
        assert rejected.status_code == 403


class TestNormalizeOrigins:

    def test_strips_trailing_slash_and_duplicates(self):
        assert normalize_origins(
            ["https://a.example.com/", "https://a.example.com", " http://localhost:8080 ", ""]
        ) == ["https://a.example.com", "http://localhost:8080"]
