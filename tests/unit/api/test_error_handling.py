"""Tests for unexpected errors and request limits in the quote API."""

import structlog
from fastapi.testclient import TestClient

from wayfinder.api import endpoints
from wayfinder.api.main import MAX_REQUEST_SIZE, app, configure_logging
from wayfinder.errors import CalculationOverflow
from tests.helpers import ASSET_A, ASSET_B

PAYLOAD = {
    "inputAsset": ASSET_A,
    "outputAsset": ASSET_B,
    "amountIn": "1000",
    "pools": [
        {
            "address": "direct",
            "assetA": ASSET_A,
            "assetB": ASSET_B,
            "feeBps": 30,
            "reserveA": "1000000",
            "reserveB": "2000000",
        }
    ],
}


class TestUnexpectedErrors:
    """Exceptions escaping the routing core are reported, not raised."""

    def test_internal_error(self, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(endpoints, "quote_route", boom)
        response = TestClient(app).post("/quote", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal error", "code": "internal_error"}

    def test_routing_error_code(self, monkeypatch):
        """Routing errors without a dedicated status map to 422."""

        def overflow(*args, **kwargs):
            raise CalculationOverflow("too big")

        monkeypatch.setattr(endpoints, "quote_route", overflow)
        response = TestClient(app).post("/quote", json=PAYLOAD)

        assert response.status_code == 422
        assert response.json() == {"detail": "too big", "code": "calculation_overflow"}


class TestRequestLimits:
    """Tests for the request size middleware."""

    def test_oversized_body_rejected(self):
        response = TestClient(app).post(
            "/quote",
            content=b"x" * (MAX_REQUEST_SIZE + 1),
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 413
        assert response.json()["code"] == "request_too_large"

    def test_non_numeric_content_length(self):
        response = TestClient(app).get("/health", headers={"content-length": "abc"})
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_content_length"


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def test_configures_level(self):
        try:
            configure_logging("WARNING")
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()

    def test_unknown_level_falls_back(self):
        try:
            configure_logging("CHATTY")
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()
