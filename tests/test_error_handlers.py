"""
Tests for global Flask error handlers.

Verifies that each service-layer exception is caught and converted
to the correct JSON error response with appropriate HTTP status code.
"""

import pytest
from flask import Flask

from dataembed.error_handlers import register_error_handlers
from dataembed.services import (
    EmbedError,
    SourceMissingError,
    UnsupportedSourceError,
    InvalidMatcherError,
)


@pytest.fixture
def app():
    """Create a test Flask app with error handlers registered."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    register_error_handlers(app)

    # Register routes that raise each exception type for testing
    @app.route("/raise/source-missing")
    def raise_source_missing():
        raise SourceMissingError("Expected a URL")

    @app.route("/raise/unsupported-source")
    def raise_unsupported_source():
        raise UnsupportedSourceError("No matcher found for example.com")

    @app.route("/raise/invalid-matcher")
    def raise_invalid_matcher():
        raise InvalidMatcherError("Unknown matcher: bogus")

    @app.route("/raise/embed-error")
    def raise_embed_error():
        raise EmbedError("Test embed error")

    return app


@pytest.fixture
def client(app):
    return app.test_client()


class TestErrorHandlers:
    """Tests for service exception mapping."""

    def test_source_missing_returns_400(self, client):
        response = client.get("/raise/source-missing")
        assert response.status_code == 400
        data = response.get_json()
        assert data["success"] is False
        assert data["message"] == "Expected a URL"
        assert data["category"] == "error"

    def test_unsupported_source_returns_404(self, client):
        response = client.get("/raise/unsupported-source")
        assert response.status_code == 404
        assert response.get_json()["message"] == "No matcher found for example.com"

    def test_invalid_matcher_falls_back_to_embed_error(self, client):
        response = client.get("/raise/invalid-matcher")
        assert response.status_code == 500
        assert response.get_json()["message"] == "Unknown matcher: bogus"

    def test_embed_error_returns_500(self, client):
        response = client.get("/raise/embed-error")
        assert response.status_code == 500
        assert response.get_json()["success"] is False


class TestHttpErrorHandlers:
    """Tests for plain HTTP error codes."""

    def test_unknown_route_returns_json_404(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.get_json()["message"] == "Resource not found."

    def test_wrong_method_returns_json_405(self, client):
        response = client.post("/raise/embed-error")
        assert response.status_code == 405
        assert response.get_json()["message"] == "Method not allowed."
