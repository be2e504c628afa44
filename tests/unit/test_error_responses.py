"""Unit tests for error_responses and the registered exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from users_api.api.exception_handlers import register_exception_handlers
from users_api.crosscutting.error_responses import (
    INTERNAL_ERROR_MESSAGE,
    OPENAPI_ERROR_RESPONSES,
    ErrorBody,
    error_content,
)
from users_api.crosscutting.exceptions import DatabaseError

pytestmark = pytest.mark.unit


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret connection string leaked")

    @app.get("/db")
    def db():
        raise DatabaseError("pool exhausted")

    return app


class TestErrorContent:
    def test_error_content_shape(self):
        assert error_content("User not found") == {"error": "User not found"}

    def test_openapi_documents_error_statuses(self):
        assert set(OPENAPI_ERROR_RESPONSES) == {400, 404, 500}
        assert all(v["model"] is ErrorBody for v in OPENAPI_ERROR_RESPONSES.values())


class TestExceptionHandlers:
    def test_unhandled_exception_returns_generic_500(self):
        client = TestClient(_build_app(), raise_server_exceptions=False)

        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}
        assert "secret" not in response.text

    def test_escaped_database_error_returns_generic_500(self):
        client = TestClient(_build_app(), raise_server_exceptions=False)

        response = client.get("/db")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unknown_route_renders_error_shape(self):
        client = TestClient(_build_app())

        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
