"""Respostas de erro no formato RFC 7807."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from errors import AppError, CategoryInUseError, NotFoundError, register_error_handlers


@pytest.fixture
def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/test/not-found")
    async def raise_not_found():
        raise NotFoundError("account xyz not found")

    @app.get("/test/in-use")
    async def raise_in_use():
        raise CategoryInUseError("Cannot delete category used in budgets")

    @app.get("/test/http")
    async def raise_http():
        raise HTTPException(status_code=400, detail="bad bounds")

    @app.get("/test/unhandled")
    async def raise_unhandled():
        raise RuntimeError("database is locked")

    return TestClient(app, raise_server_exceptions=False)


class TestProblemDetails:
    def test_not_found(self, error_client):
        response = error_client.get("/test/not-found")
        assert response.status_code == 404
        assert response.json() == {
            "type": "about:blank",
            "title": "Not Found",
            "status": 404,
            "detail": "account xyz not found",
            "instance": "/test/not-found",
        }

    def test_category_in_use_is_conflict(self, error_client):
        response = error_client.get("/test/in-use")
        assert response.status_code == 409
        assert response.json()["title"] == "Conflict"
        assert response.json()["detail"] == "Cannot delete category used in budgets"

    def test_http_exception(self, error_client):
        response = error_client.get("/test/http")
        assert response.status_code == 400
        assert response.json()["detail"] == "bad bounds"

    def test_unhandled_error_hides_message(self, error_client):
        response = error_client.get("/test/unhandled")
        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Internal Server Error"
        assert body["detail"] == "An unexpected error occurred"

    def test_unknown_route(self, error_client):
        response = error_client.get("/nowhere")
        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"


def test_category_in_use_is_app_error():
    error = CategoryInUseError()
    assert isinstance(error, AppError)
    assert error.status_code == 409
    assert str(error) == "Category in use"
