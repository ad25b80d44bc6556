"""Erros de domínio e respostas no formato RFC 7807 (Problem Details).

Todo erro volta como:

    {
        "type": "about:blank",
        "title": "Conflict",
        "status": 409,
        "detail": "Cannot delete category used in transactions",
        "instance": "/api/categories/abc"
    }
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()


class AppError(Exception):
    """Base dos erros da aplicação."""

    def __init__(self, detail: str, status_code: int = 500, error_type: str = "about:blank"):
        self.detail = detail
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(detail)


class NotFoundError(AppError):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail=detail, status_code=404)


class CategoryInUseError(AppError):
    """A categoria ainda é usada por transações ou orçamentos do usuário."""

    def __init__(self, detail: str = "Category in use"):
        super().__init__(detail=detail, status_code=409)


_STATUS_TITLES = {
    400: "Bad Request",
    401: "Unauthorized",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def problem_detail(status: int, detail: str, instance: str = "", error_type: str = "about:blank") -> dict:
    body = {
        "type": error_type,
        "title": _STATUS_TITLES.get(status, "Error"),
        "status": status,
        "detail": detail,
    }
    if instance:
        body["instance"] = instance
    return body


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        body = problem_detail(exc.status_code, exc.detail, str(request.url.path), exc.error_type)
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        body = problem_detail(exc.status_code, detail, str(request.url.path))
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
        body = problem_detail(422, "; ".join(messages), str(request.url.path))
        return JSONResponse(status_code=422, content=body)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error", path=str(request.url.path), exc_info=exc)
        body = problem_detail(500, "An unexpected error occurred", str(request.url.path))
        return JSONResponse(status_code=500, content=body)
