from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import AppError, PersistenceError

logger = logging.getLogger(__name__)


def _render(error: AppError, status_code: int | None = None) -> JSONResponse:
    payload = {"code": error.code, "message": error.message}
    if error.details is not None:
        payload["details"] = error.details
    return JSONResponse(status_code=status_code or error.status_code, content=payload)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        log = logger.error if isinstance(exc, PersistenceError) else logger.info
        log(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        return _render(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(  # noqa: WPS430
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        payload = {"code": "http_error", "message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(SQLAlchemyError)
    async def handle_db_error(  # noqa: WPS430
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.error(
            "Database error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return _render(PersistenceError("Database operation failed"))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.error(
            "Unexpected error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        error = PersistenceError("Unexpected server error")
        return _render(error, status.HTTP_500_INTERNAL_SERVER_ERROR)
