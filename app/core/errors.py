"""Exception handlers rendering every failure as a JSON envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import ApplicationError, AuthenticationError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error."


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
        headers={"WWW-Authenticate": "Bearer"} if status_code == 401 else None,
    )


def register_exception_handlers(app: FastAPI, production: bool) -> None:
    """Map domain, validation, HTTP and unexpected errors to responses."""

    def internal(exc: Exception, message: str = GENERIC_ERROR) -> JSONResponse:
        if production:
            return error_response(500, message)
        return error_response(500, str(exc) or message, error=type(exc).__name__)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
            return internal(exc)
        if isinstance(exc, AuthenticationError):
            return error_response(exc.status_code, exc.message, reason=exc.reason)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid request")
        if location:
            message = f"{location}: {message}"
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            return error_response(404, f"Route {request.url.path} not found.")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
        return internal(exc, "Database error")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return internal(exc)
