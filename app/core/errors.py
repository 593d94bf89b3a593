# app/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_METHOD = "Invalid request method."


class ApiError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


class MethodNotAllowedError(ApiError):
    status_code = 405

    def __init__(self, message: str = INVALID_METHOD):
        super().__init__(message)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Router-level failures: unknown path or a verb the path doesn't serve
    if exc.status_code == 405:
        # Keep the Allow header listing the verbs the path does serve
        error = MethodNotAllowedError()
        return error_response(error.status_code, error.message, headers=exc.headers)
    if exc.status_code == 404:
        return error_response(404, "Not found.")
    return error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return error_response(400, "Invalid request.")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


__all__ = [
    "ApiError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "MethodNotAllowedError",
    "register_error_handlers",
]
