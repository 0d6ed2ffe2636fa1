# wt/catalog/api/errors.py
"""
HTTP error envelope.

Every error leaving the API is rendered as::

    { status, code, short, long }

where ``code`` is a stable machine-readable identifier prefixed with ``#``.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class HttpError(Exception):
    """Base class for errors rendered with the envelope."""

    status: int = 500
    default_short: str = "Something went wrong"

    def __init__(self, code: str, long: str | None = None, short: str | None = None) -> None:
        self.code = code if code.startswith("#") else f"#{code}"
        self.short = short or self.default_short
        self.long = long or self.short
        super().__init__(self.long)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "code": self.code,
            "short": self.short,
            "long": self.long,
        }


class HttpValidationError(HttpError):
    status = 422
    default_short = "Bad request"


class Http404Error(HttpError):
    status = 404
    default_short = "Not found"


class HttpBadGatewayError(HttpError):
    status = 502
    default_short = "Bad gateway"


class HttpInternalError(HttpError):
    status = 500
    default_short = "Something went wrong"


def _envelope(err: HttpError) -> JSONResponse:
    return JSONResponse(status_code=err.status, content=err.to_dict())


async def _handle_http_error(request: Request, exc: HttpError) -> JSONResponse:
    if exc.status >= 500:
        logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.status, exc.code)
    return _envelope(exc)


async def _handle_starlette_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        return _envelope(
            Http404Error("notFound", "This endpoint does not exist", "Page not found")
        )
    err = HttpError("genericError", str(exc.detail))
    err.status = exc.status_code
    return _envelope(err)


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _envelope(HttpValidationError("validationError", str(exc.errors())))


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(HttpInternalError("genericError", str(exc) or type(exc).__name__))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HttpError, _handle_http_error)
    app.add_exception_handler(StarletteHTTPException, _handle_starlette_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
