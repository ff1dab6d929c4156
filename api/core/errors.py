"""
Exception handlers that render every failure as the response envelope:

    {"success": false, "message": "..."}

Internal details stay in the server log.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong."


def envelope_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def dependency_failure(event: str, **context: object) -> HTTPException:
    """
    Log the active exception and return the generic 500 to raise in its place.

    Call from inside an `except` block.
    """
    details = " ".join(f"{k}={v}" for k, v in context.items())
    logger.exception("%s %s", event, details)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=GENERIC_ERROR_MESSAGE,
    )


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = str(first.get("msg") or "invalid value")
    return f"Invalid request: {loc}: {msg}" if loc else f"Invalid request: {msg}"


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = envelope_error(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return envelope_error(status.HTTP_400_BAD_REQUEST, _validation_message(exc))


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_error method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return envelope_error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
