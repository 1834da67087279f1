"""API middleware — CORS, request logging, and error handling.

Starlette middleware is a stack (last added, first executed).  main.py adds
them as:

    app.add_middleware(ErrorHandlingMiddleware)     # innermost
    app.add_middleware(RequestLoggingMiddleware)
    configure_cors(app)                             # outermost

Request flow:
    Client -> CORS -> RequestLogging -> ErrorHandling -> route handler

so CORS headers are attached to every response, error envelopes included,
and RequestLogging sees the final status code.
"""

from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from src.api.schemas import ErrorResponse
from src.utils.errors import InternalError, ReleaseBoardError
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Attach fixed cross-origin headers and answer every OPTIONS with 204.

    Starlette's CORSMiddleware answers preflights with 200 and only when
    the browser sends the preflight headers; clients of this API expect a
    bare 204 for any OPTIONS request.
    """

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str = "*",
        allow_methods: str = "GET, OPTIONS",
    ) -> None:
        super().__init__(app)
        self._headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": allow_methods,
        }

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self._headers)

        response = await call_next(request)
        response.headers.update(self._headers)
        return response


def configure_cors(
    app: FastAPI,
    *,
    allow_origin: str = "*",
    allow_methods: str = "GET, OPTIONS",
) -> None:
    """Add the permissive CORS middleware to the FastAPI application."""
    app.add_middleware(
        PermissiveCORSMiddleware,
        allow_origin=allow_origin,
        allow_methods=allow_methods,
    )


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status code, and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            status_code = response.status_code if response else 500
            _logger.info(
                "http_request",
                method=request.method,
                path=str(request.url.path),
                query=str(request.url.query),
                status=status_code,
                duration_ms=duration_ms,
            )


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


def error_response(exc: ReleaseBoardError) -> JSONResponse:
    """Render *exc* as an ErrorResponse with its class's HTTP status."""
    body = ErrorResponse(error=type(exc).__name__, detail=exc.message)
    return JSONResponse(status_code=exc.http_status, content=body.model_dump())


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Convert exceptions into structured JSON errors.

    ``ReleaseBoardError`` subclasses keep their own status (400 / 404 /
    500).  Anything else is reported as an ``InternalError`` 500 whose
    detail carries the exception message; the traceback goes to the log.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except ReleaseBoardError as exc:
            log = _logger.warning if exc.http_status < 500 else _logger.error
            log(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                source=exc.source,
                path=str(request.url.path),
            )
            return error_response(exc)
        except Exception as exc:
            _logger.exception(
                "unhandled_error",
                error_type=type(exc).__name__,
                path=str(request.url.path),
            )
            return error_response(InternalError(message=str(exc) or type(exc).__name__))
