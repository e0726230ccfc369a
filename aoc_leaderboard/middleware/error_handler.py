from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn an exception that escaped a route into a JSON error body.

    Registered for both ``HTTPException`` (404s from routing, 405s) and bare
    ``Exception``, so every error the app returns has the same shape.
    """
    if isinstance(exc, StarletteHTTPException):
        return JSONResponse(
            {"error": "HTTPException", "detail": exc.detail},
            status_code=exc.status_code,
            headers=exc.headers,
        )

    status_code = getattr(exc, "status_code", 500)
    if not isinstance(status_code, int) or not 400 <= status_code < 600:
        status_code = 500

    path = request.scope.get("path", "")
    logger.error(f"Unhandled {type(exc).__name__} on {path}: {exc}", exc_info=exc)
    return JSONResponse(
        {"error": type(exc).__name__, "detail": "Internal server error"},
        status_code=status_code,
    )
