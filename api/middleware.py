"""
Global middleware and error handlers.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response


def _field_name(loc: tuple) -> str:
    # ("body", "email") -> "email"; a missing or undecodable body reports
    # as ("body",) or ("body", <offset>)
    parts = loc[1:] if loc and loc[0] == "body" else loc
    if not parts or not all(isinstance(p, str) for p in parts):
        return "body"
    return ".".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": ...}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        fields: dict[str, str] = {}
        for err in exc.errors():
            fields.setdefault(_field_name(tuple(err.get("loc", ()))), err.get("msg", "Invalid value"))
        logger.debug("Validation failed on %s: %s", request.url.path, fields)
        return JSONResponse(
            status_code=422,
            content={"error": "Validation failed", "fields": fields},
        )
