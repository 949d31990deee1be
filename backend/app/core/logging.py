"""Structured logging for the sizing API.

Plain-text lines in development, one JSON object per record when
``LOG_JSON`` is set.  Every request gets an ID (taken from ``X-Request-ID``
or generated) that is stamped on all records emitted while serving it.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from engine.sizing.config import FORMULA_VERSION

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

access_logger = logging.getLogger("solar_sizer.access")

# Attributes passed via ``extra=`` that are copied into JSON records
_EXTRA_FIELDS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "client_ip",
    "field",
)

# Probes hit these constantly; they are not worth an access line
_QUIET_PATHS = frozenset({"/health"})


class JSONFormatter(logging.Formatter):
    """One JSON object per record, tagged with request ID and formula version."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "formula_version": FORMULA_VERSION,
        }

        rid = request_id_var.get()
        if rid:
            entry["request_id"] = rid

        for key in _EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign a request ID, echo it in ``X-Request-ID`` and log the outcome.

    Client errors (rejected sizing inputs, rate limiting) are logged at
    WARNING so they stand out from routine traffic.
    """

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            response.headers["X-Request-ID"] = rid

            path = request.url.path
            if path not in _QUIET_PATHS:
                level = logging.WARNING if response.status_code >= 400 else logging.INFO
                access_logger.log(
                    level,
                    "%s %s -> %d (%.1fms)",
                    request.method,
                    path,
                    response.status_code,
                    duration_ms,
                    extra={
                        "method": request.method,
                        "path": path,
                        "status_code": response.status_code,
                        "duration_ms": duration_ms,
                        "client_ip": _client_ip(request),
                    },
                )
            return response
        finally:
            request_id_var.reset(token)


def setup_logging(json_format: bool = False, level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
