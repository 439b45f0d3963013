"""
request_logging.py
- Purpose: One request id per request, plus the company handle / job id the
  URL addresses, so every log line of the request (repos included) carries them.
"""

from __future__ import annotations

import re
import time
import uuid
import logging
from typing import Any
from urllib.parse import unquote

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from jobly.core.request_context import set_context, clear_context


logger = logging.getLogger("jobly.http")

REQUEST_ID_HEADER = "x-request-id"

_ENTITY_PATH = re.compile(r"^/(companies|jobs)/([^/]+)/?$")


def entity_context(path: str) -> dict[str, Any]:
    """/companies/<handle> -> {"handle": ...}; /jobs/<id> -> {"job_id": ...}."""
    m = _ENTITY_PATH.match(path)
    if not m:
        return {}
    collection, key = m.groups()
    if collection == "companies":
        return {"handle": unquote(key)}
    return {"job_id": int(key)} if key.isdigit() else {}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        entity = entity_context(request.url.path)
        # Set before call_next: the route's threadpool copies this context.
        set_context(request_id=rid, **entity)

        t0 = time.perf_counter()
        try:
            logger.info(
                "http.request",
                extra={"method": request.method, "path": request.url.path, **entity},
            )
            response: Response = await call_next(request)

            logger.info(
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - t0) * 1000),
                    **entity,
                },
            )

            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            clear_context()
