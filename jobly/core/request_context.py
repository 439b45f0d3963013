"""
Request context helpers.

We keep a small context (request_id, handle, job_id) in ContextVars.
The HTTP middleware sets request_id and the entity key addressed by the URL;
create routes add the key from the request body. Repository logs are then
correlatable with the request that caused them.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_handle: ContextVar[Optional[str]] = ContextVar("handle", default=None)
_job_id: ContextVar[Optional[int]] = ContextVar("job_id", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    handle: Optional[str] = None,
    job_id: Optional[int] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if handle is not None:
        _handle.set(handle)
    if job_id is not None:
        _job_id.set(job_id)


def clear_context() -> None:
    _request_id.set(None)
    _handle.set(None)
    _job_id.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    handle = _handle.get()
    job_id = _job_id.get()

    if rid:
        ctx["request_id"] = rid
    if handle:
        ctx["handle"] = handle
    if job_id is not None:
        ctx["job_id"] = job_id
    return ctx
