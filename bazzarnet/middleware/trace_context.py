"""
W3C Trace Context middleware.

Reads the ``traceparent`` header of incoming requests (or starts a new trace),
keeps the ids in context variables for the logger, and echoes them back.
"""

import re
import secrets
from contextvars import ContextVar
from typing import Optional, Tuple

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

TRACE_ID_HEADER = "X-Trace-ID"
TRACEPARENT_PATTERN = re.compile(r'^00-([0-9a-f]{32})-([0-9a-f]{16})-[0-9a-f]{2}$')

trace_id_ctx: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)
span_id_ctx: ContextVar[Optional[str]] = ContextVar("span_id", default=None)


def get_trace_id() -> Optional[str]:
    """Get the trace ID of the current request"""
    return trace_id_ctx.get()


def get_span_id() -> Optional[str]:
    """Get the span ID of the current request"""
    return span_id_ctx.get()


def set_trace_context(trace_id: str, span_id: str) -> None:
    trace_id_ctx.set(trace_id)
    span_id_ctx.set(span_id)


def parse_traceparent(traceparent: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Extract (trace_id, span_id) from a W3C traceparent header.
    Format: 00-{32-hex-traceId}-{16-hex-spanId}-{2-hex-flags}

    Returns None when the header is missing, malformed or carries all-zero ids.
    """
    if not traceparent:
        return None

    match = TRACEPARENT_PATTERN.match(traceparent.strip().lower())
    if not match:
        return None

    trace_id, span_id = match.groups()
    if trace_id == '0' * 32 or span_id == '0' * 16:
        return None
    return trace_id, span_id


def new_trace_context() -> Tuple[str, str]:
    """Generate a fresh 32-hex trace id and 16-hex span id"""
    return secrets.token_hex(16), secrets.token_hex(8)


class TraceContextMiddleware(BaseHTTPMiddleware):
    """Propagates W3C trace context through the request and onto the response"""

    async def dispatch(self, request: Request, call_next):
        trace_id, span_id = parse_traceparent(request.headers.get("traceparent")) or new_trace_context()

        set_trace_context(trace_id, span_id)
        request.state.trace_id = trace_id
        request.state.span_id = span_id

        response = await call_next(request)

        response.headers["traceparent"] = f"00-{trace_id}-{span_id}-01"
        response.headers[TRACE_ID_HEADER] = trace_id
        return response
