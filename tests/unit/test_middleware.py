"""Unit tests for middleware components"""
from unittest.mock import Mock

import pytest

from bazzarnet.middleware.trace_context import (
    TRACE_ID_HEADER,
    TraceContextMiddleware,
    get_span_id,
    get_trace_id,
    new_trace_context,
    parse_traceparent,
)

TRACE_ID = "4bf92f3577b34da6a3ce929d0e0e4736"
SPAN_ID = "00f067aa0ba902b7"


class MockRequest:
    def __init__(self, headers=None):
        self.headers = headers or {}
        self.state = Mock()


class TestParseTraceparent:

    def test_valid_header(self):
        assert parse_traceparent(f"00-{TRACE_ID}-{SPAN_ID}-01") == (TRACE_ID, SPAN_ID)

    def test_uppercase_header_is_normalised(self):
        assert parse_traceparent(f"00-{TRACE_ID.upper()}-{SPAN_ID}-01") == (TRACE_ID, SPAN_ID)

    @pytest.mark.parametrize("header", [
        None,
        "",
        "garbage",
        f"01-{TRACE_ID}-{SPAN_ID}-01",
        f"00-{TRACE_ID[:-1]}-{SPAN_ID}-01",
        f"00-{'0' * 32}-{SPAN_ID}-01",
        f"00-{TRACE_ID}-{'0' * 16}-01",
    ])
    def test_invalid_headers(self, header):
        assert parse_traceparent(header) is None

    def test_new_trace_context_shape(self):
        trace_id, span_id = new_trace_context()
        assert len(trace_id) == 32
        assert len(span_id) == 16
        assert parse_traceparent(f"00-{trace_id}-{span_id}-01") == (trace_id, span_id)


class TestTraceContextMiddleware:

    @pytest.mark.asyncio
    async def test_propagates_incoming_trace(self):
        middleware = TraceContextMiddleware(Mock())
        request = MockRequest({"traceparent": f"00-{TRACE_ID}-{SPAN_ID}-01"})
        seen = {}

        async def call_next(req):
            seen["trace_id"] = get_trace_id()
            seen["span_id"] = get_span_id()
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(request, call_next)

        assert seen == {"trace_id": TRACE_ID, "span_id": SPAN_ID}
        assert request.state.trace_id == TRACE_ID
        assert response.headers[TRACE_ID_HEADER] == TRACE_ID
        assert response.headers["traceparent"] == f"00-{TRACE_ID}-{SPAN_ID}-01"

    @pytest.mark.asyncio
    async def test_starts_new_trace_without_header(self):
        middleware = TraceContextMiddleware(Mock())
        request = MockRequest()

        async def call_next(req):
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(request, call_next)

        trace_id = response.headers[TRACE_ID_HEADER]
        assert len(trace_id) == 32
        assert response.headers["traceparent"].startswith(f"00-{trace_id}-")
