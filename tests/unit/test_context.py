"""Unit tests for RequestContext and CorrelationContext."""

from __future__ import annotations

import asyncio
import re

import pytest

from simplelog.context import BACKGROUND, CorrelationContext, RequestContext


@pytest.fixture(autouse=True)
def _clear_ctx():
    CorrelationContext.set(None)
    yield
    CorrelationContext.set(None)


class TestRequestContext:
    def test_new_generates_unique_ids(self) -> None:
        a = RequestContext.new()
        b = RequestContext.new()
        assert a.correlation_id != b.correlation_id

    def test_with_tenant(self) -> None:
        ctx = RequestContext.new(tenant_id="t1")
        assert ctx.tenant_id == "t1"

    def test_background_is_empty(self) -> None:
        assert BACKGROUND.is_empty
        assert RequestContext().is_empty
        assert not RequestContext.new().is_empty

    def test_with_labels_merges(self) -> None:
        ctx = RequestContext(correlation_id="c", labels={"a": "1"})
        merged = ctx.with_labels(b="2", a="3")
        assert merged.labels == {"a": "3", "b": "2"}
        assert ctx.labels == {"a": "1"}

    def test_is_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            BACKGROUND.correlation_id = "x"  # type: ignore[misc]


class TestCorrelationContext:
    def test_set_and_get(self) -> None:
        ctx = RequestContext.new()
        CorrelationContext.set(ctx)
        assert CorrelationContext.get() is ctx

    def test_get_returns_none_when_unset(self) -> None:
        assert CorrelationContext.get() is None

    def test_set_none_unsets(self) -> None:
        CorrelationContext.set(RequestContext.new())
        CorrelationContext.set(None)
        assert CorrelationContext.get() is None

    def test_isolated_across_tasks(self) -> None:
        results: list[str | None] = []

        async def worker(cid: str) -> None:
            CorrelationContext.set(RequestContext(correlation_id=cid))
            await asyncio.sleep(0)
            stored = CorrelationContext.get()
            results.append(stored.correlation_id if stored else None)

        async def run() -> None:
            await asyncio.gather(worker("id-1"), worker("id-2"))

        asyncio.run(run())
        assert set(results) == {"id-1", "id-2"}


class TestSetFromHeaders:
    def test_picks_x_correlation_id(self) -> None:
        ctx = CorrelationContext.set_from_headers({"X-Correlation-ID": "abc-123"})
        assert ctx.correlation_id == "abc-123"

    def test_falls_back_to_x_request_id(self) -> None:
        ctx = CorrelationContext.set_from_headers({"X-Request-ID": "req-999"})
        assert ctx.correlation_id == "req-999"

    def test_generates_uuid_when_no_id_header(self) -> None:
        ctx = CorrelationContext.set_from_headers({})
        assert re.match(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
            ctx.correlation_id,
        )

    def test_parses_w3c_traceparent(self) -> None:
        trace_id = "4bf92f3577b34da6a3ce929d0e0e4736"
        ctx = CorrelationContext.set_from_headers({"TraceParent": f"00-{trace_id}-00f067aa0ba902b7-01"})
        assert ctx.trace_id == trace_id
        assert ctx.span_id == "00f067aa0ba902b7"

    def test_parses_cloud_trace_context(self) -> None:
        ctx = CorrelationContext.set_from_headers(
            {"X-Cloud-Trace-Context": "105445aa7843bc8bf206b12000100000/1;o=1"}
        )
        assert ctx.trace_id == "105445aa7843bc8bf206b12000100000"
        assert ctx.span_id == "1"

    def test_traceparent_wins_over_cloud_header(self) -> None:
        ctx = CorrelationContext.set_from_headers(
            {
                "traceparent": "00-aaaa-bbbb-01",
                "X-Cloud-Trace-Context": "cccc/1;o=1",
            }
        )
        assert ctx.trace_id == "aaaa"

    def test_garbage_traceparent_does_not_raise(self) -> None:
        ctx = CorrelationContext.set_from_headers({"traceparent": "garbage", "X-Correlation-ID": "safe"})
        assert ctx.correlation_id == "safe"
        assert ctx.trace_id is None

    def test_stores_context(self) -> None:
        ctx = CorrelationContext.set_from_headers({"X-Correlation-ID": "stored"})
        assert CorrelationContext.get() is ctx
