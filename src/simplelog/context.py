"""RequestContext, CorrelationContext and the empty BACKGROUND context.

The logger core treats whatever context it is given as opaque and hands it to
the :class:`~simplelog.handler.LogHandler`. :class:`RequestContext` is the
carrier the bundled :class:`~simplelog.handler.CorrelationLogHandler`
understands.
"""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from typing import Mapping
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Request-scoped values for a single request/use-case execution."""
    correlation_id: str = ""
    tenant_id: str | None = None
    user_id: str | None = None
    trace_id: str | None = None
    span_id: str | None = None
    labels: Mapping[str, str] = dataclasses.field(default_factory=dict)

    @classmethod
    def new(cls, tenant_id: str | None = None, user_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), tenant_id=tenant_id, user_id=user_id)

    def with_labels(self, **labels: str) -> "RequestContext":
        """Return a copy with *labels* merged over the existing ones."""
        return dataclasses.replace(self, labels={**self.labels, **labels})

    @property
    def is_empty(self) -> bool:
        return self == BACKGROUND


BACKGROUND = RequestContext()
"""Context used by the no-context logging forms."""


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_simplelog_request_ctx", default=None)


class CorrelationContext:
    """Ambient request context, read by
    :class:`~simplelog.handler.CorrelationLogHandler` when a log call carries
    no usable context of its own (``BACKGROUND``, ``None``, a foreign object).
    """

    @staticmethod
    def set(ctx: RequestContext | None) -> None:
        """Make *ctx* the ambient context of the current thread/task; ``None`` unsets it."""
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def set_from_headers(headers: Mapping[str, str]) -> RequestContext:
        """Extract request context from HTTP headers and store it.

        Priority order for correlation ID:
        ``X-Correlation-ID`` → ``X-Request-ID`` → generated UUID.

        The trace id comes from the W3C ``traceparent`` header
        (``ver-trace_id-parent_id-flags``), falling back to Cloud Run's
        ``X-Cloud-Trace-Context`` (``TRACE_ID/SPAN_ID;o=1``).

        All header names are matched case-insensitively.
        """
        norm: dict[str, str] = {k.lower(): v for k, v in headers.items()}

        correlation_id = (
            norm.get("x-correlation-id")
            or norm.get("x-request-id")
            or str(uuid4())
        )

        trace_id: str | None = None
        span_id: str | None = None
        traceparent = norm.get("traceparent")
        if traceparent:
            parts = traceparent.split("-")
            if len(parts) >= 2 and parts[1]:
                trace_id = parts[1]
            if len(parts) >= 3 and parts[2]:
                span_id = parts[2]
        else:
            cloud = norm.get("x-cloud-trace-context")
            if cloud:
                trace_part, _, rest = cloud.partition("/")
                trace_id = trace_part or None
                span_id = rest.split(";", 1)[0] or None

        ctx = RequestContext(
            correlation_id=correlation_id,
            trace_id=trace_id,
            span_id=span_id,
        )
        _CTX_VAR.set(ctx)
        return ctx


__all__ = ["BACKGROUND", "CorrelationContext", "RequestContext"]
