"""LogHandler protocol and the bundled CorrelationLogHandler."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from simplelog.context import CorrelationContext, RequestContext

if TYPE_CHECKING:
    from simplelog.logger import Logger


@runtime_checkable
class LogHandler(Protocol):
    """Port: enrich a record from the request context.

    The logger calls all three methods on every emitted record, passing
    itself and the context object given at the call site. Return values:

    * ``get_message`` – the final message; *original_output* is the
      already-rendered text, *level* one of ``"DEBG"``, ``"INFO"``,
      ``"WARN"``, ``"ERROR"``, *file*/*line* the caller's location
      (``""``/``0`` when unknown).
    * ``get_labels`` – labels to attach; empty means none.
    * ``get_trace`` – trace identifier; empty means none.
    """

    def get_message(
        self,
        logger: "Logger",
        ctx: Any,
        level: str,
        file: str,
        line: int,
        original_output: str,
    ) -> str: ...

    def get_labels(self, logger: "Logger", ctx: Any) -> dict[str, str]: ...

    def get_trace(self, logger: "Logger", ctx: Any) -> str: ...


class CorrelationLogHandler:
    """:class:`LogHandler` driven by :class:`RequestContext`.

    Resolves the context passed at the call site, falling back to the ambient
    :class:`CorrelationContext` when the call carried no usable context (for
    example the no-context ``d``/``df``/``dj`` forms).

    Parameters
    ----------
    project_id:
        Google Cloud project. When set, traces are rendered as
        ``projects/<project_id>/traces/<trace_id>`` so Cloud Logging links
        them to Cloud Trace.
    prefix_correlation_id:
        Prefix each message with ``[<correlation_id>] ``.
    """

    def __init__(self, project_id: str = "", prefix_correlation_id: bool = True) -> None:
        self._project_id = project_id
        self._prefix = prefix_correlation_id

    def _resolve(self, ctx: Any) -> RequestContext | None:
        if isinstance(ctx, RequestContext) and not ctx.is_empty:
            return ctx
        return CorrelationContext.get()

    def get_message(
        self,
        logger: "Logger",  # noqa: ARG002
        ctx: Any,
        level: str,  # noqa: ARG002
        file: str,  # noqa: ARG002
        line: int,  # noqa: ARG002
        original_output: str,
    ) -> str:
        req = self._resolve(ctx)
        if self._prefix and req is not None and req.correlation_id:
            return f"[{req.correlation_id}] {original_output}"
        return original_output

    def get_labels(self, logger: "Logger", ctx: Any) -> dict[str, str]:  # noqa: ARG002
        req = self._resolve(ctx)
        if req is None:
            return {}
        labels: dict[str, str] = {}
        if req.correlation_id:
            labels["correlation_id"] = req.correlation_id
        if req.tenant_id is not None:
            labels["tenant_id"] = req.tenant_id
        if req.user_id is not None:
            labels["user_id"] = req.user_id
        labels.update(req.labels)
        return labels

    def get_trace(self, logger: "Logger", ctx: Any) -> str:  # noqa: ARG002
        req = self._resolve(ctx)
        if req is None or not req.trace_id:
            return ""
        if self._project_id:
            return f"projects/{self._project_id}/traces/{req.trace_id}"
        return req.trace_id


__all__ = ["CorrelationLogHandler", "LogHandler"]
