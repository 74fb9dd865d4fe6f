"""Logger – the façade dispatching calls to structlog or stdout.

Usage::

    from simplelog import LogLevel, LogMode, RequestContext, new

    log = new(LogLevel.DEBUG, LogMode.STRUCTURED, None, True)
    log.info(ctx, "order placed", order_id)
    log.errorf(ctx, "payment %s failed: %s", payment_id, exc)
    log.d("quick look at", value)      # no request context
    log.dj(payload)                    # indented JSON at DEBUG

Every public method resolves its caller's location on entry, so the
reported ``file``/``line`` is always the application's call site. The
``*_with_skip`` variants walk *skip* further frames out, for helpers that
wrap this logger.
"""
from __future__ import annotations

import dataclasses
import logging
import sys
import threading
from typing import TYPE_CHECKING, Any

from simplelog.caller import CallerLocation, caller_location
from simplelog.context import BACKGROUND
from simplelog.formatting import ArgFormatter, dump_json, render_args, render_format
from simplelog.handler import CorrelationLogHandler, LogHandler
from simplelog.levels import LogLevel, LogMode, PrintLevel
from simplelog.sink import LABELS_KEY, SOURCE_LOCATION_KEY, TRACE_KEY, JsonSinkFactory

if TYPE_CHECKING:
    from simplelog.config import LoggerSettings

_logger = logging.getLogger("simplelog")

# plaintext lines are written whole under this lock
_STDOUT_LOCK = threading.Lock()


@dataclasses.dataclass(frozen=True)
class Logger:
    """Immutable logging façade; build it with :func:`new`.

    Attributes
    ----------
    slogger:
        structlog bound logger used in :attr:`LogMode.STRUCTURED`.
    level:
        stdlib level number below which structured records are dropped.
    mode:
        :class:`LogMode` chosen at construction.
    handler:
        Optional :class:`LogHandler`; ``None`` emits messages verbatim.
    use_gcp_logging:
        Attach Cloud Logging source location, trace and labels fields.
    arg_formatter:
        Renders each argument of the variadic forms.
    """

    slogger: Any
    level: int
    mode: LogMode
    handler: LogHandler | None
    use_gcp_logging: bool
    arg_formatter: ArgFormatter = str

    @classmethod
    def from_settings(cls, settings: "LoggerSettings", handler: LogHandler | None = None) -> "Logger":
        """Build a logger from :class:`~simplelog.config.LoggerSettings`.

        Without an explicit *handler*, a configured ``gcp_project_id`` installs
        a :class:`~simplelog.handler.CorrelationLogHandler` for that project.
        """
        if handler is None and settings.gcp_project_id:
            handler = CorrelationLogHandler(project_id=settings.gcp_project_id)
        return new(settings.level, settings.mode, handler, settings.use_gcp_logging)

    def is_enabled_for(self, level: PrintLevel) -> bool:
        """Whether a record at *level* reaches the output in this logger's mode."""
        return self.mode is LogMode.PLAINTEXT or level.stdlib_level >= self.level

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _log(
        self,
        ctx: Any,
        level: PrintLevel,
        location: CallerLocation | None,
        fmt: str,
        args: tuple[Any, ...],
    ) -> None:
        if not self.is_enabled_for(level):
            return

        file, line = (location.file, location.line) if location is not None else ("", 0)
        rendered = out = render_format(fmt, args)
        trace = ""
        labels: dict[str, str] = {}
        if self.handler is not None:
            try:
                trace = self.handler.get_trace(self, ctx)
                labels = self.handler.get_labels(self, ctx)
                out = self.handler.get_message(self, ctx, level.value, file, line, rendered)
            except Exception:  # noqa: BLE001
                _logger.warning("log handler %r failed; emitting unenriched record", self.handler, exc_info=True)
                trace, labels, out = "", {}, rendered

        if self.mode is LogMode.PLAINTEXT:
            try:
                with _STDOUT_LOCK:
                    sys.stdout.write(f"{out}\n")
                    sys.stdout.flush()
            except (OSError, ValueError) as exc:
                _logger.warning("plaintext write to stdout failed: %r", exc)
            return

        fields: dict[str, Any] = {}
        if self.use_gcp_logging:
            if level is PrintLevel.ERROR:
                fields["error"] = out
            if location is not None:
                fields[SOURCE_LOCATION_KEY] = location.as_source_location()
            if trace:
                fields[TRACE_KEY] = trace
            if labels:
                fields[LABELS_KEY] = {str(k): str(v) for k, v in labels.items()}
        try:
            getattr(self.slogger, level.sink_method)(out, **fields)
        except (OSError, ValueError) as exc:
            _logger.warning("structured write to stdout failed: %r", exc)

    def _log_args(
        self,
        ctx: Any,
        level: PrintLevel,
        location: CallerLocation | None,
        args: tuple[Any, ...],
    ) -> None:
        if not self.is_enabled_for(level):
            return
        # pre-rendered, so "%" inside an argument is never treated as a directive
        self._log(ctx, level, location, "%s", (render_args(args, self.arg_formatter),))

    # ------------------------------------------------------------------
    # DEBUG
    # ------------------------------------------------------------------

    def debug(self, ctx: Any, *args: Any) -> None:
        self._log_args(ctx, PrintLevel.DEBUG, caller_location(1), args)

    def debugf(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._log(ctx, PrintLevel.DEBUG, caller_location(1), fmt, args)

    def d(self, *args: Any) -> None:
        """``debug`` without a request context."""
        self._log_args(BACKGROUND, PrintLevel.DEBUG, caller_location(1), args)

    def df(self, fmt: str, *args: Any) -> None:
        """``debugf`` without a request context."""
        self._log(BACKGROUND, PrintLevel.DEBUG, caller_location(1), fmt, args)

    def dj(self, value: Any) -> None:
        """Log *value* as indented JSON at DEBUG, without a request context.

        A value that cannot be serialised is logged as an empty payload.
        """
        if not self.is_enabled_for(PrintLevel.DEBUG):
            return
        self._log(BACKGROUND, PrintLevel.DEBUG, caller_location(1), "\n%s", (dump_json(value),))

    def debug_with_skip(self, ctx: Any, skip: int, *args: Any) -> None:
        """``debug`` reporting the location *skip* frames above the caller."""
        self._log_args(ctx, PrintLevel.DEBUG, caller_location(1 + skip), args)

    def debugf_with_skip(self, ctx: Any, skip: int, fmt: str, *args: Any) -> None:
        """``debugf`` reporting the location *skip* frames above the caller."""
        self._log(ctx, PrintLevel.DEBUG, caller_location(1 + skip), fmt, args)

    # ------------------------------------------------------------------
    # INFO / WARN / ERROR
    # ------------------------------------------------------------------

    def info(self, ctx: Any, *args: Any) -> None:
        self._log_args(ctx, PrintLevel.INFO, caller_location(1), args)

    def infof(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._log(ctx, PrintLevel.INFO, caller_location(1), fmt, args)

    def warn(self, ctx: Any, *args: Any) -> None:
        self._log_args(ctx, PrintLevel.WARN, caller_location(1), args)

    # common alias
    warning = warn

    def warnf(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._log(ctx, PrintLevel.WARN, caller_location(1), fmt, args)

    def error(self, ctx: Any, *args: Any) -> None:
        self._log_args(ctx, PrintLevel.ERROR, caller_location(1), args)

    def errorf(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._log(ctx, PrintLevel.ERROR, caller_location(1), fmt, args)


def new(
    level: LogLevel,
    mode: LogMode,
    handler: LogHandler | None,
    use_gcp_logging: bool,
    *,
    arg_formatter: ArgFormatter = str,
) -> Logger:
    """Build a :class:`Logger`.

    Parameters
    ----------
    level:
        :attr:`LogLevel.DEBUG` (or above) enables DEBUG records; anything
        lower keeps INFO as the threshold.
    mode:
        :attr:`LogMode.STRUCTURED` writes JSON through structlog;
        :attr:`LogMode.PLAINTEXT` writes the bare message to stdout.
    handler:
        :class:`LogHandler` deriving message, labels and trace, or ``None``.
    use_gcp_logging:
        Attach ``logging.googleapis.com/*`` fields to structured records.
    arg_formatter:
        How the variadic forms render each argument.
    """
    sink_level = logging.DEBUG if level >= LogLevel.DEBUG else logging.INFO
    return Logger(
        slogger=JsonSinkFactory.create(sink_level),
        level=sink_level,
        mode=LogMode(mode),
        handler=handler,
        use_gcp_logging=use_gcp_logging,
        arg_formatter=arg_formatter,
    )


__all__ = ["Logger", "new"]
