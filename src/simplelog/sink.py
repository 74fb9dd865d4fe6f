"""Structured sink – a structlog logger rendering Cloud Logging JSON lines."""
from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

SOURCE_LOCATION_KEY = "logging.googleapis.com/sourceLocation"
TRACE_KEY = "logging.googleapis.com/trace"
LABELS_KEY = "logging.googleapis.com/labels"


class _CurrentStdout:
    """Writes to whatever ``sys.stdout`` is at the time of the write.

    Plaintext mode looks ``sys.stdout`` up on every call; routing the
    structured sink through this keeps both modes on the same stream after
    ``sys.stdout`` is swapped.
    """

    def write(self, text: str) -> int:
        return sys.stdout.write(text)

    def flush(self) -> None:
        sys.stdout.flush()


STDOUT: IO[str] = _CurrentStdout()  # type: ignore[assignment]


def rename_level_to_severity(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor: move ``level`` to an upper-case ``severity``."""
    level = event_dict.pop("level", None)
    if level is not None:
        event_dict["severity"] = str(level).upper()
    return event_dict


class JsonSinkFactory:
    """Build structlog loggers that write one JSON object per line.

    Key names follow the Cloud Logging structured-logging convention:
    ``timestamp``, ``message`` and ``severity``.
    """

    @staticmethod
    def processors() -> list[Any]:
        return [
            structlog.processors.add_log_level,
            rename_level_to_severity,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(ensure_ascii=False, default=str),
        ]

    @staticmethod
    def create(level: int = logging.INFO, file: IO[str] | None = None) -> Any:
        """Return a bound logger dropping records below *level*.

        Without *file* every record goes to ``sys.stdout`` as it is when the
        record is written, not when the logger is built.
        """
        return structlog.wrap_logger(
            structlog.PrintLogger(file=file if file is not None else STDOUT),
            processors=JsonSinkFactory.processors(),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            cache_logger_on_first_use=True,
        )


__all__ = [
    "LABELS_KEY",
    "SOURCE_LOCATION_KEY",
    "STDOUT",
    "TRACE_KEY",
    "JsonSinkFactory",
    "rename_level_to_severity",
]
