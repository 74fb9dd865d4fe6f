"""Message rendering for the variadic, format-string and JSON-dump forms."""
from __future__ import annotations

import dataclasses
import datetime
import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Sequence

_logger = logging.getLogger("simplelog")

ArgFormatter = Callable[[Any], str]


def _render_one(value: Any, formatter: ArgFormatter) -> str:
    try:
        return formatter(value)
    except Exception as exc:  # noqa: BLE001
        _logger.debug("%s argument could not be rendered: %r", type(value).__name__, exc)
        return f"<unprintable {type(value).__name__}>"


def render_args(args: Sequence[Any], formatter: ArgFormatter = str) -> str:
    """Render every argument with *formatter* and join them with single spaces.

    An argument whose rendering raises shows up as ``<unprintable TypeName>``.
    """
    return " ".join(_render_one(a, formatter) for a in args)


def render_format(fmt: str, args: Sequence[Any]) -> str:
    """Apply ``%``-style positional substitution the way stdlib logging does.

    Without arguments the format is returned verbatim, so a literal ``%`` in
    a plain message is harmless. Nothing raises out of here: a format/argument
    mismatch, or an argument that fails to render, gives the format followed
    by the ``repr`` of each argument.
    """
    if not args:
        return fmt
    subst: Any = tuple(args)
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        subst = args[0]
    try:
        return fmt % subst
    except Exception as exc:  # noqa: BLE001
        _logger.debug("format %r failed with %d args: %r", fmt, len(args), exc)
        return f"{fmt} {render_args(args, repr)}"


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dump_json(value: Any) -> str:
    """Serialise *value* as 4-space indented JSON, or ``""`` when it cannot be."""
    try:
        return json.dumps(value, indent=4, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError, RecursionError) as exc:
        _logger.debug("json dump of %s skipped: %s", type(value).__name__, exc)
        return ""


__all__ = ["ArgFormatter", "dump_json", "render_args", "render_format"]
