"""Caller-location resolution.

Every public :class:`~simplelog.logger.Logger` method resolves its own
caller with ``caller_location(1)`` before forwarding anywhere, so the depth
never depends on how many internal helpers sit between the entry point and
the sink.
"""
from __future__ import annotations

import dataclasses
import inspect


@dataclasses.dataclass(frozen=True)
class CallerLocation:
    """Source file and line of a logging call site."""
    file: str
    line: int

    def as_source_location(self) -> dict[str, object]:
        return {"file": self.file, "line": self.line}


def caller_location(skip: int = 0) -> CallerLocation | None:
    """Return the location *skip* frames above the function calling this one.

    ``skip=0`` is the line inside the function that invoked
    :func:`caller_location`; ``skip=1`` is the line that called that function,
    and so on.
    Returns ``None`` when the stack is too shallow or the interpreter offers no
    frame introspection.
    """
    frame = inspect.currentframe()
    if frame is None:
        return None
    try:
        # step out of caller_location itself
        target = frame.f_back
        for _ in range(max(skip, 0)):
            if target is None:
                return None
            target = target.f_back
        if target is None:
            return None
        return CallerLocation(file=target.f_code.co_filename, line=target.f_lineno)
    finally:
        del frame


__all__ = ["CallerLocation", "caller_location"]
