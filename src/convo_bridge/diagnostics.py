"""Diagnostics sinks.

Translators report noteworthy events (repairs, dropped tool calls, skipped
tools) to an injected sink instead of logging directly, so their output can
be asserted on without capturing log records.
"""

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)

# Events reported at WARNING by LoggingDiagnostics; everything else is DEBUG.
WARNING_EVENTS = frozenset({"argument_decode_failed", "tool_call_id_collision"})


class DiagnosticsSink(Protocol):
    """Receives named events with keyword details."""

    def record(self, event: str, **details: Any) -> None:
        """Record one event.

        Args:
            event: Short snake_case event name, e.g. "arguments_repaired".
            **details: Event-specific values.
        """
        ...


class LoggingDiagnostics:
    """Writes events to a standard library logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def record(self, event: str, **details: Any) -> None:
        level = logging.WARNING if event in WARNING_EVENTS else logging.DEBUG
        if not self._logger.isEnabledFor(level):
            return
        fields = " ".join(f"{key}={value!r}" for key, value in details.items())
        self._logger.log(level, "%s %s", event, fields)


class NullDiagnostics:
    """Discards every event."""

    def record(self, event: str, **details: Any) -> None:
        return None
