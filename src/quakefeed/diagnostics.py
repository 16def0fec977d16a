"""
Diagnostic sinks.

Failure paths in the extractors never raise to the caller; they report
what went wrong to a sink and return a default value instead.  The sink
is injectable so callers (and tests) can capture diagnostics without
depending on a particular logging setup.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Tuple


class DiagnosticSink(ABC):
    """Receiver for failure diagnostics."""

    @abstractmethod
    def report(self, message: str, detail: Any = None) -> None:
        """Record a diagnostic message with its offending input or error."""


class LoggingSink(DiagnosticSink):
    """Forward diagnostics to a standard library logger at ERROR level."""

    def __init__(self, logger: logging.Logger):
        self._log = logger

    def report(self, message: str, detail: Any = None) -> None:
        self._log.error("%s: %s", message, detail)


class RecordingSink(DiagnosticSink):
    """Keep diagnostics in memory.

    Usage::

        sink = RecordingSink()
        parse_coordinates("invalid", sink=sink)
        sink.messages  # ['Invalid coordinate string format']
    """

    def __init__(self):
        self.reports: List[Tuple[str, Any]] = []

    def report(self, message: str, detail: Any = None) -> None:
        self.reports.append((message, detail))

    @property
    def messages(self) -> List[str]:
        return [message for message, _ in self.reports]

    def clear(self) -> None:
        self.reports.clear()
