"""structlog-backed diagnostic sink.

Multiple rule instances may share one sink, so writes are serialized
and each (rule, message) pair is logged only once until :meth:`reset`.
"""

from __future__ import annotations

import threading

import structlog


class StructlogDiagnosticSink:
    """Log configuration diagnostics through structlog, once per rule and message."""

    def __init__(self, logger_name: str = "identlint.config") -> None:
        self._log = structlog.get_logger(logger_name)
        self._lock = threading.Lock()
        self._seen: set[tuple[str | None, str]] = set()

    def emit(self, message: str, *, rule: str | None = None) -> None:
        entry = (rule, message)
        with self._lock:
            if entry in self._seen:
                return
            self._seen.add(entry)
            if rule is None:
                self._log.warning(message)
            else:
                self._log.warning(message, rule=rule)

    @property
    def emitted(self) -> frozenset[tuple[str | None, str]]:
        with self._lock:
            return frozenset(self._seen)

    def reset(self) -> None:
        with self._lock:
            self._seen.clear()
