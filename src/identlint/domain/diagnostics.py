"""Diagnostic sink protocol used for deprecation notices."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything that can receive a single human-readable diagnostic.

    *rule* names the rule whose configuration produced the diagnostic,
    or is None when the configuration is not attached to a rule.
    """

    def emit(self, message: str, *, rule: str | None = None) -> None: ...
