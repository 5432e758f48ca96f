"""Length severity verdicts for name rules."""

from __future__ import annotations

from enum import StrEnum

from identlint.domain.thresholds import ThresholdPair


class Severity(StrEnum):
    """Verdict assigned to an identifier's length."""

    NONE = "none"
    WARNING = "warning"
    ERROR = "error"


def resolve_severity(length: int, *, min_length: ThresholdPair, max_length: ThresholdPair) -> Severity:
    """Map an identifier length to a severity.

    Error checks run before the warning check: min error first, then max
    error, then either warning bound. The first match wins.
    """
    if min_length.error is not None and length < min_length.error:
        return Severity.ERROR
    if max_length.error is not None and length > max_length.error:
        return Severity.ERROR
    if length < min_length.warning or length > max_length.warning:
        return Severity.WARNING
    return Severity.NONE
