"""Warning/error threshold pairs for a single length bound."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from identlint.domain.errors import InvalidConfigurationError

THRESHOLD_KEYS = frozenset({"warning", "error"})


class Bound(StrEnum):
    """Which side of the length range a threshold pair guards."""

    MIN = "min"
    MAX = "max"


class ThresholdPair(BaseModel):
    """A warning level and an optional stricter error level.

    For a minimum bound the error level must not exceed the warning level;
    for a maximum bound it must not fall below it.
    """

    model_config = {"frozen": True}

    warning: int
    error: int | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThresholdPair):
            return NotImplemented
        return (self.warning, self.error) == (other.warning, other.error)

    def __hash__(self) -> int:
        return hash((self.warning, self.error))

    @property
    def short_description(self) -> str:
        if self.error is None:
            return f"w: {self.warning}"
        return f"w: {self.warning}, e: {self.error}"

    def check_order(self, bound: Bound, *, key: str | None = None) -> ThresholdPair:
        """Raise if the error level is looser than the warning level."""
        if self.error is None:
            return self
        if bound is Bound.MIN and self.error > self.warning:
            msg = f"error ({self.error}) must not exceed warning ({self.warning})"
            raise InvalidConfigurationError(msg, key=key)
        if bound is Bound.MAX and self.error < self.warning:
            msg = f"error ({self.error}) must not be below warning ({self.warning})"
            raise InvalidConfigurationError(msg, key=key)
        return self

    def ingest(self, value: Any, *, bound: Bound, key: str | None = None) -> ThresholdPair:
        """Merge a user-supplied value over this pair and return the result.

        A bare integer sets the warning level and clears the error level.
        A mapping may carry ``warning`` and/or ``error``; absent keys keep
        their current value and an explicit ``error: None`` clears it.
        """
        if isinstance(value, int) and not isinstance(value, bool):
            merged = ThresholdPair(warning=value)
        elif isinstance(value, Mapping):
            unknown = set(value) - THRESHOLD_KEYS
            if unknown:
                msg = f"unexpected threshold keys: {sorted(map(str, unknown))}"
                raise InvalidConfigurationError(msg, key=key)
            warning = value.get("warning", self.warning)
            error = value.get("error", self.error)
            if not _is_int(warning) or not (error is None or _is_int(error)):
                msg = "threshold levels must be integers"
                raise InvalidConfigurationError(msg, key=key)
            merged = ThresholdPair(warning=warning, error=error)
        else:
            msg = f"expected an integer or a warning/error mapping, got {type(value).__name__}"
            raise InvalidConfigurationError(msg, key=key)
        return merged.check_order(bound, key=key)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
