"""Pydantic input schema for name rule configuration sections.

Raw sections arrive as untyped mappings (parsed TOML, YAML, env JSON).
They are validated here into typed inputs before being merged into a
:class:`~identlint.domain.naming.NameConfiguration`. Unknown keys are
ignored; known keys with the wrong shape are rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, StrictBool, StrictInt, StrictStr, ValidationError

from identlint.domain.errors import InvalidConfigurationError


class ThresholdInput(BaseModel):
    """``{warning = N, error = M}`` form of a length threshold."""

    model_config = {"frozen": True, "extra": "forbid"}

    warning: StrictInt | None = None
    error: StrictInt | None = None


class NameRuleInput(BaseModel):
    """One name rule section, every key optional."""

    model_config = {"frozen": True, "extra": "ignore"}

    min_length: StrictInt | ThresholdInput | None = None
    max_length: StrictInt | ThresholdInput | None = None
    excluded: list[StrictStr] | None = None
    allowed_symbols: list[StrictStr] | None = None
    allowed_symbols_for_constants: list[StrictStr] | None = None
    validates_start_with_lowercase: StrictBool | None = None
    validates_start_lowercase: StrictBool | None = None

    @classmethod
    def parse(cls, raw: Any) -> NameRuleInput:
        """Validate *raw*, translating schema failures into configuration errors."""
        if not isinstance(raw, Mapping):
            msg = f"expected a mapping, got {type(raw).__name__}"
            raise InvalidConfigurationError(msg)
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            first = exc.errors()[0]
            loc = first.get("loc") or ()
            key = str(loc[0]) if loc else None
            raise InvalidConfigurationError(first["msg"], key=key) from exc

    def threshold_value(self, name: str) -> Any:
        """Return a threshold field in the shape ``ThresholdPair.ingest`` expects."""
        value = getattr(self, name)
        if isinstance(value, ThresholdInput):
            return value.model_dump(exclude_unset=True)
        return value

    def is_set(self, name: str) -> bool:
        return name in self.model_fields_set
