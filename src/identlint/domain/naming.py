"""Name rule configuration: length thresholds, exclusions, symbols, casing.

A :class:`NameConfiguration` is a frozen snapshot. Ingesting a raw user
section via :meth:`NameConfiguration.apply` returns a new snapshot merged
over the current one; keys absent from the section keep their values.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, model_validator

from identlint.domain.diagnostics import DiagnosticSink
from identlint.domain.inputs import NameRuleInput
from identlint.domain.severity import Severity, resolve_severity
from identlint.domain.symbols import SymbolSet
from identlint.domain.thresholds import Bound, ThresholdPair

logger = logging.getLogger(__name__)

LOWERCASE_KEY = "validates_start_with_lowercase"
DEPRECATED_LOWERCASE_KEY = "validates_start_lowercase"
DEPRECATED_LOWERCASE_MESSAGE = (
    f'"{DEPRECATED_LOWERCASE_KEY}" configuration was renamed to '
    f'"{LOWERCASE_KEY}" and will be removed in a future release.'
)


class NameConfiguration(BaseModel):
    """Validated configuration for one naming-convention rule.

    Attributes:
        min_length: Minimum identifier length thresholds.
        max_length: Maximum identifier length thresholds.
        excluded: Identifiers exempt from every check.
        allowed_symbols: Extra symbols permitted anywhere in a name.
        allowed_symbols_for_constants: Replacement symbol set for constants.
            ``None`` means constants use ``allowed_symbols``; an empty set
            means constants permit no extra symbols.
        validates_start_with_lowercase: Whether names must start lowercase.
    """

    model_config = {"frozen": True}

    min_length: ThresholdPair
    max_length: ThresholdPair
    excluded: frozenset[str] = Field(default_factory=frozenset)
    allowed_symbols: frozenset[str] = Field(default_factory=frozenset)
    allowed_symbols_for_constants: frozenset[str] | None = None
    validates_start_with_lowercase: bool = True

    @model_validator(mode="after")
    def check_threshold_order(self) -> NameConfiguration:
        self.min_length.check_order(Bound.MIN, key="min_length")
        self.max_length.check_order(Bound.MAX, key="max_length")
        return self

    def _key(self) -> tuple[Any, ...]:
        return (
            self.min_length,
            self.max_length,
            self.excluded,
            self.allowed_symbols,
            self.allowed_symbols_for_constants,
            self.validates_start_with_lowercase,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameConfiguration):
            return NotImplemented
        # frozenset equality is order-independent; None and empty differ.
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @classmethod
    def from_thresholds(
        cls,
        *,
        min_length_warning: int,
        min_length_error: int | None,
        max_length_warning: int,
        max_length_error: int | None,
        excluded: Iterable[str] = (),
        allowed_symbols: Iterable[str] = (),
        allowed_symbols_for_constants: Iterable[str] | None = None,
        validates_start_with_lowercase: bool = True,
    ) -> NameConfiguration:
        """Build a configuration from flat threshold values.

        Raises:
            InvalidConfigurationError: An error level is looser than its
                warning level.
        """
        min_length = ThresholdPair(warning=min_length_warning, error=min_length_error)
        max_length = ThresholdPair(warning=max_length_warning, error=max_length_error)
        min_length.check_order(Bound.MIN, key="min_length")
        max_length.check_order(Bound.MAX, key="max_length")
        return cls(
            min_length=min_length,
            max_length=max_length,
            excluded=frozenset(excluded),
            allowed_symbols=frozenset(allowed_symbols),
            allowed_symbols_for_constants=(
                None
                if allowed_symbols_for_constants is None
                else frozenset(allowed_symbols_for_constants)
            ),
            validates_start_with_lowercase=validates_start_with_lowercase,
        )

    # --- Derived thresholds ---

    @property
    def min_length_threshold(self) -> int:
        """Loosest minimum length still enforced at some severity."""
        error = self.min_length.error
        return max(self.min_length.warning, self.min_length.warning if error is None else error)

    @property
    def max_length_threshold(self) -> int:
        """Loosest maximum length still enforced at some severity."""
        error = self.max_length.error
        return min(self.max_length.warning, self.max_length.warning if error is None else error)

    # --- Symbols ---

    @property
    def allowed_symbol_set(self) -> SymbolSet:
        return SymbolSet.build(self.allowed_symbols)

    @property
    def allowed_symbol_set_for_constants(self) -> SymbolSet | None:
        if self.allowed_symbols_for_constants is None:
            return None
        return SymbolSet.build(self.allowed_symbols_for_constants)

    def symbols_for(self, *, constant: bool = False) -> SymbolSet:
        """Symbol set in effect for a regular identifier or a constant."""
        if constant:
            override = self.allowed_symbol_set_for_constants
            if override is not None:
                return override
        return self.allowed_symbol_set

    # --- Severity ---

    def severity(self, length: int) -> Severity:
        return resolve_severity(length, min_length=self.min_length, max_length=self.max_length)

    # --- Description ---

    @property
    def console_description(self) -> str:
        flag = "true" if self.validates_start_with_lowercase else "false"
        return (
            f"(min_length) {self.min_length.short_description}, "
            f"(max_length) {self.max_length.short_description}, "
            f"excluded: {_sorted_list(self.excluded)}, "
            f"allowed_symbols: {_sorted_list(self.allowed_symbols)}, "
            f"{LOWERCASE_KEY}: {flag}"
        )

    # --- Ingestion ---

    def apply(
        self,
        raw: Any,
        *,
        sink: DiagnosticSink | None = None,
        rule: str | None = None,
    ) -> NameConfiguration:
        """Merge a raw configuration section and return the new snapshot.

        Diagnostics (deprecated keys) go to *sink*, tagged with *rule*.

        Raises:
            InvalidConfigurationError: *raw* is not a mapping, a known key
                has the wrong shape, or a threshold breaks its ordering.
        """
        section = NameRuleInput.parse(raw)
        updates: dict[str, Any] = {}

        if section.min_length is not None:
            updates["min_length"] = self.min_length.ingest(
                section.threshold_value("min_length"), bound=Bound.MIN, key="min_length"
            )
        if section.max_length is not None:
            updates["max_length"] = self.max_length.ingest(
                section.threshold_value("max_length"), bound=Bound.MAX, key="max_length"
            )
        if section.excluded is not None:
            updates["excluded"] = frozenset(section.excluded)
        if section.allowed_symbols is not None:
            updates["allowed_symbols"] = frozenset(section.allowed_symbols)
        if section.is_set("allowed_symbols_for_constants"):
            # Explicit null resets to "follow allowed_symbols".
            constants = section.allowed_symbols_for_constants
            updates["allowed_symbols_for_constants"] = (
                None if constants is None else frozenset(constants)
            )

        if section.validates_start_with_lowercase is not None:
            updates[LOWERCASE_KEY] = section.validates_start_with_lowercase
        elif section.validates_start_lowercase is not None:
            updates[LOWERCASE_KEY] = section.validates_start_lowercase
            _emit(DEPRECATED_LOWERCASE_MESSAGE, sink, rule)

        if not updates:
            return self
        logger.debug("Applying name configuration keys: %s", sorted(updates))
        return self.model_copy(update=updates)


def _sorted_list(values: Iterable[str]) -> str:
    return json.dumps(sorted(values), ensure_ascii=False)


def _emit(message: str, sink: DiagnosticSink | None, rule: str | None) -> None:
    if sink is not None:
        sink.emit(message, rule=rule)
    elif rule is None:
        logger.warning(message)
    else:
        logger.warning("%s: %s", rule, message)


# --- Stock name rules ---

NAME_RULE_DEFAULTS: dict[str, NameConfiguration] = {
    "identifier_name": NameConfiguration.from_thresholds(
        min_length_warning=3,
        min_length_error=2,
        max_length_warning=40,
        max_length_error=60,
        excluded=["id"],
    ),
    "type_name": NameConfiguration.from_thresholds(
        min_length_warning=3,
        min_length_error=0,
        max_length_warning=40,
        max_length_error=1000,
    ),
    "generic_type_name": NameConfiguration.from_thresholds(
        min_length_warning=1,
        min_length_error=0,
        max_length_warning=20,
        max_length_error=1000,
    ),
}
