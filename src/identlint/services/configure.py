"""ConfigureService — load name rule sections with per-rule isolation.

Each rule's raw section is merged over that rule's default configuration.
A rejected section leaves the rule on its defaults and is reported as a
warning naming the rule; it never prevents other rules from loading.
Deprecation diagnostics are tagged with the rule that triggered them and
are reported once per rule on every load.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from identlint.config.settings import IdentlintSettings
from identlint.domain.diagnostics import DiagnosticSink
from identlint.domain.errors import InvalidConfigurationError
from identlint.domain.naming import NAME_RULE_DEFAULTS, NameConfiguration
from identlint.infrastructure.diagnostics import StructlogDiagnosticSink
from identlint.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class ConfigureService:
    """Build frozen :class:`NameConfiguration` snapshots for every name rule.

    Usage::

        service = ConfigureService()
        result = service.load({"identifier_name": {"min_length": 4}})
        config = result.data["rules"]["identifier_name"]
    """

    def __init__(
        self,
        defaults: Mapping[str, NameConfiguration] | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._defaults = dict(NAME_RULE_DEFAULTS if defaults is None else defaults)
        self._sink = sink if sink is not None else StructlogDiagnosticSink()

    @property
    def rule_ids(self) -> list[str]:
        return sorted(self._defaults)

    def load(self, raw_rules: Any) -> ServiceResult:
        """Apply raw per-rule sections over the defaults."""
        op = "load_name_rules"
        if not isinstance(raw_rules, Mapping):
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_CONFIGURATION",
                    message=f"rule sections must be a mapping, got {type(raw_rules).__name__}",
                ),
            )

        if isinstance(self._sink, StructlogDiagnosticSink):
            self._sink.reset()

        rules: dict[str, NameConfiguration] = {}
        failed: dict[str, str] = {}
        warnings: list[str] = []

        for rule_id in self.rule_ids:
            config = self._defaults[rule_id]
            if rule_id in raw_rules:
                try:
                    config = config.apply(raw_rules[rule_id], sink=self._sink, rule=rule_id)
                except InvalidConfigurationError as exc:
                    error = exc.with_rule(rule_id)
                    logger.debug("Rejected configuration for %s", rule_id, exc_info=True)
                    failed[rule_id] = str(error)
                    warnings.append(f"Invalid configuration for {rule_id}, using defaults: {error}")
            rules[rule_id] = config

        return ServiceResult(
            ok=True,
            op=op,
            data={"rules": rules},
            warnings=warnings,
            meta={"failed": failed, "count": len(rules)},
        )

    def load_settings(self, settings: IdentlintSettings) -> ServiceResult:
        """Load the rule sections carried by *settings*."""
        return self.load(settings.rules)

    def describe(self, rules: Mapping[str, NameConfiguration]) -> ServiceResult:
        """Summarize each rule's active configuration."""
        descriptions = {rule_id: rules[rule_id].console_description for rule_id in sorted(rules)}
        return ServiceResult(
            ok=True,
            op="describe_name_rules",
            data={"descriptions": descriptions},
        )
