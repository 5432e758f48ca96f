"""Process settings — logging flags and raw name rule sections.

Priority chain (highest to lowest):
  1. Init kwargs  — values handed over by the embedding tool
  2. Env vars     — ``IDENTLINT_*`` prefix (``IDENTLINT_RULES`` as JSON)
  3. Code defaults

Rule sections stay untyped here. They are validated per rule by
:class:`identlint.services.configure.ConfigureService` so that one bad
section cannot stop the others from loading.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class IdentlintSettings(BaseSettings):
    """Frozen settings object shared by the configuration loader.

    Attributes:
        verbose: Enable DEBUG output from identlint loggers.
        log_json: Render logs as JSON lines.
        rules: Raw rule sections keyed by rule identifier.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "IDENTLINT_",
        "env_nested_delimiter": "__",
    }

    verbose: bool = False
    log_json: bool = False
    rules: dict[str, Any] = Field(default_factory=dict)

    def rule_section(self, rule_id: str) -> Any:
        """Return the raw section for *rule_id*, or None if not configured."""
        return self.rules.get(rule_id)
