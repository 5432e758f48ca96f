"""Configuration errors raised while ingesting name rule settings."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """A rule configuration value has the wrong shape or breaks an invariant.

    Carries optional *rule* and *key* context so the caller can attribute
    the failure to one rule without aborting the whole load.
    """

    def __init__(self, message: str, *, rule: str | None = None, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.rule = rule
        self.key = key

    @property
    def location(self) -> str | None:
        parts = [p for p in (self.rule, self.key) if p]
        return ".".join(parts) or None

    def with_rule(self, rule: str) -> InvalidConfigurationError:
        """Return a copy of this error attributed to *rule*."""
        return InvalidConfigurationError(self.message, rule=rule, key=self.key)

    def __str__(self) -> str:
        location = self.location
        if location:
            return f"{location}: {self.message}"
        return self.message
