"""Shared pytest fixtures and test helpers for identlint tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from identlint.domain.naming import NAME_RULE_DEFAULTS, NameConfiguration


class CollectingSink:
    """Diagnostic sink that records every emitted message."""

    def __init__(self) -> None:
        self.entries: list[tuple[str | None, str]] = []

    def emit(self, message: str, *, rule: str | None = None) -> None:
        self.entries.append((rule, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.entries]


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def identifier_name() -> NameConfiguration:
    """Stock ``identifier_name`` configuration."""
    return NAME_RULE_DEFAULTS["identifier_name"]


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore root and identlint logger state after a test reconfigures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("identlint")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
