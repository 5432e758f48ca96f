"""structlog setup for identlint.

Configuration diagnostics (deprecated keys, rejected rule sections) are
written to stderr, either as colored console lines or as JSON lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from identlint.config.settings import IdentlintSettings

PACKAGE_LOGGER = "identlint"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib ``identlint.*`` loggers to one handler.

    Args:
        verbose: Emit DEBUG from identlint loggers. Otherwise WARNING+.
        log_json: Render JSON lines instead of console output.
        stream: Output stream, stderr when omitted.
    """
    out = stream or sys.stderr
    processors = _shared_processors()

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def configure_from_settings(settings: IdentlintSettings) -> None:
    """Apply the logging flags carried by *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
