# src/stubverify/telemetry/logger/base.py

"""
Routes the registry's structlog events through stdlib logging.

Registries, rules and fakes log with ``structlog.get_logger(<area>)``; this
module decides where those events end up when a test run or the CLI wants
to see them: coloured on stderr, as JSON on stderr, and/or as JSON lines in
a file.
"""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger

from stubverify.telemetry.logger.processors import (
    add_emoji_processor,
    remove_extra_keys_processor,
)

BASE_LOGGER_NAME = "stubverify"

_EVENT_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    add_emoji_processor,
    remove_extra_keys_processor,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(sort_keys=True)
    )


def _console_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_logs:
        return _json_formatter()
    return structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )


def _reset_root(level: int) -> logging.Logger:
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.setLevel(level)
    return root


def setup_logging(
    level: int = logging.WARNING,
    json_logs: bool = False,
    log_file: str | None = None,
    file_only: bool = False,
) -> None:
    """
    Sends stub, dispatch and verification events to the chosen outputs.

    Args:
        level: Minimum stdlib level; registry chatter is mostly DEBUG.
        json_logs: Render console events as JSON instead of coloured text.
        log_file: Also append JSON lines to this path.
        file_only: Skip the stderr handler, e.g. under pytest capture.
    """
    structlog.configure(
        processors=_EVENT_PROCESSORS,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = _reset_root(level)
    slog = structlog.get_logger(BASE_LOGGER_NAME)

    if not file_only:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(_console_formatter(json_logs))
        root.addHandler(console)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            slog.error("Cannot open registry log file", log_file=log_file, error=str(e))
        else:
            file_handler.setFormatter(_json_formatter())
            file_handler.setLevel(level)
            root.addHandler(file_handler)
            slog.info("Writing registry events to file", log_file=log_file)

    slog.debug(
        "Registry logging ready",
        log_level=logging.getLevelName(level),
        json_console=json_logs,
        console=not file_only,
        log_file=log_file,
    )


StructLogger = FilteringBoundLogger

# 🔼⚙️
