# src/stubverify/cli/utils.py

import logging
from typing import Any

import click
import structlog

from stubverify.telemetry.logger import setup_logging as core_setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def logging_options(f):
    """Adds --log-level, --log-file and --json-logs, each readable from STUBVERIFY_* env vars."""
    f = click.option(
        "-l",
        "--log-level",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default=None,
        envvar="STUBVERIFY_LOG_LEVEL",
        help="Level for registry events (DEBUG shows every stub match).",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="STUBVERIFY_LOG_FILE",
        help="Also append registry events to this file as JSON lines.",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="STUBVERIFY_JSON_LOGS",
        help="Render console events as JSON.",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context, default_log_level: str = "WARNING", **overrides: Any
) -> None:
    """
    Configures logging from the options the root command stored on ``ctx.obj``.

    Subcommands pass their own ``log_level``, ``log_file`` and ``json_logs``
    values as overrides; ``None`` means the option was not given.
    """
    options = dict(ctx.obj)
    options.update({key.upper(): value for key, value in overrides.items() if value is not None})

    level_name = (options.get("LOG_LEVEL") or default_log_level).upper()
    log_file = options.get("LOG_FILE")
    json_logs = bool(options.get("JSON_LOGS"))

    core_setup_logging(
        level=getattr(logging, level_name, logging.WARNING),
        json_logs=json_logs,
        log_file=log_file,
    )
    log.debug("CLI logging configured", level=level_name, log_file=log_file, json_logs=json_logs)

# ⚙️🛠️
