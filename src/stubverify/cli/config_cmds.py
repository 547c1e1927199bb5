# src/stubverify/cli/config_cmds.py

from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from stubverify.cli.utils import logging_options, setup_logging_from_context
from stubverify.config import load_config
from stubverify.exceptions import ConfigurationError
from stubverify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting and validating configuration."""
    pass


@config_cli.command(name="show")
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    envvar="STUBVERIFY_CONF",
    help="Path to a TOML config file (env var STUBVERIFY_CONF). Defaults to ./pyproject.toml.",
    show_envvar=True,
)
@logging_options
@click.pass_context
def show_config(ctx: click.Context, config_path: Path | None, **kwargs):
    """Load, validate, and display the configuration."""
    setup_logging_from_context(ctx, **kwargs)
    log.info("Executing 'config show' command", config_path=str(config_path))

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem:\n{e}", err=True)
        ctx.exit(1)

    if not (kwargs.get("log_level") or ctx.obj.get("LOG_LEVEL")):
        # No level given on the command line, fall back to the configured one
        setup_logging_from_context(ctx, default_log_level=config.global_config.log_level, **kwargs)

    click.echo(pretty_repr(config, expand_all=True))
    if config.strict:
        log.info("Strict mode active: unmatched calls on fakes will raise.")

# 🔼⚙️
