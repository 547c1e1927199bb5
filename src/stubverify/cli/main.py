# src/stubverify/cli/main.py

"""
``stubverify`` command line.

The library itself is driven from test code; the CLI exists to inspect how
a project configures its registries (``stubverify config show``).
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from stubverify.cli.config_cmds import config_cli
from stubverify.cli.utils import logging_options, setup_logging_from_context
from stubverify.telemetry import StructLogger

try:
    __version__ = version("stubverify")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="stubverify")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    stubverify: fake objects, argument matchers and call verification for tests.

    Registry settings come from [tool.stubverify] in pyproject.toml and can be
    overridden with STUBVERIFY_* environment variables.
    """
    ctx.ensure_object(dict)
    ctx.obj.update(LOG_LEVEL=log_level, LOG_FILE=log_file, JSON_LOGS=bool(json_logs))

    setup_logging_from_context(ctx)
    log.debug("stubverify CLI started", subcommand=ctx.invoked_subcommand)


cli.add_command(config_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
