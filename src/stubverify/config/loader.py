#
# config/loader.py
#
"""
Loads stubverify configuration from TOML with environment overrides.

Settings live under ``[tool.stubverify]`` in a ``pyproject.toml``; any other
``.toml`` file is read from its top level. Environment variables win over
file values.
"""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from stubverify.config.models import GlobalConfig, StubVerifyConfig
from stubverify.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

ENV_UNMATCHED_CALLS = "STUBVERIFY_UNMATCHED_CALLS"
ENV_LOG_LEVEL = "STUBVERIFY_LOG_LEVEL"


def _read_table(config_path: Path) -> Mapping[str, Any]:
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file '{config_path}': {e}") from e

    if config_path.name == "pyproject.toml":
        table = data.get("tool", {}).get("stubverify", {})
    else:
        table = data

    if not isinstance(table, Mapping):
        raise ConfigurationError(f"Expected a table of stubverify settings in '{config_path}'")
    return table


def load_config(config_path: Path | None = None) -> StubVerifyConfig:
    """
    Builds a StubVerifyConfig from a TOML file and the environment.

    Args:
        config_path: File to read. Defaults to ``./pyproject.toml``; a missing
            default file yields the built-in defaults.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: If the file is unreadable, not valid TOML, or
            contains invalid values.
    """
    explicit = config_path is not None
    path = Path(config_path) if explicit else Path.cwd() / "pyproject.toml"

    table: Mapping[str, Any] = {}
    if path.is_file():
        table = _read_table(path)
        log.debug("Loaded config table", path=str(path), keys=sorted(table))
    elif explicit:
        raise ConfigurationError(f"Config file '{path}' does not exist")
    else:
        log.debug("No config file found, using defaults", path=str(path))

    global_table = table.get("global", {})
    if not isinstance(global_table, Mapping):
        raise ConfigurationError("The 'global' config section must be a table")

    unmatched_calls = os.environ.get(ENV_UNMATCHED_CALLS) or table.get("unmatched_calls", "absent")
    log_level = os.environ.get(ENV_LOG_LEVEL) or global_table.get("log_level", "WARNING")

    unknown = set(table) - {"unmatched_calls", "global"}
    if unknown:
        log.warning("Ignoring unknown config keys", keys=sorted(unknown), path=str(path))

    try:
        config = StubVerifyConfig(
            unmatched_calls=unmatched_calls,
            global_config=GlobalConfig(log_level=log_level),
        )
    except (TypeError, ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid configuration in '{path}': {e}") from e

    log.debug(
        "Configuration resolved",
        unmatched_calls=config.unmatched_calls,
        log_level=config.global_config.log_level,
    )
    return config


# 🔼⚙️
