#
# src/stubverify/pytest_plugin.py
#
"""
pytest integration: a fresh registry per test, torn down afterwards.
"""
from collections.abc import Iterator

import pytest
import structlog

from stubverify.config import StubVerifyConfig, load_config
from stubverify.exceptions import ConfigurationError
from stubverify.registry import Registry

log = structlog.get_logger("pytest_plugin")


@pytest.fixture(scope="session")
def stub_config(pytestconfig: pytest.Config) -> StubVerifyConfig:
    """Configuration read once per session from the project's pyproject.toml."""
    pyproject = pytestconfig.rootpath / "pyproject.toml"
    try:
        return load_config(pyproject) if pyproject.is_file() else StubVerifyConfig()
    except ConfigurationError as e:
        raise pytest.UsageError(f"stubverify: {e}") from e


@pytest.fixture
def stub_registry(stub_config: StubVerifyConfig) -> Iterator[Registry]:
    """Registry scoped to a single test."""
    registry = Registry(stub_config)
    try:
        yield registry
    finally:
        registry.teardown()
        log.debug("Registry torn down after test")

# 🔼⚙️
