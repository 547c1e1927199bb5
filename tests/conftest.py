from collections.abc import Iterator

import pytest

from stubverify import Registry, StubVerifyConfig
from stubverify.samples import WeatherStation


@pytest.fixture
def registry() -> Iterator[Registry]:
    """A registry torn down after the test."""
    with Registry() as reg:
        yield reg


@pytest.fixture
def strict_registry() -> Iterator[Registry]:
    """A registry that raises on unmatched calls."""
    with Registry(StubVerifyConfig(unmatched_calls="strict")) as reg:
        yield reg


@pytest.fixture
def station() -> WeatherStation:
    """A real WeatherStation."""
    return WeatherStation()
