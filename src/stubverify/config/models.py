#
# config/models.py
#
"""
Attrs-based data models for stubverify configuration.
"""

import logging
from typing import Any

from attrs import define, field

UNMATCHED_CALL_POLICIES = ("absent", "strict")


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_unmatched_calls(inst: Any, attr: Any, value: str) -> None:
    """Validator for the unmatched-call policy."""
    if value not in UNMATCHED_CALL_POLICIES:
        raise ValueError(
            f"Invalid {attr.name} '{value}'. Must be one of {list(UNMATCHED_CALL_POLICIES)}."
        )


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for stubverify."""
    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@define(frozen=True, slots=True)
class StubVerifyConfig:
    """
    Root configuration object.

    ``unmatched_calls`` decides what an ordinary fake does when no stub rule
    matches: "absent" returns None, "strict" raises UnmatchedCallOnStrictFake.
    """
    unmatched_calls: str = field(default="absent", validator=_validate_unmatched_calls)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})

    @property
    def strict(self) -> bool:
        return self.unmatched_calls == "strict"


# 🔼⚙️
