# src/stubverify/telemetry/logger/processors.py

"""
Custom structlog processors for stubverify log output.
"""

from typing import Any

LOG_EMOJIS = {
    "debug": "🐛",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
    "critical": "💥",
}

# Keys added by stdlib integration that add noise to console output.
_EXTRA_KEYS = ("_record", "_from_structlog", "positional_args")


def add_emoji_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Prefixes the event with an emoji matching its log level."""
    level = event_dict.get("level", method_name)
    emoji = LOG_EMOJIS.get(str(level).lower())
    event = event_dict.get("event")
    if emoji and isinstance(event, str) and not event.startswith(emoji):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Drops internal bookkeeping keys before rendering."""
    for key in _EXTRA_KEYS:
        event_dict.pop(key, None)
    return event_dict


# 🔼⚙️
