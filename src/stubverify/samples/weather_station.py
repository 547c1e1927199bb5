#
# src/stubverify/samples/weather_station.py
#
"""
A small weather station used as the real object in stubbing examples.
"""
from typing import Any


class WeatherStation:
    """Simulated sensor readings with fixed, side-effect free answers."""

    def temperature(self, location: str) -> float:
        # Simulated sensor reading
        return 72.0

    def humidity(self, location: str) -> int:
        return 50

    def report(self, condition: str, value: Any) -> str:
        return f"{condition.capitalize()}: {value}"

    def forecast(self, day: str) -> str:
        if day == "today":
            return "Sunny"
        if day == "tomorrow":
            return "Rainy"
        return "Unknown"

    def calibrate(self, sensor: str) -> str:
        return f"Calibrated {sensor}"

    def log_event(self, event: str, data: dict[str, Any] | None = None) -> str:
        payload = data if data is not None else {}
        return f"Logged {event}: {payload!r}"

# 🔼⚙️
