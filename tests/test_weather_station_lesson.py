#
# tests/test_weather_station_lesson.py
#
"""
Stubbing and argument matching walked through with WeatherStation examples.
"""

from stubverify import Registry, any_args, anything, array_including, hash_including, satisfying
from stubverify.samples import WeatherStation


class TestStubbing:
    """Canned responses on plain doubles."""

    def test_stubs_a_method_on_a_double(self, registry: Registry) -> None:
        """Test stubbing temperature on a double."""
        station = registry.create_fake("WeatherStation")
        registry.allow(station).to_receive("temperature").and_return(68.5)

        assert station.temperature() == 68.5

    def test_returns_a_value_for_specific_arguments(self, registry: Registry) -> None:
        """Test a response bound to specific arguments."""
        station = registry.create_fake("WeatherStation")
        registry.allow(station).to_receive("humidity").and_return(None)
        registry.allow(station).to_receive("humidity").with_args("NYC").and_return(55)

        assert station.humidity("NYC") == 55
        assert station.humidity("LA") is None

    def test_returns_different_values_for_different_arguments(self, registry: Registry) -> None:
        """Test different arguments get different responses."""
        station = registry.create_fake("WeatherStation")
        registry.allow(station).to_receive("forecast").and_return(None)
        registry.allow(station).to_receive("forecast").with_args("today").and_return("Sunny")
        registry.allow(station).to_receive("forecast").with_args("tomorrow").and_return("Rainy")

        assert station.forecast("today") == "Sunny"
        assert station.forecast("tomorrow") == "Rainy"
        assert station.forecast("friday") is None

    def test_returns_a_sequence_of_values(self, registry: Registry) -> None:
        """Test consecutive calls walk a sequence of values."""
        sensor = registry.create_fake("Sensor")
        registry.allow(sensor).to_receive("read").and_return(10, 20, 30)

        assert [sensor.read() for _ in range(4)] == [10, 20, 30, 30]


class TestArgumentMatchers:
    """Flexible argument matching."""

    def test_any_args(self, registry: Registry) -> None:
        """Test any_args accepts every argument list."""
        logger = registry.create_fake("Logger")
        registry.allow(logger).to_receive("log_event").with_args(any_args)

        logger.log_event("rain", {"amount": 2})
        logger.log_event("wind")

        assert registry.received(logger, "log_event").twice()

    def test_anything_for_a_single_argument(self, registry: Registry) -> None:
        """Test anything stands in for one argument."""
        station = registry.create_fake("WeatherStation")
        registry.allow(station).to_receive("report").and_return(None)
        registry.allow(station).to_receive("report").with_args(anything, "high").and_return("Alert!")

        assert station.report("temp", "high") == "Alert!"
        assert station.report("humidity", "high") == "Alert!"
        assert station.report("temp", "low") is None

    def test_hash_including(self, registry: Registry) -> None:
        """Test matching a hash by its keys."""
        station = registry.create_fake("WeatherStation")
        registry.allow(station).to_receive("log_event").and_return(None)
        registry.allow(station).to_receive("log_event").with_args(hash_including("event")).and_return("Logged!")

        assert station.log_event({"event": "storm", "severity": "high"}) == "Logged!"
        assert station.log_event({"severity": "high"}) is None

    def test_array_including(self, registry: Registry) -> None:
        """Test matching an array by its elements."""
        sensor = registry.create_fake("Sensor")
        registry.allow(sensor).to_receive("calibrate").and_return(None)
        registry.allow(sensor).to_receive("calibrate").with_args(
            array_including("temp", "humidity")
        ).and_return("Calibrated")

        assert sensor.calibrate(["temp", "humidity", "pressure"]) == "Calibrated"
        assert sensor.calibrate(["pressure"]) is None

    def test_combined_matchers(self, registry: Registry) -> None:
        """Test mixing literals and matchers in one argument list."""
        station = registry.create_fake("WeatherStation")
        registry.allow(station).to_receive("report").and_return(None)
        registry.allow(station).to_receive("report").with_args(
            anything, hash_including("level")
        ).and_return("Matched")

        assert station.report("wind", {"level": "high", "speed": 20}) == "Matched"
        assert station.report("wind", {"speed": 20}) is None

    def test_custom_matcher(self, registry: Registry) -> None:
        """Test a predicate-based matcher."""
        station = registry.create_fake("WeatherStation")
        freezing = satisfying(lambda degrees: degrees <= 32, "freezing")
        registry.allow(station).to_receive("report").with_args("temp", freezing).and_return("Frost warning")

        assert station.report("temp", 28) == "Frost warning"
        assert station.report("temp", 60) is None


class TestVerificationAndEdgeCases:
    """Verifying calls, null objects and real objects."""

    def test_verifies_call_with_specific_arguments(self, registry: Registry) -> None:
        """Test verifying a logged event with its payload."""
        logger = registry.create_null_object_fake("Logger")
        registry.allow(logger).to_receive("log_event")

        logger.log_event("rain", {"amount": 2})

        assert registry.received(logger, "log_event").with_args("rain", {"amount": 2})

    def test_stubs_a_method_on_a_real_object(self, registry: Registry, station: WeatherStation) -> None:
        """Test stubbing temperature on a real station."""
        partial_station = registry.partial(station)
        registry.allow(partial_station).to_receive("temperature").and_return(99.9)

        assert partial_station.temperature("NYC") == 99.9
        assert partial_station.humidity("NYC") == 50

    def test_stubs_humidity_and_forecast_on_a_real_object(
        self, registry: Registry, station: WeatherStation
    ) -> None:
        """Test stubbing several methods of a real station."""
        partial_station = registry.partial(station)
        registry.allow(partial_station).to_receive("humidity").with_args("Miami").and_return(90)
        registry.allow(partial_station).to_receive("forecast").and_return("Snow")

        assert partial_station.humidity("Miami") == 90
        assert partial_station.humidity("Denver") == 50
        assert partial_station.forecast("today") == "Snow"

    def test_null_object_returns_itself_for_unstubbed_methods(self, registry: Registry) -> None:
        """Test a null object swallows unstubbed calls."""
        double = registry.as_null_object(registry.create_fake("WeatherStation"))

        assert double.unknown_method() is double

    def test_uses_the_most_specific_stub(self, registry: Registry) -> None:
        """Test the most specific stub wins."""
        station = registry.create_null_object_fake("WeatherStation")
        registry.allow(station).to_receive("forecast").with_args(anything).and_return("B")
        registry.allow(station).to_receive("forecast").with_args("today").and_return("A")

        assert station.forecast("today") == "A"
        assert station.forecast("friday") == "B"

    def test_real_station_is_untouched(self, station: WeatherStation) -> None:
        """Test the real station keeps its own behaviour."""
        assert station.temperature("NYC") == 72.0
        assert station.report("wind", 20) == "Wind: 20"
        assert station.forecast("someday") == "Unknown"
        assert station.calibrate("temp") == "Calibrated temp"
        assert station.log_event("rain", {"amount": 2}) == "Logged rain: {'amount': 2}"
