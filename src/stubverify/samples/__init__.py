"""
Sample domain objects used to demonstrate stubbing real objects.
"""
from .weather_station import WeatherStation

__all__ = ["WeatherStation"]
