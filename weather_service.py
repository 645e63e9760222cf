"""Weather provider contract.

Defines the Weather data container shared by every weather provider and the
abstract WeatherService capability the aggregation layer depends on. Concrete
providers (e.g. OpenWeatherMap) and test doubles implement WeatherService.
"""

from abc import ABC, abstractmethod


class Weather:
    """Current weather for a city as reported by a weather provider.

        Attributes:
            temperature: Current temperature in degrees Celsius.
            summary: Human-readable weather description (e.g., 'light rain').
    """
    def __init__(self, temperature: float, summary: str):
        self.temperature = temperature
        self.summary = summary

    def __eq__(self, other):
        if not isinstance(other, Weather):
            return NotImplemented
        return self.temperature == other.temperature and self.summary == other.summary

    def __repr__(self):
        """Returns a string representation of the Weather instance."""
        return (
            f"{self.__class__.__name__}("
            f"temperature={self.temperature!r}, "
            f"summary={self.summary!r})"
        )


class WeatherService(ABC):
    """Abstract base class for weather providers."""

    @abstractmethod
    def fetch_city_weather(self, city_name: str) -> Weather:
        """Fetches the current weather for a city.

            Args:
                city_name: The name of the city to query.

            Returns:
                Weather: Current temperature and weather summary.

            Raises:
                ServiceError: If the provider fails to fetch the weather.
        """
        pass
