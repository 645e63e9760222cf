"""OpenWeatherMap Service Provider Module.

This module implements the integration with the OpenWeatherMap current weather
API. It provides the network-backed WeatherService used in production.

The module follows a clean separation of concerns:
    1. Input validation of the requested city name.
    2. API interaction through OpenWeatherMapService.fetch_city_weather.
    3. Translation of transport and payload failures into the ServiceError hierarchy.
"""

import logging

import requests

import utils
from service_errors import CityNotFoundError, InvalidCityNameError, ServiceRequestError
from weather_service import Weather, WeatherService

logger = logging.getLogger(__name__)

OPEN_WEATHER_MAP_ENDPOINT = "https://api.openweathermap.org/data/2.5/weather"
REQUEST_TIMEOUT_SECONDS = 10
UNEXPECTED_RESPONSE_MESSAGE = "unexpected response from openweathermap api"


class OpenWeatherMapService(WeatherService):
    """Fetches current weather from OpenWeatherMap.

        Attributes:
            api_key: The OpenWeatherMap API key used to authenticate requests.
    """
    def __init__(self, api_key: str):
        self.api_key = api_key

    def __repr__(self):
        # never leak the api key into logs
        return f"{self.__class__.__name__}()"

    def fetch_city_weather(self, city_name: str) -> Weather:
        """Fetches real-time weather data from OpenWeatherMap.

            Args:
                city_name: The name of the city to query (e.g., "London" or "Tel Aviv").

            Returns:
                A Weather object with the temperature in Celsius and the first
                reported weather description.

            Raises:
                InvalidCityNameError: If city_name is empty.
                CityNotFoundError: If the API answers 404 for the city.
                ServiceRequestError: If a network error occurs, the API returns a
                    non-success status code, or the payload cannot be decoded.
        """
        if not city_name:
            raise InvalidCityNameError()

        params = {"q": city_name, "units": "metric", "appid": self.api_key}
        try:
            response = requests.get(OPEN_WEATHER_MAP_ENDPOINT, params=params, timeout=REQUEST_TIMEOUT_SECONDS)

            if response.status_code == 404:
                raise CityNotFoundError("city not found")

            # Raise an exception for bad status codes (4xx or 5xx)
            response.raise_for_status()

            data = response.json()
        except requests.exceptions.RequestException as err:
            # the request url carries the api key, so only the error type and status are surfaced
            message = describe_request_error(err)
            logger.warning("OpenWeatherMap request for %r failed: %s", city_name, message)
            raise ServiceRequestError(message, err)

        if not isinstance(data, dict):
            raise ServiceRequestError(UNEXPECTED_RESPONSE_MESSAGE)

        main = data.get("main")
        temperature = main.get("temp") if isinstance(main, dict) else None
        if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
            raise ServiceRequestError(f"{UNEXPECTED_RESPONSE_MESSAGE}: missing temperature")

        conditions = data.get("weather") or []
        if not isinstance(conditions, list):
            raise ServiceRequestError(f"{UNEXPECTED_RESPONSE_MESSAGE}: malformed weather conditions")

        # only interested in the first reported condition
        condition = utils.first_or_default(conditions, {})
        if not isinstance(condition, dict):
            raise ServiceRequestError(f"{UNEXPECTED_RESPONSE_MESSAGE}: malformed weather conditions")

        return Weather(float(temperature), str(condition.get("description") or ""))


def describe_request_error(err: requests.exceptions.RequestException) -> str:
    """Describes a failed OpenWeatherMap request without echoing the request url.

        Args:
            err: The requests exception raised while calling the API.

        Returns:
            The exception type, plus the HTTP status code when a response was received,
            e.g. "openweathermap request failed: HTTPError (status 429)".
    """
    message = f"openweathermap request failed: {type(err).__name__}"
    if err.response is not None:
        message += f" (status {err.response.status_code})"
    return message
