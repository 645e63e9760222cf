"""City Info Aggregation Module.

This module provides the core business logic of the City Info service. It
queries a weather provider and a description provider for the same city at
the same time and joins both answers into a single CityInfo record. A failure
of either provider aborts the combined result with an error that names the
failing source, the city and the upstream cause.

Main components:
    - CityInfo: The immutable, caller-facing combined record.
    - CityInfoFetchError: Aggregation failures, one subclass per provider.
    - CityInfoService: Fans out both lookups and joins them.
"""

import json
import logging
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional, Tuple

import utils
from description_service import DescriptionService
from weather_service import WeatherService


@dataclass(frozen=True)
class CityInfo:
    """Current information about a city.

        Attributes:
            description: Short encyclopedic description of the city.
            weather_situation: Human-readable summary of the current weather.
            temperature: Current temperature formatted with one fractional digit.
    """
    description: str
    weather_situation: str
    temperature: str

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        """Serializes the record into the JSON body returned to HTTP clients."""
        return json.dumps(self.to_dict())


class CityInfoFetchError(Exception):
    """Base exception for errors occurring while aggregating city info.

        Attributes:
            city_name: The city the lookup was made for.
            cause: The original exception raised by the provider.
    """
    source = "city info"

    def __init__(self, city_name: str, cause: Exception):
        super().__init__(f"could not fetch {self.source} for '{city_name}': {cause}")
        self.city_name = city_name
        self.cause = cause

    def __repr__(self):
        return f"{self.__class__.__name__}({self.city_name!r}, {self.cause!r})"


class WeatherFetchError(CityInfoFetchError):
    """Raised when the weather provider failed for the requested city."""
    source = "weather"


class DescriptionFetchError(CityInfoFetchError):
    """Raised when the description provider failed for the requested city."""
    source = "description"


class CityInfoService:
    """Aggregates weather and description lookups into CityInfo records.

        The service holds no per-call state, so a single instance can serve
        any number of concurrent calls.

        Attributes:
            weather_service: Provider of the current weather.
            description_service: Provider of the city description.
            logger: Sink every fetch failure is recorded to.
    """
    def __init__(self, weather_service: WeatherService, description_service: DescriptionService,
                 logger: Optional[logging.Logger] = None):
        self.weather_service = weather_service
        self.description_service = description_service
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def current_status(self, city_name: str) -> CityInfo:
        """Returns the current CityInfo for the given city.

            Both provider lookups run in parallel worker threads. The call always
            waits for both of them to finish, even when one has already failed,
            and never cancels the other. The city name is passed to the
            providers unchanged; validating it is their job.

            Args:
                city_name: The name of the city to query.

            Returns:
                A CityInfo built from both lookups.

            Raises:
                WeatherFetchError: If the weather lookup failed. When both lookups
                    failed, this is the error raised.
                DescriptionFetchError: If only the description lookup failed.
        """
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="city-info") as executor:
            weather_future = executor.submit(
                self._fetch, self.weather_service.fetch_city_weather, WeatherFetchError, city_name)
            description_future = executor.submit(
                self._fetch, self.description_service.fetch_city_description, DescriptionFetchError, city_name)
            wait([weather_future, description_future], return_when=ALL_COMPLETED)

        weather, weather_error = weather_future.result()
        description, description_error = description_future.result()

        # weather failure takes precedence when both lookups failed
        for error in (weather_error, description_error):
            if error is not None:
                raise error from error.cause

        return CityInfo(
            description=description,
            weather_situation=weather.summary,
            temperature=utils.format_temperature(weather.temperature),
        )

    def _fetch(self, fetch: Callable[[str], Any], error_class: type,
               city_name: str) -> Tuple[Any, Optional[CityInfoFetchError]]:
        """Runs one provider lookup, turning any failure into a recorded error value."""
        try:
            return fetch(city_name), None
        except Exception as e:
            error = error_class(city_name, e)
            self.logger.error(error)
            return None, error
