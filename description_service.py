"""Description provider contract - allows swapping the encyclopedic source."""

from abc import ABC, abstractmethod


class DescriptionService(ABC):
    """Abstract base class for city description providers."""

    @abstractmethod
    def fetch_city_description(self, city_name: str) -> str:
        """Fetches a short plain-text description of a city.

            Raises:
                ServiceError: If the provider fails to fetch a description.
        """
        pass
