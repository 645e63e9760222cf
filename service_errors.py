"""Custom exception hierarchy for the upstream service providers.

This module defines the structured set of exceptions raised by the weather and
description providers. By inheriting from a common base class, it allows the
aggregation layer to treat any provider failure uniformly while the concrete
subclass still tells what kind of failure occurred.

Example:
    try:
        weather = weather_service.fetch_city_weather(city)
    except ServiceError as e:
        logger.error(f"Weather service failed: {e}")
"""

import requests


class ServiceError(Exception):
    """Base class for any exception raised by an upstream service provider.

        Catching this exception will intercept any error specifically defined
        within this application, regardless of the underlying service provider.
    """
    pass


class InvalidCityNameError(ServiceError):
    """Raised when the city name handed to a provider is empty or malformed."""

    def __init__(self, message: str = "invalid name; should be non empty string"):
        super().__init__(message)


class CityNotFoundError(ServiceError):
    """Raised when a provider has no entry matching the requested city."""
    pass


class ServiceRequestError(ServiceError):
    """Raised when a network, decoding or unexpected-shape error occurred while talking to a provider.

        Attributes:
            error: The underlying requests exception, or None when the response
                decoded fine but did not have the expected shape.
    """
    def __init__(self, message: str, error: requests.exceptions.RequestException | None = None):
        """Initializes the error with a message and the original requests exception.

                Args:
                    message: Human-readable description of the failure.
                    error: The source RequestException, if any.
        """
        super().__init__(message)
        self.error = error

    def __repr__(self):
        """Returns a string representation of the ServiceRequestError instance, naming the wrapped error type."""
        # the wrapped error's own text may contain the request url and its credentials
        error_type = type(self.error).__name__ if self.error is not None else None
        return f"{self.__class__.__name__}({str(self)!r}, {error_type})"
