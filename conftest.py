"""Shared pytest fixtures: in-memory provider doubles and a fake Lambda context."""

import threading
import time
from types import SimpleNamespace
from typing import Dict, Optional

import pytest

from description_service import DescriptionService
from weather_service import Weather, WeatherService


class StubWeatherService(WeatherService):
    """Returns a fixed Weather (or one per city) or raises a fixed error, recording every call."""
    def __init__(self, weather: Optional[Weather] = None, error: Optional[Exception] = None,
                 by_city: Optional[Dict[str, Weather]] = None, barrier: Optional[threading.Barrier] = None,
                 delay: float = 0):
        self.weather = weather
        self.error = error
        self.by_city = by_city
        self.barrier = barrier
        self.delay = delay
        self.calls = []
        self.completed = []

    def fetch_city_weather(self, city_name: str) -> Weather:
        self.calls.append(city_name)
        if self.barrier is not None:
            self.barrier.wait()
        time.sleep(self.delay)
        self.completed.append(city_name)
        if self.error is not None:
            raise self.error
        return self.by_city[city_name] if self.by_city is not None else self.weather


class StubDescriptionService(DescriptionService):
    """Description counterpart of StubWeatherService."""
    def __init__(self, description: Optional[str] = None, error: Optional[Exception] = None,
                 by_city: Optional[Dict[str, str]] = None, barrier: Optional[threading.Barrier] = None,
                 delay: float = 0):
        self.description = description
        self.error = error
        self.by_city = by_city
        self.barrier = barrier
        self.delay = delay
        self.calls = []
        self.completed = []

    def fetch_city_description(self, city_name: str) -> str:
        self.calls.append(city_name)
        if self.barrier is not None:
            self.barrier.wait()
        time.sleep(self.delay)
        self.completed.append(city_name)
        if self.error is not None:
            raise self.error
        return self.by_city[city_name] if self.by_city is not None else self.description


@pytest.fixture
def weather_stub():
    """Factory for StubWeatherService instances."""
    return StubWeatherService


@pytest.fixture
def description_stub():
    """Factory for StubDescriptionService instances."""
    return StubDescriptionService


@pytest.fixture
def lambda_context():
    """Minimal stand-in for the AWS Lambda context object."""
    return SimpleNamespace(aws_request_id="test-request-id")
