"""AWS Lambda Handler and Request Orchestration Module.

This module acts as the entry point for the City Info service. It manages the
end-to-end lifecycle of an HTTP request, including:
    1. Extracting the 'name' query parameter.
    2. Building (once per container) the CityInfoService from configuration.
    3. Coordinating with the business logic layer to fetch the city info.
    4. Mapping internal outcomes to HTTP status codes and JSON bodies.

Environment Requirements:
    - OWS_API_KEY: OpenWeatherMap API key used to authenticate weather requests.
    - LOG_LEVEL (optional): Logging level of the root logger, defaults to INFO.
"""
import json
import logging
import os
from typing import Optional, TYPE_CHECKING

# makes AWS specific type hinting available in IDE, without bundling the library when deploying to the cloud
if TYPE_CHECKING:
    from aws_lambda_typing.context import Context

from city_info import CityInfoFetchError, CityInfoService
from open_weather_map import OpenWeatherMapService
from wiki_service import WikipediaService

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "OWS_API_KEY"
DEFAULT_LOG_LEVEL = "INFO"


def configure_logging(level_name: Optional[str]) -> int:
    """Sets the root logger level, falling back to INFO for unknown level names.

        The Lambda runtime installs its own handler on the root logger, so only
        the level is configured here.

        Returns:
            The numeric level that was applied.
    """
    root_logger = logging.getLogger()
    try:
        root_logger.setLevel((level_name or DEFAULT_LOG_LEVEL).upper())
    except ValueError:
        root_logger.setLevel(DEFAULT_LOG_LEVEL)
        logger.warning("Unknown LOG_LEVEL %r, using %s", level_name, DEFAULT_LOG_LEVEL)
    return root_logger.level


configure_logging(os.getenv("LOG_LEVEL"))

_city_info_service: Optional[CityInfoService] = None


class MissingApiKeyError(Exception):
    """Raised when the OpenWeatherMap API key is not configured."""
    def __init__(self):
        super().__init__(f"{API_KEY_ENV_VAR} environment variable not set")


def build_city_info_service() -> CityInfoService:
    """Wires the production CityInfoService from environment configuration.

        Raises:
            MissingApiKeyError: If OWS_API_KEY is unset or empty.
    """
    api_key = os.getenv(API_KEY_ENV_VAR)

    if not api_key:
        raise MissingApiKeyError()

    return CityInfoService(OpenWeatherMapService(api_key), WikipediaService())


def get_city_info_service() -> CityInfoService:
    """Returns the CityInfoService of this container, building it on first use."""
    global _city_info_service
    if _city_info_service is None:
        _city_info_service = build_city_info_service()
    return _city_info_service


def get_request_city_param(event: dict) -> Optional[str]:
    """Retrieves the 'name' query string parameter from the incoming request."""
    # API Gateway sends null instead of {} when there is no query string
    return (event.get('queryStringParameters') or {}).get('name', None)


def get_response(status_code: int, context: "Context", body: dict) -> dict:
    """Constructs a standardized HTTP response for the Lambda Gateway.

        Args:
            status_code: HTTP status code to return.
            context: AWS Lambda context object (used for Request ID).
            body: The dictionary serialized as the JSON body.

        Returns:
            A dictionary formatted as an AWS Lambda HTTP response.
    """
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': "application/json",
            "X-Request-ID": context.aws_request_id
        },
        'body': json.dumps(body)
    }


def handle_missing_parameter_name(context: "Context") -> dict:
    """Returns a formatted HTTP 404 response for a missing 'name' query parameter."""
    return get_response(404, context, {"error": "missing required name query parameter"})


def handle_city_info_fetch_error(context: "Context", error: CityInfoFetchError) -> dict:
    """Returns a formatted HTTP 404 response carrying the aggregation error message."""
    return get_response(404, context, {"error": str(error)})


def handle_internal_server_error(context: "Context") -> dict:
    """Returns a formatted HTTP 500 Internal Server Error response for configuration failures."""
    return get_response(500, context, {"error": "internal server error"})


def lambda_handler(event, context: "Context") -> dict:
    """The primary execution entry point for the AWS Lambda function.

        Execution Flow:
            1. Parse and validate the 'name' query parameter.
            2. Obtain the configured CityInfoService.
            3. Invoke business logic to fetch the weather and description of the city.
            4. Return the CityInfo as JSON, or an error body with the failure message.
    """
    city = get_request_city_param(event)

    if not city:
        logger.info("Request missing 'name' parameter")
        return handle_missing_parameter_name(context)

    try:
        city_info_service = get_city_info_service()
    except MissingApiKeyError as e:
        logger.error("City info service is not configured: %s", e)
        return handle_internal_server_error(context)

    logger.info("Fetching city info for %r", city)

    try:
        city_info = city_info_service.current_status(city)
    except CityInfoFetchError as e:
        logger.info("City info fetching failed: %s", e)
        return handle_city_info_fetch_error(context, e)

    return get_response(200, context, city_info.to_dict())
