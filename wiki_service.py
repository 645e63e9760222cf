"""Wikipedia Service Provider Module.

This module implements the DescriptionService on top of the MediaWiki query
API. It asks for the plain-text first sentence of the intro section of the
article titled after the city, following redirects.
"""

import logging

import requests

import utils
from description_service import DescriptionService
from service_errors import CityNotFoundError, InvalidCityNameError, ServiceRequestError

logger = logging.getLogger(__name__)

WIKIPEDIA_ENDPOINT = "https://en.wikipedia.org/w/api.php"
REQUEST_TIMEOUT_SECONDS = 10
EMPTY_RESPONSE_MESSAGE = "empty response from wikipedia api"
UNEXPECTED_RESPONSE_MESSAGE = "unexpected response from wikipedia api"


class WikipediaService(DescriptionService):
    """Fetches a one-sentence city description from Wikipedia."""

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def fetch_city_description(self, city_name: str) -> str:
        """Returns the first sentence of the Wikipedia intro for the given city.

            Raises:
                InvalidCityNameError: If city_name is empty.
                CityNotFoundError: If no page matches or the matching page has no extract.
                ServiceRequestError: On network, status code or decoding failures.
        """
        if not city_name:
            raise InvalidCityNameError()

        params = {
            "action": "query",
            "prop": "extracts",
            "exsentences": 1,
            "exintro": 1,
            "explaintext": 1,
            "format": "json",
            "redirects": 1,
            "titles": city_name,
        }
        try:
            response = requests.get(WIKIPEDIA_ENDPOINT, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as err:
            logger.warning("Wikipedia request for %r failed: %s", city_name, err)
            raise ServiceRequestError(str(err), err)

        if not isinstance(data, dict):
            raise ServiceRequestError(UNEXPECTED_RESPONSE_MESSAGE)

        query = data.get("query") or {}
        pages = (query.get("pages") or {}) if isinstance(query, dict) else None
        if not isinstance(pages, dict):
            raise ServiceRequestError(f"{UNEXPECTED_RESPONSE_MESSAGE}: malformed pages")

        # only interested in the first result
        page = utils.first_or_default(pages.values())
        if page is None:
            raise CityNotFoundError(EMPTY_RESPONSE_MESSAGE)
        if not isinstance(page, dict):
            raise ServiceRequestError(f"{UNEXPECTED_RESPONSE_MESSAGE}: malformed page")

        extract = page.get("extract")
        if extract is not None and not isinstance(extract, str):
            raise ServiceRequestError(f"{UNEXPECTED_RESPONSE_MESSAGE}: malformed extract")
        if not extract:
            raise CityNotFoundError(EMPTY_RESPONSE_MESSAGE)

        return extract
