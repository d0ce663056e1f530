# src/geokit/geocode/google_geocoder.py
import logging

import requests

from geokit.core.config import settings
from geokit.core.http import decode_json, parse_model
from geokit.errors import MissingParameterError, ProviderResponseError, ProviderTransportError
from geokit.models import GooglePlace

logger = logging.getLogger(__name__)

PROVIDER = "Google"


def geocode_request(address: str, language: str = "en") -> dict:
    if not address or not settings.google_api_key:
        raise MissingParameterError("Google geocode needs an address and an API key (set GOOGLE_GEOCODING_API_KEY)")
    if len(language or "") != 2:
        language = "en"
    return {
        "url": settings.google_geocode_url,
        "params": {"address": address, "language": language, "key": settings.google_api_key},
        "headers": {"User-Agent": settings.user_agent},
        "timeout": settings.timeout,
    }


def parse_geocode(data) -> GooglePlace:
    # OK: at least one result
    # ZERO_RESULTS, OVER_QUERY_LIMIT, REQUEST_DENIED, INVALID_REQUEST, UNKNOWN_ERROR otherwise
    status = data.get("status") if isinstance(data, dict) else None
    if status != "OK":
        msg = data.get("error_message", "") if isinstance(data, dict) else ""
        logger.warning("Google geocode status %s %s", status, msg)
        raise ProviderResponseError(f"Google status: {status}" + (f" ({msg})" if msg else ""))
    results = data.get("results")
    if not isinstance(results, list) or not results:
        raise ProviderResponseError("Google status OK without results")
    return parse_model(GooglePlace, results[0], PROVIDER)


def geocode(address: str, language: str = "en") -> GooglePlace:
    """Best match for an address from the Google Geocoding service.

        geocode("Avenue Louise 24, Bruxelles, Belgium", "en")
    """
    req = geocode_request(address, language)
    logger.debug("Google geocode %r (%s)", address, req["params"]["language"])
    try:
        resp = requests.get(**req)
    except requests.RequestException as e:
        raise ProviderTransportError(f"Google network error: {e}") from e
    return parse_geocode(decode_json(resp, PROVIDER))
