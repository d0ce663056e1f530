# src/geokit/iplocate/rapidapi_locator.py

# https://rapidapi.com/apility.io/api/ip-geolocation

import logging

import requests

from geokit.core.config import settings
from geokit.core.http import decode_json, parse_model
from geokit.errors import MissingParameterError, ProviderTransportError
from geokit.models import RapidIPGeolocation

logger = logging.getLogger(__name__)

PROVIDER = "RapidAPI"


def locate_request(ip: str) -> dict:
    if not ip or not settings.rapidapi_key:
        raise MissingParameterError("RapidAPI lookup needs an IP and an API key (set RAPIDAPI_KEY)")
    return {
        "url": f"https://{settings.rapidapi_host}/{ip}",
        "params": {},
        "headers": {
            "x-rapidapi-host": settings.rapidapi_host,
            "x-rapidapi-key": settings.rapidapi_key,
            "accept": "application/json",
        },
        "timeout": settings.timeout,
    }


def parse_locate(data) -> RapidIPGeolocation:
    # apility.io wraps the record: {"ip": {...}}
    if isinstance(data, dict) and isinstance(data.get("ip"), dict):
        data = data["ip"]
    return parse_model(RapidIPGeolocation, data, PROVIDER)


def ip_geocode(ip: str) -> RapidIPGeolocation:
    req = locate_request(ip)
    logger.debug("RapidAPI lookup %s", ip)
    try:
        resp = requests.get(**req)
    except requests.RequestException as e:
        raise ProviderTransportError(f"RapidAPI network error: {e}") from e
    return parse_locate(decode_json(resp, PROVIDER))
