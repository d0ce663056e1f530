# src/geokit/geocode/nominatim_geocoder.py

# https://nominatim.openstreetmap.org/reverse?format=json&lat=18.8094923&lon=98.968031&zoom=18&addressdetails=1
# https://nominatim.openstreetmap.org/search?city=ottignies&street=pinchart%2031&format=json

import logging
import time
from typing import List, Optional, Tuple, Union

import requests

from geokit.core.config import settings
from geokit.core.http import decode_json, parse_model
from geokit.errors import GeocodingError, ProviderResponseError, ProviderTransportError
from geokit.models import Address, NominatimResult, Place

logger = logging.getLogger(__name__)

PROVIDER = "Nominatim"


def _headers() -> dict:
    return {"User-Agent": settings.user_agent}


def reverse_request(lat: float, lon: float) -> dict:
    return {
        "url": f"{settings.nominatim_url.rstrip('/')}/reverse",
        "params": {"format": "json", "lat": lat, "lon": lon, "zoom": 18, "addressdetails": 1},
        "headers": _headers(),
        "timeout": settings.nominatim_timeout,
    }


def search_request(address: Union[Address, str], limit: Optional[int] = None) -> dict:
    params = {"format": "json"}
    if isinstance(address, str):
        params["q"] = address
    else:
        structured = {
            "street": address.road,
            "city": address.city,
            "postalcode": address.postcode,
            "state": address.region,
            "countrycodes": address.country,
        }
        params.update({k: v for k, v in structured.items() if v})
    if limit is not None:
        params["limit"] = limit
    return {
        "url": f"{settings.nominatim_url.rstrip('/')}/search",
        "params": params,
        "headers": _headers(),
        "timeout": settings.nominatim_timeout,
    }


def parse_reverse(data) -> NominatimResult:
    if isinstance(data, dict) and data.get("error"):
        logger.warning("Nominatim reverse error: %s", data["error"])
        raise ProviderResponseError(f"Nominatim: {data['error']}")
    return parse_model(NominatimResult, data, PROVIDER)


def parse_search(data) -> List[Place]:
    if not isinstance(data, list):
        raise ProviderResponseError(f"Nominatim: expected a list of places, got {type(data).__name__}")
    return [parse_model(Place, item, PROVIDER) for item in data]


def first_coordinates(places: List[Place]) -> Tuple[float, float]:
    if not places:
        raise GeocodingError("Nominatim returned empty result")
    return places[0].lat, places[0].lon


def _wait_rate():
    # terms of usage limit to 1 call / second (https://operations.osmfoundation.org/policies/nominatim/)
    if settings.nominatim_delay > 0:
        time.sleep(settings.nominatim_delay)


def _get(req: dict):
    _wait_rate()
    logger.debug("GET %s %s", req["url"], req["params"])
    try:
        resp = requests.get(**req)
    except requests.RequestException as e:
        raise ProviderTransportError(f"Nominatim network error: {e}") from e
    return decode_json(resp, PROVIDER)


def reverse(lat: float, lon: float) -> NominatimResult:
    """Location name and address for coordinates.

    Waits `settings.nominatim_delay` seconds first, because of the public
    instance rate limit.

        reverse(13.7665269, 100.6068431)
    """
    return parse_reverse(_get(reverse_request(lat, lon)))


def search(address: Union[Address, str], limit: Optional[int] = None) -> List[Place]:
    """Candidate places for a free-form query or a (partial) structured Address."""
    return parse_search(_get(search_request(address, limit)))


def geolocate(address: Union[Address, str]) -> Tuple[float, float]:
    """
    Coordinates of the best candidate for an address. Returns (lat, lon)

        geolocate(Address(city="Bangkok", road="Latprao 94", postcode="10310"))
    """
    return first_coordinates(search(address))
