"""Clients for geolocation web services, plus haversine distance."""

from .core.config import set_google_api_key, set_ipstack_api_key, set_rapidapi_key, settings
from .distance import EARTH_RADIUS_M, GeoPoint, distance, distance_between
from .errors import (
    GeocodingError,
    MissingParameterError,
    ProviderHTTPError,
    ProviderResponseError,
    ProviderTransportError,
)
from .geocode import GoogleProvider, NominatimProvider, geocode, geolocate, reverse, search
from .iplocate import IPAPIProvider, IPStackProvider, RapidAPIProvider, get_location_from_ip, ip_geocode, locate_ip
from .models import IPAPI, Address, GooglePlace, IPLocation, NominatimResult, Place, RapidIPGeolocation

__all__ = [
    "settings",
    "set_google_api_key",
    "set_ipstack_api_key",
    "set_rapidapi_key",
    "EARTH_RADIUS_M",
    "GeoPoint",
    "distance",
    "distance_between",
    "GeocodingError",
    "MissingParameterError",
    "ProviderHTTPError",
    "ProviderResponseError",
    "ProviderTransportError",
    "geocode",
    "geolocate",
    "reverse",
    "search",
    "locate_ip",
    "get_location_from_ip",
    "ip_geocode",
    "GoogleProvider",
    "NominatimProvider",
    "IPStackProvider",
    "IPAPIProvider",
    "RapidAPIProvider",
    "Address",
    "NominatimResult",
    "Place",
    "GooglePlace",
    "IPLocation",
    "IPAPI",
    "RapidIPGeolocation",
]
