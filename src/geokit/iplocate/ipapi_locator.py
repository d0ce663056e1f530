# src/geokit/iplocate/ipapi_locator.py

# https://ipapi.co/api/#introduction

import logging

import requests

from geokit.core.config import settings
from geokit.core.http import decode_json, parse_model
from geokit.errors import ProviderResponseError, ProviderTransportError
from geokit.models import IPAPI

logger = logging.getLogger(__name__)

PROVIDER = "ipapi.co"


def locate_request(ip: str = "") -> dict:
    base = settings.ipapi_url.rstrip("/")
    # without an IP, ipapi.co answers for the caller's own address
    url = f"{base}/{ip}/json/" if ip else f"{base}/json/"
    return {
        "url": url,
        "params": {},
        "headers": {"User-Agent": settings.user_agent},
        "timeout": settings.timeout,
    }


def parse_locate(data) -> IPAPI:
    # {"ip": "...", "error": true, "reason": "Invalid IP Address"}
    if isinstance(data, dict) and data.get("error"):
        logger.warning("ipapi.co error: %s", data.get("reason"))
        raise ProviderResponseError(f"ipapi.co: {data.get('reason', 'error')}")
    return parse_model(IPAPI, data, PROVIDER)


def get_location_from_ip(ip: str = "") -> IPAPI:
    """Location information for an IP (or for the caller when ip is empty)."""
    req = locate_request(ip)
    try:
        resp = requests.get(**req)
    except requests.RequestException as e:
        raise ProviderTransportError(f"ipapi.co network error: {e}") from e
    return parse_locate(decode_json(resp, PROVIDER))
