# src/geokit/iplocate/ipstack_locator.py

# http://api.ipstack.com/<ip>?access_key=IPSTACK_API_KEY
# https://ipstack.com/documentation

import logging

import requests

from geokit.core.config import settings
from geokit.core.http import decode_json, parse_model
from geokit.errors import MissingParameterError, ProviderResponseError, ProviderTransportError
from geokit.models import IPLocation

logger = logging.getLogger(__name__)

PROVIDER = "ipstack"


def locate_request(ip: str) -> dict:
    if not ip or not settings.ipstack_api_key:
        raise MissingParameterError("ipstack needs an IP and an access key (set IPSTACK_API_KEY)")
    return {
        "url": f"{settings.ipstack_url.rstrip('/')}/{ip}",
        "params": {"access_key": settings.ipstack_api_key},
        "headers": {"User-Agent": settings.user_agent},
        "timeout": settings.ipstack_timeout,
    }


def parse_locate(data) -> IPLocation:
    # errors come back as HTTP 200 {"success": false, "error": {"code": 101, "type": ..., "info": ...}}
    if isinstance(data, dict) and data.get("success") is False:
        err = data.get("error")
        if not isinstance(err, dict):
            err = {"info": err}
        logger.warning("ipstack error %s: %s", err.get("code"), err.get("type"))
        raise ProviderResponseError(f"ipstack error {err.get('code')}: {err.get('info') or err.get('type')}")
    return parse_model(IPLocation, data, PROVIDER)


def locate_ip(ip: str) -> IPLocation:
    """
    Location of an IP address, serviced by ipstack.
    The access key must be set first:

        set_ipstack_api_key("MY IP STACK KEY")
        locate_ip("134.201.250.155")
    """
    req = locate_request(ip)
    logger.debug("ipstack lookup %s", ip)
    try:
        resp = requests.get(**req)
    except requests.RequestException as e:
        raise ProviderTransportError(f"ipstack network error: {e}") from e
    return parse_locate(decode_json(resp, PROVIDER))
