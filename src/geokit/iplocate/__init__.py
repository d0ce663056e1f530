# src/geokit/iplocate/__init__.py
from .ipapi_locator import get_location_from_ip
from .ipstack_locator import locate_ip
from .providers import IPAPIProvider, IPStackProvider, RapidAPIProvider
from .rapidapi_locator import ip_geocode

__all__ = ["get_location_from_ip", "locate_ip", "ip_geocode", "IPAPIProvider", "IPStackProvider", "RapidAPIProvider"]
