# src/geokit/iplocate/providers.py
from geokit.geocode.providers import BaseProvider
from geokit.iplocate import ipapi_locator, ipstack_locator, rapidapi_locator
from geokit.models import IPAPI, IPLocation, RapidIPGeolocation


class IPStackProvider(BaseProvider):
    name = ipstack_locator.PROVIDER

    async def locate(self, ip: str) -> IPLocation:
        return ipstack_locator.parse_locate(await self._get(ipstack_locator.locate_request(ip)))


class IPAPIProvider(BaseProvider):
    name = ipapi_locator.PROVIDER

    async def locate(self, ip: str = "") -> IPAPI:
        return ipapi_locator.parse_locate(await self._get(ipapi_locator.locate_request(ip)))


class RapidAPIProvider(BaseProvider):
    name = rapidapi_locator.PROVIDER

    async def locate(self, ip: str) -> RapidIPGeolocation:
        return rapidapi_locator.parse_locate(await self._get(rapidapi_locator.locate_request(ip)))
