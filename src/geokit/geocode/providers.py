# src/geokit/geocode/providers.py
import asyncio
import logging
from typing import List, Optional, Tuple, Union

import httpx

from geokit.core.config import settings
from geokit.core.http import decode_json
from geokit.errors import ProviderTransportError
from geokit.geocode import google_geocoder, nominatim_geocoder
from geokit.models import Address, GooglePlace, NominatimResult, Place

logger = logging.getLogger(__name__)


# -------------------------
# Provider base class (async)
# -------------------------
class BaseProvider:
    name = "provider"

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    async def _get(self, req: dict):
        logger.debug("%s GET %s", self.name, req["url"])
        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                resp = await client.get(req["url"], params=req["params"], headers=req["headers"], timeout=req["timeout"])
            except httpx.RequestError as e:
                raise ProviderTransportError(f"{self.name} network error: {e}") from e
        return decode_json(resp, self.name)


# -------------------------
# Nominatim provider (async, fixed wait before each call)
# -------------------------
class NominatimProvider(BaseProvider):
    name = nominatim_geocoder.PROVIDER

    def __init__(self, delay: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(transport)
        self.delay = settings.nominatim_delay if delay is None else delay

    async def _wait_rate(self):
        if self.delay > 0:
            await asyncio.sleep(self.delay)

    async def _get(self, req: dict):
        await self._wait_rate()
        return await super()._get(req)

    async def reverse(self, lat: float, lon: float) -> NominatimResult:
        return nominatim_geocoder.parse_reverse(await self._get(nominatim_geocoder.reverse_request(lat, lon)))

    async def search(self, address: Union[Address, str], limit: Optional[int] = None) -> List[Place]:
        return nominatim_geocoder.parse_search(await self._get(nominatim_geocoder.search_request(address, limit)))

    async def geolocate(self, address: Union[Address, str]) -> Tuple[float, float]:
        return nominatim_geocoder.first_coordinates(await self.search(address))


# -------------------------
# Google provider
# -------------------------
class GoogleProvider(BaseProvider):
    name = google_geocoder.PROVIDER

    async def geocode(self, address: str, language: str = "en") -> GooglePlace:
        return google_geocoder.parse_geocode(await self._get(google_geocoder.geocode_request(address, language)))
