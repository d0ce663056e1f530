# src/geokit/geocode/__init__.py
from .google_geocoder import geocode
from .nominatim_geocoder import geolocate, reverse, search
from .providers import GoogleProvider, NominatimProvider

__all__ = ["geocode", "geolocate", "reverse", "search", "GoogleProvider", "NominatimProvider"]
