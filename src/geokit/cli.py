#!/usr/bin/env python3
import json
import logging

import click

from geokit.core.config import settings
from geokit.distance import distance as haversine_distance
from geokit.errors import GeocodingError
from geokit.geocode import google_geocoder, nominatim_geocoder
from geokit.iplocate import ipapi_locator, ipstack_locator, rapidapi_locator
from geokit.models import Address


def _echo_model(obj):
    click.echo(obj.model_dump_json(indent=2, by_alias=True))


def _run(fn, *args):
    try:
        return fn(*args)
    except GeocodingError as e:
        raise click.ClickException(str(e))


# -----------------------------
# CLI entry point
# -----------------------------
@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose):
    """Query geolocation services and compute distances."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
def distance(lat1, lon1, lat2, lon2):
    """Great-circle distance in meters (use -- before negative coordinates)."""
    click.echo(repr(haversine_distance(lat1, lon1, lat2, lon2)))


@main.command()
@click.argument("lat", type=float)
@click.argument("lon", type=float)
def reverse(lat, lon):
    """Address of a point, from Nominatim."""
    _echo_model(_run(nominatim_geocoder.reverse, lat, lon))


@main.command()
@click.argument("query", required=False)
@click.option("--street", default="", help="Street and house number")
@click.option("--city", default="")
@click.option("--postcode", default="")
@click.option("--region", default="", help="State or province")
@click.option("--country", default="", help="ISO country code")
@click.option("--limit", type=int, default=None)
def search(query, street, city, postcode, region, country, limit):
    """Candidate places for a free-form QUERY or a structured address."""
    if query:
        address = query
    else:
        address = Address(road=street, city=city, postcode=postcode, region=region, country=country)
        if not any((street, city, postcode, region, country)):
            raise click.UsageError("give a QUERY or at least one address field")
    places = _run(nominatim_geocoder.search, address, limit)
    click.echo(json.dumps([p.model_dump(by_alias=True) for p in places], indent=2))


@main.command()
@click.argument("address")
@click.option("--language", default="en", help="Two-letter result language")
@click.option("--api-key", envvar="GOOGLE_GEOCODING_API_KEY", default="", help="Google API key")
def geocode(address, language, api_key):
    """Best Google Geocoding match for ADDRESS."""
    if api_key:
        settings.google_api_key = api_key
    _echo_model(_run(google_geocoder.geocode, address, language))


@main.command()
@click.argument("ip", required=False, default="")
@click.option(
    "--provider",
    type=click.Choice(["ipstack", "ipapi", "rapidapi"]),
    default="ipapi",
    show_default=True,
)
def ip(ip, provider):
    """Location of an IP address (ipapi: empty IP means this machine)."""
    if provider == "ipstack":
        _echo_model(_run(ipstack_locator.locate_ip, ip))
    elif provider == "rapidapi":
        _echo_model(_run(rapidapi_locator.ip_geocode, ip))
    else:
        _echo_model(_run(ipapi_locator.get_location_from_ip, ip))


if __name__ == "__main__":
    main()
