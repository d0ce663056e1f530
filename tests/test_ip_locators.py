# tests/test_ip_locators.py
import pytest
import requests

from geokit.core.config import set_ipstack_api_key, set_rapidapi_key, settings
from geokit.errors import MissingParameterError, ProviderHTTPError, ProviderResponseError, ProviderTransportError
from geokit.iplocate import ipapi_locator, ipstack_locator, rapidapi_locator

IPSTACK_PAYLOAD = {
    "ip": "134.201.250.155",
    "type": "ipv4",
    "continent_code": "NA",
    "continent_name": "North America",
    "country_code": "US",
    "country_name": "United States",
    "region_code": "CA",
    "region_name": "California",
    "city": "Los Angeles",
    "zip": "90013",
    "latitude": 34.0453,
    "longitude": -118.2413,
    "location": {
        "geoname_id": 5368361,
        "capital": "Washington D.C.",
        "languages": [{"code": "en", "name": "English", "native": "English"}],
        "country_flag_emoji": "🇺🇸",
        "calling_code": "1",
        "is_eu": False,
    },
}

IPAPI_PAYLOAD = {
    "ip": "8.8.8.8",
    "version": "IPv4",
    "city": "Mountain View",
    "region": "California",
    "region_code": "CA",
    "country_code": "US",
    "country_code_iso3": "USA",
    "country_name": "United States",
    "in_eu": False,
    "postal": None,
    "latitude": 37.42301,
    "longitude": -122.083352,
    "timezone": "America/Los_Angeles",
    "utc_offset": "-0700",
    "asn": "AS15169",
    "org": "GOOGLE",
}


# -------------------------
# ipstack
# -------------------------
def test_ipstack_missing_key(fake_get):
    with pytest.raises(MissingParameterError):
        ipstack_locator.locate_ip("134.201.250.155")
    assert fake_get.calls == []


def test_ipstack_missing_ip(fake_get):
    set_ipstack_api_key("k")
    with pytest.raises(MissingParameterError):
        ipstack_locator.locate_ip("")


def test_ipstack_locate(fake_get, make_response):
    set_ipstack_api_key("stack-key")
    fake_get.response = make_response(IPSTACK_PAYLOAD)
    loc = ipstack_locator.locate_ip("134.201.250.155")

    assert fake_get.last["url"] == "http://api.ipstack.com/134.201.250.155"
    assert fake_get.last["params"] == {"access_key": "stack-key"}
    assert fake_get.last["timeout"] == settings.ipstack_timeout
    assert loc.city == "Los Angeles"
    assert loc.latitude == pytest.approx(34.0453)
    assert loc.location.languages[0].code == "en"
    assert loc.location.geoname_id == 5368361


def test_ipstack_error_payload(fake_get, make_response):
    set_ipstack_api_key("bad-key")
    fake_get.response = make_response(
        {"success": False, "error": {"code": 101, "type": "invalid_access_key", "info": "You have not supplied a valid API Access Key."}}
    )
    with pytest.raises(ProviderResponseError, match="101"):
        ipstack_locator.locate_ip("1.1.1.1")


# -------------------------
# ipapi.co
# -------------------------
def test_ipapi_locate(fake_get, make_response):
    fake_get.response = make_response(IPAPI_PAYLOAD)
    loc = ipapi_locator.get_location_from_ip("8.8.8.8")

    assert fake_get.last["url"] == "https://ipapi.co/8.8.8.8/json/"
    assert loc.org == "GOOGLE"
    assert loc.timezone == "America/Los_Angeles"
    # null becomes the field default
    assert loc.postal == ""


def test_ipapi_without_ip_asks_for_caller(fake_get, make_response):
    fake_get.response = make_response(IPAPI_PAYLOAD)
    ipapi_locator.get_location_from_ip()
    assert fake_get.last["url"] == "https://ipapi.co/json/"


def test_ipapi_error_payload(fake_get, make_response):
    fake_get.response = make_response({"ip": "999.1.1.1", "error": True, "reason": "Invalid IP Address"})
    with pytest.raises(ProviderResponseError, match="Invalid IP Address"):
        ipapi_locator.get_location_from_ip("999.1.1.1")


def test_ipapi_rate_limited(fake_get, make_response):
    fake_get.response = make_response(status_code=429, text="Too many rapid requests")
    with pytest.raises(ProviderHTTPError):
        ipapi_locator.get_location_from_ip("8.8.8.8")


# -------------------------
# RapidAPI
# -------------------------
def test_rapidapi_missing_key(fake_get):
    with pytest.raises(MissingParameterError):
        rapidapi_locator.ip_geocode("8.8.8.8")


def test_rapidapi_headers_and_unwrap(fake_get, make_response):
    set_rapidapi_key("rapid-key")
    fake_get.response = make_response(
        {"ip": {"address": "8.8.8.8", "city": "Mountain View", "country": "US", "latitude": 37.4, "longitude": -122.0, "asn": {"asn": 15169}}}
    )
    res = rapidapi_locator.ip_geocode("8.8.8.8")

    assert fake_get.last["url"] == "https://apility-io-ip-geolocation-v1.p.rapidapi.com/8.8.8.8"
    assert fake_get.last["headers"] == {
        "x-rapidapi-host": "apility-io-ip-geolocation-v1.p.rapidapi.com",
        "x-rapidapi-key": "rapid-key",
        "accept": "application/json",
    }
    assert res.address == "8.8.8.8"
    assert res.city == "Mountain View"
    # unknown keys are kept
    assert res.model_extra["asn"] == {"asn": 15169}


def test_ipstack_error_as_plain_string(fake_get, make_response):
    set_ipstack_api_key("k")
    fake_get.response = make_response({"success": False, "error": "usage limit reached"})
    with pytest.raises(ProviderResponseError, match="usage limit reached"):
        ipstack_locator.locate_ip("1.1.1.1")


def test_rapidapi_payload_without_envelope(fake_get, make_response):
    set_rapidapi_key("rapid-key")
    fake_get.response = make_response({"address": "1.2.3.4", "city": "Brussels", "country": "BE"})
    res = rapidapi_locator.ip_geocode("1.2.3.4")

    assert res.address == "1.2.3.4"
    assert res.country == "BE"


@pytest.mark.parametrize(
    "call,key_setter",
    [
        (lambda: ipstack_locator.locate_ip("1.1.1.1"), set_ipstack_api_key),
        (lambda: ipapi_locator.get_location_from_ip("1.1.1.1"), None),
        (lambda: rapidapi_locator.ip_geocode("1.1.1.1"), set_rapidapi_key),
    ],
)
def test_network_error_is_wrapped(fake_get, call, key_setter):
    if key_setter:
        key_setter("k")
    fake_get.exc = requests.ConnectionError("connection refused")
    with pytest.raises(ProviderTransportError) as exc_info:
        call()
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
