"""Response shapes of the wrapped providers, mirroring their JSON as-is."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _ProviderModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # providers send null for unknown values; fall back to the field default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# -------------------------
# Nominatim
# -------------------------
class Address(_ProviderModel):
    """Structured address; also used to query Nominatim forward search."""

    country: str = Field("", alias="country_code")
    road: str = ""
    city: str = ""
    postcode: str = ""
    region: str = Field("", alias="state")


class NominatimResult(_ProviderModel):
    display_name: str = ""
    address: Optional[Address] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    place_id: Optional[str] = None

    @field_validator("place_id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return None if v is None else str(v)


class Place(_ProviderModel):
    """One candidate of a Nominatim search, ranked by importance."""

    lat: float
    lon: float
    place_id: str = ""
    display_name: str = ""
    class_: str = Field("", alias="class")
    type: str = ""
    importance: float = 0.0
    osm_type: str = ""

    @field_validator("place_id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return "" if v is None else str(v)


# -------------------------
# Google Geocoding / Places
# -------------------------
class LatLng(_ProviderModel):
    lat: float = 0.0
    lng: float = 0.0


class Geometry(_ProviderModel):
    location: LatLng = Field(default_factory=LatLng)
    # ROOFTOP, RANGE_INTERPOLATED, GEOMETRIC_CENTER, APPROXIMATE
    location_type: str = ""


class AddressComponent(_ProviderModel):
    long_name: str = ""
    short_name: str = ""
    types: List[str] = Field(default_factory=list)


class DayTime(_ProviderModel):
    day: int = 0  # 0-6, starting on Sunday
    time: str = ""  # hhmm, place's time zone


class OpeningPeriod(_ProviderModel):
    open: Optional[DayTime] = None
    close: Optional[DayTime] = None


class OpeningHours(_ProviderModel):
    open_now: bool = False
    weekday_text: List[str] = Field(default_factory=list)
    periods: List[OpeningPeriod] = Field(default_factory=list)


class Photo(_ProviderModel):
    height: int = 0
    width: int = 0
    photo_reference: str = ""
    html_attributions: List[str] = Field(default_factory=list)


class Review(_ProviderModel):
    author_name: str = ""
    author_url: str = ""
    language: str = ""
    profile_photo_url: str = ""
    rating: int = 0
    text: str = ""
    time: Optional[int] = None


class GooglePlace(_ProviderModel):
    geometry: Geometry = Field(default_factory=Geometry)
    place_id: str = ""
    formatted_address: str = ""
    address_components: List[AddressComponent] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)
    partial_match: bool = False

    # Places details, absent from plain geocoding results
    name: str = ""
    icon: str = ""
    vicinity: str = ""
    opening_hours: Optional[OpeningHours] = None
    photos: List[Photo] = Field(default_factory=list)
    rating: Optional[float] = None
    price_level: Optional[int] = None  # 0 free .. 4 very expensive
    reviews: List[Review] = Field(default_factory=list)
    url: str = ""
    website: str = ""
    formatted_phone_number: str = ""
    international_phone_number: str = ""
    utc_offset: Optional[int] = None
    user_ratings_total: int = 0
    permanently_closed: bool = False


# -------------------------
# ipstack
# -------------------------
class Language(_ProviderModel):
    code: str = ""
    name: str = ""
    native: str = ""


class CountryInfo(_ProviderModel):
    geoname_id: Optional[int] = None
    capital: str = ""
    languages: List[Language] = Field(default_factory=list)
    country_flag: str = ""
    country_flag_emoji: str = ""
    country_flag_emoji_unicode: str = ""
    calling_code: str = ""
    is_eu: bool = False


class IPLocation(_ProviderModel):
    ip: str = ""
    type: str = ""
    continent_code: str = ""
    continent_name: str = ""
    country_code: str = ""
    country_name: str = ""
    region_code: Optional[str] = None
    region_name: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location: CountryInfo = Field(default_factory=CountryInfo)


# -------------------------
# ipapi.co
# -------------------------
class IPAPI(_ProviderModel):
    ip: str = ""
    version: str = ""
    city: str = ""
    region: str = ""
    region_code: str = ""
    country_code: str = ""
    country_code_iso3: str = ""
    country_name: str = ""
    country_capital: str = ""
    country_tld: str = ""
    continent_code: str = ""
    in_eu: bool = False
    postal: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    utc_offset: str = ""
    country_calling_code: str = ""
    currency: str = ""
    currency_name: str = ""
    languages: str = ""
    country_area: float = 0.0
    country_population: float = 0.0
    asn: str = ""
    org: str = ""


# -------------------------
# RapidAPI (apility.io ip-geolocation)
# -------------------------
class RapidIPGeolocation(_ProviderModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    address: str = ""
    hostname: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    continent: Optional[str] = None
    postal: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    time_zone: Optional[str] = None
