from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Provider credentials, usually set once per process
    google_api_key: str = Field("", validation_alias="GOOGLE_GEOCODING_API_KEY")
    ipstack_api_key: str = Field("", validation_alias="IPSTACK_API_KEY")
    rapidapi_key: str = Field("", validation_alias="RAPIDAPI_KEY")

    nominatim_url: str = Field("https://nominatim.openstreetmap.org", validation_alias="NOMINATIM_URL")
    google_geocode_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    ipstack_url: str = "http://api.ipstack.com"
    ipapi_url: str = "https://ipapi.co"
    rapidapi_host: str = "apility-io-ip-geolocation-v1.p.rapidapi.com"
    user_agent: str = Field("geokit/1.0 (dev@example.com)", validation_alias="NOMINATIM_USER_AGENT")

    timeout: float = 30
    nominatim_timeout: float = 10
    ipstack_timeout: float = 5
    # Nominatim public instance: max 1 req/sec
    nominatim_delay: float = 1.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()


def set_google_api_key(key: str):
    """Set the Google Geocoding API key."""
    settings.google_api_key = key


def set_ipstack_api_key(key: str):
    """Set the ipstack access key. Get one at https://ipstack.com/quickstart"""
    settings.ipstack_api_key = key


def set_rapidapi_key(key: str):
    settings.rapidapi_key = key
