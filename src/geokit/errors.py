class GeocodingError(RuntimeError):
    pass


class MissingParameterError(GeocodingError, ValueError):
    """A required argument or API key was empty."""


class ProviderTransportError(GeocodingError):
    """The request never got a response (DNS, connect, timeout...)."""


class ProviderHTTPError(GeocodingError):
    def __init__(self, provider: str, status_code: int, body: str = ""):
        super().__init__(f"{provider} HTTP {status_code}: {body}")
        self.provider = provider
        self.status_code = status_code
        self.body = body


class ProviderResponseError(GeocodingError):
    """Malformed payload, or an error status reported inside the payload."""
