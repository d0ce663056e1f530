"""Response handling shared by the requests (sync) and httpx (async) clients."""

import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from geokit.errors import ProviderHTTPError, ProviderResponseError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def decode_json(resp, provider: str) -> Any:
    """Return the JSON body of a requests or httpx response.

    Anything but a 200 raises ProviderHTTPError, an undecodable body
    raises ProviderResponseError.
    """
    if resp.status_code != 200:
        logger.warning("%s answered HTTP %s", provider, resp.status_code)
        raise ProviderHTTPError(provider, resp.status_code, resp.text)
    try:
        return resp.json()
    except ValueError as e:
        raise ProviderResponseError(f"{provider}: malformed JSON payload: {e}") from e


def parse_model(model: Type[M], data: Any, provider: str) -> M:
    try:
        # aliased fields are filled from the provider key only
        return model.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as e:
        raise ProviderResponseError(f"{provider}: unexpected payload: {e}") from e
