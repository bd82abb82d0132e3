"""HTTP helpers shared by the provider sources."""

import logging
from typing import Any

import requests

from define.exceptions import ResponseDecodeError, SourceRequestError

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
DEFAULT_TIMEOUT = 10  # Seconds per request


def send_request(
    session: requests.Session,
    url: str,
    *,
    params: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Response:
    """Perform a GET request.

    Raises:
        SourceRequestError: If the request fails or times out
    """
    logger.debug(f"GET {url} params={params}")

    try:
        return session.get(url, params=params, headers=headers, timeout=timeout)
    except requests.exceptions.Timeout as e:
        raise SourceRequestError(f"request timed out after {timeout}s") from e
    except requests.RequestException as e:
        raise SourceRequestError(f"request failed: {e}") from e


def decode_json(response: requests.Response) -> Any:
    """Decode a JSON response body.

    Raises:
        ResponseDecodeError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise ResponseDecodeError(f"invalid JSON response: {e}") from e
