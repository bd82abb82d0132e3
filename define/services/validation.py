"""Validation shared by every dictionary source."""

from collections.abc import Iterable

import requests

from define.exceptions import (
    EmptyResultError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)
from define.models import Result

DEFAULT_ACCEPTABLE_STATUS_CODES = (200,)


def validate_result(result: Result) -> None:
    """Check that a result has meaningful content.

    Args:
        result: Result built from a source response

    Raises:
        EmptyResultError: If there are no entries, or every entry is empty
    """
    if not result.entries or not result.has_content:
        raise EmptyResultError(result.head)


def validate_and_return_result(result: Result) -> Result:
    """Validate a result and hand it back.

    Sources return through this so an empty upstream response always
    surfaces as EmptyResultError.
    """
    validate_result(result)
    return result


def validate_http_response(
    response: requests.Response,
    acceptable_mime_types: Iterable[str],
    acceptable_status_codes: Iterable[int] | None = None,
) -> None:
    """Sanity check an HTTP response before parsing its body.

    Args:
        response: Response to check
        acceptable_mime_types: MIME types the body may have (parameters
            like charset are ignored)
        acceptable_status_codes: Accepted status codes; None or empty
            means only 200

    Raises:
        UnexpectedStatusError: If the status code isn't acceptable
        UnexpectedContentTypeError: If the content type isn't acceptable
    """
    status_codes = tuple(acceptable_status_codes or ()) or DEFAULT_ACCEPTABLE_STATUS_CODES

    if response.status_code not in status_codes:
        raise UnexpectedStatusError(response.status_code)

    content_type = response.headers.get("Content-Type", "")
    mime_type = content_type.split(";", 1)[0].strip().lower()

    if mime_type not in {m.lower() for m in acceptable_mime_types}:
        raise UnexpectedContentTypeError(content_type)
