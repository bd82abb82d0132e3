"""Glosbe API dictionary provider."""

import argparse
import logging
from dataclasses import dataclass
from typing import Any

import requests

from define.exceptions import EmptyResultError, ResponseDecodeError
from define.models import CombinedEntry, Result, Sense
from define.services.validation import validate_and_return_result, validate_http_response
from define.utils import clean_text

from .http import DEFAULT_TIMEOUT, JSON_MIME_TYPE, decode_json, send_request

logger = logging.getLogger(__name__)

NAME = "Glosbe API"
JSON_KEY = "Glosbe"

API_URL = "https://glosbe.com/gapi/translate"
VALID_MIME_TYPES = (JSON_MIME_TYPE,)


@dataclass
class GlosbeConfig:
    """Glosbe needs no credentials."""

    @property
    def json_key(self) -> str:
        return JSON_KEY


class GlosbeSource:
    """Dictionary source using the Glosbe translation API (English to English).

    Implements Source protocol.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize with an HTTP session.

        Args:
            session: Session used for requests (a new one if not given).
            timeout: Seconds to wait for the API.
        """
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def name(self) -> str:
        return NAME

    def define(self, word: str) -> Result:
        """Look up word via the Glosbe API.

        Args:
            word: Word to define.

        Returns:
            Validated Result with one combined entry.
        """
        response = send_request(
            self._session,
            API_URL,
            params={"format": "json", "from": "en", "dest": "en", "phrase": word},
            headers={"Accept": JSON_MIME_TYPE},
            timeout=self._timeout,
        )
        validate_http_response(response, VALID_MIME_TYPES)

        data = decode_json(response)
        if not isinstance(data, dict):
            raise ResponseDecodeError("unexpected Glosbe response shape")

        if not data.get("tuc"):
            raise EmptyResultError(word)

        return validate_and_return_result(self._to_result(data, word))

    @staticmethod
    def _to_result(data: dict[str, Any], word: str) -> Result:
        """Convert the Glosbe response to a Result."""
        phrase = data.get("phrase") or word
        senses = []
        synonyms = []

        for item in data.get("tuc") or []:
            item_phrase = item.get("phrase")
            item_phrase_text = (item_phrase or {}).get("text") or ""

            # Only items without their own phrase, or with the looked-up
            # phrase, are definitions
            if item_phrase is None or item_phrase_text.casefold() == phrase.casefold():
                for meaning in item.get("meanings") or []:
                    text = clean_text(meaning.get("text") or "")
                    if text:
                        senses.append(Sense(definitions=(text,)))
            elif item_phrase_text:
                synonyms.append(clean_text(item_phrase_text))

        entry = CombinedEntry(senses=tuple(senses), synonyms=tuple(synonyms))

        return Result(head=phrase, language=data.get("dest") or "", entries=(entry,))


class GlosbeProvider:
    """Provider for GlosbeSource.

    Implements SourceProvider protocol.
    """

    def __init__(self, session: requests.Session | None = None):
        self._session = session

    @property
    def name(self) -> str:
        return NAME

    def finalize(self, config: GlosbeConfig) -> None:
        pass

    def provide(self, config: GlosbeConfig) -> GlosbeSource:
        return GlosbeSource(self._session)


def register(parser: argparse.ArgumentParser) -> tuple[GlosbeProvider, GlosbeConfig]:
    """Registration function for the Glosbe provider (declares no flags)."""
    return GlosbeProvider(), GlosbeConfig()
