"""Free Dictionary API (dictionaryapi.dev) provider."""

import argparse
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import requests

from define.exceptions import EmptyResultError, ResponseDecodeError
from define.models import CombinedEntry, Result, Sense
from define.services.validation import validate_and_return_result, validate_http_response
from define.utils import clean_text

from .http import DEFAULT_TIMEOUT, JSON_MIME_TYPE, decode_json, send_request

logger = logging.getLogger(__name__)

NAME = "Free Dictionary API"
JSON_KEY = "FreeDictionary"

API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"
VALID_MIME_TYPES = (JSON_MIME_TYPE,)


@dataclass
class FreeDictionaryConfig:
    """The Free Dictionary API needs no credentials."""

    @property
    def json_key(self) -> str:
        return JSON_KEY


class FreeDictionarySource:
    """Dictionary source using the free dictionaryapi.dev API.

    Implements Source protocol.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def name(self) -> str:
        return NAME

    def define(self, word: str) -> Result:
        """Look up word via dictionaryapi.dev.

        Returns:
            Validated Result with one entry per part of speech.
        """
        response = send_request(
            self._session,
            f"{API_URL}/{quote(word, safe='')}",
            headers={"Accept": JSON_MIME_TYPE},
            timeout=self._timeout,
        )

        # Unknown words come back as 404 with a "No Definitions Found" body
        if response.status_code == 404:
            raise EmptyResultError(word)

        validate_http_response(response, VALID_MIME_TYPES)

        data = decode_json(response)
        if not isinstance(data, list):
            raise ResponseDecodeError("unexpected Free Dictionary response shape")
        if not data:
            raise EmptyResultError(word)

        return validate_and_return_result(self._to_result(data, word))

    def _to_result(self, items: list[dict[str, Any]], word: str) -> Result:
        entries = []
        for item in items:
            phonetic, audio = self._pronunciation(item)
            for meaning in item.get("meanings") or []:
                entries.append(self._to_entry(meaning, phonetic, audio))

        return Result(head=items[0].get("word") or word, language="en", entries=tuple(entries))

    @staticmethod
    def _pronunciation(item: dict[str, Any]) -> tuple[str, str]:
        """Get the phonetic text and first audio URL of a word item."""
        phonetics = item.get("phonetics") or []

        phonetic = item.get("phonetic") or next(
            (p["text"] for p in phonetics if p.get("text")), ""
        )
        audio = next((p["audio"] for p in phonetics if p.get("audio")), "")

        return phonetic, audio

    @staticmethod
    def _to_entry(meaning: dict[str, Any], phonetic: str, audio: str) -> CombinedEntry:
        senses = []
        for definition in meaning.get("definitions") or []:
            text = clean_text(definition.get("definition") or "")
            example = clean_text(definition.get("example") or "")
            senses.append(
                Sense(
                    definitions=(text,) if text else (),
                    examples=(example,) if example else (),
                    synonyms=tuple(definition.get("synonyms") or ()),
                    antonyms=tuple(definition.get("antonyms") or ()),
                )
            )

        return CombinedEntry(
            word_class=meaning.get("partOfSpeech") or "",
            pronunciation=phonetic,
            audio_url=audio,
            senses=tuple(sense for sense in senses if sense.has_content),
            synonyms=tuple(meaning.get("synonyms") or ()),
            antonyms=tuple(meaning.get("antonyms") or ()),
        )


class FreeDictionaryProvider:
    """Provider for FreeDictionarySource.

    Implements SourceProvider protocol.
    """

    def __init__(self, session: requests.Session | None = None):
        self._session = session

    @property
    def name(self) -> str:
        return NAME

    def finalize(self, config: FreeDictionaryConfig) -> None:
        pass

    def provide(self, config: FreeDictionaryConfig) -> FreeDictionarySource:
        return FreeDictionarySource(self._session)


def register(
    parser: argparse.ArgumentParser,
) -> tuple[FreeDictionaryProvider, FreeDictionaryConfig]:
    """Registration function for the Free Dictionary provider (declares no flags)."""
    return FreeDictionaryProvider(), FreeDictionaryConfig()
