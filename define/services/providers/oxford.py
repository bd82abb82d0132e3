"""Oxford Dictionaries API provider."""

import argparse
import logging
import os
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import requests

from define.exceptions import EmptyResultError, RequiredConfigError, ResponseDecodeError
from define.models import DictionaryEntry, Result, Sense
from define.services.validation import validate_and_return_result, validate_http_response
from define.utils import BindToConfig, clean_text

from .http import DEFAULT_TIMEOUT, JSON_MIME_TYPE, decode_json, send_request

logger = logging.getLogger(__name__)

NAME = "Oxford Dictionaries API"
JSON_KEY = "OxfordDictionary"

APP_ID_ENV_VAR = "OXFORD_DICTIONARY_APP_ID"
APP_KEY_ENV_VAR = "OXFORD_DICTIONARY_APP_KEY"

API_URL = "https://od-api.oxforddictionaries.com/api/v2"
SOURCE_LANGUAGE = "en-us"
VALID_MIME_TYPES = (JSON_MIME_TYPE,)


@dataclass
class OxfordConfig:
    """Credentials for the Oxford Dictionaries API."""

    app_id: str = field(default="", metadata={"json": "AppID"})
    app_key: str = field(default="", metadata={"json": "AppKey"})

    @property
    def json_key(self) -> str:
        return JSON_KEY


class OxfordSource:
    """Dictionary source using the Oxford Dictionaries API.

    Implements Source protocol.
    """

    def __init__(
        self,
        app_id: str,
        app_key: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize with API credentials.

        Args:
            app_id: Oxford application ID.
            app_key: Oxford application key.
            session: Session used for requests (a new one if not given).
            timeout: Seconds to wait for the API.
        """
        self._app_id = app_id
        self._app_key = app_key
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def name(self) -> str:
        return NAME

    def define(self, word: str) -> Result:
        """Look up word via the Oxford entries endpoint.

        Args:
            word: Word to define.

        Returns:
            Validated Result with one entry per lexical entry.
        """
        response = send_request(
            self._session,
            f"{API_URL}/entries/{SOURCE_LANGUAGE}/{quote(word.lower(), safe='')}",
            params={"strictMatch": "false"},
            headers={
                "Accept": JSON_MIME_TYPE,
                "app_id": self._app_id,
                "app_key": self._app_key,
            },
            timeout=self._timeout,
        )

        # 404 is how the API reports an unknown word
        if response.status_code == 404:
            raise EmptyResultError(word)

        validate_http_response(response, VALID_MIME_TYPES)

        data = decode_json(response)
        if not isinstance(data, dict):
            raise ResponseDecodeError("unexpected Oxford response shape")

        results = data.get("results") or []
        if not results:
            raise EmptyResultError(word)

        return validate_and_return_result(self._to_result(results, word))

    def _to_result(self, results: list[dict[str, Any]], word: str) -> Result:
        """Convert Oxford headword results to a Result."""
        first = results[0]
        entries = []

        for headword in results:
            for lexical_entry in headword.get("lexicalEntries") or []:
                entries.append(self._to_entry(lexical_entry))

        return Result(
            head=first.get("word") or word,
            language=first.get("language") or "",
            entries=tuple(entries),
        )

    def _to_entry(self, lexical_entry: dict[str, Any]) -> DictionaryEntry:
        word_class = (lexical_entry.get("lexicalCategory") or {}).get("text") or ""
        pronunciations = list(lexical_entry.get("pronunciations") or [])
        senses = []

        for entry in lexical_entry.get("entries") or []:
            pronunciations.extend(entry.get("pronunciations") or [])

            for sense in entry.get("senses") or []:
                senses.append(self._to_sense(sense))
                # Subsenses are flattened right after their parent
                for subsense in sense.get("subsenses") or []:
                    senses.append(self._to_sense(subsense))

        spelling = next(
            (p["phoneticSpelling"] for p in pronunciations if p.get("phoneticSpelling")), ""
        )
        audio_url = next((p["audioFile"] for p in pronunciations if p.get("audioFile")), "")

        return DictionaryEntry(
            word_class=word_class.lower(),
            pronunciation=spelling,
            audio_url=audio_url,
            senses=tuple(sense for sense in senses if sense.has_content),
        )

    @staticmethod
    def _to_sense(sense: dict[str, Any]) -> Sense:
        definitions = sense.get("definitions") or sense.get("shortDefinitions") or []

        return Sense(
            definitions=tuple(clean_text(d) for d in definitions if d),
            examples=_texts(sense.get("examples")),
            synonyms=_texts(sense.get("synonyms")),
            antonyms=_texts(sense.get("antonyms")),
        )


def _texts(items: list[dict[str, Any]] | None) -> tuple[str, ...]:
    """Collect the 'text' values of a list of Oxford objects."""
    return tuple(clean_text(item["text"]) for item in items or [] if item.get("text"))


class OxfordProvider:
    """Provider for OxfordSource.

    Implements SourceProvider protocol.
    """

    def __init__(self, session: requests.Session | None = None):
        self._session = session

    @property
    def name(self) -> str:
        return NAME

    def finalize(self, config: OxfordConfig) -> None:
        """Fill blank credentials from the environment."""
        if not config.app_id:
            config.app_id = os.environ.get(APP_ID_ENV_VAR, "")
        if not config.app_key:
            config.app_key = os.environ.get(APP_KEY_ENV_VAR, "")

    def provide(self, config: OxfordConfig) -> OxfordSource:
        """Build the source.

        Raises:
            RequiredConfigError: If AppID or AppKey is blank (AppID is checked first).
        """
        if not config.app_id:
            raise RequiredConfigError("AppID")

        if not config.app_key:
            raise RequiredConfigError("AppKey")

        return OxfordSource(config.app_id, config.app_key, self._session)


def register(parser: argparse.ArgumentParser) -> tuple[OxfordProvider, OxfordConfig]:
    """Registration function for the Oxford provider."""
    config = OxfordConfig()

    group = parser.add_argument_group(NAME)
    group.add_argument(
        "--oxford-dictionary-app-id",
        action=BindToConfig,
        target=config,
        attribute="app_id",
        metavar="ID",
        help=f"The app ID for the {NAME}",
    )
    group.add_argument(
        "--oxford-dictionary-app-key",
        action=BindToConfig,
        target=config,
        attribute="app_key",
        metavar="KEY",
        help=f"The app key for the {NAME}",
    )

    return OxfordProvider(), config
