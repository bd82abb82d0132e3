"""Merriam-Webster Collegiate Dictionary API provider."""

import argparse
import logging
import os
import string
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import requests

from define.exceptions import EmptyResultError, RequiredConfigError, ResponseDecodeError
from define.models import DictionaryEntry, Result, Sense
from define.services.validation import validate_and_return_result, validate_http_response
from define.utils import BindToConfig, strip_markup

from .http import DEFAULT_TIMEOUT, JSON_MIME_TYPE, decode_json, send_request

logger = logging.getLogger(__name__)

NAME = "Merriam-Webster Dictionary API"
JSON_KEY = "MerriamWebsterDictionary"

APP_KEY_ENV_VAR = "MERRIAM_WEBSTER_DICTIONARY_APP_KEY"

API_URL = "https://www.dictionaryapi.com/api/v3/references/collegiate/json"
AUDIO_URL = "https://media.merriam-webster.com/audio/prons/en/us/mp3"
VALID_MIME_TYPES = (JSON_MIME_TYPE,)


@dataclass
class MerriamWebsterConfig:
    """Credentials for the Merriam-Webster API."""

    app_key: str = field(default="", metadata={"json": "AppKey"})

    @property
    def json_key(self) -> str:
        return JSON_KEY


def audio_url(sound_file: str) -> str:
    """Build the pronunciation audio URL for a sound file name.

    The subdirectory is "bix" or "gg" for names starting with those,
    "number" for names starting with a digit or punctuation, and the
    first letter otherwise.
    """
    if not sound_file:
        return ""

    if sound_file.startswith("bix"):
        subdirectory = "bix"
    elif sound_file.startswith("gg"):
        subdirectory = "gg"
    elif sound_file[0] in string.digits + string.punctuation:
        subdirectory = "number"
    else:
        subdirectory = sound_file[0]

    return f"{AUDIO_URL}/{subdirectory}/{sound_file}.mp3"


def is_main_entry(item: dict[str, Any], word: str) -> bool:
    """Check if an entry defines the word itself.

    The API also returns compounds and phrases containing the word (e.g.
    "test tube" for "test"). Only entries whose id is the word, or the word
    with a homograph number like "test:1", are kept.
    """
    entry_id = ((item.get("meta") or {}).get("id") or "").casefold()
    word = word.casefold()

    return entry_id == word or entry_id.startswith(f"{word}:")


class MerriamWebsterSource:
    """Dictionary source using the Merriam-Webster Collegiate API.

    Implements Source protocol.
    """

    def __init__(
        self,
        app_key: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._app_key = app_key
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def name(self) -> str:
        return NAME

    def define(self, word: str) -> Result:
        """Look up word in the Collegiate dictionary.

        A list of plain strings in the response is a list of spelling
        suggestions, meaning the word wasn't found. Entries for other
        headwords, like compounds containing the word, are dropped.
        """
        response = send_request(
            self._session,
            f"{API_URL}/{quote(word, safe='')}",
            params={"key": self._app_key},
            headers={"Accept": JSON_MIME_TYPE},
            timeout=self._timeout,
        )
        validate_http_response(response, VALID_MIME_TYPES)

        data = decode_json(response)
        if not isinstance(data, list):
            raise ResponseDecodeError("unexpected Merriam-Webster response shape")

        entries = [item for item in data if isinstance(item, dict)]
        if not entries and data:
            logger.debug(f"No match for {word!r}, suggestions: {data[:5]}")

        items = [item for item in entries if is_main_entry(item, word)]
        if not items:
            raise EmptyResultError(word)

        return validate_and_return_result(self._to_result(items, word))

    def _to_result(self, items: list[dict[str, Any]], word: str) -> Result:
        head = (items[0].get("hwi") or {}).get("hw") or word

        return Result(
            head=head.replace("*", ""),
            language="en",
            entries=tuple(self._to_entry(item) for item in items),
        )

    def _to_entry(self, item: dict[str, Any]) -> DictionaryEntry:
        prs = (item.get("hwi") or {}).get("prs") or []
        first_pr = prs[0] if prs else {}

        senses = self._parse_senses(item.get("def") or [])
        if not senses:
            senses = [Sense(definitions=(strip_markup(d),)) for d in item.get("shortdef") or []]

        return DictionaryEntry(
            word_class=item.get("fl") or "",
            pronunciation=first_pr.get("mw") or "",
            audio_url=audio_url((first_pr.get("sound") or {}).get("audio") or ""),
            senses=tuple(sense for sense in senses if sense.has_content),
        )

    def _parse_senses(self, definition_sections: list[dict[str, Any]]) -> list[Sense]:
        """Collect senses from the 'def' sections' sense sequences."""
        senses = []

        for section in definition_sections:
            for sequence in section.get("sseq") or []:
                for kind, body in sequence:
                    senses.extend(self._senses_from_element(kind, body))

        return senses

    def _senses_from_element(self, kind: str, body: Any) -> list[Sense]:
        if kind == "sense":
            return [self._to_sense(body)]
        if kind == "bs":
            return [self._to_sense(body.get("sense") or {})]
        if kind == "pseq":
            senses = []
            for inner_kind, inner_body in body:
                senses.extend(self._senses_from_element(inner_kind, inner_body))
            return senses
        return []

    @staticmethod
    def _to_sense(sense: dict[str, Any]) -> Sense:
        definitions = []
        examples = []

        for kind, content in sense.get("dt") or []:
            if kind == "text":
                text = strip_markup(content)
                if text:
                    definitions.append(text)
            elif kind == "vis":
                examples.extend(strip_markup(v["t"]) for v in content if v.get("t"))

        return Sense(definitions=tuple(definitions), examples=tuple(examples))


class MerriamWebsterProvider:
    """Provider for MerriamWebsterSource.

    Implements SourceProvider protocol.
    """

    def __init__(self, session: requests.Session | None = None):
        self._session = session

    @property
    def name(self) -> str:
        return NAME

    def finalize(self, config: MerriamWebsterConfig) -> None:
        """Fill a blank key from the environment."""
        if not config.app_key:
            config.app_key = os.environ.get(APP_KEY_ENV_VAR, "")

    def provide(self, config: MerriamWebsterConfig) -> MerriamWebsterSource:
        if not config.app_key:
            raise RequiredConfigError("AppKey")

        return MerriamWebsterSource(config.app_key, self._session)


def register(
    parser: argparse.ArgumentParser,
) -> tuple[MerriamWebsterProvider, MerriamWebsterConfig]:
    """Registration function for the Merriam-Webster provider."""
    config = MerriamWebsterConfig()

    group = parser.add_argument_group(NAME)
    group.add_argument(
        "--merriam-webster-dictionary-app-key",
        action=BindToConfig,
        target=config,
        attribute="app_key",
        metavar="KEY",
        help=f"The app key for the {NAME}",
    )

    return MerriamWebsterProvider(), config
