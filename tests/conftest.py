"""Pytest configuration and shared fixtures."""

import argparse
import os
from dataclasses import dataclass, field
from unittest.mock import MagicMock

import pytest

from define.exceptions import RequiredConfigError
from define.models import DictionaryEntry, Result, Sense
from define.registry import ProviderRegistry
from define.utils import BindToConfig

ENV_VARS = (
    "DEFINE_APP_INDENT_SIZE",
    "DEFINE_APP_PREFERRED_SOURCE",
    "OXFORD_DICTIONARY_APP_ID",
    "OXFORD_DICTIONARY_APP_KEY",
    "MERRIAM_WEBSTER_DICTIONARY_APP_KEY",
    "FAKE_TOKEN",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of configuration tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response():
    """Factory fixture for mocked requests.Response objects."""

    def _make(
        json_data=None,
        status_code=200,
        content_type="application/json; charset=utf-8",
        json_error=None,
    ):
        response = MagicMock()
        response.status_code = status_code
        response.headers = {"Content-Type": content_type}
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def make_session(make_response):
    """Factory fixture for a mocked requests.Session returning one response."""

    def _make(json_data=None, **response_kwargs):
        session = MagicMock()
        session.get.return_value = make_response(json_data, **response_kwargs)
        return session

    return _make


@pytest.fixture
def make_result():
    """Factory fixture for a Result with one dictionary entry."""

    def _make(head="hello", definitions=("a greeting",), language="en"):
        return Result(
            head=head,
            language=language,
            entries=(DictionaryEntry(word_class="noun", senses=(Sense(definitions=definitions),)),),
        )

    return _make


# A minimal provider used to test the registry and CLI without network access


@dataclass
class FakeConfig:
    token: str = field(default="", metadata={"json": "Token"})

    @property
    def json_key(self) -> str:
        return "Fake"


class FakeSource:
    def __init__(self, error=None):
        self.error = error
        self.words = []

    @property
    def name(self) -> str:
        return "Fake Source"

    def define(self, word):
        self.words.append(word)
        if self.error is not None:
            raise self.error
        return Result(
            head=word,
            language="en",
            entries=(DictionaryEntry(senses=(Sense(definitions=(f"definition of {word}",)),)),),
        )


class FakeProvider:
    def __init__(self, source=None):
        self.source = source or FakeSource()
        self.finalized = []

    @property
    def name(self) -> str:
        return "Fake Source"

    def finalize(self, config):
        self.finalized.append(config)
        if not config.token:
            config.token = os.environ.get("FAKE_TOKEN", "")

    def provide(self, config):
        if not config.token:
            raise RequiredConfigError("Token")
        return self.source


def make_fake_register(provider):
    """Build a registration function for a FakeProvider."""

    def register(parser: argparse.ArgumentParser):
        config = FakeConfig()
        parser.add_argument("--fake-token", action=BindToConfig, target=config, attribute="token")
        return provider, config

    return register


@pytest.fixture
def fake_source():
    return FakeSource()


@pytest.fixture
def fake_provider(fake_source):
    return FakeProvider(fake_source)


@pytest.fixture
def fake_registry(fake_provider):
    """Provide a registry holding only the fake provider."""
    registry = ProviderRegistry()
    registry.register("Fake", make_fake_register(fake_provider))
    return registry


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.errors = []
        self.results = []
        self.sources = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_result(self, result, source_name: str) -> None:
        self.results.append((result, source_name))

    def show_sources(self, names: list[str]) -> None:
        self.sources.append(names)


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()
