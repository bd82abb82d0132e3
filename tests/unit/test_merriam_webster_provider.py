"""Tests for the Merriam-Webster provider."""

import argparse

import pytest

from define.exceptions import EmptyResultError, RequiredConfigError, ResponseDecodeError
from define.services.providers import merriam_webster
from define.services.providers.merriam_webster import (
    MerriamWebsterConfig,
    MerriamWebsterProvider,
    MerriamWebsterSource,
    audio_url,
    is_main_entry,
)

TEST_RESPONSE = [
    {
        "meta": {"id": "test:1"},
        "hwi": {"hw": "test", "prs": [{"mw": "ˈtest", "sound": {"audio": "test0001"}}]},
        "fl": "noun",
        "def": [
            {
                "sseq": [
                    [
                        [
                            "sense",
                            {
                                "sn": "1",
                                "dt": [
                                    ["text", "{bc}a means of testing"],
                                    ["vis", [{"t": "a {wi}test{/wi} of strength"}]],
                                ],
                            },
                        ]
                    ],
                    [
                        [
                            "pseq",
                            [
                                [
                                    "bs",
                                    {
                                        "sense": {
                                            "sn": "2 a",
                                            "dt": [
                                                [
                                                    "text",
                                                    "{bc}something for "
                                                    "{d_link|measuring|measure:1} skill",
                                                ]
                                            ],
                                        }
                                    },
                                ],
                                [
                                    "sense",
                                    {
                                        "sn": "b",
                                        "dt": [
                                            [
                                                "text",
                                                "{bc}a positive result "
                                                "{dx}compare {dxt|trial||}{/dx}",
                                            ]
                                        ],
                                    },
                                ],
                            ],
                        ]
                    ],
                ]
            }
        ],
        "shortdef": ["not used when def is present"],
    },
    {"meta": {"id": "test:2"}, "hwi": {"hw": "test"}, "fl": "verb", "shortdef": ["to put to test"]},
]


class TestAudioUrl:
    """Tests for audio_url subdirectory rules."""

    @pytest.mark.parametrize(
        "sound_file,subdirectory",
        [
            ("test0001", "t"),
            ("bixtest01", "bix"),
            ("ggtest01", "gg"),
            ("3d000001", "number"),
            ("_test001", "number"),
        ],
    )
    def test_subdirectory(self, sound_file, subdirectory):
        assert audio_url(sound_file) == (
            f"{merriam_webster.AUDIO_URL}/{subdirectory}/{sound_file}.mp3"
        )

    def test_empty(self):
        assert audio_url("") == ""


class TestIsMainEntry:
    """Tests for is_main_entry."""

    @pytest.mark.parametrize(
        "entry_id,expected",
        [
            ("test", True),
            ("test:1", True),
            ("Test:2", True),
            ("test tube", False),
            ("acid test", False),
            ("testy", False),
            ("", False),
        ],
    )
    def test_entry_ids(self, entry_id, expected):
        assert is_main_entry({"meta": {"id": entry_id}}, "test") is expected

    def test_missing_meta(self):
        assert is_main_entry({"hwi": {"hw": "test"}}, "test") is False


class TestMerriamWebsterSource:
    """Tests for MerriamWebsterSource."""

    def test_define_success(self, make_session):
        session = make_session(TEST_RESPONSE)

        result = MerriamWebsterSource("key", session).define("test")

        assert result.head == "test"
        assert result.language == "en"
        assert len(result.entries) == 2

        noun = result.entries[0]
        assert noun.word_class == "noun"
        assert noun.pronunciation == "ˈtest"
        assert noun.audio_url == f"{merriam_webster.AUDIO_URL}/t/test0001.mp3"
        assert [s.definitions for s in noun.senses] == [
            ("a means of testing",),
            ("something for measuring skill",),
            ("a positive result",),
        ]
        assert noun.senses[0].examples == ("a test of strength",)

        verb = result.entries[1]
        assert verb.word_class == "verb"
        assert verb.audio_url == ""
        assert verb.senses[0].definitions == ("to put to test",)

    def test_sends_key(self, make_session):
        session = make_session(TEST_RESPONSE)

        MerriamWebsterSource("secret", session).define("test")

        args, kwargs = session.get.call_args
        assert args[0] == f"{merriam_webster.API_URL}/test"
        assert kwargs["params"] == {"key": "secret"}

    def test_head_word_syllable_marks_removed(self, make_session):
        session = make_session(
            [{"meta": {"id": "tested"}, "hwi": {"hw": "test*ed"}, "shortdef": ["examined"]}]
        )

        result = MerriamWebsterSource("key", session).define("tested")

        assert result.head == "tested"

    def test_other_headwords_dropped(self, make_session):
        session = make_session(
            [
                {"meta": {"id": "test:1"}, "fl": "noun", "shortdef": ["a means of testing"]},
                {"meta": {"id": "test tube"}, "shortdef": ["a plain tube of thin glass"]},
                {"meta": {"id": "acid test"}, "shortdef": ["a severe or crucial test"]},
            ]
        )

        result = MerriamWebsterSource("key", session).define("test")

        assert result.head == "test"
        assert [e.senses[0].definitions for e in result.entries] == [("a means of testing",)]

    def test_only_other_headwords(self, make_session):
        session = make_session([{"meta": {"id": "test tube"}, "shortdef": ["a plain tube"]}])

        with pytest.raises(EmptyResultError):
            MerriamWebsterSource("key", session).define("test")

    def test_slash_in_word_is_escaped(self, make_session):
        session = make_session([{"meta": {"id": "and/or"}, "shortdef": ["either or both"]}])

        MerriamWebsterSource("key", session).define("and/or")

        args, _ = session.get.call_args
        assert args[0] == f"{merriam_webster.API_URL}/and%2For"

    def test_suggestions_mean_no_results(self, make_session):
        session = make_session(["tests", "testy", "tester"])

        with pytest.raises(EmptyResultError) as exc_info:
            MerriamWebsterSource("key", session).define("tesst")

        assert exc_info.value.word == "tesst"

    def test_empty_list(self, make_session):
        session = make_session([])

        with pytest.raises(EmptyResultError):
            MerriamWebsterSource("key", session).define("zzzz")

    def test_unexpected_shape(self, make_session):
        session = make_session({"error": "Invalid API key"})

        with pytest.raises(ResponseDecodeError):
            MerriamWebsterSource("bad", session).define("test")


class TestMerriamWebsterProvider:
    """Tests for MerriamWebsterProvider and its flag."""

    def test_flag_binds_to_config(self):
        parser = argparse.ArgumentParser()
        provider, config = merriam_webster.register(parser)

        parser.parse_args(["--merriam-webster-dictionary-app-key", "abc"])

        assert config.app_key == "abc"
        assert config.json_key == "MerriamWebsterDictionary"

    def test_finalize_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MERRIAM_WEBSTER_DICTIONARY_APP_KEY", "env-key")
        config = MerriamWebsterConfig()

        MerriamWebsterProvider().finalize(config)

        assert config.app_key == "env-key"

    def test_provide_requires_key(self):
        with pytest.raises(RequiredConfigError) as exc_info:
            MerriamWebsterProvider().provide(MerriamWebsterConfig())

        assert exc_info.value.key == "AppKey"

    def test_provide(self, make_session):
        session = make_session(TEST_RESPONSE)

        source = MerriamWebsterProvider(session).provide(MerriamWebsterConfig("abc"))

        assert source.name == "Merriam-Webster Dictionary API"
        assert source.define("test").head == "test"
