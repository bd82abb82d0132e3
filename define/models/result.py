"""Data models for dictionary lookup results.

Every source converts its upstream response into these shapes, so the
printer and validation never need to know which provider answered.
All models are frozen and hold tuples.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Sense:
    """One specific meaning within a dictionary entry."""

    definitions: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()

    @property
    def has_content(self) -> bool:
        """Check if the sense carries any non-blank text."""
        return any(
            text.strip()
            for text in (*self.definitions, *self.examples, *self.synonyms, *self.antonyms)
        )


@dataclass(frozen=True)
class Entry:
    """Base for a grouping of a result, usually by word class."""

    word_class: str = ""  # e.g. "noun", "verb"

    @property
    def has_content(self) -> bool:
        return False


@dataclass(frozen=True)
class DictionaryEntry(Entry):
    """Dictionary-style entry with pronunciation and senses."""

    pronunciation: str = ""
    audio_url: str = ""
    senses: tuple[Sense, ...] = ()

    @property
    def has_content(self) -> bool:
        return (
            bool(self.pronunciation.strip())
            or bool(self.audio_url.strip())
            or any(sense.has_content for sense in self.senses)
        )


@dataclass(frozen=True)
class ThesaurusEntry(Entry):
    """Thesaurus-style entry with related words."""

    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()

    @property
    def has_content(self) -> bool:
        return any(word.strip() for word in (*self.synonyms, *self.antonyms))


@dataclass(frozen=True)
class CombinedEntry(DictionaryEntry, ThesaurusEntry):
    """Entry that is both dictionary and thesaurus style."""

    @property
    def has_content(self) -> bool:
        return DictionaryEntry.has_content.fget(self) or ThesaurusEntry.has_content.fget(self)


@dataclass(frozen=True)
class Result:
    """Canonical, provider-agnostic outcome of a word lookup."""

    head: str  # Head word as the source reported it
    language: str = ""  # Language tag, e.g. "en"
    entries: tuple[Entry, ...] = field(default_factory=tuple)

    @property
    def has_content(self) -> bool:
        """Check if at least one entry carries meaningful content."""
        return any(entry.has_content for entry in self.entries)

    def __str__(self) -> str:
        return f"Result(head='{self.head}', language='{self.language}', entries={len(self.entries)})"
