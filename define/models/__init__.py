"""Data models for Define."""

from .result import (
    CombinedEntry,
    DictionaryEntry,
    Entry,
    Result,
    Sense,
    ThesaurusEntry,
)

__all__ = [
    "Result",
    "Entry",
    "DictionaryEntry",
    "ThesaurusEntry",
    "CombinedEntry",
    "Sense",
]
