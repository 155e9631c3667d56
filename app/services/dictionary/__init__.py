"""Numèè dictionary: entries, loading, filtering and the word of the day."""

from app.services.dictionary.base import DictionaryEntry, Example
from app.services.dictionary.loader import load_dictionary
from app.services.dictionary.search import (
    DictionaryView,
    QueryState,
    build_view,
    clean_cross_reference,
    filter_entries,
)
from app.services.dictionary.word_of_day import word_of_day

__all__ = [
    "DictionaryEntry",
    "DictionaryView",
    "Example",
    "QueryState",
    "build_view",
    "clean_cross_reference",
    "filter_entries",
    "load_dictionary",
    "word_of_day",
]
