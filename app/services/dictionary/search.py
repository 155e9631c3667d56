"""Dictionary filtering by first letter or free-text search."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from app.services.dictionary.base import DictionaryEntry
from app.services.normalization import normalize

# Characters stripped from a "Voir aussi" value before it is searched
_CROSS_REFERENCE_STRIP = re.compile(r"[{}()\[\]]")


@dataclass(frozen=True)
class QueryState:
    """
    What the dictionary view is currently showing.

    At most one of ``letter`` and ``term`` is set. ``term == ""`` is an
    explicit (empty) search, while ``term is None`` means no search at all.
    Use the transition methods rather than the constructor so the two never
    end up active together.
    """

    letter: str | None = None
    term: str | None = None

    def __post_init__(self) -> None:
        if self.letter is not None and self.term is not None:
            raise ValueError("A letter filter and a search term cannot both be active")

    @classmethod
    def empty(cls) -> "QueryState":
        return cls()

    @classmethod
    def from_seed(cls, seed: str | None) -> "QueryState":
        """Initial state for a dictionary visit; a non-empty seed pre-selects a letter."""
        if seed:
            return cls(letter=seed)
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.letter is None and self.term is None

    def is_letter_active(self, letter: str) -> bool:
        """Whether ``letter`` is the active filter, ignoring case and accents."""
        return self.letter is not None and normalize(letter) == normalize(self.letter)

    def select_letter(self, letter: str) -> "QueryState":
        """Activate a letter; selecting the active letter again clears it."""
        if self.is_letter_active(letter):
            return QueryState()
        return QueryState(letter=letter)

    def search(self, term: str) -> "QueryState":
        """Start a free-text search, dropping any letter filter."""
        return QueryState(term=term)

    def follow_cross_reference(self, value: str) -> "QueryState":
        """Search for a cross-referenced word, whatever was active before."""
        return self.search(clean_cross_reference(value))


def clean_cross_reference(value: str) -> str:
    """Strip brackets and parentheses from a cross-reference value."""
    return _CROSS_REFERENCE_STRIP.sub("", value).strip()


def alphabet(entries: Sequence[DictionaryEntry]) -> list[str]:
    """Distinct headword initials, accents folded, in order of first appearance."""
    letters: dict[str, None] = {}
    for entry in entries:
        key = normalize(entry.numee)
        if key:
            letters.setdefault(key[0].upper(), None)
    return list(letters)


def _searchable_fields(entry: DictionaryEntry) -> list[str]:
    fields = [entry.numee, entry.french]
    for optional in (entry.definition, entry.variants, entry.literal):
        if optional:
            fields.append(optional)
    return fields


def filter_by_letter(entries: Sequence[DictionaryEntry], letter: str) -> list[DictionaryEntry]:
    """Entries whose headword starts with ``letter``, ignoring accents and case."""
    key = normalize(letter)
    return [entry for entry in entries if normalize(entry.numee).startswith(key)]


def search_entries(entries: Sequence[DictionaryEntry], term: str) -> list[DictionaryEntry]:
    """
    Entries where ``term`` occurs in any searchable field.

    Searched fields are the headword, French gloss, definition, variants and
    literal translation. Matching is accent- and case-insensitive containment;
    an empty term matches every entry.
    """
    key = normalize(term)
    return [
        entry
        for entry in entries
        if any(key in normalize(text) for text in _searchable_fields(entry))
    ]


def filter_entries(entries: Sequence[DictionaryEntry], query: QueryState) -> list[DictionaryEntry]:
    """
    Apply a query to the dictionary, preserving source order.

    The letter filter takes priority over the search term. With no query the
    result is empty: the view prompts the user to pick a letter or search.
    """
    if query.letter is not None:
        return filter_by_letter(entries, query.letter)
    if query.term is not None:
        return search_entries(entries, query.term)
    return []


@dataclass(frozen=True)
class DictionaryView:
    """Filtered results together with the query that produced them."""

    query: QueryState
    results: list[DictionaryEntry]
    total: int

    @property
    def has_query(self) -> bool:
        """False in the initial prompt state, True once a letter or search is set."""
        return not self.query.is_empty

    @property
    def summary(self) -> str:
        """Result count line shown above the cards."""
        count = len(self.results)
        text = f"{count} résultat{'s' if count != 1 else ''}"
        if self.query.letter is not None:
            text += f" pour la lettre '{self.query.letter}'"
        if self.query.term:
            text += f' pour "{self.query.term}"'
        return text


def build_view(entries: Sequence[DictionaryEntry], query: QueryState) -> DictionaryView:
    return DictionaryView(query=query, results=filter_entries(entries, query), total=len(entries))
