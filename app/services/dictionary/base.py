"""Dataclasses for Numèè dictionary entries."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Example:
    """A usage example: a Numèè sentence and its French translation."""

    numee: str = ""
    french: str = ""

    @property
    def is_placeholder(self) -> bool:
        """True when the dataset left the example slot empty."""
        return not self.numee


@dataclass(frozen=True)
class DictionaryEntry:
    """One dictionary record. Entries are loaded once and never mutated."""

    numee: str  # headword
    french: str  # French gloss
    phonetic: str | None = None
    word_type: str | None = None  # grammatical tag, "type" in the dataset
    definition: str | None = None
    literal: str | None = None  # literal translation note
    variants: str | None = None
    homonym: str | None = None
    cross_reference: str | None = None  # "Voir aussi" target
    examples: tuple[Example, ...] = field(default_factory=tuple)

    @property
    def real_examples(self) -> list[Example]:
        """Examples that are not empty placeholders."""
        return [ex for ex in self.examples if not ex.is_placeholder]

    @property
    def has_examples(self) -> bool:
        return bool(self.real_examples)

    @property
    def main_example(self) -> Example | None:
        """First non-placeholder example, shown on the word-of-the-day card."""
        real = self.real_examples
        return real[0] if real else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the dataset's field names."""
        return {
            "numee": self.numee,
            "french": self.french,
            "phonetic": self.phonetic,
            "type": self.word_type,
            "definition": self.definition,
            "literal": self.literal,
            "variants": self.variants,
            "homonym": self.homonym,
            "crossReference": self.cross_reference,
            "examples": [{"numee": ex.numee, "french": ex.french} for ex in self.examples],
        }
