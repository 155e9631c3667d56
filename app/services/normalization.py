"""Accent- and case-insensitive comparison keys."""

import unicodedata


def normalize(text: str) -> str:
    """
    Collapse a string to its comparison key.

    The text is decomposed (NFD), every combining mark is dropped and the
    result is lower-cased, so ``"Numèè"`` and ``"numee"`` share a key.
    Applying it twice gives the same result as applying it once.
    """
    # Lower-case first: some capitals (e.g. "İ") lower to a base letter plus a
    # combining mark, which must be stripped too.
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
