"""Deterministic word-of-the-day selection."""

from collections.abc import Sequence
from datetime import date, datetime

from app.services.dictionary.base import DictionaryEntry


def day_of_year(day: date) -> int:
    """Ordinal day within the year, starting at 1 for January 1st."""
    return day.timetuple().tm_yday


def word_of_day(
    entries: Sequence[DictionaryEntry],
    day: date | datetime | None = None,
) -> DictionaryEntry | None:
    """
    Pick the entry for a calendar day.

    The index is the day of the year modulo the number of entries, so the pick
    only changes at local midnight or when the dictionary size changes.
    Returns None for an empty dictionary.
    """
    if not entries:
        return None
    if day is None:
        day = date.today()
    if isinstance(day, datetime):
        day = day.date()
    return entries[day_of_year(day) % len(entries)]
