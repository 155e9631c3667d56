"""Load the static Numèè dataset from a JSON file."""

import json
import logging
from pathlib import Path
from typing import Any

from app.services.dictionary.base import DictionaryEntry, Example

logger = logging.getLogger(__name__)


def _optional(obj: dict[str, Any], key: str) -> str | None:
    """Return a stripped string field, or None when missing or blank."""
    value = obj.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _text(obj: dict[str, Any], key: str) -> str:
    """Return a text field that must be a string when present."""
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _examples(obj: dict[str, Any]) -> tuple[Example, ...]:
    raw = obj.get("examples")
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ValueError("'examples' must be a list")
    examples = []
    for ex in raw:
        if not isinstance(ex, dict):
            raise ValueError("each example must be an object")
        examples.append(Example(numee=_text(ex, "numee"), french=_text(ex, "french")))
    return tuple(examples)


def entry_from_dict(obj: dict[str, Any]) -> DictionaryEntry:
    """
    Build a DictionaryEntry from one dataset record.

    Raises:
        ValueError: If the headword is missing or a field has the wrong type.
    """
    numee = _text(obj, "numee")
    if not numee:
        raise ValueError("missing headword")
    return DictionaryEntry(
        numee=numee,
        french=_text(obj, "french"),
        phonetic=_optional(obj, "phonetic"),
        word_type=_optional(obj, "type"),
        definition=_optional(obj, "definition"),
        literal=_optional(obj, "literal"),
        variants=_optional(obj, "variants"),
        homonym=_optional(obj, "homonym"),
        cross_reference=_optional(obj, "crossReference"),
        examples=_examples(obj),
    )


def load_dictionary(path: Path) -> list[DictionaryEntry]:
    """
    Load dictionary entries, keeping the file's order.

    A missing or unreadable file yields an empty dictionary; records without a
    headword or with badly typed fields are skipped. Both cases are logged.
    """
    if not path.exists():
        logger.warning(f"Dictionary file not found: {path}")
        return []

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read dictionary file {path}: {e}")
        return []

    if not isinstance(raw, list):
        logger.error(f"Dictionary file {path} must contain a JSON array")
        return []

    entries: list[DictionaryEntry] = []
    for index, obj in enumerate(raw):
        if not isinstance(obj, dict):
            logger.warning(f"Skipping dictionary record #{index}: not an object")
            continue
        try:
            entries.append(entry_from_dict(obj))
        except ValueError as e:
            logger.warning(f"Skipping dictionary record #{index}: {e}")

    logger.info(f"Loaded {len(entries)} dictionary entries from {path}")
    return entries
