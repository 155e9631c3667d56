"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.services.dictionary.base import DictionaryEntry, Example
from app.services.dictionary.loader import entry_from_dict
from app.services.identity import IdentityStore
from app.services.storage import MappingStorage


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Dataset records in the JSON layout of the dictionary file."""
    return [
        {
            "numee": "Kanu",
            "french": "Maison",
            "phonetic": "ka.nu",
            "type": "n.",
            "definition": "Bâtiment où l'on habite",
            "examples": [{"numee": "Kanu mâ", "french": "Ma maison"}],
        },
        {
            "numee": "Koko",
            "french": "Poulet",
            "variants": "kôkô",
            "examples": [{"numee": "", "french": ""}],
        },
        {
            "numee": "Èdo",
            "french": "Eau",
            "literal": "ce qui coule",
            "crossReference": "(Kanu)",
        },
        {
            "numee": "Bwa",
            "french": "Bonjour",
            "type": "interj.",
            "homonym": "bwa (forêt)",
        },
    ]


@pytest.fixture
def entries(sample_records: list[dict[str, Any]]) -> list[DictionaryEntry]:
    """Sample dictionary entries, in dataset order."""
    return [entry_from_dict(record) for record in sample_records]


@pytest.fixture
def kanu_koko() -> list[DictionaryEntry]:
    """The two-entry dictionary used in the filtering scenarios."""
    return [
        DictionaryEntry(numee="Kanu", french="Maison", examples=(Example("Kanu mâ", "Ma maison"),)),
        DictionaryEntry(numee="Koko", french="Poulet"),
    ]


@pytest.fixture
def dictionary_file(tmp_path: Path, sample_records: list[dict[str, Any]]) -> Path:
    """Sample dataset written to disk."""
    path = tmp_path / "dictionary.json"
    path.write_text(json.dumps(sample_records, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def storage() -> MappingStorage:
    """Empty in-memory session storage."""
    return MappingStorage()


@pytest.fixture
def identity_store(storage: MappingStorage) -> IdentityStore:
    """Identity store with the demo accounts and no one logged in."""
    return IdentityStore(storage)


@pytest.fixture
def test_app(entries: list[DictionaryEntry]) -> Generator[FastAPI, None, None]:
    """The FastAPI application serving the sample dictionary."""
    previous = app.state.dictionary
    app.state.dictionary = entries
    yield app
    app.state.dictionary = previous
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Create a synchronous test client."""
    return TestClient(test_app)


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
