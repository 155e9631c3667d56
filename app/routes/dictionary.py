"""Dictionary browsing routes."""

from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response

from app.dependencies import get_dictionary, get_navigation, get_theme_store
from app.routes.pages import render_page
from app.services.dictionary.base import DictionaryEntry
from app.services.dictionary.search import QueryState, build_view
from app.services.navigation import NavigationController, View
from app.services.theme import ThemeStore

router = APIRouter(tags=["dictionary"])


def query_from_params(letter: str | None, q: str | None, seed: str) -> QueryState:
    """
    Turn request parameters into a single query.

    An explicit letter wins over a search term, and either wins over the seed
    the page was opened with. ``q`` present but empty is an explicit search.
    """
    if letter:
        return QueryState(letter=letter)
    if q is not None:
        return QueryState().search(q)
    return QueryState.from_seed(seed)


@router.get("/dictionary", response_class=HTMLResponse)
async def dictionary_page(
    request: Request,
    letter: str | None = Query(None, description="Active first letter"),
    q: str | None = Query(None, description="Free-text search"),
    seed: str = Query("", description="Letter pre-selected by the linking page"),
    navigation: NavigationController = Depends(get_navigation),
    theme_store: ThemeStore = Depends(get_theme_store),
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> Response:
    """Browse the dictionary by letter or search it."""
    navigation.navigate(View.DICTIONARY, seed)
    query = query_from_params(letter, q, navigation.seed)
    return render_page(request, navigation, theme_store, entries, query=query)


def _results_payload(entries: list[DictionaryEntry], query: QueryState) -> dict[str, Any]:
    view = build_view(entries, query)
    return {
        "letter": query.letter,
        "term": query.term,
        "count": len(view.results),
        "total": view.total,
        "results": [entry.to_dict() for entry in view.results],
    }


@router.get("/api/dictionary/search")
async def search_api(
    q: str = Query("", description="Free-text search"),
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> dict[str, Any]:
    """Search headwords, glosses, definitions, variants and literal translations."""
    return _results_payload(entries, QueryState().search(q))


@router.get("/api/dictionary/letter/{letter}")
async def letter_api(
    letter: str,
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> dict[str, Any]:
    """Entries whose headword starts with ``letter``."""
    return _results_payload(entries, QueryState(letter=letter))
