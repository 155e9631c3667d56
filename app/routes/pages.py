"""Page routes: every site view goes through the navigation controller."""

from datetime import date
from typing import Any
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from app.dependencies import get_dictionary, get_navigation, get_theme_store
from app.services.dictionary.base import DictionaryEntry
from app.services.dictionary.search import QueryState, alphabet, build_view, clean_cross_reference
from app.services.dictionary.word_of_day import word_of_day
from app.services.navigation import NavigationController, View
from app.services.theme import THEMES, ThemeStore

router = APIRouter(tags=["pages"])

# Views without logic of their own, rendered from a shared template
LEAF_PAGES: dict[View, tuple[str, str]] = {
    View.GUIDE: ("Guide touristique", "Les expressions utiles pour voyager."),
    View.QUIZ: ("Quiz", "Testez vos connaissances en Numèè."),
    View.GAMES: ("Centre de Jeux", "Apprenez en vous amusant avec nos jeux interactifs."),
    View.MEMORY_GAME: ("Jeu de Mémoire", "Associez les mots en Numèè à leur traduction."),
    View.FILL_IN_BLANK: ("Complétez la Phrase", "Retrouvez le mot retiré de la phrase."),
    View.SCRABBLE_GAME: ("Mots Numèè", "Formez des mots à partir de lettres piochées."),
    View.CERTIFICATION: ("Certification", "Validez votre niveau de Numèè."),
    View.CONTACT: ("Contact", "Une question ou une suggestion ? Écrivez-nous."),
}

GAMES = (View.MEMORY_GAME, View.FILL_IN_BLANK, View.SCRABBLE_GAME)


def dictionary_url(query: QueryState) -> str:
    """Link that reproduces a dictionary query."""
    if query.letter is not None:
        return "/dictionary?" + urlencode({"letter": query.letter})
    if query.term is not None:
        return "/dictionary?" + urlencode({"q": query.term})
    return "/dictionary"


def cross_reference_url(value: str) -> str:
    """Link for a "Voir aussi" value: a fresh search, whatever filter was active."""
    return dictionary_url(QueryState().follow_cross_reference(value))


def render_page(
    request: Request,
    navigation: NavigationController,
    theme_store: ThemeStore,
    entries: list[DictionaryEntry],
    query: QueryState | None = None,
    error: str | None = None,
    status_code: int = 200,
) -> Response:
    """Render whatever the navigation state resolves to for the current identity."""
    view = navigation.rendered_view
    context: dict[str, Any] = {
        "view": view,
        "identity": navigation.identity,
        "theme": theme_store.theme,
        "themes": THEMES,
        "error": error,
        "cross_reference_url": cross_reference_url,
        "clean_cross_reference": clean_cross_reference,
    }

    if view is View.HOME:
        context["word"] = word_of_day(entries)
        context["total"] = len(entries)
        template = "home.html"
    elif view is View.DICTIONARY:
        if query is None:
            query = QueryState.from_seed(navigation.seed)
        result = build_view(entries, query)
        context["result"] = result
        context["letters"] = [
            (letter, dictionary_url(query.select_letter(letter)), query.is_letter_active(letter))
            for letter in alphabet(entries)
        ]
        template = "dictionary.html"
    elif view is View.LOGIN:
        template = "login.html"
    elif view is View.ADMIN:
        template = "admin.html"
    elif view is View.USER_DASHBOARD:
        template = "user_dashboard.html"
    else:
        context["title"], context["description"] = LEAF_PAGES[view]
        context["games"] = [(game, LEAF_PAGES[game][0]) for game in GAMES] if view is View.GAMES else []
        template = "leaf.html"

    return request.app.state.templates.TemplateResponse(
        request, template, context, status_code=status_code
    )


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    navigation: NavigationController = Depends(get_navigation),
    theme_store: ThemeStore = Depends(get_theme_store),
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> Response:
    """Home page with the word of the day."""
    navigation.navigate(View.HOME)
    return render_page(request, navigation, theme_store, entries)


@router.get("/views/{view_name}", response_class=HTMLResponse)
async def open_view(
    request: Request,
    view_name: str,
    seed: str = Query("", description="One-shot parameter, e.g. a dictionary letter"),
    navigation: NavigationController = Depends(get_navigation),
    theme_store: ThemeStore = Depends(get_theme_store),
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> Response:
    """Navigate to a view by name; unknown names land on the home page."""
    navigation.navigate(view_name, seed)
    return render_page(request, navigation, theme_store, entries)


class NavigateRequest(BaseModel):
    view: str
    seed: str = ""


@router.post("/api/navigate")
async def navigate_api(
    payload: NavigateRequest,
    navigation: NavigationController = Depends(get_navigation),
) -> dict[str, Any]:
    """Resolve a navigation request without rendering it."""
    state = navigation.navigate(payload.view, payload.seed)
    return {
        "requested": payload.view,
        "view": state.view.value,
        "rendered": navigation.rendered_view.value,
        "seed": navigation.seed,
    }


@router.get("/api/word-of-day")
async def word_of_day_api(
    day: date | None = Query(None, alias="date", description="Calendar day, defaults to today"),
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> dict[str, Any]:
    """Word of the day as JSON; ``entry`` is null for an empty dictionary."""
    entry = word_of_day(entries, day)
    return {
        "date": (day or date.today()).isoformat(),
        "entry": entry.to_dict() if entry else None,
    }
