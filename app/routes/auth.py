"""Login, logout and session preference routes."""

from typing import Any
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from app.dependencies import get_dictionary, get_identity_store, get_navigation, get_theme_store
from app.routes.pages import render_page
from app.services.dictionary.base import DictionaryEntry
from app.services.identity import IdentityStore
from app.services.navigation import NavigationController, View
from app.services.theme import ThemeStore

router = APIRouter(tags=["auth"])


@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    navigation: NavigationController = Depends(get_navigation),
    theme_store: ThemeStore = Depends(get_theme_store),
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> Response:
    navigation.navigate(View.LOGIN)
    return render_page(request, navigation, theme_store, entries)


@router.post("/login", response_class=HTMLResponse)
async def login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    identity_store: IdentityStore = Depends(get_identity_store),
    navigation: NavigationController = Depends(get_navigation),
    theme_store: ThemeStore = Depends(get_theme_store),
    entries: list[DictionaryEntry] = Depends(get_dictionary),
) -> Response:
    """Check credentials and open the matching dashboard."""
    identity = identity_store.authenticate(username, password)
    if identity is None:
        navigation.navigate(View.LOGIN)
        return render_page(
            request,
            navigation,
            theme_store,
            entries,
            error="Nom d'utilisateur ou mot de passe incorrect.",
            status_code=401,
        )

    target = View.ADMIN if identity.is_admin else View.USER_DASHBOARD
    return RedirectResponse(url=f"/views/{target.value}", status_code=303)


@router.post("/logout")
async def logout(identity_store: IdentityStore = Depends(get_identity_store)) -> Response:
    identity_store.logout()
    return RedirectResponse(url="/", status_code=303)


@router.get("/api/me")
async def current_identity(
    identity_store: IdentityStore = Depends(get_identity_store),
) -> dict[str, Any]:
    """The logged-in identity, or null."""
    identity = identity_store.current
    if identity is None:
        return {"identity": None}
    return {"identity": {"username": identity.username, "role": identity.role.value}}


@router.post("/theme")
async def set_theme(
    request: Request,
    theme: str = Form(...),
    theme_store: ThemeStore = Depends(get_theme_store),
) -> Response:
    """Store the theme preference and go back to the previous page."""
    try:
        theme_store.set_theme(theme)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    # Path and query of the referer only, so the redirect stays on this site
    referer = urlparse(request.headers.get("referer", ""))
    back = referer.path if referer.path.startswith("/") and not referer.path.startswith("//") else "/"
    if referer.query:
        back += f"?{referer.query}"
    return RedirectResponse(url=back, status_code=303)
