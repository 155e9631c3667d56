"""Route handlers for the Numèè site."""

from app.routes.auth import router as auth_router
from app.routes.dictionary import router as dictionary_router
from app.routes.pages import router as pages_router

__all__ = [
    "auth_router",
    "dictionary_router",
    "pages_router",
]
