"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from app.config import settings
from app.logging_config import setup_logging
from app.routes import auth_router, dictionary_router, pages_router
from app.services.dictionary.loader import load_dictionary

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting Numèè...")

    # Tests may preload their own entries
    if not getattr(app.state, "dictionary", None):
        app.state.dictionary = load_dictionary(settings.resolved_dictionary_path)

    yield

    logger.info("Shutting down Numèè...")


app = FastAPI(
    title="Numèè",
    description="Numèè language dictionary, games and quizzes",
    version=VERSION,
    lifespan=lifespan,
)

app.state.dictionary = []

# Identity and theme live in a signed cookie that expires with the browser session
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie,
    max_age=None,
    same_site="lax",
)

# Setup templates
templates_dir = Path(__file__).parent / "templates"
app.state.templates = Jinja2Templates(directory=str(templates_dir))

# Mount static files
static_dir = Path(__file__).parent.parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

# Include routers
app.include_router(pages_router)
app.include_router(dictionary_router)
app.include_router(auth_router)


@app.get("/health")
async def health() -> dict[str, str | int]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": VERSION,
        "entries": len(app.state.dictionary),
    }


def run() -> None:
    """Run the application (for use with `numee serve`)."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",  # noqa: S104  # nosec B104 - Development server
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    run()
