"""Main CLI application entry point."""

import logging

import typer

from app.cli.commands import dictionary, speech
from app.config import settings
from app.logging_config import setup_logging

app = typer.Typer(
    name="numee",
    help="Numèè dictionary tools",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging before any command runs."""
    setup_logging()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        # Keep command output readable; only problems are logged
        logging.getLogger().setLevel(max(logging.WARNING, getattr(logging, settings.log_level)))


app.command(name="search", help="Search the dictionary")(dictionary.search)
app.command(name="letter", help="List entries starting with a letter")(dictionary.letter)
app.command(name="word-of-day", help="Show the word of the day")(dictionary.show_word_of_day)
app.command(name="say", help="Pronounce a word")(speech.say)


@app.command(name="serve", help="Run the web application")
def serve() -> None:
    from app.main import run

    run()


if __name__ == "__main__":
    app()
