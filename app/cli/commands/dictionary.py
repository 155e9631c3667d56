"""Dictionary lookup commands."""

from datetime import date, datetime

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from app.cli.utils.console import console, error_console
from app.config import settings
from app.services.dictionary.base import DictionaryEntry
from app.services.dictionary.loader import load_dictionary
from app.services.dictionary.search import QueryState, build_view
from app.services.dictionary.word_of_day import word_of_day


def _load_entries() -> list[DictionaryEntry]:
    """Load the dataset or exit with an error when it is empty."""
    path = settings.resolved_dictionary_path
    entries = load_dictionary(path)
    if not entries:
        error_console.print(f"[error]No dictionary entries found in {path}[/]")
        raise typer.Exit(1)
    return entries


def _print_results(entries: list[DictionaryEntry], query: QueryState, limit: int) -> None:
    view = build_view(entries, query)
    if not view.results:
        console.print("[dim]Aucun mot trouvé.[/]")
        return

    table = Table(title=view.summary)
    table.add_column("Numèè", style="word")
    table.add_column("Français", style="gloss")
    table.add_column("Type", style="tag")
    table.add_column("Voir aussi", style="dim")

    for entry in view.results[:limit]:
        table.add_row(
            entry.numee,
            entry.french,
            entry.word_type or "",
            entry.cross_reference or "",
        )

    console.print(table)
    if len(view.results) > limit:
        console.print(f"[dim]... {len(view.results) - limit} more[/]")


def search(
    term: str = typer.Argument(..., help="Word or fragment, in Numèè or French"),
    limit: int = typer.Option(50, "--limit", "-n", help="Maximum number of entries to show"),
) -> None:
    """Search headwords, translations, definitions, variants and literal translations."""
    _print_results(_load_entries(), QueryState().search(term), limit)


def letter(
    initial: str = typer.Argument(..., help="First letter of the headword"),
    limit: int = typer.Option(50, "--limit", "-n", help="Maximum number of entries to show"),
) -> None:
    """List entries starting with a letter (accents ignored)."""
    _print_results(_load_entries(), QueryState(letter=initial), limit)


def _parse_day(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        error_console.print(f"[error]Invalid date '{value}', expected YYYY-MM-DD[/]")
        raise typer.Exit(1) from None


def show_word_of_day(
    day: str | None = typer.Option(None, "--date", "-d", help="Day as YYYY-MM-DD (default: today)"),
) -> None:
    """Show the word of the day."""
    target = _parse_day(day)
    entry = word_of_day(_load_entries(), target)
    if entry is None:  # pragma: no cover - _load_entries exits on empty data
        return

    body = Table(show_header=False, box=None, padding=(0, 2))
    body.add_column("Label", style="bold")
    body.add_column("Value")
    body.add_row("Français", entry.french)
    if entry.phonetic:
        body.add_row("Phonétique", escape(f"[{entry.phonetic}]"))
    if entry.word_type:
        body.add_row("Type", entry.word_type)
    if entry.definition:
        body.add_row("Définition", entry.definition)
    example = entry.main_example
    if example:
        body.add_row("Exemple", f'"{example.numee}"\n"{example.french}"')

    console.print(
        Panel(
            body,
            title=f"[bold]Mot du Jour: [word]{entry.numee}[/][/]",
            subtitle=target.isoformat(),
            border_style="cyan",
        )
    )
