"""Pronunciation command."""

import asyncio

import typer
from rich.markup import escape

from app.cli.utils.console import console, error_console
from app.services.speech import EspeakBackend, PronunciationPlayer


def say(
    text: str = typer.Argument(..., help="Word or sentence to pronounce"),
) -> None:
    """Pronounce a word with the system text-to-speech engine."""
    asyncio.run(_say(text))


async def _say(text: str) -> None:
    player = PronunciationPlayer(
        backend=EspeakBackend.detect(),
        notify=lambda message: error_console.print(f"[warning]{message}[/]"),
    )
    task = await player.speak(text)
    if task is None:
        raise typer.Exit(1)

    console.print(f"[info]🔊 {text}[/]")
    try:
        await player.wait()
    except Exception as e:
        error_console.print(f"[error]Pronunciation failed: {escape(str(e))}[/]")
        raise typer.Exit(1) from None
