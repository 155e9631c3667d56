"""Pronunciation playback through a text-to-speech backend."""

import asyncio
import logging
import shutil
from abc import ABC, abstractmethod
from collections.abc import Callable

from app.config import settings

logger = logging.getLogger(__name__)

UNSUPPORTED_NOTICE = "Désolé, la synthèse vocale n'est pas supportée sur ce système."

# espeak's default speaking rate, in words per minute
ESPEAK_BASE_WPM = 175


class SpeechBackend(ABC):
    """Something that can say a piece of text out loud."""

    @abstractmethod
    async def say(self, text: str, lang: str, rate: float) -> None:
        """Speak ``text``; cancelling the awaiting task must stop the audio."""
        ...  # pragma: no cover


class EspeakBackend(SpeechBackend):
    """Speech through the ``espeak`` (or ``espeak-ng``) command-line program."""

    def __init__(self, executable: str) -> None:
        self.executable = executable

    @classmethod
    def detect(cls) -> "EspeakBackend | None":
        """Return a backend if an espeak binary is on PATH."""
        for name in ("espeak-ng", "espeak"):
            path = shutil.which(name)
            if path:
                return cls(path)
        return None

    @staticmethod
    def voice_for(lang: str) -> str:
        """espeak voices use the bare language code ("fr-FR" -> "fr")."""
        return lang.split("-")[0].lower()

    async def say(self, text: str, lang: str, rate: float) -> None:
        process = await asyncio.create_subprocess_exec(
            self.executable,
            "-v",
            self.voice_for(lang),
            "-s",
            str(int(ESPEAK_BASE_WPM * rate)),
            text,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        try:
            await process.wait()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise


class PronunciationPlayer:
    """
    Plays one utterance at a time.

    A new request cancels whatever is still playing before it starts, so the
    latest request always wins and nothing is queued.
    """

    def __init__(
        self,
        backend: SpeechBackend | None = None,
        lang: str | None = None,
        rate: float | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.backend = backend
        self.lang = lang or settings.speech_lang
        self.rate = rate if rate is not None else settings.speech_rate
        self.notify = notify or logger.warning
        self._task: asyncio.Task[None] | None = None
        self._notified = False

    @property
    def is_supported(self) -> bool:
        return self.backend is not None

    @property
    def is_playing(self) -> bool:
        return self._task is not None and not self._task.done()

    async def speak(self, text: str) -> asyncio.Task[None] | None:
        """
        Start saying ``text``.

        Returns the playback task, or None when speech is unsupported. The
        unsupported notice is shown only the first time.
        """
        await self.cancel()

        if self.backend is None:
            if not self._notified:
                self._notified = True
                self.notify(UNSUPPORTED_NOTICE)
            return None

        logger.debug(f"Speaking '{text}' ({self.lang}, rate {self.rate})")
        self._task = asyncio.create_task(self.backend.say(text, self.lang, self.rate))
        return self._task

    async def cancel(self) -> None:
        """Stop the current utterance, if any."""
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.warning(f"Speech playback failed: {e}")

    async def wait(self) -> None:
        """Wait for the current utterance to finish."""
        if self._task is not None:
            try:
                await self._task
            finally:
                self._task = None
