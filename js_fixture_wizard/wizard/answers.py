"""Sources of operator answers for the fixture wizard."""

import asyncio
import logging
import threading
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Returned when the input stream is broken so the wizard keeps moving
FALLBACK_ANSWER = "default_value"


class AnswerSource(Protocol):
    """Anything that can answer one wizard question at a time."""

    async def ask(self, prompt: str) -> str: ...


class ConsoleAnswerSource:
    """Read answers line by line from standard input.

    Once stdin hits EOF or fails, every further question gets the fallback
    answer without touching the stream again.
    """

    def __init__(self):
        self._broken = False

    async def ask(self, prompt: str) -> str:
        if self._broken:
            return FALLBACK_ANSWER
        try:
            answer = await _read_line(prompt)
        except (EOFError, OSError) as e:
            logger.warning(f"Input stream unavailable, using fallback answer: {e!r}")
            self._broken = True
            return FALLBACK_ANSWER
        return answer.strip()


async def _read_line(prompt: str) -> str:
    """Call input() on a daemon thread.

    The executor used by asyncio.to_thread is joined at shutdown, which would
    make Ctrl+C wait for Enter. A daemon thread is abandoned instead.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def settle(result: str | None, error: Exception | None) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def reader() -> None:
        try:
            line = input(prompt)
        except Exception as e:
            outcome = (None, e)
        else:
            outcome = (line, None)
        try:
            loop.call_soon_threadsafe(settle, *outcome)
        except RuntimeError:
            logger.debug("Event loop closed before input arrived, dropping answer")

    threading.Thread(target=reader, name="console-input", daemon=True).start()
    return await future


class ScriptedAnswerSource:
    """Replay predetermined answers in order, recording each prompt.

    Used for non-interactive runs and for testing the wizard.
    """

    def __init__(self, answers: list[str]):
        self._answers = list(answers)
        self._position = 0
        self.prompts: list[str] = []

    async def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._position >= len(self._answers):
            logger.warning(f"Scripted answers exhausted at prompt: {prompt!r}")
            return FALLBACK_ANSWER
        answer = self._answers[self._position]
        self._position += 1
        return answer.strip()


def load_answers_file(path: Path) -> list[str]:
    """Read a line-per-answer script; blank lines are answers too."""
    logger.info(f"Loading scripted answers from {path}")
    return path.read_text(encoding="utf-8").splitlines()
