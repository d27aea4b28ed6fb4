"""Async boundary between the frame loop and an external text source.

The frame loop never awaits: the host schedules request() as a task when a
HOLD_COMPLETE event (or the first load) asks for text. The resulting text,
or a placeholder on failure, goes through the same token check as any other
text, so a request superseded by reset() or the watchdog has no effect.
"""

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Protocol

from tensegrity.animator import NetworkAnimatorState, begin_loading, offer_text
from tensegrity.config import Settings, settings

logger = logging.getLogger(__name__)


class TextSource(Protocol):
    """Anything that can produce a paragraph of text."""

    async def generate(self, word: str | None, language: str) -> str:
        """
        Produce new text.

        Args:
            word: Selected word to write about, or None for a free prompt
            language: Profile code of the current language

        Returns:
            Generated text
        """
        ...


class GenerationCoordinator:
    """Requests text and feeds it back into the animator state."""

    def __init__(
        self,
        source: TextSource,
        config: Settings | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.source = source
        self.config = config or settings
        self.clock = clock

    async def request(self, state: NetworkAnimatorState, word: str | None = None) -> bool:
        """
        Fetch text for the current language and offer it to the state.

        Args:
            state: Animator state to deliver into
            word: Selected word, if the request follows a selection

        Returns:
            True if the text (or placeholder) was accepted, False if stale
        """
        token = begin_loading(state, self.clock())
        language = state.language
        logger.info(f"Requesting text (token {token}, language {language}, word {word!r})")

        try:
            text = await asyncio.wait_for(
                self.source.generate(word, language),
                timeout=self.config.generation_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Text generation timed out after {self.config.generation_timeout}s"
            )
            text = self.config.connection_timeout_text
        except Exception:
            logger.exception("Text generation failed")
            text = self.config.generation_error_text

        return offer_text(state, token, text)
