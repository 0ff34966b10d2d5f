"""Flashcards generation controller.

Orchestrates scaling, request construction, the remote call and parsing, and
keeps the presentation-facing state (deck, flips, loading flag, error) in one
place. Mirrors the service-class pattern used for other generators so it can
back API handlers, the CLI or scripts alike.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from flashgen.core.config import DeckSettings
from flashgen.core.logging import get_logger
from flashgen.modules.flashcards.errors import FlashcardsError
from flashgen.modules.flashcards.models.flashcards import (
    DeckView,
    GenerationSession,
    GenerationStatus,
)
from flashgen.modules.flashcards.parser import parse_response
from flashgen.modules.flashcards.prompts import build_request
from flashgen.modules.flashcards.scaler import is_blank, scale
from flashgen.modules.flashcards.state import DeckState
from flashgen.modules.flashcards.transport import Transport


logger = get_logger(__name__)

GENERIC_ERROR = (
    "Failed to generate cards. "
    "The text might be too complex or the connection was lost."
)


class FlashcardsGenerator:
    """Single-deck generation controller.

    Every trigger and every reset opens a new epoch; a reply is applied only if
    its epoch is still current, so late replies never repopulate a deck the
    user has since reset or regenerated.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        deck_settings: Optional[DeckSettings] = None,
    ) -> None:
        self.transport = transport
        self.deck_settings = deck_settings or DeckSettings()
        self.deck = DeckState()
        self.input_text = ""
        self.session: Optional[GenerationSession] = None
        self._epoch = 0

    # State accessors ----------------------------------------------------
    @property
    def loading(self) -> bool:
        return (
            self.session is not None
            and self.session.status == GenerationStatus.LOADING
        )

    @property
    def error(self) -> Optional[str]:
        if self.session is None:
            return None
        return self.session.error_message

    @property
    def epoch(self) -> int:
        return self._epoch

    def view(self) -> DeckView:
        return DeckView(
            cards=list(self.deck.cards),
            flipped_indices=sorted(self.deck.flipped),
            loading=self.loading,
            error=self.error,
            generation=self.deck.generation,
            input_text=self.input_text,
        )

    def target_count(self, text: str) -> int:
        cfg = self.deck_settings
        return scale(
            text,
            words_per_card=cfg.words_per_card,
            min_cards=cfg.min_cards,
            max_cards=cfg.max_cards,
        )

    # User actions -------------------------------------------------------
    def set_input(self, text: str) -> None:
        self.input_text = text or ""

    async def generate(self, text: Optional[str] = None) -> DeckView:
        """Run one generation for ``text`` (or the stored input)."""
        source = text if text is not None else self.input_text
        if is_blank(source):
            logger.debug("Ignoring generate trigger for blank input")
            return self.view()
        self.set_input(source)

        self._epoch += 1
        token = self._epoch
        target = self.target_count(source)

        # Clear the previous deck before the call starts
        self.deck.reset()
        session = GenerationSession(
            request_text=source,
            target_count=target,
            status=GenerationStatus.LOADING,
        )
        self.session = session
        extra = {"epoch": token}
        logger.info("Generating %d flashcards", target, extra=extra)

        request = build_request(source, target)
        try:
            raw = await self.transport.send(request)
            cards = parse_response(raw)
        except FlashcardsError as e:
            if token != self._epoch:
                logger.info("Discarding stale failure", extra=extra)
                return self.view()
            logger.warning(
                "Flashcard generation failed (%s): %s",
                type(e).__name__,
                e,
                extra=extra,
            )
            session.status = GenerationStatus.ERROR
            session.error_message = GENERIC_ERROR
            return self.view()
        except Exception:  # noqa: BLE001
            if token == self._epoch:
                logger.exception("Unexpected flashcard generation failure", extra=extra)
                session.status = GenerationStatus.ERROR
                session.error_message = GENERIC_ERROR
            return self.view()

        if token != self._epoch:
            logger.info("Discarding stale result", extra=extra)
            return self.view()

        if len(cards) != target:
            logger.info(
                "Service returned %d cards, %d requested", len(cards), target, extra=extra
            )
        self.deck.commit(cards)
        session.status = GenerationStatus.SUCCESS
        logger.info(
            "Generated %d flashcards (generation %d)",
            len(cards),
            self.deck.generation,
            extra=extra,
        )
        return self.view()

    def generate_sync(self, text: Optional[str] = None) -> DeckView:
        return asyncio.run(self.generate(text))

    def toggle_flip(self, index: int) -> bool:
        return self.deck.toggle_flip(index)

    def reset(self) -> None:
        self._epoch += 1
        self.deck.reset()
        self.session = None
        self.input_text = ""

    @staticmethod
    def to_jsonable(view: DeckView) -> dict:
        return view.model_dump(mode="json")
