from __future__ import annotations

from typing import Optional

from flashgen.core.config import settings
from flashgen.modules.flashcards.main import FlashcardsGenerator
from flashgen.modules.flashcards.transport import GeminiTransport


_generator: Optional[FlashcardsGenerator] = None


def get_generator() -> FlashcardsGenerator:
    """Process-wide deck controller (single in-memory deck)."""
    global _generator
    if _generator is None:
        transport = GeminiTransport.from_settings(settings.gemini)
        _generator = FlashcardsGenerator(transport, deck_settings=settings.deck)
    return _generator


async def close_generator() -> None:
    global _generator
    if _generator is None:
        return
    transport = _generator.transport
    _generator = None
    if isinstance(transport, GeminiTransport):
        await transport.aclose()
