"""Turn a raw Gemini reply into a validated, ordered deck.

Each step fails with its own ``ParseError`` subclass so callers can tell an
empty reply from broken JSON or a wrong shape. Cards are never dropped or
reordered: one bad entry rejects the whole reply.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from flashgen.modules.flashcards.errors import (
    EmptyResponse,
    InvalidCard,
    InvalidShape,
    MalformedJSON,
)
from flashgen.modules.flashcards.models.flashcards import Flashcard, FlashcardDeck

DECK_FIELD = "flashcards"


def extract_text(raw_body: str) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of the envelope."""
    try:
        envelope = json.loads(raw_body or "")
    except (ValueError, RecursionError) as e:
        raise EmptyResponse("response envelope is not JSON") from e

    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise EmptyResponse("no text payload in response") from e

    if not isinstance(text, str) or not text.strip():
        raise EmptyResponse("no text payload in response")
    return text


def _strip_fence(text: str) -> str:
    s = text.strip()
    if s.startswith("```"):
        s = s[3:]
        if s[:4].lower() == "json":
            s = s[4:]
        if s.rstrip().endswith("```"):
            s = s.rstrip()[:-3]
    return s.strip()


def _to_deck(data: Any) -> tuple[Flashcard, ...]:
    if not isinstance(data, dict):
        raise InvalidShape(f"expected an object with a '{DECK_FIELD}' list")
    try:
        deck = FlashcardDeck.model_validate(data)
    except ValidationError as e:
        err = e.errors(include_url=False)[0]
        loc = err["loc"]
        if len(loc) > 1 and isinstance(loc[1], int):
            raise InvalidCard(loc[1], err["msg"]) from e
        raise InvalidShape(f"expected a '{DECK_FIELD}' list") from e
    return tuple(deck.flashcards)


def parse_payload(text: str) -> tuple[Flashcard, ...]:
    if not text or not text.strip():
        raise EmptyResponse("empty payload")
    try:
        data = json.loads(_strip_fence(text))
    except (ValueError, RecursionError) as e:
        raise MalformedJSON(str(e) or type(e).__name__) from e

    return _to_deck(data)


def parse_response(raw_body: str) -> tuple[Flashcard, ...]:
    return parse_payload(extract_text(raw_body))
