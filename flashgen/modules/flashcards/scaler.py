"""Derive how many cards to ask for from the size of the input text."""

from __future__ import annotations

import math

WORDS_PER_CARD = 60
MIN_CARDS = 4
MAX_CARDS = 20


def is_blank(text: str | None) -> bool:
    return not (text or "").strip()


def word_count(text: str) -> int:
    return len(text.split())


def scale(
    text: str,
    *,
    words_per_card: int = WORDS_PER_CARD,
    min_cards: int = MIN_CARDS,
    max_cards: int = MAX_CARDS,
) -> int:
    """Return the target card count: one card per ``words_per_card`` words,
    clamped to ``[min_cards, max_cards]``.
    """
    per_card = max(1, int(words_per_card))
    wanted = math.ceil(word_count(text) / per_card)
    return min(max(wanted, min_cards), max_cards)
