"""In-memory deck state: cards, flip state and the generation counter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from flashgen.modules.flashcards.models.flashcards import Flashcard


def toggle_index(flipped: frozenset[int], index: int, size: int) -> frozenset[int]:
    """Return ``flipped`` with ``index`` toggled; out-of-range indices are ignored."""
    if not 0 <= index < size:
        return flipped
    if index in flipped:
        return flipped - {index}
    return flipped | {index}


@dataclass
class DeckState:
    cards: tuple[Flashcard, ...] = ()
    flipped: frozenset[int] = field(default_factory=frozenset)
    generation: int = 0

    def __len__(self) -> int:
        return len(self.cards)

    def replace(self, cards: Iterable[Flashcard]) -> None:
        self.cards = tuple(cards)
        self.flipped = frozenset()

    def commit(self, cards: Iterable[Flashcard]) -> None:
        """Replace the deck with a freshly generated one and open a new epoch."""
        self.replace(cards)
        self.generation += 1

    def reset(self) -> None:
        # generation stays monotonic across resets
        self.cards = ()
        self.flipped = frozenset()

    def toggle_flip(self, index: int) -> bool:
        """Toggle one card; returns whether the index was in range."""
        self.flipped = toggle_index(self.flipped, index, len(self.cards))
        return 0 <= index < len(self.cards)
