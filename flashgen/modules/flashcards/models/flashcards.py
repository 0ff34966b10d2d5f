"""Pydantic models for generated decks and the generation request contract.

Cards are frozen: a deck is replaced wholesale on every successful generation
and never patched card by card.
"""

from __future__ import annotations

import enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Flashcard(BaseModel):
    """Simple front/back study card; both sides must carry text."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    front: str = Field(min_length=1, strict=True)
    back: str = Field(min_length=1, strict=True)


class FlashcardDeck(BaseModel):
    """Shape the remote service must reply with."""

    flashcards: list[Flashcard]


class FlashcardRequest(BaseModel):
    """Outbound contract: fixed instruction kept apart from the user's text."""

    model_config = ConfigDict(frozen=True)

    subject_text: str
    system_instruction: str
    response_format: Literal["structured-json"] = "structured-json"


class GenerationStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class GenerationSession(BaseModel):
    request_text: str
    target_count: int
    status: GenerationStatus = GenerationStatus.IDLE
    error_message: Optional[str] = None


class DeckView(BaseModel):
    """Snapshot of everything a renderer needs to draw the deck."""

    cards: list[Flashcard] = Field(default_factory=list)
    flipped_indices: list[int] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    generation: int = 0
    input_text: str = ""

    @computed_field
    def card_count(self) -> int:
        return len(self.cards)

    @computed_field
    def card_keys(self) -> list[str]:
        # Keys change with each generation so per-tile state never carries over
        return [f"{self.generation}-{i}" for i in range(len(self.cards))]

    @computed_field
    def can_generate(self) -> bool:
        return not self.loading and bool(self.input_text.strip())

    @computed_field
    def is_empty(self) -> bool:
        return not self.loading and not self.cards and self.error is None
