from .flashcards import (
    DeckView,
    Flashcard,
    FlashcardDeck,
    FlashcardRequest,
    GenerationSession,
    GenerationStatus,
)

__all__ = [
    "DeckView",
    "Flashcard",
    "FlashcardDeck",
    "FlashcardRequest",
    "GenerationSession",
    "GenerationStatus",
]
