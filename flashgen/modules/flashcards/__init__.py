"""Flashcards module exports."""

from .models.flashcards import DeckView, Flashcard, FlashcardRequest
from .main import FlashcardsGenerator
from .parser import parse_response
from .prompts import build_request
from .scaler import scale
from .transport import GeminiTransport

__all__ = [
    "DeckView",
    "Flashcard",
    "FlashcardRequest",
    "FlashcardsGenerator",
    "GeminiTransport",
    "build_request",
    "parse_response",
    "scale",
]
