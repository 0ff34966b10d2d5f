from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from flashgen.apis.deps import get_generator
from flashgen.core.config import settings
from flashgen.modules.flashcards.main import FlashcardsGenerator
from flashgen.modules.flashcards.models.flashcards import DeckView
from flashgen.modules.flashcards.scaler import word_count
from .schemas import (
    GenerateRequest,
    InputRequest,
    ScaleRequest,
    ScaleResponse,
)


router = APIRouter()

Generator = Annotated[FlashcardsGenerator, Depends(get_generator)]

BASE = f"/{settings.app.version}/deck"


@router.get(BASE, response_model=DeckView, tags=["flashcards"])
async def get_deck(gen: Generator) -> DeckView:
    return gen.view()


@router.put(f"{BASE}/input", response_model=DeckView, tags=["flashcards"])
async def set_input(req: InputRequest, gen: Generator) -> DeckView:
    gen.set_input(req.text)
    return gen.view()


@router.post(
    f"{BASE}/generate",
    response_model=DeckView,
    status_code=status.HTTP_200_OK,
    tags=["flashcards"],
)
async def generate_deck(gen: Generator, req: GenerateRequest | None = None) -> DeckView:
    # Failures come back as a view carrying the user-facing error message
    return await gen.generate(req.text if req else None)


@router.post(
    f"{BASE}/cards/{{index:int}}/flip",
    response_model=DeckView,
    tags=["flashcards"],
)
async def flip_card(index: int, gen: Generator) -> DeckView:
    if not gen.toggle_flip(index):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Card not found"
        )
    return gen.view()


@router.post(f"{BASE}/reset", response_model=DeckView, tags=["flashcards"])
async def reset_deck(gen: Generator) -> DeckView:
    gen.reset()
    return gen.view()


@router.post(f"{BASE}/scale", response_model=ScaleResponse, tags=["flashcards"])
async def scale_text(req: ScaleRequest, gen: Generator) -> ScaleResponse:
    if not req.text.strip():
        return ScaleResponse(word_count=0, target_count=0)
    return ScaleResponse(
        word_count=word_count(req.text), target_count=gen.target_count(req.text)
    )
