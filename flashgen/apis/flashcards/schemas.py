from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class InputRequest(BaseModel):
    text: str = Field(..., description="Source material to study")


class GenerateRequest(BaseModel):
    text: Optional[str] = Field(
        default=None, description="Source material; defaults to the stored input"
    )


class ScaleRequest(BaseModel):
    text: str = Field(..., description="Source material to measure")


class ScaleResponse(BaseModel):
    word_count: int
    target_count: int
