"""Failure kinds raised along the generation pipeline."""

from __future__ import annotations

from typing import Optional


class FlashcardsError(Exception):
    """Base class for generation pipeline failures."""

    pass


class TransportFailure(FlashcardsError):
    """Remote call failed or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(FlashcardsError):
    """Remote reply could not be turned into a deck."""

    pass


class EmptyResponse(ParseError):
    pass


class MalformedJSON(ParseError):
    pass


class InvalidShape(ParseError):
    pass


class InvalidCard(InvalidShape):
    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"card {index}: {reason}")
        self.index = index
