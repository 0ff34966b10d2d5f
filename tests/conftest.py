from __future__ import annotations

import json

import pytest

from flashgen.modules.flashcards.main import FlashcardsGenerator


def envelope(payload) -> str:
    """Wrap a payload the way Gemini's generateContent reply does."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return json.dumps(
        {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}
    )


def deck_payload(n: int) -> dict:
    return {"flashcards": [{"front": f"Q{i}", "back": f"A{i}"} for i in range(n)]}


class StubTransport:
    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests = []

    async def send(self, request):
        self.requests.append(request)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def stub():
    return StubTransport()


@pytest.fixture
def generator(stub):
    return FlashcardsGenerator(stub)
