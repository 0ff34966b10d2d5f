"""Request contract for the remote flashcard extractor.

The instruction is fixed apart from the card count; the user's text is sent
untouched as subject content so the service can apply the instruction as a
system-level directive.
"""

from __future__ import annotations

from typing import Any

from flashgen.modules.flashcards.models.flashcards import FlashcardRequest


SYSTEM_PROMPT_TEMPLATE = (
    "You are an expert study assistant. "
    "Analyze the user's text and extract the most important concepts, facts, "
    "or definitions.\n\n"
    "Based on the length of the provided text, you must create exactly "
    "{count} flashcards to ensure thorough coverage.\n\n"
    "Strictly follow this JSON format:\n"
    "{{\n"
    '  "flashcards": [\n'
    '    {{ "front": "Question or Term", "back": "Answer or Definition" }}\n'
    "  ]\n"
    "}}\n\n"
    "Return ONLY the raw JSON. No extra text, commentary or code fences."
)


def build_system_prompt(target_count: int) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(count=int(target_count))


def build_request(text: str, target_count: int) -> FlashcardRequest:
    return FlashcardRequest(
        subject_text=text,
        system_instruction=build_system_prompt(target_count),
    )


def to_gemini_payload(request: FlashcardRequest) -> dict[str, Any]:
    """Render the request as a Gemini ``generateContent`` body."""
    return {
        "contents": [{"parts": [{"text": request.subject_text}]}],
        "systemInstruction": {"parts": [{"text": request.system_instruction}]},
        "generationConfig": {"responseMimeType": "application/json"},
    }
