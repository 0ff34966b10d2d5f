from flashgen.modules.flashcards.prompts import build_request, to_gemini_payload


def test_request_keeps_text_separate_from_instruction():
    text = "Photosynthesis converts light into chemical energy."
    req = build_request(text, 7)

    assert req.subject_text == text
    assert text not in req.system_instruction
    assert req.response_format == "structured-json"


def test_instruction_encodes_role_count_and_shape():
    instr = build_request("anything", 12).system_instruction

    assert "expert study assistant" in instr
    assert "exactly 12 flashcards" in instr
    assert '"flashcards"' in instr
    assert '"front"' in instr and '"back"' in instr
    assert "Return ONLY the raw JSON" in instr


def test_build_is_deterministic():
    assert build_request("x y", 4) == build_request("x y", 4)


def test_gemini_payload_shape():
    req = build_request("notes", 4)
    body = to_gemini_payload(req)

    assert body["contents"] == [{"parts": [{"text": "notes"}]}]
    assert body["systemInstruction"] == {"parts": [{"text": req.system_instruction}]}
    assert body["generationConfig"] == {"responseMimeType": "application/json"}
