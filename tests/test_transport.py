import asyncio
import json

import httpx
import pytest

from flashgen.core.config import GeminiSettings
from flashgen.modules.flashcards.errors import TransportFailure
from flashgen.modules.flashcards.prompts import build_request
from flashgen.modules.flashcards.transport import GeminiTransport

ENDPOINT = "https://gemini.example/v1beta/models/test-model:generateContent"


def make_transport(handler, api_key="secret"):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiTransport(api_key=api_key, endpoint=ENDPOINT, client=client)


def test_send_posts_payload_and_returns_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, text='{"candidates": []}')

    transport = make_transport(handler)
    body = asyncio.run(transport.send(build_request("some notes", 4)))

    assert body == '{"candidates": []}'
    assert seen["url"] == ENDPOINT
    assert seen["key"] == "secret"
    assert seen["body"]["contents"][0]["parts"][0]["text"] == "some notes"
    assert seen["body"]["generationConfig"]["responseMimeType"] == "application/json"


def test_missing_key_sends_no_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["has_key"] = "x-goog-api-key" in request.headers
        return httpx.Response(200, text="{}")

    asyncio.run(make_transport(handler, api_key=None).send(build_request("x", 4)))
    assert seen["has_key"] is False


@pytest.mark.parametrize("code", [400, 403, 429, 500, 503])
def test_non_success_status_raises(code):
    transport = make_transport(lambda request: httpx.Response(code, text="nope"))

    with pytest.raises(TransportFailure) as exc:
        asyncio.run(transport.send(build_request("x", 4)))
    assert exc.value.status_code == code


def test_network_error_raises_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportFailure) as exc:
        asyncio.run(make_transport(handler).send(build_request("x", 4)))
    assert exc.value.status_code is None
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_from_settings_uses_explicit_values():
    cfg = GeminiSettings(
        GEMINI_API_KEY="k",
        GEMINI_MODEL="m",
        GEMINI_BASE_URL="https://host/v1beta/",
        GEMINI_TIMEOUT=5,
    )
    transport = GeminiTransport.from_settings(cfg)

    assert transport.api_key == "k"
    assert transport.endpoint == "https://host/v1beta/models/m:generateContent"
    assert transport.timeout == 5


def test_aclose_leaves_injected_client_open():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    transport = GeminiTransport(api_key=None, endpoint=ENDPOINT, client=client)

    asyncio.run(transport.aclose())

    assert client.is_closed is False
