"""HTTP transport to the Gemini ``generateContent`` endpoint.

The credential and endpoint are passed in explicitly; nothing here reads
process-wide settings.
"""

from __future__ import annotations

from typing import Optional, Protocol

import httpx

from flashgen.core.config import GeminiSettings
from flashgen.modules.flashcards.errors import TransportFailure
from flashgen.modules.flashcards.models.flashcards import FlashcardRequest
from flashgen.modules.flashcards.prompts import to_gemini_payload


class Transport(Protocol):
    async def send(self, request: FlashcardRequest) -> str: ...


class GeminiTransport:
    """Sends one request per call; no retries."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        endpoint: str,
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, cfg: GeminiSettings) -> "GeminiTransport":
        return cls(api_key=cfg.api_key, endpoint=cfg.endpoint, timeout=cfg.timeout)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def send(self, request: FlashcardRequest) -> str:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-goog-api-key"] = self.api_key

        try:
            response = await self._get_client().post(
                self.endpoint, json=to_gemini_payload(request), headers=headers
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportFailure(f"request failed: {e}") from e

        if not response.is_success:
            raise TransportFailure(
                f"API Error: {response.status_code}", status_code=response.status_code
            )
        return response.text

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
