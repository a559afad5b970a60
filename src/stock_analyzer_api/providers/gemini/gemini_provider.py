"""Google Gemini text-generation provider."""
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors

from stock_analyzer_api.providers.core import (TextGenerationProviderABC,
                                               UpstreamError)

logger = logging.getLogger(__name__)


class GeminiProvider(TextGenerationProviderABC):
    """Text generation via the google-genai SDK (async surface, client.aio).

    The SDK client is created on first use so the service can start without a
    key; requests then fail with UpstreamError instead.
    """

    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        client: Any = None,
    ) -> None:
        """Initialize the Gemini provider.

        Args:
            api_key: Gemini API key.
            model: Model name passed to generate_content.
            client: Optional pre-built genai.Client (or a compatible stand-in).
        """
        self._api_key = api_key
        self._model = model
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            if not self._api_key:
                raise UpstreamError("Gemini API key is not configured")
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self._model, contents=prompt
            )
        except genai_errors.APIError as e:
            raise UpstreamError(f"Gemini request failed: {e.message}", status_code=e.code) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Gemini request failed: {e}") from e

        if not response.candidates:
            raise UpstreamError("Gemini returned no candidates")
        return (response.text or "").strip()

    async def close(self) -> None:
        """Close the SDK's async HTTP session if a client was created."""
        if self._client is not None:
            await self._client.aio.aclose()
