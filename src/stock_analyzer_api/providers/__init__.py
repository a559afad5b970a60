"""Upstream providers for market data and AI text generation.

- PolygonProvider: US stock snapshots, bars, search, movers and news via Polygon.io
- GeminiProvider: prompt-in, text-out generation via Google Gemini

Both implement the ABCs in providers.core and raise the typed errors defined
there (NotFoundError, UpstreamError).

Example:
    async with PolygonProvider(api_key="...") as provider:
        snapshot = await provider.get_snapshot("AAPL")
"""
from stock_analyzer_api.providers.core import (MarketDataProviderABC,
                                               NotFoundError, ProviderError,
                                               ProviderErrorMapper,
                                               TextGenerationProviderABC,
                                               UpstreamError)
from stock_analyzer_api.providers.gemini import GeminiProvider
from stock_analyzer_api.providers.polygon import PolygonProvider

__all__ = [
    "GeminiProvider",
    "MarketDataProviderABC",
    "NotFoundError",
    "PolygonProvider",
    "ProviderError",
    "ProviderErrorMapper",
    "TextGenerationProviderABC",
    "UpstreamError",
]
