"""Core provider abstractions."""
from stock_analyzer_api.providers.core.ai_provider_abc import \
    TextGenerationProviderABC
from stock_analyzer_api.providers.core.error_mapper import ProviderErrorMapper
from stock_analyzer_api.providers.core.exceptions import (NotFoundError,
                                                          ProviderError,
                                                          UpstreamError)
from stock_analyzer_api.providers.core.market_provider_abc import (
    MarketDataProviderABC, MoverDirection)
from stock_analyzer_api.providers.core.utils import (first_present,
                                                     normalize_stock_symbol)

__all__ = [
    "MarketDataProviderABC",
    "MoverDirection",
    "NotFoundError",
    "ProviderError",
    "ProviderErrorMapper",
    "TextGenerationProviderABC",
    "UpstreamError",
    "first_present",
    "normalize_stock_symbol",
]
