"""Google Gemini text-generation provider."""
from stock_analyzer_api.providers.gemini.gemini_provider import GeminiProvider

__all__ = ["GeminiProvider"]
