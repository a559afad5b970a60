"""Insights service: AI outlook, headline sentiment and stock chat."""
import logging
import re

from stock_analyzer_api import prompts
from stock_analyzer_api.providers.core import (ProviderError,
                                               ProviderErrorMapper,
                                               TextGenerationProviderABC,
                                               normalize_stock_symbol)
from stock_analyzer_api.schemas import AISuggestion, ChatAnswer, Sentiment
from stock_analyzer_api.services.utils import gather_strict

logger = logging.getLogger(__name__)

SHORT_TERM_FALLBACK = "Short-term insight unavailable."
LONG_TERM_FALLBACK = "Long-term insight unavailable."
HIGHLIGHTS_FALLBACK = "No highlights available."
CHAT_FALLBACK = "Sorry, I couldn't find an answer."

_LEADING_MARKUP = re.compile(r"^(?:[*\-•]|\d+[.)]|\s)+")
_SENTIMENTS = {s.value: s for s in Sentiment}


def strip_bullet(line: str) -> str:
    """Drop leading bullet, numbering and whitespace from one line."""
    return _LEADING_MARKUP.sub("", line).strip()


def parse_outlook(text: str) -> tuple[str, str]:
    """Split an outlook reply into (short_term, long_term).

    Takes the first line mentioning "short-term" and the first mentioning
    "long-term" (case-insensitive), skipping lines that mention both. Missing
    parts get the fallback text.
    """
    short_term = long_term = None
    for line in text.splitlines():
        lowered = line.lower()
        has_short, has_long = "short-term" in lowered, "long-term" in lowered
        if has_short and has_long:
            continue
        if short_term is None and has_short:
            short_term = strip_bullet(line)
        elif long_term is None and has_long:
            long_term = strip_bullet(line)
    return short_term or SHORT_TERM_FALLBACK, long_term or LONG_TERM_FALLBACK


def coerce_sentiment(text: str) -> Sentiment:
    """Exact (trimmed) match against the enum values; anything else is Neutral."""
    return _SENTIMENTS.get(text.strip(), Sentiment.NEUTRAL)


class InsightsService:
    """Prompts the AI provider per use case and shapes its replies."""

    def __init__(
        self,
        provider: TextGenerationProviderABC,
        error_mapper: ProviderErrorMapper,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper

    async def classify_sentiment(self, headline: str) -> Sentiment:
        """Classify one headline. Provider errors propagate; batch callers fall back."""
        reply = await self._provider.generate(prompts.sentiment_prompt(headline))
        sentiment = coerce_sentiment(reply)
        if sentiment is Sentiment.NEUTRAL and reply.strip() != Sentiment.NEUTRAL.value:
            logger.debug("Unrecognized sentiment reply %r coerced to Neutral", reply)
        return sentiment

    async def suggest(self, symbol: str) -> AISuggestion:
        """Short/long-term outlook plus key trend drivers for a symbol."""
        sym = normalize_stock_symbol(symbol)
        try:
            outlook, highlights = await gather_strict(
                self._provider.generate(prompts.outlook_prompt(sym)),
                self._provider.generate(prompts.highlights_prompt(sym)),
            )
        except ProviderError as e:
            self._error_mapper.raise_http(e, symbol=sym, operation="suggestions")
        short_term, long_term = parse_outlook(outlook)
        return AISuggestion(
            short_term=short_term,
            long_term=long_term,
            highlights=highlights.strip() or HIGHLIGHTS_FALLBACK,
        )

    async def chat(self, question: str, symbol: str) -> ChatAnswer:
        """Answer one question about a stock. No memory across calls."""
        try:
            reply = await self._provider.generate(
                prompts.chat_prompt(symbol.strip().upper(), question.strip())
            )
        except ProviderError as e:
            self._error_mapper.raise_http(e, symbol=symbol or None, operation="chat answer")
        return ChatAnswer(answer=reply.strip() or CHAT_FALLBACK)
