"""News service: latest headlines, each tagged with AI sentiment."""
import logging
from typing import Any

from stock_analyzer_api.providers.core import (MarketDataProviderABC,
                                               ProviderError,
                                               ProviderErrorMapper,
                                               normalize_stock_symbol)
from stock_analyzer_api.providers.polygon.mapper import article_fields
from stock_analyzer_api.schemas import NewsItem, Sentiment, SymbolNewsItem
from stock_analyzer_api.services.insights import InsightsService
from stock_analyzer_api.services.utils import gather_settled

logger = logging.getLogger(__name__)

NEWS_LIMIT = 5


class NewsService:
    """Fetches articles, then classifies every headline concurrently.

    A failed classification falls back to Neutral for that headline only.
    """

    def __init__(
        self,
        provider: MarketDataProviderABC,
        insights: InsightsService,
        error_mapper: ProviderErrorMapper,
    ) -> None:
        self._provider = provider
        self._insights = insights
        self._error_mapper = error_mapper

    async def _fetch(self, ticker: str | None) -> list[dict[str, Any]]:
        try:
            articles = await self._provider.get_news(ticker)
        except ProviderError as e:
            self._error_mapper.raise_http(e, symbol=ticker, operation="news")
        return articles[:NEWS_LIMIT]

    async def _analyze(self, articles: list[dict[str, Any]]) -> list[tuple[dict[str, Any], Sentiment]]:
        fields = [article_fields(article) for article in articles]
        sentiments = await gather_settled(
            (self._insights.classify_sentiment(f["title"]) for f in fields),
            fallback=Sentiment.NEUTRAL,
            label="sentiment",
        )
        return list(zip(fields, sentiments))

    async def top_news(self) -> list[NewsItem]:
        articles = await self._fetch(None)
        return [
            NewsItem(**fields, sentiment=sentiment)
            for fields, sentiment in await self._analyze(articles)
        ]

    async def symbol_news(self, symbol: str) -> list[SymbolNewsItem]:
        articles = await self._fetch(normalize_stock_symbol(symbol))
        items = []
        for fields, sentiment in await self._analyze(articles):
            published = fields.pop("published")
            items.append(SymbolNewsItem(**fields, published_utc=published, sentiment=sentiment))
        return items
