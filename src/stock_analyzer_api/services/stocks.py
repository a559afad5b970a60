"""Stocks service: quote, search and chart with unified error mapping."""
import logging
from datetime import date, datetime, timezone
from typing import Any

from stock_analyzer_api.providers.core import (MarketDataProviderABC,
                                               NotFoundError, ProviderError,
                                               ProviderErrorMapper,
                                               normalize_stock_symbol)
from stock_analyzer_api.providers.polygon.mapper import (bar_to_chart_point,
                                                         snapshot_to_quote,
                                                         to_search_result)
from stock_analyzer_api.providers.polygon.models import chart_window
from stock_analyzer_api.schemas import ChartPoint, Quote, TickerSearchResult
from stock_analyzer_api.services.utils import gather_strict

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class StocksService:
    """Single-resource stock lookups; provider errors become HTTP errors."""

    def __init__(
        self,
        provider: MarketDataProviderABC,
        error_mapper: ProviderErrorMapper,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper

    async def _details_or_none(self, symbol: str) -> dict[str, Any] | None:
        """Reference details are optional for a quote; missing ones are not an error."""
        try:
            return await self._provider.get_ticker_details(symbol)
        except NotFoundError:
            logger.info("No reference details for %s; using snapshot only", symbol)
            return None

    async def get_quote(self, symbol: str) -> Quote:
        """Snapshot and reference details fetched concurrently, fail-fast."""
        sym = normalize_stock_symbol(symbol)
        try:
            snapshot, details = await gather_strict(
                self._provider.get_snapshot(sym),
                self._details_or_none(sym),
            )
        except ProviderError as e:
            self._error_mapper.raise_http(e, symbol=sym, operation="quote")
        return snapshot_to_quote(snapshot, details, sym)

    async def search(self, query: str) -> list[TickerSearchResult]:
        """Ticker search. No upstream results is an empty list, not an error."""
        try:
            results = await self._provider.search_tickers(query.strip())
        except NotFoundError:
            return []
        except ProviderError as e:
            self._error_mapper.raise_http(e, operation="search results")
        return [to_search_result(item) for item in results]

    async def get_chart(
        self,
        symbol: str,
        range_name: str | None = None,
        today: date | None = None,
    ) -> list[ChartPoint]:
        """Bars for a dashboard range (1D, 1W, 1M, 6M, 1Y, ALL); [] when none."""
        sym = normalize_stock_symbol(symbol)
        chart_range, start, end = chart_window(range_name, today or utc_today())
        logger.info(
            "Chart requested: %s %s (%s..%s, %d %s)",
            sym, range_name, start, end, chart_range.multiplier, chart_range.timespan,
        )
        try:
            bars = await self._provider.get_aggregates(
                sym, chart_range.multiplier, chart_range.timespan, start, end
            )
        except NotFoundError:
            logger.warning("No chart data returned for %s", sym)
            return []
        except ProviderError as e:
            self._error_mapper.raise_http(e, symbol=sym, operation="chart data")
        return [bar_to_chart_point(bar) for bar in bars]
