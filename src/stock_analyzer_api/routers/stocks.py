"""Single-stock routes: quote, ticker search and chart bars (Polygon)."""
from fastapi import APIRouter, Query

from stock_analyzer_api.dependencies import (SearchQuery, StocksServiceDep,
                                             Symbol)
from stock_analyzer_api.schemas import ChartPoint, Quote, TickerSearchResult

router = APIRouter(prefix="/api", tags=["stocks"])


@router.get("/quote/{symbol}", response_model=Quote)
async def get_quote(sym: Symbol, service: StocksServiceDep) -> Quote:
    """Get the current quote for a stock symbol.

    Args:
        sym: Stock ticker (e.g., "AAPL"), any case; 1-10 alphanumeric characters.

    Returns:
        Snapshot prices merged with reference metadata. 404 when Polygon has no snapshot.
    """
    return await service.get_quote(sym)


@router.get("/search/{query}", response_model=list[TickerSearchResult])
async def search_tickers(query: SearchQuery, service: StocksServiceDep) -> list[TickerSearchResult]:
    """Search active tickers by name or symbol (at most 10 hits)."""
    return await service.search(query)


@router.get("/chart/{symbol}", response_model=list[ChartPoint])
async def get_chart(
    sym: Symbol,
    service: StocksServiceDep,
    range_name: str = Query(
        default="1D",
        alias="range",
        description="One of 1D, 1W, 1M, 6M, 1Y, ALL (case-insensitive); unknown values use 1D",
    ),
) -> list[ChartPoint]:
    """Get OHLCV bars for the requested range, oldest first."""
    return await service.get_chart(sym, range_name)
