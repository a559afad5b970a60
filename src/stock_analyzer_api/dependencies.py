"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

Lifespan (main.py) creates providers and services once and attaches them to
app.state; these getters are used by Depends(). Path validators live here too
so every route validates the same way.
"""
from typing import Annotated

from fastapi import Depends, HTTPException, Request

from stock_analyzer_api.providers.core.utils import (is_valid_symbol,
                                                     normalize_stock_symbol)
from stock_analyzer_api.services import (InsightsService,
                                         MarketOverviewService, NewsService,
                                         StocksService)

INVALID_SYMBOL_MESSAGE = "Invalid stock symbol"
EMPTY_QUERY_MESSAGE = "Search query must not be empty"


def get_stocks_service(request: Request) -> StocksService:
    """Resolve StocksService from app.state (created at startup)."""
    return request.app.state.stocks_service


def get_market_service(request: Request) -> MarketOverviewService:
    """Resolve MarketOverviewService from app.state."""
    return request.app.state.market_service


def get_news_service(request: Request) -> NewsService:
    """Resolve NewsService from app.state."""
    return request.app.state.news_service


def get_insights_service(request: Request) -> InsightsService:
    """Resolve InsightsService from app.state."""
    return request.app.state.insights_service


def valid_symbol(symbol: str) -> str:
    """Path validator: 1-10 alphanumeric characters, returned uppercased."""
    if not is_valid_symbol(symbol):
        raise HTTPException(status_code=400, detail=INVALID_SYMBOL_MESSAGE)
    return normalize_stock_symbol(symbol)


def valid_query(query: str) -> str:
    """Path validator: non-blank free text, returned trimmed."""
    query = query.strip()
    if not query:
        raise HTTPException(status_code=400, detail=EMPTY_QUERY_MESSAGE)
    return query


# Type aliases for route injection
StocksServiceDep = Annotated[StocksService, Depends(get_stocks_service)]
MarketServiceDep = Annotated[MarketOverviewService, Depends(get_market_service)]
NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]
InsightsServiceDep = Annotated[InsightsService, Depends(get_insights_service)]
Symbol = Annotated[str, Depends(valid_symbol)]
SearchQuery = Annotated[str, Depends(valid_query)]
