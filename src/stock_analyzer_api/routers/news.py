"""News routes with per-headline AI sentiment."""
from fastapi import APIRouter

from stock_analyzer_api.dependencies import NewsServiceDep, Symbol
from stock_analyzer_api.schemas import NewsItem, SymbolNewsItem

router = APIRouter(prefix="/api/news", tags=["news"])


@router.get("/top", response_model=list[NewsItem])
async def get_top_news(service: NewsServiceDep) -> list[NewsItem]:
    """Latest 5 market headlines. 404 when Polygon returns none."""
    return await service.top_news()


@router.get("/{symbol}", response_model=list[SymbolNewsItem])
async def get_symbol_news(sym: Symbol, service: NewsServiceDep) -> list[SymbolNewsItem]:
    """Latest 5 headlines for one ticker. 404 when Polygon returns none."""
    return await service.symbol_news(sym)
