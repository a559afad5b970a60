"""Market-wide routes: movers, sectors, indices and exchange status."""
from fastapi import APIRouter

from stock_analyzer_api.dependencies import MarketServiceDep
from stock_analyzer_api.schemas import (IndexEntry, MarketStatus, MoverEntry,
                                        SectorEntry)

router = APIRouter(prefix="/api", tags=["market"])


@router.get("/top-gainers", response_model=list[MoverEntry])
async def get_top_gainers(service: MarketServiceDep) -> list[MoverEntry]:
    """Top 5 gainers today."""
    return await service.top_gainers()


@router.get("/top-losers", response_model=list[MoverEntry])
async def get_top_losers(service: MarketServiceDep) -> list[MoverEntry]:
    """Top 5 losers today."""
    return await service.top_losers()


@router.get("/most-active", response_model=list[MoverEntry])
async def get_most_active(service: MarketServiceDep) -> list[MoverEntry]:
    """Top 7 tickers by volume, highest first."""
    return await service.most_active()


@router.get("/sectors", response_model=list[SectorEntry])
async def get_sectors(service: MarketServiceDep) -> list[SectorEntry]:
    return await service.sectors()


@router.get("/indices", response_model=list[IndexEntry])
async def get_indices(service: MarketServiceDep) -> list[IndexEntry]:
    """S&P 500, NASDAQ 100 and Dow Jones via their ETFs; unavailable ones are omitted."""
    return await service.indices()


@router.get("/market-status", response_model=MarketStatus)
async def get_market_status(service: MarketServiceDep) -> MarketStatus:
    return await service.market_status()
