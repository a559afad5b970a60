"""Market overview service: movers, sectors, indices and exchange status."""
import logging

from stock_analyzer_api.providers.core import (MarketDataProviderABC,
                                               MoverDirection, NotFoundError,
                                               ProviderError,
                                               ProviderErrorMapper,
                                               first_present)
from stock_analyzer_api.providers.core.utils import dig
from stock_analyzer_api.providers.polygon.mapper import (snapshot_to_mover,
                                                         to_market_status)
from stock_analyzer_api.schemas import (IndexEntry, MarketStatus, MoverEntry,
                                        SectorEntry)
from stock_analyzer_api.services.utils import gather_settled, gather_strict

logger = logging.getLogger(__name__)

MOVERS_LIMIT = 5
MOST_ACTIVE_LIMIT = 7

SECTOR_ETFS: tuple[tuple[str, str], ...] = (
    ("Technology", "XLK"),
    ("Healthcare", "XLV"),
    ("Financials", "XLF"),
    ("Energy", "XLE"),
    ("Consumer Discretionary", "XLY"),
)

INDEX_ETFS: tuple[tuple[str, str], ...] = (
    ("S&P 500", "SPY"),
    ("NASDAQ 100", "QQQ"),
    ("Dow Jones", "DIA"),
)


class MarketOverviewService:
    """Dashboard-wide lists built from snapshot endpoints."""

    def __init__(
        self,
        provider: MarketDataProviderABC,
        error_mapper: ProviderErrorMapper,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper

    async def _movers(self, direction: MoverDirection) -> list[MoverEntry]:
        try:
            tickers = await self._provider.get_movers(direction)
        except NotFoundError:
            return []
        except ProviderError as e:
            self._error_mapper.raise_http(e, operation=f"top {direction}")
        return [snapshot_to_mover(t) for t in tickers[:MOVERS_LIMIT]]

    async def top_gainers(self) -> list[MoverEntry]:
        return await self._movers("gainers")

    async def top_losers(self) -> list[MoverEntry]:
        return await self._movers("losers")

    async def most_active(self) -> list[MoverEntry]:
        """Highest-volume tickers. Re-sorted locally; upstream order is not reliable."""
        try:
            tickers = await self._provider.get_most_active()
        except NotFoundError:
            return []
        except ProviderError as e:
            self._error_mapper.raise_http(e, operation="most active stocks")
        movers = [snapshot_to_mover(t) for t in tickers]
        movers.sort(key=lambda m: m.volume, reverse=True)
        return movers[:MOST_ACTIVE_LIMIT]

    async def sectors(self) -> list[SectorEntry]:
        """Change percent per sector ETF. Any failing ETF fails the response."""
        try:
            snapshots = await gather_strict(
                *(self._provider.get_snapshot(etf) for _, etf in SECTOR_ETFS)
            )
        except ProviderError as e:
            self._error_mapper.raise_http(e, operation="sector data")
        return [
            SectorEntry(
                name=name,
                change_percent=first_present(snapshot.get("todaysChangePerc"), default=0),
            )
            for (name, _), snapshot in zip(SECTOR_ETFS, snapshots)
        ]

    async def indices(self) -> list[IndexEntry]:
        """Headline index ETFs; an index whose snapshot fails is left out."""
        snapshots = await gather_settled(
            (self._provider.get_snapshot(etf) for _, etf in INDEX_ETFS),
            fallback=None,
            label="index snapshot",
        )
        return [
            IndexEntry(
                symbol=etf,
                name=name,
                price=first_present(
                    dig(snapshot, "day", "c"),
                    dig(snapshot, "min", "c"),
                    dig(snapshot, "prevDay", "c"),
                    default=0,
                ),
                change_percent=first_present(snapshot.get("todaysChangePerc"), default=0),
            )
            for (name, etf), snapshot in zip(INDEX_ETFS, snapshots)
            if snapshot is not None
        ]

    async def market_status(self) -> MarketStatus:
        try:
            body = await self._provider.get_market_status()
        except ProviderError as e:
            self._error_mapper.raise_http(e, operation="market status")
        return to_market_status(body)
