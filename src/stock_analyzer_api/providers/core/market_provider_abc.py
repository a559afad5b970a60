"""Abstract base class for market data providers."""
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Literal

MoverDirection = Literal["gainers", "losers"]


class MarketDataProviderABC(ABC):
    """Base interface for market data providers.

    Methods return the provider's decoded primary payload. Implementations raise
    NotFoundError when upstream has no data and UpstreamError for anything else
    that went wrong; normalization into API schemas happens in the services.
    """

    @abstractmethod
    async def get_snapshot(self, symbol: str) -> dict[str, Any]:
        """Fetch the point-in-time snapshot for one ticker."""

    @abstractmethod
    async def get_ticker_details(self, symbol: str) -> dict[str, Any]:
        """Fetch reference metadata (name, exchange, market cap...) for one ticker."""

    @abstractmethod
    async def get_aggregates(
        self,
        symbol: str,
        multiplier: int,
        timespan: str,
        start: date,
        end: date,
    ) -> list[dict[str, Any]]:
        """Fetch OHLCV bars between two calendar dates, ascending."""

    @abstractmethod
    async def search_tickers(self, query: str) -> list[dict[str, Any]]:
        """Search active tickers by free-text query."""

    @abstractmethod
    async def get_movers(self, direction: MoverDirection) -> list[dict[str, Any]]:
        """Fetch today's gainers or losers snapshots."""

    @abstractmethod
    async def get_most_active(self) -> list[dict[str, Any]]:
        """Fetch snapshots requested in descending volume order."""

    @abstractmethod
    async def get_news(self, ticker: str | None = None) -> list[dict[str, Any]]:
        """Fetch the latest news articles, market-wide or for one ticker."""

    @abstractmethod
    async def get_market_status(self) -> dict[str, Any]:
        """Fetch the current exchange open/closed status."""

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "MarketDataProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
