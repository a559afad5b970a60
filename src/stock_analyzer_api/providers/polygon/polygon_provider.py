"""Polygon.io market data provider for US stocks."""
import logging
from datetime import date
from typing import Any

import httpx

from stock_analyzer_api.providers.core import (MarketDataProviderABC,
                                               MoverDirection, NotFoundError,
                                               UpstreamError,
                                               normalize_stock_symbol)
from stock_analyzer_api.providers.polygon.models import (
    PolygonAggregatesParams, PolygonMostActiveParams, PolygonNewsParams,
    PolygonSearchParams)

logger = logging.getLogger(__name__)

SNAPSHOT_PATH = "/v2/snapshot/locale/us/markets/stocks"


class PolygonProvider(MarketDataProviderABC):
    """Market data provider for stocks via the Polygon REST API.

    Uses httpx for REST calls. The API key travels in the Authorization header
    so it never appears in request URLs or access logs.
    """

    BASE_URL = "https://api.polygon.io"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Polygon provider.

        Args:
            api_key: Polygon API key.
            base_url: Override for the API root (defaults to BASE_URL).
            transport: Optional httpx transport (tests pass httpx.MockTransport).
        """
        headers: dict[str, str] = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.AsyncClient(
            base_url=base_url or self.BASE_URL,
            headers=headers,
            transport=transport,
        )

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET a path and decode the JSON body, mapping failures to provider errors."""
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Polygon request to {path} failed: {e}") from e
        if response.status_code == 404:
            raise NotFoundError(f"Polygon returned 404 for {path}")
        if response.is_error:
            raise UpstreamError(
                f"Polygon request to {path} failed", status_code=response.status_code
            )
        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError(f"Polygon returned malformed JSON for {path}") from e
        if not isinstance(body, dict):
            raise UpstreamError(f"Polygon returned unexpected body for {path}")
        return body

    @staticmethod
    def _require(body: dict[str, Any], key: str, what: str) -> Any:
        """Return body[key]; NotFoundError if it is absent or empty."""
        payload = body.get(key)
        if not payload:
            raise NotFoundError(f"No {what} returned by Polygon")
        return payload

    async def get_snapshot(self, symbol: str) -> dict[str, Any]:
        sym = normalize_stock_symbol(symbol)
        body = await self._get(f"{SNAPSHOT_PATH}/tickers/{sym}")
        return self._require(body, "ticker", f"snapshot for '{sym}'")

    async def get_ticker_details(self, symbol: str) -> dict[str, Any]:
        sym = normalize_stock_symbol(symbol)
        body = await self._get(f"/v3/reference/tickers/{sym}")
        return self._require(body, "results", f"reference data for '{sym}'")

    async def get_aggregates(
        self,
        symbol: str,
        multiplier: int,
        timespan: str,
        start: date,
        end: date,
    ) -> list[dict[str, Any]]:
        """Fetch bars for [start, end]; dates are sent as YYYY-MM-DD."""
        sym = normalize_stock_symbol(symbol)
        path = (
            f"/v2/aggs/ticker/{sym}/range/{multiplier}/{timespan}/"
            f"{start.isoformat()}/{end.isoformat()}"
        )
        body = await self._get(path, params=PolygonAggregatesParams().model_dump())
        return self._require(body, "results", f"bars for '{sym}'")

    async def search_tickers(self, query: str) -> list[dict[str, Any]]:
        params = PolygonSearchParams().model_dump() | {"search": query}
        body = await self._get("/v3/reference/tickers", params=params)
        if "results" not in body:
            raise NotFoundError(f"No search results for '{query}'")
        return body["results"] or []

    async def get_movers(self, direction: MoverDirection) -> list[dict[str, Any]]:
        body = await self._get(f"{SNAPSHOT_PATH}/{direction}")
        return self._require(body, "tickers", direction)

    async def get_most_active(self) -> list[dict[str, Any]]:
        body = await self._get(
            f"{SNAPSHOT_PATH}/tickers", params=PolygonMostActiveParams().model_dump()
        )
        return self._require(body, "tickers", "most active tickers")

    async def get_news(self, ticker: str | None = None) -> list[dict[str, Any]]:
        params = PolygonNewsParams(
            ticker=normalize_stock_symbol(ticker) if ticker else None
        ).model_dump(exclude_none=True)
        body = await self._get("/v2/reference/news", params=params)
        return self._require(body, "results", "news")

    async def get_market_status(self) -> dict[str, Any]:
        return await self._get("/v1/marketstatus/now")

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
