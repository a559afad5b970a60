"""Domain concept for mapping provider exceptions to HTTP responses."""
import logging
from dataclasses import dataclass

from fastapi import HTTPException

from stock_analyzer_api.providers.core.exceptions import (NotFoundError,
                                                          UpstreamError)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps provider exceptions to HTTP (status_code, detail).

    Inject this into services to centralize error-to-HTTP mapping per domain
    (e.g. stocks, news, insights) with appropriate resource and API names.
    Upstream details are logged server-side only; clients get generic messages.
    """

    resource_name: str = "Resource"
    api_name: str = "API"

    def to_http(
        self,
        exc: Exception,
        symbol: str | None = None,
        operation: str | None = None,
    ) -> tuple[int, str]:
        """Map a provider exception to (status_code, detail) for HTTP responses.

        Args:
            exc: The exception raised by the provider or service.
            symbol: Optional symbol to include in detail (e.g. "AAPL").
            operation: What was being fetched (e.g. "quote"), used in 500 details.

        Returns:
            (status_code, detail) suitable for HTTPException(status_code=..., detail=...).
        """
        if isinstance(exc, NotFoundError):
            if symbol is None:
                return (404, f"{self.resource_name} not found")
            return (404, f"{self.resource_name} '{symbol}' not found")
        if isinstance(exc, UpstreamError):
            if operation is None:
                return (500, f"{self.api_name} error")
            return (500, f"Failed to fetch {operation} from {self.api_name}")
        return (500, "Internal server error")

    def raise_http(
        self,
        exc: Exception,
        symbol: str | None = None,
        operation: str | None = None,
    ) -> None:
        """Log, map provider exception to HTTP and raise HTTPException. Never returns."""
        status_code, detail = self.to_http(exc, symbol=symbol, operation=operation)
        if status_code >= 500:
            logger.error(
                "%s %s failed for %s: %s",
                self.api_name,
                operation or "request",
                symbol or "-",
                exc,
            )
        else:
            logger.info("%s: %s", detail, exc)
        raise HTTPException(status_code=status_code, detail=detail) from exc
