"""Main module for the stock analyzer API service."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stock_analyzer_api.config import Settings
from stock_analyzer_api.providers import (GeminiProvider,
                                          MarketDataProviderABC,
                                          PolygonProvider,
                                          ProviderErrorMapper,
                                          TextGenerationProviderABC)
from stock_analyzer_api.rate_limit import RateLimitMiddleware, per_minutes
from stock_analyzer_api.routers import (ai_router, market_router, news_router,
                                        stocks_router)
from stock_analyzer_api.schemas import ErrorBody
from stock_analyzer_api.services import (InsightsService,
                                         MarketOverviewService, NewsService,
                                         StocksService)

logger = logging.getLogger(__name__)


def _wire_services(
    fastapi_app: FastAPI,
    market_provider: MarketDataProviderABC,
    ai_provider: TextGenerationProviderABC,
) -> None:
    """Create per-domain services and attach them to app.state (composition root)."""
    insights_service = InsightsService(
        ai_provider, ProviderErrorMapper(resource_name="Insight", api_name="Gemini")
    )
    fastapi_app.state.insights_service = insights_service
    fastapi_app.state.stocks_service = StocksService(
        market_provider, ProviderErrorMapper(resource_name="Stock", api_name="Polygon")
    )
    fastapi_app.state.market_service = MarketOverviewService(
        market_provider, ProviderErrorMapper(resource_name="Market data", api_name="Polygon")
    )
    fastapi_app.state.news_service = NewsService(
        market_provider,
        insights_service,
        ProviderErrorMapper(resource_name="News", api_name="Polygon"),
    )


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = next((str(part) for part in reversed(first.get("loc", ())) if isinstance(part, str)), None)
    message = first.get("msg", "Invalid request")
    return f"{field}: {message}" if field and field != "body" else message


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": detail}."""
    return JSONResponse(
        ErrorBody(error=str(exc.detail)).model_dump(),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed client input is a 400 carrying the first failure's message."""
    return JSONResponse(
        ErrorBody(error=_first_validation_message(exc)).model_dump(), status_code=400
    )


def create_app(
    settings: Settings | None = None,
    *,
    market_provider: MarketDataProviderABC | None = None,
    ai_provider: TextGenerationProviderABC | None = None,
) -> FastAPI:
    """Build the FastAPI app.

    Args:
        settings: Configuration; read from the environment when omitted.
        market_provider: Market data provider to use instead of Polygon.
        ai_provider: Text-generation provider to use instead of Gemini.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Create providers and services at startup; close providers on shutdown."""
        settings.warn_if_incomplete()
        stocks_provider = market_provider or PolygonProvider(
            api_key=settings.polygon_api_key, base_url=settings.polygon_base_url
        )
        text_provider = ai_provider or GeminiProvider(
            api_key=settings.gemini_api_key, model=settings.gemini_model
        )
        _wire_services(fastapi_app, stocks_provider, text_provider)

        # Keep provider refs for clean shutdown
        fastapi_app.state.providers_to_close = [stocks_provider, text_provider]

        yield

        for provider in fastapi_app.state.providers_to_close:
            try:
                await provider.close()
            except Exception as exc:  # pylint: disable=broad-except
                logger.warning("Error closing provider %s: %s", type(provider).__name__, exc)

    fastapi_app = FastAPI(
        title="Stock Analyzer API",
        description="Polygon market data and Gemini insights for the stock dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.settings = settings

    # Last added runs first: CORS wraps the limiter so 429s carry CORS headers.
    fastapi_app.add_middleware(
        RateLimitMiddleware,
        limit=per_minutes(settings.rate_limit_max, settings.rate_limit_window_minutes),
        path_prefix="/api",
    )
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    fastapi_app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    fastapi_app.add_exception_handler(RequestValidationError, validation_exception_handler)

    fastapi_app.include_router(stocks_router)
    fastapi_app.include_router(market_router)
    fastapi_app.include_router(news_router)
    fastapi_app.include_router(ai_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for `poetry run start`."""
    settings: Settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Backend starting on http://%s:%d", settings.host, settings.port)
    uvicorn.run("stock_analyzer_api.main:app", host=settings.host, port=settings.port)
