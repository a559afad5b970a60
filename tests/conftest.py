"""Shared fixtures: a scripted Polygon upstream and a scripted AI provider."""
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from stock_analyzer_api.config import Settings
from stock_analyzer_api.main import create_app
from stock_analyzer_api.providers import (PolygonProvider,
                                          TextGenerationProviderABC)

POLYGON_TEST_URL = "https://polygon.test"
POLYGON_TEST_KEY = "polygon-secret-key"

Reply = str | Exception | Callable[[str], str]


class FakePolygon:
    """Routes upstream paths to canned (status, body) pairs; unknown paths 404."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any] | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def fail(self, path: str, exc: Exception) -> None:
        self.routes[path] = exc

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"status": "NOT_FOUND"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        return httpx.Response(status, json=body)

    def provider(self) -> PolygonProvider:
        return PolygonProvider(
            api_key=POLYGON_TEST_KEY,
            base_url=POLYGON_TEST_URL,
            transport=httpx.MockTransport(self.handler),
        )


class FakeAI(TextGenerationProviderABC):
    """Answers prompts by the first matching substring rule, else `default`."""

    def __init__(self, default: Reply = "") -> None:
        self.default = default
        self.rules: list[tuple[str, Reply]] = []
        self.prompts: list[str] = []
        self.closed = False

    def when(self, needle: str, reply: Reply) -> None:
        self.rules.append((needle, reply))

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = next((r for needle, r in self.rules if needle in prompt), self.default)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            reply = reply(prompt)
        return reply.strip()

    async def close(self) -> None:
        self.closed = True


def snapshot_body(ticker: str, **overrides: Any) -> dict[str, Any]:
    snapshot = {
        "ticker": ticker,
        "todaysChange": 1.5,
        "todaysChangePerc": 0.79,
        "day": {"o": 189.0, "h": 192.5, "l": 188.1, "c": 191.2, "v": 51_000_000},
        "min": {"o": 191.0, "h": 191.4, "l": 190.9, "c": 191.1, "v": 12_000},
        "prevDay": {"c": 189.7},
        "lastTrade": {"p": 191.25},
    }
    snapshot.update(overrides)
    return {"status": "OK", "ticker": snapshot}


def news_body(*titles: str) -> dict[str, Any]:
    return {
        "status": "OK",
        "results": [
            {
                "title": title,
                "article_url": f"https://news.test/{i}",
                "published_utc": f"2026-10-1{i}T12:00:00Z",
                "publisher": {"name": "Wire"},
            }
            for i, title in enumerate(titles)
        ],
    }


@pytest.fixture
def fake_polygon() -> FakePolygon:
    return FakePolygon()


@pytest.fixture
def fake_ai() -> FakeAI:
    return FakeAI()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="gemini-test-key",
        polygon_api_key=POLYGON_TEST_KEY,
        cors_origin="http://localhost:5173",
    )


@pytest.fixture
def make_client(fake_polygon: FakePolygon, fake_ai: FakeAI, settings: Settings):
    """Factory for a TestClient; pass Settings to override limits or CORS."""
    clients: list[TestClient] = []

    def _make(app_settings: Settings | None = None) -> TestClient:
        app = create_app(
            app_settings or settings,
            market_provider=fake_polygon.provider(),
            ai_provider=fake_ai,
        )
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


