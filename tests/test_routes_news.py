from conftest import news_body
from stock_analyzer_api.providers import UpstreamError


def _sentiment_for(prompt: str) -> str:
    if "beats" in prompt:
        return "Positive"
    if "plunges" in prompt:
        return " Negative \n"
    return "Mixed, leaning Positive!"


def test_top_news_tags_each_headline(client, fake_polygon, fake_ai):
    fake_polygon.add(
        "/v2/reference/news",
        news_body("Apple beats estimates", "Oil plunges", "Markets await Fed"),
    )
    fake_ai.default = _sentiment_for

    r = client.get("/api/news/top")

    assert r.status_code == 200
    body = r.json()
    assert [item["sentiment"] for item in body] == ["Positive", "Negative", "Neutral"]
    assert body[0] == {
        "title": "Apple beats estimates",
        "url": "https://news.test/0",
        "published": "2026-10-10T12:00:00Z",
        "source": "Wire",
        "sentiment": "Positive",
    }
    assert "ticker" not in fake_polygon.requests[0].url.params


def test_failing_sentiment_call_only_affects_its_headline(client, fake_polygon, fake_ai):
    fake_polygon.add(
        "/v2/reference/news",
        news_body("Apple beats estimates", "Chipmaker outage", "Bank beats forecasts"),
    )
    fake_ai.default = _sentiment_for
    fake_ai.when("Chipmaker outage", UpstreamError("quota exceeded", status_code=429))

    r = client.get("/api/news/top")

    assert r.status_code == 200
    body = r.json()
    assert len(body) == 3
    assert [item["sentiment"] for item in body] == ["Positive", "Neutral", "Positive"]
    assert body[1]["title"] == "Chipmaker outage"


def test_top_news_truncated_to_five(client, fake_polygon, fake_ai):
    fake_polygon.add("/v2/reference/news", news_body(*[f"Headline {i}" for i in range(7)]))
    fake_ai.default = "Neutral"

    r = client.get("/api/news/top")

    assert len(r.json()) == 5
    assert len(fake_ai.prompts) == 5


def test_top_news_none_found_is_404(client, fake_polygon):
    fake_polygon.add("/v2/reference/news", {"status": "OK", "results": []})
    r = client.get("/api/news/top")
    assert r.status_code == 404
    assert r.json() == {"error": "News not found"}


def test_symbol_news_uses_published_utc(client, fake_polygon, fake_ai):
    fake_polygon.add("/v2/reference/news", news_body("Tesla beats deliveries"))
    fake_ai.default = _sentiment_for

    r = client.get("/api/news/tsla")

    assert r.status_code == 200
    assert r.json() == [
        {
            "title": "Tesla beats deliveries",
            "url": "https://news.test/0",
            "published_utc": "2026-10-10T12:00:00Z",
            "source": "Wire",
            "sentiment": "Positive",
        }
    ]
    assert fake_polygon.requests[0].url.params["ticker"] == "TSLA"


def test_symbol_news_none_found_is_404(client):
    r = client.get("/api/news/ZZZZ")
    assert r.status_code == 404
    assert r.json() == {"error": "News 'ZZZZ' not found"}


def test_symbol_news_invalid_symbol_is_400(client):
    assert client.get("/api/news/NOT-A-TICKER").status_code == 400


def test_news_upstream_failure_is_500(client, fake_polygon):
    fake_polygon.add("/v2/reference/news", {}, status=500)
    r = client.get("/api/news/AAPL")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch news from Polygon"}
