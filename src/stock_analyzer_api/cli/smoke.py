"""CLI to smoke-test a running stock analyzer API.

Usage:
  poetry run smoke-api health
  poetry run smoke-api quote AAPL
  poetry run smoke-api chart AAPL --range 1M --head 5
  poetry run smoke-api chat TSLA "Is TSLA a buy?"
"""
import argparse
import json
import sys
from collections.abc import Callable

import httpx

DEFAULT_BASE_URL = "http://localhost:4000"


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _get(client: httpx.Client, path: str, params: dict | None = None, head: int = 0) -> int:
    r = client.get(path, params=params)
    r.raise_for_status()
    data = r.json()
    if isinstance(data, list):
        print(f"{len(data)} results from {path}", file=sys.stderr)
        data = data[:head] if head else data
    print_json(data)
    return 0


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/")


def cmd_quote(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/api/quote/{args.symbol}")


def cmd_search(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/api/search/{args.query}", head=args.head)


def cmd_chart(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/api/chart/{args.symbol}", params={"range": args.range}, head=args.head)


def cmd_movers(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/api/{args.list}")


def cmd_sectors(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/sectors")


def cmd_indices(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/indices")


def cmd_status(client: httpx.Client, _: argparse.Namespace) -> int:
    return _get(client, "/api/market-status")


def cmd_news(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/api/news/{args.symbol or 'top'}")


def cmd_suggest(client: httpx.Client, args: argparse.Namespace) -> int:
    return _get(client, f"/api/ai/suggest/{args.symbol}")


def cmd_chat(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/api/ai/chat", json={"question": args.question, "symbol": args.symbol})
    r.raise_for_status()
    print_json(r.json())
    return 0


COMMANDS: dict[str, Callable[[httpx.Client, argparse.Namespace], int]] = {
    "health": cmd_health,
    "quote": cmd_quote,
    "search": cmd_search,
    "chart": cmd_chart,
    "movers": cmd_movers,
    "sectors": cmd_sectors,
    "indices": cmd_indices,
    "status": cmd_status,
    "news": cmd_news,
    "suggest": cmd_suggest,
    "chat": cmd_chat,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Smoke-test stock analyzer API routes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"API base URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET / health check")
    p = subparsers.add_parser("quote", help="GET /api/quote/{symbol}")
    p.add_argument("symbol", help="Ticker (e.g. AAPL, MSFT)")
    p = subparsers.add_parser("search", help="GET /api/search/{query}")
    p.add_argument("query", help="Free text (e.g. apple)")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")
    p = subparsers.add_parser("chart", help="GET /api/chart/{symbol}")
    p.add_argument("symbol", help="Ticker")
    p.add_argument("--range", default="1D", help="1D, 1W, 1M, 6M, 1Y or ALL (default: 1D)")
    p.add_argument("--head", type=int, default=0, help="Show only first N points (0 = all)")
    p = subparsers.add_parser("movers", help="GET /api/top-gainers|top-losers|most-active")
    p.add_argument("list", choices=["top-gainers", "top-losers", "most-active"])
    subparsers.add_parser("sectors", help="GET /api/sectors")
    subparsers.add_parser("indices", help="GET /api/indices")
    subparsers.add_parser("status", help="GET /api/market-status")
    p = subparsers.add_parser("news", help="GET /api/news/top or /api/news/{symbol}")
    p.add_argument("symbol", nargs="?", default=None, help="Ticker (omit for top news)")
    p = subparsers.add_parser("suggest", help="GET /api/ai/suggest/{symbol}")
    p.add_argument("symbol", help="Ticker")
    p = subparsers.add_parser("chat", help="POST /api/ai/chat")
    p.add_argument("symbol", help="Ticker the question is about")
    p.add_argument("question", help="Question text")
    return parser


def run_command(client: httpx.Client, args: argparse.Namespace) -> int:
    """Dispatch a parsed command; HTTP failures are printed and return 1."""
    try:
        return COMMANDS[args.command](client, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    with httpx.Client(base_url=args.base_url.rstrip("/"), timeout=args.timeout) as client:
        return run_command(client, args)


if __name__ == "__main__":
    sys.exit(main())
