"""Shared utilities for market data providers."""
from typing import Any, TypeVar

T = TypeVar("T")

MAX_SYMBOL_LENGTH = 10


def normalize_stock_symbol(symbol: str) -> str:
    """Normalize a stock symbol (trimmed, uppercase)."""
    return symbol.strip().upper()


def is_valid_symbol(symbol: str) -> bool:
    """True for 1-10 ASCII alphanumeric characters."""
    return (
        0 < len(symbol) <= MAX_SYMBOL_LENGTH
        and symbol.isascii()
        and symbol.isalnum()
    )


def first_present(*candidates: T | None, default: T) -> T:
    """Return the first candidate that is not None, else default.

    Falsy values such as 0 or "" count as present.
    """
    for value in candidates:
        if value is not None:
            return value
    return default


def first_nonzero(*candidates: T | None, default: T) -> T:
    """Return the first truthy candidate, else default.

    Used for bar fields, where a 0 means the bar has not traded yet.
    """
    for value in candidates:
        if value:
            return value
    return default


def dig(data: Any, *keys: str) -> Any:
    """Walk nested dicts by key; None as soon as a level is missing or not a dict."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data
