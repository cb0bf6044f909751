"""
Text extraction helpers shared by page objects and scenario assertions.

Everything here is pure: no Playwright objects, so the parsing rules can be
unit tested without a browser.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

_FIRST_INT = re.compile(r"\d+")
_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_PRICE_NOISE = re.compile(r"[^\d.,]")


def extract_first_int(text: Optional[str], default: int = 0) -> int:
    """
    Return the first integer found in `text`.

    "(3)" -> 3, "Shopping cart (12)" -> 12, "" -> default
    """
    if not text:
        return default
    match = _FIRST_INT.search(text)
    return int(match.group(0)) if match else default


def parse_price(text: Optional[str]) -> Optional[float]:
    """
    Parse a rendered price such as "$1,350.00" into a float.

    Returns None when no number can be read.
    """
    if not text:
        return None
    cleaned = _PRICE_NOISE.sub("", text).replace(",", "")
    match = _NUMBER.search(cleaned)
    return float(match.group(0)) if match else None


def numeric_prices(texts: Iterable[str]) -> List[float]:
    """Parse a list of price strings, dropping entries that are not numbers."""
    prices = (parse_price(text) for text in texts)
    return [price for price in prices if price is not None]


def is_sorted(values: Sequence[float], descending: bool = False) -> bool:
    """True if `values` is non-decreasing (or non-increasing when descending)."""
    pairs = zip(values, values[1:])
    if descending:
        return all(later <= earlier for earlier, later in pairs)
    return all(later >= earlier for earlier, later in pairs)


def slug_for(name: str) -> str:
    """
    Derive a storefront URL slug from a human readable name.

    "Cell phones" -> "cell-phones", "Camera & photo" -> "camera-photo"
    """
    words = re.sub(r"[^a-z0-9\s-]", " ", name.lower()).split()
    return "-".join(words)


def slider_offset(price: float, slider_width: float, max_price: float) -> float:
    """
    Pixel offset on a price slider proportional to `price / max_price`.

    The result is not clamped: prices above `max_price` land past the
    slider's right edge, negative prices before its left edge.
    """
    return (price / max_price) * slider_width


__all__ = [
    "extract_first_int",
    "is_sorted",
    "numeric_prices",
    "parse_price",
    "slider_offset",
    "slug_for",
]
