"""Utility functions shared across layers."""

from __future__ import annotations

import math
import time
import unicodedata
from collections.abc import Callable
from datetime import datetime, timedelta
from datetime import time as dt_time

# Source of "now" as epoch milliseconds. Injected so tests control time.
Clock = Callable[[], int]


def now_ms() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


def local_midnight_after(reference_ms: float, days: int) -> int:
    """Epoch ms of local midnight ``days`` calendar days after the reference day.

    Arithmetic is done on calendar dates, so a DST transition between the two
    days still lands exactly on midnight.
    """
    today = datetime.fromtimestamp(reference_ms / 1000).date()
    target = datetime.combine(today + timedelta(days=days), dt_time.min)
    return int(target.timestamp() * 1000)


def is_finite_number(value: object) -> bool:
    """True for int/float values that are finite. Booleans don't count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def as_number(value: object) -> float:
    """Leniently coerce a loosely typed value to a number.

    Missing or non-numeric values become NaN so that the record normalizer
    treats them as invalid. Whole numbers are returned as ``int``.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value)
        except ValueError:
            return math.nan
    else:
        return math.nan

    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def round_half_up(value: float) -> int:
    """Round half away from zero (2.5 -> 3), unlike the built-in round()."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def normalize_text(value: object) -> str:
    """Trim, lowercase and collapse inner whitespace for comparisons."""
    if not value:
        return ""
    return " ".join(str(value).split()).lower()


def fold_text(value: object) -> str:
    """Trim and lowercase, leaving inner whitespace as typed. Used for search."""
    if not value:
        return ""
    return str(value).strip().lower()


def clean_text(value: object) -> str:
    """Loosely typed input to trimmed text. Falsy values become empty."""
    if not value:
        return ""
    return str(value).strip()


def collation_key(value: str) -> str:
    """Accent- and case-insensitive sort key.

    Decomposes characters (NFKD) and drops combining marks, so "école" sorts
    next to "ecole" and "Zebra" after "apple".
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()
