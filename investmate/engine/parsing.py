"""Numeric parsing for the loosely-typed strings tools receive from the agent."""

import math
import re
from functools import lru_cache

from investmate.config import settings
from investmate.engine.errors import InvalidNumericInput, OutOfRangeInput

_GROUPED_RE = re.compile(r"-?\d{1,3}(,\d{3})+(\.\d+)?")
_STRAY_RE = re.compile(r"[\s_]")


@lru_cache(maxsize=settings.parse_cache_size)
def _parse_decimal(text: str) -> float:
    cleaned = text
    if cleaned.startswith("$"):
        cleaned = cleaned[1:]
    elif cleaned.startswith("-$"):
        cleaned = "-" + cleaned[2:]
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    if _STRAY_RE.search(cleaned):
        raise ValueError(text)
    if "," in cleaned:
        # Commas only as thousands separators: "1,5" is not 15.
        if not _GROUPED_RE.fullmatch(cleaned):
            raise ValueError(text)
        cleaned = cleaned.replace(",", "")
    value = float(cleaned)
    if not math.isfinite(value):
        raise ValueError(text)
    return value


def parse_decimal(value: str | int | float, field: str) -> float:
    """
    Parse an amount or rate: "5000", "$5,000.00", "7", "7.5%".
    Raises InvalidNumericInput instead of defaulting to zero.
    """
    if isinstance(value, bool):
        raise InvalidNumericInput(f"{field} must be a number, got {value!r}.", field=field)
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InvalidNumericInput(f"{field} must be finite, got {value!r}.", field=field)
        return float(value)
    text = str(value).strip()
    if not text:
        raise InvalidNumericInput(f"{field} is empty.", field=field)
    try:
        return _parse_decimal(text)
    except ValueError:
        raise InvalidNumericInput(f"{field} is not a number: {value!r}.", field=field) from None


def parse_amount(value: str | int | float, field: str) -> float:
    amount = parse_decimal(value, field)
    if amount < 0:
        raise OutOfRangeInput(f"{field} must not be negative, got {amount}.", field=field)
    return amount


def parse_whole_number(value: str | int | float, field: str) -> int:
    """Parse a count such as years. "20" and 20.0 are accepted, "20.5" is not."""
    number = parse_decimal(value, field)
    if not number.is_integer():
        raise InvalidNumericInput(f"{field} must be a whole number, got {value!r}.", field=field)
    return int(number)
