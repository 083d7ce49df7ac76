"""Conversions between the textual forms used by the explorer API and Python values."""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation

INVALID_BLOCK_NUMBER = -1
INVALID_TIMESTAMP = -1
INVALID_TRANSACTION_COUNT = -1
INVALID_BLOCK_SIZE = -1
INVALID_BLOCK_COUNT = -1

WEI_PER_ETHER = 10**18

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL_FLOATS = {"inf": float("inf"), "+inf": float("inf"), "-inf": float("-inf"), "nan": float("nan")}


def _parse(text: object, base: int) -> int | None:
    """Parse an integer leniently; return None when the text is not a number."""
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    lowered = stripped.lower()
    if base == 0:
        if lowered.startswith("0x"):
            base, lowered = 16, lowered[2:]
        elif lowered.startswith("0") and len(lowered) > 1:
            base, lowered = 8, lowered[1:]
        else:
            base = 10
    elif base == 16 and lowered.startswith("0x"):
        lowered = lowered[2:]
    if not 2 <= base <= 36 or not lowered:
        return None
    valid = _DIGITS[:base]
    if any(ch not in valid for ch in lowered):
        return None
    return sign * int(lowered, base)


def int_to_eth_string(value: int) -> str:
    """Format an integer as a ``0x``-prefixed lower-case hexadecimal string."""
    return "0x" + format(value, "x")


def _eth_string_to_int(text: str, low: int, high: int) -> int:
    if not isinstance(text, str) or not text.startswith("0x"):
        return -1
    value = _parse(text.replace("0x", ""), 16)
    if value is None or not low <= value <= high:
        return -1
    return value


def eth_string_to_int32(text: str) -> int:
    """Decode a ``0x`` hexadecimal string into a 32-bit integer, or -1 if it is not one."""
    return _eth_string_to_int(text, _INT32_MIN, _INT32_MAX)


def eth_string_to_int64(text: str) -> int:
    """Decode a ``0x`` hexadecimal string into a 64-bit integer, or -1 if it is not one."""
    return _eth_string_to_int(text, _INT64_MIN, _INT64_MAX)


def parse_int(text: str, base: int = 10) -> int:
    """Parse an integer in the given base (0 detects ``0x`` and octal prefixes); 0 on failure."""
    value = _parse(text, base)
    return 0 if value is None else value


def parse_float(text: str) -> float:
    """Parse a decimal number; 0.0 on failure."""
    if not isinstance(text, str):
        return 0.0
    stripped = text.strip()
    special = _SPECIAL_FLOATS.get(stripped.lower())
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(stripped):
        return 0.0
    return float(stripped)


def ether_to_wei(text: str) -> int:
    """Convert a decimal amount of ether into an integer amount of wei; 0 on failure."""
    if not isinstance(text, str) or not _FLOAT_RE.fullmatch(text.strip()):
        return 0
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        return 0
    return int(amount * WEI_PER_ETHER)


def timestamp_to_datetime(seconds: int) -> datetime:
    """Convert seconds since the Unix epoch into an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def timestamp_to_date(seconds: int) -> date:
    """Convert seconds since the Unix epoch into the UTC calendar date."""
    return timestamp_to_datetime(seconds).date()