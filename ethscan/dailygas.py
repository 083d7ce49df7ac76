"""Daily average gas limit."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from .units import INVALID_TIMESTAMP, parse_int, timestamp_to_date

_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _parse_int64(value: Any, default_text: str = "") -> int:
    number = parse_int(_as_str(value, default_text), 10)
    return number if _INT64_MIN <= number <= _INT64_MAX else 0


@dataclass
class DailyGasLimit:
    """Average gas limit of the blocks of one day."""

    utc_date: str = ""
    timestamp_integer: int = INVALID_TIMESTAMP
    gas_limit: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "DailyGasLimit":
        """Build a daily record from a decoded JSON object."""
        obj = data if isinstance(data, Mapping) else {}
        return cls(
            utc_date=_as_str(obj.get("UTCDate")),
            timestamp_integer=_parse_int64(obj.get("unixTimeStamp"), str(INVALID_TIMESTAMP)),
            gas_limit=_parse_int64(obj.get("gasLimit")),
        )

    @property
    def is_valid(self) -> bool:
        """True when the record carries a timestamp."""
        return self.timestamp_integer != INVALID_TIMESTAMP

    @property
    def date(self) -> date:
        """The UTC day the record describes."""
        return timestamp_to_date(self.timestamp_integer)

    def __str__(self) -> str:
        return f"DailyGasLimit(utcDate={self.utc_date}; gasLimit={self.gas_limit})"