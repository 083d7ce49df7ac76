"""Daily block count and block rewards."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from .units import (
    INVALID_BLOCK_COUNT,
    INVALID_TIMESTAMP,
    ether_to_wei,
    parse_int,
    timestamp_to_date,
)

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _json_int(value: Any, default: int) -> int:
    """Read a JSON number holding a 32-bit integer; the default for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not value.is_integer():
        return default
    number = int(value)
    return number if _INT32_MIN <= number <= _INT32_MAX else default


@dataclass
class DailyBlockCountRewards:
    """Number of blocks mined in a day and the rewards paid for them, in wei."""

    utc_date: str = ""
    timestamp_integer: int = INVALID_TIMESTAMP
    block_count: int = INVALID_BLOCK_COUNT
    block_rewards: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "DailyBlockCountRewards":
        """Build a daily record from a decoded JSON object."""
        obj = data if isinstance(data, Mapping) else {}
        timestamp = parse_int(_as_str(obj.get("unixTimeStamp"), str(INVALID_TIMESTAMP)), 10)
        return cls(
            utc_date=_as_str(obj.get("UTCDate")),
            timestamp_integer=timestamp if _INT64_MIN <= timestamp <= _INT64_MAX else 0,
            block_count=_json_int(obj.get("blockCount"), INVALID_BLOCK_COUNT),
            block_rewards=ether_to_wei(_as_str(obj.get("blockRewards_Eth"))),
        )

    @property
    def is_valid(self) -> bool:
        """True when the record carries a block count."""
        return self.block_count != INVALID_BLOCK_COUNT

    @property
    def date(self) -> date:
        """The UTC day the record describes."""
        return timestamp_to_date(self.timestamp_integer)

    def __str__(self) -> str:
        return (
            f"DailyBlockCountRewards(utcDate={self.utc_date}; "
            f"blockRewards={self.block_rewards} wei; blockCount={self.block_count})"
        )