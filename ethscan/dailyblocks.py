"""Daily block rewards, average block size and average block time."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from .units import (
    INVALID_BLOCK_SIZE,
    INVALID_TIMESTAMP,
    ether_to_wei,
    parse_float,
    parse_int,
    timestamp_to_date,
)

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _as_object(data: Any) -> Mapping:
    return data if isinstance(data, Mapping) else {}


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _parse_timestamp(value: Any) -> int:
    """Read the ``unixTimeStamp`` string; -1 when absent, 0 when malformed."""
    number = parse_int(_as_str(value, str(INVALID_TIMESTAMP)), 10)
    return number if _INT64_MIN <= number <= _INT64_MAX else 0


def _json_int(value: Any, default: int) -> int:
    """Read a JSON number holding a 32-bit integer; the default for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not value.is_integer():
        return default
    number = int(value)
    return number if _INT32_MIN <= number <= _INT32_MAX else default


@dataclass
class DailyBlockRewards:
    """Rewards paid to block producers in one day, in wei."""

    utc_date: str = ""
    timestamp_integer: int = INVALID_TIMESTAMP
    block_rewards: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "DailyBlockRewards":
        """Build a daily record from a decoded JSON object."""
        obj = _as_object(data)
        return cls(
            utc_date=_as_str(obj.get("UTCDate")),
            timestamp_integer=_parse_timestamp(obj.get("unixTimeStamp")),
            block_rewards=ether_to_wei(_as_str(obj.get("blockRewards_Eth"))),
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
        return f"DailyBlockRewards(utcDate={self.utc_date}; blockRewards={self.block_rewards} wei)"


@dataclass
class DailyBlockSize:
    """Average size of the blocks of one day, in bytes."""

    utc_date: str = ""
    timestamp_integer: int = INVALID_TIMESTAMP
    block_size: int = INVALID_BLOCK_SIZE

    @classmethod
    def from_json(cls, data: Any) -> "DailyBlockSize":
        """Build a daily record from a decoded JSON object."""
        obj = _as_object(data)
        return cls(
            utc_date=_as_str(obj.get("UTCDate")),
            timestamp_integer=_parse_timestamp(obj.get("unixTimeStamp")),
            block_size=_json_int(obj.get("blockSize_bytes"), INVALID_BLOCK_SIZE),
        )

    @property
    def is_valid(self) -> bool:
        """True when the record carries a block size."""
        return self.block_size != INVALID_BLOCK_SIZE

    @property
    def date(self) -> date:
        """The UTC day the record describes."""
        return timestamp_to_date(self.timestamp_integer)

    def __str__(self) -> str:
        return f"DailyBlockSize(utcDate={self.utc_date}; blockSize={self.block_size})"


@dataclass
class DailyBlockTime:
    """Average time, in seconds, for a block to be included in the chain on one day."""

    utc_date: str = ""
    timestamp_integer: int = INVALID_TIMESTAMP
    block_time: float = 0.0

    @classmethod
    def from_json(cls, data: Any) -> "DailyBlockTime":
        """Build a daily record from a decoded JSON object."""
        obj = _as_object(data)
        return cls(
            utc_date=_as_str(obj.get("UTCDate")),
            timestamp_integer=_parse_timestamp(obj.get("unixTimeStamp")),
            block_time=parse_float(_as_str(obj.get("blockTime_sec"))),
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
        return f"DailyBlockTime(utcDate={self.utc_date}; blockTime={self.block_time:g})"