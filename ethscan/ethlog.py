"""Log entries produced by contract execution, as returned by the proxy endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .units import INVALID_BLOCK_NUMBER, int_to_eth_string, parse_int

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _int32(value: Any, default_text: str = "") -> int:
    """Parse a string field with automatic base detection; 0 when it is not a 32-bit integer."""
    number = parse_int(_as_str(value, default_text), 0)
    return number if _INT32_MIN <= number <= _INT32_MAX else 0


@dataclass
class Log:
    """One log object emitted by a transaction."""

    removed: bool = True
    log_index: int = 0
    transaction_index: int = 0
    transaction_hash: str = ""
    block_hash: str = ""
    block_number: int = INVALID_BLOCK_NUMBER
    address: str = ""
    data: str = ""
    topics: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "Log":
        """Build a log from a decoded JSON object."""
        obj = data if isinstance(data, Mapping) else {}
        topics = obj.get("topics")
        return cls(
            removed=obj.get("removed") is True,
            log_index=_int32(obj.get("logIndex")),
            transaction_index=_int32(obj.get("transactionIndex")),
            transaction_hash=_as_str(obj.get("transactionHash")),
            block_hash=_as_str(obj.get("blockHash")),
            block_number=_int32(obj.get("blockNumber"), str(INVALID_BLOCK_NUMBER)),
            address=_as_str(obj.get("address")),
            data=_as_str(obj.get("data")),
            topics=[_as_str(topic) for topic in topics] if isinstance(topics, list) else [],
        )

    @property
    def is_valid(self) -> bool:
        """True when the log carries a block number."""
        return self.block_number != INVALID_BLOCK_NUMBER

    @property
    def log_index_string(self) -> str:
        return int_to_eth_string(self.log_index)

    @property
    def transaction_index_string(self) -> str:
        return int_to_eth_string(self.transaction_index)

    @property
    def block_number_string(self) -> str:
        return int_to_eth_string(self.block_number)

    def __str__(self) -> str:
        return f"Log(blockNumber={self.block_number}; transactionHash={self.transaction_hash};)"


def parse_logs(data: Any) -> list[Log]:
    """Decode a JSON array of log objects; anything but an array gives an empty list."""
    if not isinstance(data, list):
        return []
    return [Log.from_json(item) for item in data]