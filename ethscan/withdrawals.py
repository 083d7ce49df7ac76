"""Beacon chain withdrawals made to an address."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .units import INVALID_BLOCK_NUMBER, INVALID_TIMESTAMP, parse_int, timestamp_to_datetime

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _parse_decimal(value: Any, low: int, high: int, default_text: str = "") -> int:
    number = parse_int(_as_str(value, default_text), 10)
    return number if low <= number <= high else 0


def _parse_amount(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    return max(parse_int(_as_str(value), 10), 0)


@dataclass
class BeaconChainWithdrawal:
    """One withdrawal from the beacon chain."""

    withdrawal_index: int = 0
    validator_index: int = 0
    address: str = ""
    amount: int = 0
    block_number: int = INVALID_BLOCK_NUMBER
    timestamp_integer: int = INVALID_TIMESTAMP

    @classmethod
    def from_json(cls, data: Any) -> "BeaconChainWithdrawal":
        """Build a withdrawal from a decoded JSON object."""
        obj = data if isinstance(data, Mapping) else {}
        return cls(
            withdrawal_index=_parse_decimal(obj.get("withdrawalIndex"), _INT32_MIN, _INT32_MAX),
            validator_index=_parse_decimal(obj.get("validatorIndex"), _INT32_MIN, _INT32_MAX),
            address=_as_str(obj.get("address")),
            amount=_parse_amount(obj.get("amount")),
            block_number=_parse_decimal(
                obj.get("blockNumber"), _INT32_MIN, _INT32_MAX, str(INVALID_BLOCK_NUMBER)
            ),
            timestamp_integer=_parse_decimal(
                obj.get("timestamp"), _INT64_MIN, _INT64_MAX, str(INVALID_TIMESTAMP)
            ),
        )

    @property
    def is_valid(self) -> bool:
        """True when the withdrawal carries a block number."""
        return self.block_number != INVALID_BLOCK_NUMBER

    @property
    def timestamp(self) -> datetime:
        """Time of the withdrawal, in UTC."""
        return timestamp_to_datetime(self.timestamp_integer)

    def __str__(self) -> str:
        return (
            f"BeaconChainWithdrawal(blockNumber={self.block_number}; "
            f"timeStamp={self.timestamp.isoformat()}; amount={self.amount})"
        )


def parse_withdrawals(data: Any) -> list[BeaconChainWithdrawal]:
    """Decode a JSON array of withdrawals; anything but an array gives an empty list."""
    if not isinstance(data, list):
        return []
    return [BeaconChainWithdrawal.from_json(item) for item in data]