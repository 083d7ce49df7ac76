"""Account balances and blocks validated by an address."""

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
    """Parse a decimal string field; 0 when it is malformed or out of range."""
    number = parse_int(_as_str(value, default_text), 10)
    return number if low <= number <= high else 0


def _parse_wei(value: Any) -> int:
    """Parse an amount of wei given as a decimal string; 0 when it is not one."""
    return max(parse_int(_as_str(value), 10), 0)


@dataclass
class AccountBalance:
    """An address together with its balance in wei."""

    account: str = ""
    balance: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "AccountBalance":
        """Build a balance record from a decoded JSON object."""
        obj = data if isinstance(data, Mapping) else {}
        return cls(
            account=_as_str(obj.get("account")),
            balance=_parse_wei(obj.get("balance")),
        )

    @property
    def is_valid(self) -> bool:
        """True when the account address is known."""
        return bool(self.account)

    def __str__(self) -> str:
        return f"AccountBalance(account={self.account}; balance={self.balance} wei)"


@dataclass
class MinedBlock:
    """A block validated by an address, with the reward paid for it in wei."""

    block_number: int = INVALID_BLOCK_NUMBER
    timestamp_integer: int = INVALID_TIMESTAMP
    block_reward: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "MinedBlock":
        """Build a block record from a decoded JSON object."""
        obj = data if isinstance(data, Mapping) else {}
        return cls(
            block_number=_parse_decimal(
                obj.get("blockNumber"), _INT32_MIN, _INT32_MAX, str(INVALID_BLOCK_NUMBER)
            ),
            timestamp_integer=_parse_decimal(
                obj.get("timeStamp"), _INT64_MIN, _INT64_MAX, str(INVALID_TIMESTAMP)
            ),
            block_reward=_parse_wei(obj.get("blockReward")),
        )

    @property
    def is_valid(self) -> bool:
        """True when the record carries a block number."""
        return self.block_number != INVALID_BLOCK_NUMBER

    @property
    def timestamp(self) -> datetime:
        """Time of the block, in UTC."""
        return timestamp_to_datetime(self.timestamp_integer)

    def __str__(self) -> str:
        return f"Block(blockNumber={self.block_number}; timeStamp={self.timestamp.isoformat()})"


def parse_account_balances(data: Any) -> list[AccountBalance]:
    """Decode a JSON array of balance records; anything but an array gives an empty list."""
    if not isinstance(data, list):
        return []
    return [AccountBalance.from_json(item) for item in data]


def parse_mined_blocks(data: Any) -> list[MinedBlock]:
    """Decode a JSON array of block records; anything but an array gives an empty list."""
    if not isinstance(data, list):
        return []
    return [MinedBlock.from_json(item) for item in data]