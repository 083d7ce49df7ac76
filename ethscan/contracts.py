"""Contract creator records and contract execution status."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass
class ContractCreator:
    """Address that created a contract and the hash of the creating transaction."""

    contract_address: str = ""
    contract_creator: str = ""
    tx_hash: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "ContractCreator":
        """Build a record from a decoded JSON object."""
        obj = data if isinstance(data, Mapping) else {}
        return cls(
            contract_address=_as_str(obj.get("contractAddress")),
            contract_creator=_as_str(obj.get("contractCreator")),
            tx_hash=_as_str(obj.get("txHash")),
        )

    @property
    def is_valid(self) -> bool:
        """True when the creator address is known."""
        return bool(self.contract_creator)

    def __str__(self) -> str:
        return (
            f"ContractCreator(contractAddress={self.contract_address}; "
            f"contractCreator={self.contract_creator}; txHash={self.tx_hash})"
        )


def parse_contract_creators(data: Any) -> list[ContractCreator]:
    """Decode a JSON array of creator records; anything but an array gives an empty list."""
    if not isinstance(data, list):
        return []
    return [ContractCreator.from_json(item) for item in data]


@dataclass
class ContractExecutionStatus:
    """Whether a contract execution failed, and why."""

    is_valid: bool = False
    is_error: bool = False
    err_description: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "ContractExecutionStatus":
        """Build a status from a decoded JSON object; valid only if it has an ``isError`` field."""
        obj = data if isinstance(data, Mapping) else {}
        return cls(
            is_valid="isError" in obj,
            is_error=_as_str(obj.get("isError")) == "1",
            err_description=_as_str(obj.get("errDescription")),
        )

    def __str__(self) -> str:
        return (
            f"ContractExecutionStatus(isError={str(self.is_error).lower()}; "
            f"errDescription={self.err_description})"
        )