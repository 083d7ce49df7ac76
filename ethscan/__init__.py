"""Typed records for Etherscan API replies: logs, contracts, withdrawals, accounts and daily statistics."""

__version__ = "0.0.4"