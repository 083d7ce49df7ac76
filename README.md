# ethscan

This package gives you typed Python records for the JSON replies of the
Etherscan API. You pass in the decoded JSON of a reply, either one object or an
array of them, and get back dataclasses with typed fields. It also has helpers
for the `0x` hex quantities, ether amounts and Unix timestamps those replies use.

## Installation

```
pip install ethscan
```

It needs only the standard library and Python 3.10 or later.

## Modules

- `ethscan.units` holds the conversion helpers:
  - `int_to_eth_string`, `eth_string_to_int32` and `eth_string_to_int64` convert between integers and `0x` hex strings.
  - `parse_int` and `parse_float` parse numbers leniently.
  - `ether_to_wei` turns a decimal ether amount into integer wei.
  - `timestamp_to_datetime` and `timestamp_to_date` turn Unix seconds into UTC values.
  - The constants `INVALID_BLOCK_NUMBER`, `INVALID_TIMESTAMP`, `INVALID_BLOCK_SIZE`, `INVALID_BLOCK_COUNT`, `INVALID_TRANSACTION_COUNT` and `WEI_PER_ETHER`.
- `ethscan.ethlog` has `Log`, a log entry emitted by a transaction, and `parse_logs`.
- `ethscan.contracts` has `ContractCreator`, `ContractExecutionStatus` and `parse_contract_creators`.
- `ethscan.withdrawals` has `BeaconChainWithdrawal` and `parse_withdrawals`.
- `ethscan.accounts` has `AccountBalance`, `MinedBlock`, `parse_account_balances` and `parse_mined_blocks`.
- `ethscan.dailyrewards` has `DailyBlockCountRewards`.
- `ethscan.dailygas` has `DailyGasLimit`.
- `ethscan.dailyblocks` has `DailyBlockRewards`, `DailyBlockSize` and `DailyBlockTime`.

Each record class has a `from_json` classmethod. Each `parse_*` function takes
a JSON array. If it gets anything other than an array, it returns an empty list.

## Usage

```python
from ethscan.units import eth_string_to_int32, int_to_eth_string, ether_to_wei
from ethscan.ethlog import Log
from ethscan.dailyblocks import DailyBlockRewards

eth_string_to_int32("0x10d4f")   # 68943
int_to_eth_string(68943)         # '0x10d4f'
ether_to_wei("1.5")              # 1500000000000000000

log = Log.from_json({"blockNumber": "0x5c29fb", "topics": ["0xabc"]})
log.is_valid                     # True
log.block_number                 # 6040059
log.block_number_string          # '0x5c29fb'

day = DailyBlockRewards.from_json(
    {"UTCDate": "2019-01-01", "unixTimeStamp": "1546300800", "blockRewards_Eth": "15300.65625"}
)
day.date                         # datetime.date(2019, 1, 1)
day.block_rewards                # 15300656250000000000000 (wei)
```

If a field is missing from the reply, the record gets an invalid default
instead of raising an error. A missing block number becomes `-1`, and a missing
timestamp also becomes `-1`. A malformed number becomes `0`. Check a record's
`is_valid` property to see whether it holds real data. `is_valid` is a
property, not a method.

Ether and wei amounts are stored as plain `int` values in wei.

## What it does not do

- It makes no HTTP requests and has no API client. You fetch and decode the
  replies yourself.
- The only JSON-RPC proxy reply it parses is the log entry (`Log`). It has no
  records for these proxy replies:
  - the JSON-RPC envelope (`jsonrpc`, `id`, `error`),
  - the block number,
  - the gas price,
  - the transaction count,
  - transactions,
  - transaction receipts,
  - blocks.
- It has no command-line tool.

## Tests

```
pip install -e .[test]
pytest
```