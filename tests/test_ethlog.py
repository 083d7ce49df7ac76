import pytest

from ethscan.ethlog import Log, parse_logs

SAMPLE = {
    "address": "0x0000000000000000000000000000000000000abc",
    "topics": [
        "0x" + "a" * 64,
        "0x" + "b" * 64,
    ],
    "data": "0x" + "0" * 64,
    "blockNumber": "0x1b4",
    "transactionHash": "0x" + "c" * 64,
    "transactionIndex": "0x2",
    "blockHash": "0x" + "d" * 64,
    "logIndex": "0x0",
    "removed": False,
}


def test_default_log_is_invalid():
    log = Log()
    assert not log.is_valid
    assert log.block_number == -1
    assert log.removed is True
    assert log.topics == []


def test_from_json_reads_all_fields():
    log = Log.from_json(SAMPLE)
    assert log.is_valid
    assert log.address == SAMPLE["address"]
    assert log.data == SAMPLE["data"]
    assert log.transaction_hash == SAMPLE["transactionHash"]
    assert log.block_hash == SAMPLE["blockHash"]
    assert log.topics == SAMPLE["topics"]
    assert log.removed is False


def test_hex_fields_round_trip_to_strings():
    log = Log.from_json(SAMPLE)
    assert log.block_number_string == SAMPLE["blockNumber"]
    assert log.log_index_string == SAMPLE["logIndex"]
    assert log.transaction_index_string == SAMPLE["transactionIndex"]


def test_block_number_value():
    assert Log.from_json(SAMPLE).block_number == 436


def test_missing_block_number_is_invalid():
    data = {k: v for k, v in SAMPLE.items() if k != "blockNumber"}
    log = Log.from_json(data)
    assert not log.is_valid
    assert log.block_number == -1


def test_empty_block_number_string_parses_to_zero():
    log = Log.from_json({**SAMPLE, "blockNumber": ""})
    assert log.block_number == 0
    assert log.is_valid


def test_removed_true_is_read():
    assert Log.from_json({**SAMPLE, "removed": True}).removed is True


def test_removed_missing_means_false():
    data = {k: v for k, v in SAMPLE.items() if k != "removed"}
    assert Log.from_json(data).removed is False


def test_non_string_topics_become_empty():
    log = Log.from_json({**SAMPLE, "topics": ["0x01", 5, None]})
    assert log.topics == ["0x01", "", ""]


def test_out_of_range_index_becomes_zero():
    log = Log.from_json({**SAMPLE, "logIndex": "0x100000000"})
    assert log.log_index == 0


@pytest.mark.parametrize("data", [None, "text", 3, []])
def test_from_json_with_non_object_is_invalid(data):
    log = Log.from_json(data)
    assert not log.is_valid
    assert log.address == ""


def test_parse_logs_list():
    logs = parse_logs([SAMPLE, {**SAMPLE, "blockNumber": "0x1b5"}])
    assert len(logs) == 2
    assert all(log.is_valid for log in logs)
    assert logs[1].block_number == logs[0].block_number + 1


def test_parse_logs_non_list_is_empty():
    assert parse_logs({"a": 1}) == []
    assert parse_logs(None) == []