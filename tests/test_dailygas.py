from datetime import date

from ethscan.dailygas import DailyGasLimit
from ethscan.units import timestamp_to_date

SAMPLE = {"UTCDate": "2019-02-01", "unixTimeStamp": "1548979200", "gasLimit": "8001360"}


def test_from_json_fields():
    record = DailyGasLimit.from_json(SAMPLE)
    assert record.utc_date == "2019-02-01"
    assert record.timestamp_integer == 1548979200
    assert record.gas_limit == 8001360
    assert record.is_valid is True


def test_date():
    record = DailyGasLimit.from_json(SAMPLE)
    assert record.date == date(2019, 2, 1)
    assert record.date == timestamp_to_date(record.timestamp_integer)


def test_missing_timestamp_is_invalid():
    record = DailyGasLimit.from_json({"UTCDate": "2019-02-01", "gasLimit": "1"})
    assert record.timestamp_integer == -1
    assert record.is_valid is False


def test_numeric_timestamp_is_not_read():
    record = DailyGasLimit.from_json({**SAMPLE, "unixTimeStamp": 1548979200})
    assert record.is_valid is False


def test_malformed_gas_limit_is_zero():
    record = DailyGasLimit.from_json({**SAMPLE, "gasLimit": "8,001,360"})
    assert record.gas_limit == 0


def test_non_object_input():
    record = DailyGasLimit.from_json(["not", "an", "object"])
    assert record.is_valid is False
    assert record.gas_limit == 0
    assert record.utc_date == ""


def test_default_is_invalid():
    assert DailyGasLimit().is_valid is False