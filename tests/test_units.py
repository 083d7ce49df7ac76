from datetime import datetime, timezone

import pytest

from ethscan.units import (
    eth_string_to_int32,
    eth_string_to_int64,
    ether_to_wei,
    int_to_eth_string,
    parse_float,
    parse_int,
    timestamp_to_date,
    timestamp_to_datetime,
)


def test_int_to_eth_string_has_prefix():
    assert int_to_eth_string(255) == "0xff"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 4096, 2**31 - 1])
def test_int32_round_trip(value):
    assert eth_string_to_int32(int_to_eth_string(value)) == value


@pytest.mark.parametrize("value", [0, 2**31, 2**40 + 7, 2**63 - 1])
def test_int64_round_trip(value):
    assert eth_string_to_int64(int_to_eth_string(value)) == value


@pytest.mark.parametrize("text", ["ff", "", "0x", "0xzz", "0x1_0", "12"])
def test_eth_string_to_int32_invalid(text):
    assert eth_string_to_int32(text) == -1


def test_eth_string_to_int32_out_of_range():
    assert eth_string_to_int32(int_to_eth_string(2**31)) == -1


def test_eth_string_to_int64_out_of_range():
    assert eth_string_to_int64(int_to_eth_string(2**64)) == -1


def test_eth_string_is_case_insensitive_in_digits():
    assert eth_string_to_int32("0xABC") == eth_string_to_int32("0xabc")


def test_parse_int_decimal():
    assert parse_int("42", 10) == 42


def test_parse_int_auto_detects_hex():
    assert parse_int("0x1f", 0) == parse_int("1f", 16)


def test_parse_int_auto_detects_octal():
    assert parse_int("017", 0) == parse_int("17", 8)


def test_parse_int_hex_accepts_prefix():
    assert parse_int("0x1f", 16) == parse_int("1f", 16)


@pytest.mark.parametrize("text", ["abc", "", "1.5", None, "1_000"])
def test_parse_int_invalid_is_zero(text):
    assert parse_int(text, 10) == 0


def test_parse_int_negative():
    assert parse_int("-42", 10) == -parse_int("42", 10)


def test_parse_float_value():
    assert parse_float("13.5") == 13.5


@pytest.mark.parametrize("text", ["", "abc", "1,5", None, "1_0"])
def test_parse_float_invalid_is_zero(text):
    assert parse_float(text) == 0.0


def test_ether_to_wei_one_ether():
    assert ether_to_wei("1") == 10**18


def test_ether_to_wei_fraction_scales():
    assert ether_to_wei("1.5") == 3 * ether_to_wei("0.5")


@pytest.mark.parametrize("text", ["", "abc", None])
def test_ether_to_wei_invalid_is_zero(text):
    assert ether_to_wei(text) == 0


def test_timestamp_epoch():
    assert timestamp_to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_timestamp_round_trip():
    seconds = 1_700_000_000
    assert timestamp_to_datetime(seconds).timestamp() == seconds


def test_timestamp_to_date_matches_datetime():
    seconds = 1_700_000_000
    assert timestamp_to_date(seconds) == timestamp_to_datetime(seconds).date()