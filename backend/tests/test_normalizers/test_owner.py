import logging

import pytest

from explorer.normalizers.owner import (
    OwnerEncoding,
    ascii_from_number_bytes,
    decode_owner,
    detect_owner_encoding,
    hex_from_number_bytes,
    owner_hex,
)

ADDRESS = "0123456789abcdefABCD"  # 20 ASCII chars


def _bytes(text: str) -> list[int]:
    return [ord(c) for c in text]


def _owner_warnings(caplog) -> list[logging.LogRecord]:
    return [
        r for r in caplog.records
        if r.name == "explorer.owner" and r.levelno == logging.WARNING
    ]


@pytest.mark.parametrize("address", ["abc123", "0xdeadbeef", "k", "a b#c:d"])
def test_legacy_address_owner_round_trip(address):
    assert decode_owner(f"AddressOwner(k#{address})") == address


@pytest.mark.parametrize("address", ["abc123", "0xdeadbeef", "k", "a b#c:d"])
def test_legacy_single_owner_round_trip(address):
    assert decode_owner(f"SingleOwner(k#{address})") == address


def test_address_owner_strips_only_one_trailing_paren():
    assert decode_owner("AddressOwner(k#abc))") == "abc)"


def test_address_owner_without_closing_paren_is_absent():
    """A prefixed string that is not closed does not fall through to SingleOwner."""
    assert decode_owner("AddressOwner(k#abc") is None
    assert decode_owner("AddressOwner(k#SingleOwner(k#abc)x") is None


def test_address_owner_takes_precedence_over_single_owner():
    raw = "AddressOwner(k#SingleOwner(k#inner))"
    assert detect_owner_encoding(raw) is OwnerEncoding.legacy_address_owner
    assert decode_owner(raw) == "SingleOwner(k#inner)"


def test_single_owner_found_anywhere_in_string():
    assert decode_owner("owner: SingleOwner(k#xyz)") == "xyz"


def test_empty_address_is_absent():
    assert decode_owner("AddressOwner(k#)") is None
    assert decode_owner("SingleOwner(k#)") is None


def test_tagged_owner_decodes_ascii(caplog):
    caplog.set_level(logging.WARNING, logger="explorer.owner")
    raw = {"AddressOwner": _bytes(ADDRESS)}
    assert detect_owner_encoding(raw) is OwnerEncoding.tagged_address_owner
    assert decode_owner(raw) == ADDRESS
    assert _owner_warnings(caplog) == []


@pytest.mark.parametrize("length", [0, 1, 5, 19, 21, 32])
def test_tagged_owner_wrong_length_is_absent_with_one_diagnostic(caplog, length):
    caplog.set_level(logging.WARNING, logger="explorer.owner")
    raw = {"AddressOwner": [65] * length}
    assert decode_owner(raw) is None
    assert len(_owner_warnings(caplog)) == 1


def test_tagged_owner_non_byte_values_are_absent(caplog):
    caplog.set_level(logging.WARNING, logger="explorer.owner")
    raw = {"AddressOwner": [300] + [65] * 19}
    assert decode_owner(raw) is None
    assert len(_owner_warnings(caplog)) == 1


def test_tagged_owner_payload_not_a_list(caplog):
    caplog.set_level(logging.WARNING, logger="explorer.owner")
    assert decode_owner({"AddressOwner": "abc"}) is None
    assert len(_owner_warnings(caplog)) == 1


def test_address_length_override():
    assert decode_owner({"AddressOwner": _bytes("abcd")}, address_length=4) == "abcd"


@pytest.mark.parametrize(
    "raw",
    [None, 42, "", "Shared", "ObjectOwner(k#abc)", {"SingleOwner": [1, 2]}, [1, 2, 3], True],
)
def test_unrecognized_owner_is_absent(raw):
    assert detect_owner_encoding(raw) is OwnerEncoding.unrecognized
    assert decode_owner(raw) is None


def test_owner_hex_for_tagged_owner():
    assert owner_hex({"AddressOwner": [0, 15, 255, 16]}) == "0x000fff10"
    # Any length, unlike ASCII decoding
    assert owner_hex({"AddressOwner": [1, 2]}) == "0x0102"


def test_owner_hex_masks_to_one_byte():
    assert hex_from_number_bytes([256 + 10, -1]) == "0x0aff"


def test_owner_hex_absent_for_string_encodings():
    assert owner_hex("AddressOwner(k#abc)") is None
    assert owner_hex({"AddressOwner": ["a", "b"]}) is None


def test_ascii_from_number_bytes():
    assert ascii_from_number_bytes([104, 105]) == "hi"
