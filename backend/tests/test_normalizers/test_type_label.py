import pytest

from explorer.normalizers.type_label import is_type_string, normalize_type


def test_strips_std_lib_prefix():
    assert normalize_type("0x2::coin::Coin<SUI>") == "coin::Coin<SUI>"


def test_unchanged_without_prefix():
    assert normalize_type("0x3::validator::Validator") == "0x3::validator::Validator"
    assert normalize_type("") == ""


def test_prefix_removed_wherever_it_first_appears():
    assert normalize_type("vector<0x2::object::ID>") == "vector<object::ID>"


@pytest.mark.parametrize(
    "type_string",
    [
        "0x2::coin::Coin<SUI>",
        "0x2::coin::Coin<0x2::sui::SUI>",
        "0x2::0x2::x",
        "0x0x2::2::",
        "plain",
        "",
    ],
)
def test_normalize_is_idempotent(type_string):
    once = normalize_type(type_string)
    assert normalize_type(once) == once


def test_custom_prefix():
    assert normalize_type("0x1::string::String", prefix="0x1::") == "string::String"
    assert normalize_type("0x2::coin::Coin", prefix="") == "0x2::coin::Coin"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0x2::coin::Coin<SUI>", True),
        ("0xABC::mod::Thing", True),
        ("coin::Coin", False),
        ("hello world", False),
        ("0x2::", False),
        ("vector<0x2::object::ID>", True),
        ("Table<u64, 0xABC::mod::Thing>", True),
    ],
)
def test_is_type_string(value, expected):
    assert is_type_string(value) is expected
