import pytest

from ustar_core.numparse import (
    InvalidNumberError,
    NumberOverflowError,
    NumberParseError,
    ParseMode,
    parse_unsigned,
)
from ustar_core.protocol import MAX_UNSIGNED


def test_simple_parse():
    assert parse_unsigned(b"12345") == 12345

def test_leading_zeroes():
    assert parse_unsigned(b"0000012345", ParseMode.DECIMAL) == 12345

def test_rejects_invalid_chars():
    with pytest.raises(InvalidNumberError):
        parse_unsigned(b"-12345")

@pytest.mark.parametrize("text", [b"", None])
@pytest.mark.parametrize("mode", list(ParseMode))
def test_rejects_empty(text, mode):
    with pytest.raises(InvalidNumberError):
        parse_unsigned(text, mode)

def test_handles_max():
    assert parse_unsigned(str(MAX_UNSIGNED).encode()) == MAX_UNSIGNED

def test_rejects_overflow():
    with pytest.raises(NumberOverflowError):
        parse_unsigned(("9" + str(MAX_UNSIGNED)).encode())

def test_octal():
    assert parse_unsigned(b"37", ParseMode.OCTAL) == 31

def test_octal_rejects_eight():
    with pytest.raises(InvalidNumberError):
        parse_unsigned(b"18", ParseMode.OCTAL)

def test_octal_overflow():
    # 22 octal digits of 7 exceed 64 bits
    with pytest.raises(NumberOverflowError):
        parse_unsigned(b"7" * 22, ParseMode.OCTAL)
    assert parse_unsigned(b"1" + b"7" * 21, ParseMode.OCTAL) == MAX_UNSIGNED

def test_custom_limit():
    assert parse_unsigned(b"255", limit=255) == 255
    with pytest.raises(NumberOverflowError):
        parse_unsigned(b"256", limit=255)

def test_accepts_str_and_memoryview():
    assert parse_unsigned("0017", ParseMode.OCTAL) == 15
    assert parse_unsigned(memoryview(b"42")) == 42

def test_errors_share_channel():
    assert issubclass(InvalidNumberError, NumberParseError)
    assert issubclass(NumberOverflowError, NumberParseError)
    with pytest.raises(ValueError):
        parse_unsigned(b"")
