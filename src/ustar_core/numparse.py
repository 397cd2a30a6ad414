"""ustar core - Fixed-width ASCII numeric field decoding."""
from __future__ import annotations

from enum import Enum

from .protocol import MAX_UNSIGNED


class ParseMode(Enum):
    DECIMAL = 10
    OCTAL = 8


class NumberParseError(ValueError):
    """Numeric field could not be decoded."""


class InvalidNumberError(NumberParseError):
    """Empty, absent, or containing a byte that is not a digit of the base."""


class NumberOverflowError(NumberParseError):
    """Value does not fit in the configured unsigned width."""


def _digits(mode: ParseMode) -> bytes:
    return b"0123456789"[: mode.value]


def parse_unsigned(
    text: bytes | bytearray | memoryview | str | None,
    mode: ParseMode = ParseMode.DECIMAL,
    limit: int = MAX_UNSIGNED,
) -> int:
    """Parse an unsigned ASCII digit string. Leading zeros are allowed.

    Raises InvalidNumberError for empty input or a non-digit byte, and
    NumberOverflowError if any intermediate product or sum exceeds ``limit``.
    """
    if text is None or len(text) == 0:
        raise InvalidNumberError("empty numeric field")
    if isinstance(text, str):
        try:
            text = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidNumberError(f"non-ASCII numeric field {text!r}") from e

    base = mode.value
    valid = _digits(mode)

    current = 0
    for ch in bytes(text):
        if ch not in valid:
            raise InvalidNumberError(f"invalid {mode.name.lower()} digit {bytes([ch])!r}")

        product = current * base
        if product > limit:
            raise NumberOverflowError(f"numeric field exceeds {limit}")

        total = product + (ch - 0x30)
        if total > limit:
            raise NumberOverflowError(f"numeric field exceeds {limit}")

        current = total
    return current
