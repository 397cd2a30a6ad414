"""ustar core - shared layout constants and numeric field decoding."""
from .numparse import ParseMode, parse_unsigned, NumberParseError, InvalidNumberError, NumberOverflowError

__all__ = ["ParseMode", "parse_unsigned", "NumberParseError", "InvalidNumberError", "NumberOverflowError"]
