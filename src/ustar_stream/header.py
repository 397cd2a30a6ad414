from __future__ import annotations

from ustar_core.numparse import NumberParseError, ParseMode, parse_unsigned
from ustar_core.protocol import BLOCK_SIZE, HEADER_FIELDS, MAX_UNSIGNED, NUL, USTAR_MAGIC, USTAR_VERSION

from .errors import InvalidHeaderError


class HeaderBlock:
    """Read-only field access over a 512-byte block by explicit offset."""

    def __init__(self, block: bytes | bytearray | memoryview):
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"Header block must be {BLOCK_SIZE} bytes, got {len(block)}")
        self._block = block
        self.size: int | None = None

    def field(self, name: str) -> bytes:
        off, length = HEADER_FIELDS[name]
        return bytes(self._block[off : off + length])

    def cstring(self, name: str) -> bytes | None:
        """Field contents up to the first NUL, or None if there is none."""
        raw = self.field(name)
        end = raw.find(NUL)
        if end == -1:
            return None
        return raw[:end]

    def is_ustar(self) -> bool:
        return self.field("magic") == USTAR_MAGIC and self.field("version") == USTAR_VERSION

    @property
    def name_bytes(self) -> bytes:
        return self.cstring("name") or b""

    @property
    def checksum(self) -> bytes:
        # Exposed for inspection only, never verified
        return self.field("chksum")


def validate_header(block: bytes | bytearray | memoryview, limit: int = MAX_UNSIGNED) -> HeaderBlock | None:
    """Check a block for ustar markers and decode its size.

    Returns None when the block is not a ustar header (filler or padding).
    Raises InvalidHeaderError for a ustar header with unterminated name or
    size fields, or a size that does not decode as octal.
    """
    hdr = HeaderBlock(block)
    if not hdr.is_ustar():
        return None

    if hdr.cstring("name") is None:
        raise InvalidHeaderError("E_HEADER_NAME")
    size_text = hdr.cstring("size")
    if size_text is None:
        raise InvalidHeaderError("E_HEADER_SIZE_TERM")

    try:
        hdr.size = parse_unsigned(size_text, ParseMode.OCTAL, limit)
    except NumberParseError as e:
        raise InvalidHeaderError("E_HEADER_SIZE", str(e)) from e
    return hdr
