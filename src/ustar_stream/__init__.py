"""ustar stream - incremental decoding of ustar archives fed in arbitrary chunks."""
from .blocks import BlockAccumulator
from .errors import ERRORS, InvalidHeaderError, TarStreamError
from .header import HeaderBlock, validate_header
from .parser import ContentCallback, FileMeta, ParserState, TarParser

__all__ = [
    "BlockAccumulator",
    "ContentCallback",
    "ERRORS",
    "FileMeta",
    "HeaderBlock",
    "InvalidHeaderError",
    "ParserState",
    "TarParser",
    "TarStreamError",
    "validate_header",
]
