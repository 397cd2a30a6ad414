from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ustar_core.protocol import BLOCK_SIZE, MAX_UNSIGNED

from .blocks import BlockAccumulator
from .errors import InvalidHeaderError
from .header import validate_header


@dataclass(frozen=True)
class FileMeta:
    name: str
    size: int


class ParserState(Enum):
    AWAITING_HEADER = "awaiting_header"
    AWAITING_CONTENT = "awaiting_content"


ContentCallback = Callable[[FileMeta, memoryview], None]

_EMPTY_STATS = {
    "blocks": 0,
    "headers": 0,
    "skipped_blocks": 0,
    "files": 0,
    "content_bytes": 0,
}


class TarParser:
    """Streamed ustar extractor.

    Feed archive bytes in chunks of any size; file contents are delivered
    through ``on_file_contents(meta, data)`` as they complete, at most one
    block at a time. Either pass a callable or subclass and override
    ``on_file_contents``.

    - Only the ustar format is supported.
    - Blocks without the ustar magic and version are skipped while a header
      is expected.
    - ``data`` borrows the internal block buffer and is released when the
      callback returns. Copy what you need to keep.
    - A member of size 0 gets exactly one callback with ``len(data) == 0``,
      made when its header is read.
    - An exception raised by the callback propagates out of ``feed``. The
      rest of that chunk is not consumed; ``offset`` tells how far it got.
    """

    def __init__(
        self,
        on_file_contents: ContentCallback | None = None,
        *,
        encoding: str = "utf-8",
        errors: str = "surrogateescape",
        limit: int = MAX_UNSIGNED,
    ):
        self._callback = on_file_contents
        self.encoding = encoding
        self.errors = errors
        self.limit = limit

        self._blocks = BlockAccumulator()
        self.reset()

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def metadata(self) -> FileMeta:
        return self._metadata

    @property
    def consumed(self) -> int:
        return self._consumed

    @property
    def offset(self) -> int:
        """Bytes of the last fed chunk consumed, including a block that failed."""
        return self._blocks.consumed

    def get_stats(self) -> dict:
        return dict(self._stats)

    def reset(self) -> None:
        """Reset parser state. The next feed() behaves as on a new parser."""
        self._blocks.reset()
        self._state = ParserState.AWAITING_HEADER
        self._metadata = FileMeta(name="", size=0)
        self._consumed = 0
        self._stats = dict(_EMPTY_STATS)

    def on_file_contents(self, meta: FileMeta, data: memoryview) -> None:
        if self._callback is None:
            raise NotImplementedError("Pass on_file_contents or override it in a subclass")
        self._callback(meta, data)

    def feed(self, data: bytes | bytearray | memoryview) -> None:
        """Consume a chunk of archive data.

        Raises InvalidHeaderError on the first malformed ustar header. The
        failing block is discarded and the cursor is back at a block
        boundary; ``err.offset`` bytes of ``data`` were consumed. Callback
        exceptions leave the parser in the same place, and ``self.offset``
        gives the resume point.
        """
        blocks = self._blocks.append(data)
        try:
            for block in blocks:
                try:
                    self._parse_block(block)
                except InvalidHeaderError as e:
                    e.block_index = self._stats["blocks"] - 1
                    e.offset = self._blocks.consumed
                    raise
        finally:
            blocks.close()

    def _emit(self, block: memoryview, how_many: int) -> None:
        # Counters and state are final before the callback runs
        self._stats["content_bytes"] += how_many
        view = block[:how_many]
        try:
            self.on_file_contents(self._metadata, view)
        finally:
            view.release()

    def _parse_block(self, block: memoryview) -> None:
        self._stats["blocks"] += 1

        if self._state is ParserState.AWAITING_HEADER:
            hdr = validate_header(block, self.limit)
            if hdr is None:
                self._stats["skipped_blocks"] += 1
                return

            self._metadata = FileMeta(
                name=hdr.name_bytes.decode(self.encoding, self.errors),
                size=hdr.size,
            )
            self._consumed = 0
            self._stats["headers"] += 1

            if self._metadata.size == 0:
                # No content blocks follow an empty file
                self._stats["files"] += 1
                self._emit(block, 0)
                return
            self._state = ParserState.AWAITING_CONTENT

        elif self._state is ParserState.AWAITING_CONTENT:
            how_many = min(self._metadata.size - self._consumed, BLOCK_SIZE)
            self._consumed += how_many

            if self._consumed == self._metadata.size:
                self._stats["files"] += 1
                self._state = ParserState.AWAITING_HEADER
            self._emit(block, how_many)
