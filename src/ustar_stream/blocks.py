from __future__ import annotations

from typing import Iterator
from warnings import warn

from ustar_core.protocol import BLOCK_SIZE


class BlockAccumulator:
    """Reassembles arbitrarily sized chunks into 512-byte blocks.

    The staging buffer is reused for every block. Views yielded by
    ``append`` are only valid until the iterator is resumed.
    """

    def __init__(self) -> None:
        self._buf = bytearray(BLOCK_SIZE)
        self.cursor = 0
        # Bytes of the chunk passed to the latest append() copied so far
        self.consumed = 0

    def bytes_left(self) -> int:
        return BLOCK_SIZE - self.cursor

    def block_ready(self) -> bool:
        return self.cursor == BLOCK_SIZE

    def _advance(self, n: int) -> None:
        if self.cursor + n > BLOCK_SIZE:
            warn(f"Block cursor overrun ({self.cursor} + {n}), clamping to {BLOCK_SIZE}", RuntimeWarning)
            self.cursor = BLOCK_SIZE
            return
        self.cursor += n

    def append(self, chunk: bytes | bytearray | memoryview) -> Iterator[memoryview]:
        """Copy ``chunk`` into the staging buffer, yielding each completed block."""
        src = memoryview(chunk).cast("B")
        self.consumed = 0

        while self.consumed < len(src):
            how_many = min(len(src) - self.consumed, self.bytes_left())
            self._buf[self.cursor : self.cursor + how_many] = src[self.consumed : self.consumed + how_many]
            self._advance(how_many)
            self.consumed += how_many

            if self.block_ready():
                view = memoryview(self._buf).toreadonly()
                try:
                    yield view
                finally:
                    # Runs on resume and when the consumer abandons the iterator
                    view.release()
                    self.cursor = 0

    def reset(self) -> None:
        self.cursor = 0
        self.consumed = 0
