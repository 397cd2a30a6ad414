from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from ustar_core.protocol import DEFAULT_CHUNK_SIZE
from ustar_stream import FileMeta, TarParser


class MemberIndexer(TarParser):
    """Byte sink that hashes member content as slices arrive.

    Only digests are kept; content is never buffered.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.records: list[dict] = []
        self._hasher = None

    def on_file_contents(self, meta: FileMeta, data: memoryview) -> None:
        # The parser counts a slice before delivering it, so the first slice
        # of a member is the only one where consumed == len(data)
        if self.consumed == len(data):
            self._start_member(meta)

        self._hasher.update(data)
        rec = self.records[-1]
        rec["slices"] += 1
        rec["received"] += len(data)
        if rec["received"] == meta.size:
            rec["sha256"] = self._hasher.hexdigest()
            self._hasher = None

    def _start_member(self, meta: FileMeta) -> None:
        self._hasher = hashlib.sha256()
        self.records.append(
            {
                "index": len(self.records),
                "name": meta.name,
                "size": int(meta.size),
                "sha256": None,
                "slices": 0,
                "received": 0,
            }
        )


def scan_archive(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> tuple[list[dict], dict]:
    """Decode an archive stream chunk by chunk.

    Returns the member records and the parser statistics. Members whose
    content was cut short by the end of the stream keep ``sha256=None``.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    indexer = MemberIndexer()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        indexer.feed(chunk)

    stats = indexer.get_stats()
    stats["truncated"] = any(r["sha256"] is None for r in indexer.records)
    return indexer.records, stats


def raw_name(name: str) -> bytes:
    # Undo the parser's surrogateescape decoding to recover the header bytes
    return name.encode("utf-8", "surrogateescape")


def display_name(name: str) -> str:
    return raw_name(name).decode("utf-8", "backslashreplace")


def write_index(records: list[dict], out_path: Path) -> Path | None:
    """Write members.parquet under ``out_path``.

    ``name`` is printable text (undecodable bytes shown as ``\\xNN``);
    ``name_raw`` holds the exact bytes of the header's name field.
    """
    out_path = Path(out_path)
    out_path.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(records)
    if df.empty:
        return None

    df["name_raw"] = df["name"].map(raw_name)
    df["name"] = df["name"].map(display_name)

    schema = pa.schema(
        [
            ("index", pa.int32()),
            ("name", pa.string()),
            ("name_raw", pa.binary()),
            ("size", pa.int64()),
            ("sha256", pa.string()),
            ("slices", pa.int64()),
        ]
    )

    table = pa.Table.from_pandas(df[schema.names], schema=schema, preserve_index=False)
    target = out_path / "members.parquet"
    pq.write_table(table, target)
    return target
