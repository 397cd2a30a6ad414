"""ustar stream - Archive member listing and indexing."""
from __future__ import annotations

import json
from pathlib import Path
from typing import BinaryIO

import click

from ustar_core.protocol import DEFAULT_CHUNK_SIZE
from ustar_index.members import display_name, scan_archive, write_index
from ustar_index.merkle import compute_integrity_root

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

chunk_size_option = click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=DEFAULT_CHUNK_SIZE,
    show_default=True,
    help="Bytes read from the archive per feed",
)


def _fail_closed(fn, *args):
    try:
        return fn(*args)
    except Exception as e:
        # Fail closed with a single-line reason, no stack trace.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)


@click.group()
def main():
    pass


@main.command("list")
@click.argument("archive", type=click.File("rb"))
@chunk_size_option
def list_cmd(archive: BinaryIO, chunk_size: int):
    """Print one JSON line per member, then a summary line."""
    records, stats = _fail_closed(scan_archive, archive, chunk_size)
    for rec in records:
        rec = {k: v for k, v in rec.items() if k != "received"}
        rec["name"] = display_name(rec["name"])
        click.echo(json.dumps(rec, **CANONICAL_JSON_KW))

    summary = dict(stats)
    summary["integrity_root"] = compute_integrity_root(records)
    click.echo(json.dumps({"summary": summary}, **CANONICAL_JSON_KW))


@main.command("index")
@click.argument("archive", type=click.File("rb"))
@click.argument("out", type=click.Path(file_okay=False, path_type=Path))
@chunk_size_option
def index_cmd(archive: BinaryIO, out: Path, chunk_size: int):
    """Write OUT/members.parquet describing every member."""
    records, stats = _fail_closed(scan_archive, archive, chunk_size)
    target = _fail_closed(write_index, records, out)

    if target is None:
        click.echo("No members found.")
        return
    click.echo(f"PASS: Index written to {target}")
    click.echo(f"  Members: {len(records)}")
    click.echo(f"  Content bytes: {stats['content_bytes']}")
    click.echo(f"  Integrity root: {compute_integrity_root(records)}")


if __name__ == "__main__":
    main()
