import os

import pytest

from ustar_stream.blocks import BlockAccumulator


def collect(acc, chunks):
    out = []
    for chunk in chunks:
        out.extend(bytes(b) for b in acc.append(chunk))
    return out

def test_partial_then_complete():
    acc = BlockAccumulator()
    assert collect(acc, [b"a" * 1000]) == [b"a" * 512]
    assert acc.cursor == 488
    blocks = collect(acc, [b"b" * 24])
    assert blocks == [b"a" * 488 + b"b" * 24]
    assert acc.cursor == 0

def test_chunking_independent():
    data = os.urandom(512 * 9 + 100)
    whole = collect(BlockAccumulator(), [data])
    single = collect(BlockAccumulator(), [data[i : i + 1] for i in range(len(data))])
    odd = collect(BlockAccumulator(), [data[i : i + 777] for i in range(0, len(data), 777)])
    assert len(whole) == 9
    assert whole == single == odd

def test_empty_chunk_is_noop():
    acc = BlockAccumulator()
    assert collect(acc, [b""]) == []
    assert acc.cursor == 0

def test_block_view_is_readonly():
    acc = BlockAccumulator()
    for block in acc.append(b"x" * 512):
        assert block.readonly
        assert len(block) == 512

def test_abandoned_iterator_resets_cursor():
    acc = BlockAccumulator()
    gen = acc.append(b"a" * 700)
    next(gen)
    assert acc.cursor == 512
    assert acc.consumed == 512
    gen.close()
    assert acc.cursor == 0

def test_advance_clamps():
    acc = BlockAccumulator()
    acc.cursor = 500
    with pytest.warns(RuntimeWarning):
        acc._advance(100)
    assert acc.cursor == 512
    assert acc.block_ready()
