import io
import tarfile

import pytest


def build_tar(members, garbage_prefix: bytes = b"", encoding: str = "utf-8") -> bytes:
    """ustar archive bytes for [(name, content), ...]."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w", format=tarfile.USTAR_FORMAT, encoding=encoding) as tf:
        for name, data in members:
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tf.addfile(info, io.BytesIO(data))
    return garbage_prefix + buf.getvalue()


class Recorder:
    def __init__(self):
        self.calls: list[tuple[str, int, bytes]] = []

    def __call__(self, meta, data):
        self.calls.append((meta.name, meta.size, bytes(data)))

    def files(self) -> dict[str, bytes]:
        out: dict[str, bytes] = {}
        for name, _, data in self.calls:
            out[name] = out.get(name, b"") + data
        return out


@pytest.fixture
def make_tar():
    return build_tar


@pytest.fixture
def recorder():
    return Recorder()
