import argparse
import io
import os
import random
import tarfile
from pathlib import Path

WORDS = ["manifest", "version", "header", "data", "payload", "index", "notes"]

def random_member(i: int) -> tuple[str, bytes]:
    name = f"{random.choice(WORDS)}-{i:04d}.bin"
    # Mix exact block multiples, short tails and empty files
    size = random.choice([0, 5, 511, 512, 513, 1024, random.randint(1, 20000)])
    return name, os.urandom(size)

def generate_archive(path: Path, members: int, garbage: bool) -> Path:
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w", format=tarfile.USTAR_FORMAT) as tf:
        for i in range(members):
            name, data = random_member(i)
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tf.addfile(info, io.BytesIO(data))

    raw = buf.getvalue()
    if garbage:
        # One leading block that is not a ustar header
        raw = os.urandom(512) + raw

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(raw)
    return path

def main():
    ap = argparse.ArgumentParser(description="Write a sample ustar archive")
    ap.add_argument("out", type=Path)
    ap.add_argument("--members", type=int, default=5)
    ap.add_argument("--garbage", action="store_true", help="Prefix one random non-header block")
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args()

    if args.seed is not None:
        random.seed(args.seed)

    p = generate_archive(args.out, args.members, args.garbage)
    print(f"Archive written: {p} ({p.stat().st_size} bytes, {args.members} members)")

if __name__ == "__main__":
    main()
