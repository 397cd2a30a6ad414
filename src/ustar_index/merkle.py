import hashlib

def leaf_hash(name: str, content_digest: str) -> bytes:
    h = hashlib.sha256()
    h.update(name.encode("utf-8", "surrogateescape"))
    h.update(b"\x00")
    h.update(bytes.fromhex(content_digest))
    return h.digest()

def compute_integrity_root(records: list[dict]) -> str:
    """sha256 over the leaf hashes of complete members, in archive order."""
    acc = hashlib.sha256()
    for rec in sorted(records, key=lambda r: r["index"]):
        if rec["sha256"] is None:
            continue
        acc.update(leaf_hash(rec["name"], rec["sha256"]))
    return acc.hexdigest()
