import sys
from pathlib import Path

def main():
    if len(sys.argv) != 2:
        print("Usage: unterminate_name.py <archive.tar>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < 512:
        print("File too small to hold a header block.")
        raise SystemExit(2)

    # Name field spans bytes 0..99 of the first header. Replace every NUL
    # in it so the field is no longer terminated.
    name = b[0:100]
    idx = name.find(b"\x00")
    if idx == -1:
        print("Name field is already unterminated.")
        raise SystemExit(2)
    b[0:100] = name.replace(b"\x00", b"x")
    p.write_bytes(bytes(b))
    print(f"Unterminated name field (first NUL was at offset {idx}) in {p}")

if __name__ == "__main__":
    main()
