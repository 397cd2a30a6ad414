"""ustar stream protocol constants.

Single source of truth for block size, magic values and header layout.
Keep this file stable. Decoder and tooling must remain synchronized.
"""

# Block and record sizing
BLOCK_SIZE = 512
RECORD_SIZE = BLOCK_SIZE * 20

# Format markers
USTAR_MAGIC = b"ustar\x00"  # Includes the terminator
USTAR_VERSION = b"00"       # Not terminated

NUL = b"\x00"

# Header: field name -> (offset, size). Numeric fields are NUL-terminated ASCII octal.
HEADER_FIELDS = {
    "name":     (0, 100),
    "mode":     (100, 8),
    "uid":      (108, 8),
    "gid":      (116, 8),
    "size":     (124, 12),
    "mtime":    (136, 12),
    "chksum":   (148, 8),
    "typeflag": (156, 1),
    "linkname": (157, 100),
    "magic":    (257, 6),
    "version":  (263, 2),
    "uname":    (265, 32),
    "gname":    (297, 32),
    "devmajor": (329, 8),
    "devminor": (337, 8),
    "prefix":   (345, 155),
    "pad":      (500, 12),
}

# Largest magnitude a numeric field may decode to (64-bit unsigned)
MAX_UNSIGNED = 2**64 - 1

# Default read size for drivers: one tar record
DEFAULT_CHUNK_SIZE = RECORD_SIZE
