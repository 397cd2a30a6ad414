"""Query a member index - find the largest members of an archive."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <index_dir> [limit]")
        print("Example: python query.py index/ 10")
        sys.exit(1)

    index_dir = Path(sys.argv[1])
    limit = int(sys.argv[2]) if len(sys.argv) > 2 else 10

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW members AS SELECT * FROM '{index_dir}/members.parquet'")

    sql = f"""
    SELECT
        name,
        size,
        slices,
        sha256
    FROM members
    WHERE sha256 IS NOT NULL
    ORDER BY size DESC, "index"
    LIMIT {limit}
    """

    print(f"--- Largest members (top {limit}) ---\n")

    df = con.execute(sql).fetchdf()
    if df.empty:
        print("No complete members found.")
    else:
        for _, row in df.iterrows():
            print(f"MEMBER: {row['name']}")
            print(f"  Size: {row['size']} bytes in {row['slices']} slices")
            print(f"  sha256: {row['sha256']}")
            print()


if __name__ == "__main__":
    main()
