from __future__ import annotations

import os
import sys
import argparse
import json as _json

from typing import List, Optional, Tuple

from merkleroot.constants import EXIT_OK, EXIT_MISMATCH, EXIT_ERROR
from merkleroot.tree import MerkleTree
from merkleroot.errors import MerkleRootError, ValidationError


def validate_inputs(path: str, block_size: str | int) -> Tuple[int, int]:
    """Check the CLI inputs before any hashing is attempted.

    Args:
        path: File to fingerprint.
        block_size: Leaf block size as given on the command line.

    Returns:
        (block_size, file_size) as integers.

    Raises:
        ValidationError: If the file is missing or empty, or the block size is
            not an integer in ``1..file_size``.
    """
    if not os.path.exists(path):
        raise ValidationError(f"File {path} does not exist!")
    if not os.path.isfile(path):
        raise ValidationError(f"File {path} is not a regular file!")
    file_size = os.path.getsize(path)
    if not file_size:
        raise ValidationError(f"File {path} is empty!")
    try:
        bs = int(block_size)
    except (TypeError, ValueError):
        raise ValidationError("Block size must be a positive integer!") from None
    if bs <= 0:
        raise ValidationError("Block size must be a positive integer!")
    if bs > file_size:
        raise ValidationError("Block size is greater than the size of the file!")
    return bs, file_size


def cmd_root(path: str, block_size: str | int, *, as_json: bool = False, expect: Optional[str] = None) -> bool:
    """Compute and print the Merkle root of a file.

    Args:
        path: File to fingerprint.
        block_size: Leaf block size in bytes.
        as_json: When True, print a JSON summary instead of the ``Root:`` line.
        expect: Optional hex root to compare against.

    Returns:
        False when ``expect`` was given and does not match, True otherwise.
    """
    bs, _file_size = validate_inputs(path, block_size)
    tree = MerkleTree()
    root = tree.make(path, bs)
    if as_json:
        print(_json.dumps({"path": path, "block_size": bs, "leaves": tree.leaf_count, "root": root}))
    else:
        print(f"Root: {root}")
    if expect is None:
        return True
    if expect.strip().lower() == root:
        print("OK")
        return True
    print("MISMATCH")
    return False


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="merkleroot",
        description="Compute the root of the binary Merkle tree for a given file",
        epilog="Leaves are SHA-256 digests of fixed-size blocks; parents hash the hex of their children.",
    )
    ap.add_argument("file_name", help="File to fingerprint")
    ap.add_argument("block_size", help="Leaf block size in bytes (1..file size)")
    ap.add_argument("--json", action="store_true", help="Emit JSON result summary")
    ap.add_argument("--expect", metavar="HEX", help="Expected root; exit 1 on mismatch")

    args = ap.parse_args(argv)
    try:
        ok = cmd_root(args.file_name, args.block_size, as_json=args.json, expect=args.expect)
    except (MerkleRootError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_OK if ok else EXIT_MISMATCH)


if __name__ == "__main__":
    main()
