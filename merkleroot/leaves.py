from __future__ import annotations

import os
from typing import BinaryIO, List, Optional

from .errors import ReadError
from .hashutil import HexHasher


def block_lengths(file_size: int, block_size: int) -> List[int]:
    """Read lengths for each block of a file, in file order.

    Every block is ``block_size`` bytes except a shorter trailing block when
    ``file_size`` is not a multiple of ``block_size``.
    """
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    if file_size < 0:
        raise ValueError("file_size must be non-negative")
    full, tail = divmod(file_size, block_size)
    lengths = [block_size] * full
    if tail:
        lengths.append(tail)
    return lengths


def _read_exact(fh: BinaryIO, n: int) -> bytes:
    buf = bytearray()
    while len(buf) < n:
        part = fh.read(n - len(buf))
        if not part:
            break
        buf += part
    return bytes(buf)


def extract_leaves(
    fh: BinaryIO,
    file_size: int,
    block_size: int,
    hasher: Optional[HexHasher] = None,
) -> List[str]:
    """Hash ``fh`` block by block from its current position.

    Args:
        fh: Readable binary stream positioned at the first byte to hash.
        file_size: Number of bytes the stream is expected to hold.
        block_size: Size of each leaf block in bytes.
        hasher: Digest adapter; defaults to SHA-256.

    Returns:
        One lowercase hex digest per block, in file order.

    Raises:
        ReadError: If the stream runs out before ``file_size`` bytes were read.
        HashError: If the hash primitive fails.
    """
    if hasher is None:
        hasher = HexHasher()
    leaves: List[str] = []
    for idx, want in enumerate(block_lengths(file_size, block_size)):
        data = _read_exact(fh, want)
        if len(data) != want:
            raise ReadError(
                f"Could not read the expected number of bytes for block {idx} "
                f"(expected {want}, got {len(data)})",
                block_index=idx,
                expected=want,
                actual=len(data),
            )
        leaves.append(hasher(data))
    return leaves


def leaves_from_path(path: str, block_size: int, hasher: Optional[HexHasher] = None) -> List[str]:
    try:
        with open(path, "rb") as fh:
            file_size = os.fstat(fh.fileno()).st_size
            return extract_leaves(fh, file_size, block_size, hasher)
    except OSError as exc:
        raise ReadError(f"Failed to read {path}: {exc}") from exc
