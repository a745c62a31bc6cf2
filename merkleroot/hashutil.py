"""Hash primitive adapter.

The tree only ever sees hex strings. ``HexHasher`` turns any
``bytes -> bytes`` digest function into ``bytes -> str`` and refuses to hand
back anything that is not a fixed-width digest, so a misbehaving primitive
surfaces as ``HashError`` instead of leaking an empty node into the tree.
"""

from __future__ import annotations

from typing import Callable, Optional

from Cryptodome.Hash import SHA256

from .constants import NODE_ENCODING
from .errors import HashError


DigestFunc = Callable[[bytes], bytes]


def sha256_digest(data: bytes) -> bytes:
    return SHA256.new(data).digest()


def combine(left: str, right: str) -> bytes:
    """Hash input of a parent node: left hex immediately followed by right hex."""
    return (left + right).encode(NODE_ENCODING)


class HexHasher:
    def __init__(self, func: DigestFunc = sha256_digest):
        self.func = func
        self.digest_size: Optional[int] = None

    def __call__(self, data: bytes) -> str:
        try:
            digest = self.func(data)
        except Exception as exc:
            raise HashError(f"Error while hashing: {exc}") from exc
        if not isinstance(digest, (bytes, bytearray)):
            raise HashError(f"Hash function returned {type(digest).__name__}, expected bytes")
        if not digest:
            raise HashError("Hash function returned an empty digest")
        if self.digest_size is None:
            self.digest_size = len(digest)
        elif len(digest) != self.digest_size:
            raise HashError(
                f"Hash function returned {len(digest)} bytes, expected {self.digest_size}"
            )
        return bytes(digest).hex()
