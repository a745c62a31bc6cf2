from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Sequence

from .constants import PADDING_NODE
from .errors import EmptyInputError
from .hashutil import HexHasher, combine
from .leaves import leaves_from_path


def reduce_leaves(leaves: Sequence[str], hasher: Optional[HexHasher] = None) -> str:
    """
    Reduces an ordered sequence of hex digests to a single Merkle root.

    Nodes are paired through one FIFO queue: the two front nodes are hashed
    together (left hex immediately followed by right hex) and the parent goes
    to the back. An odd leaf count is evened out once, up front, with an
    empty-string padding node that hashes as a zero-length byte string; later
    rounds are never padded. A lone leaf is returned unchanged.

    Raises:
        EmptyInputError: If ``leaves`` is empty.
    """
    if not leaves:
        raise EmptyInputError("No leaves to reduce")
    if hasher is None:
        hasher = HexHasher()
    nodes: Deque[str] = deque(leaves)
    if len(nodes) > 1 and len(nodes) % 2:
        nodes.append(PADDING_NODE)
    while len(nodes) > 1:
        left = nodes.popleft()
        right = nodes.popleft()
        nodes.append(hasher(combine(left, right)))
    return nodes[0]


class MerkleTree:
    """Binary Merkle tree over the fixed-size blocks of one file."""

    def __init__(self, hasher: Optional[HexHasher] = None):
        self.hasher = hasher
        self._root = ""
        self.leaf_count = 0

    @property
    def root_hash(self) -> str:
        return self._root

    def make(self, file_name: str, block_size: int) -> str:
        self._root = ""
        self.leaf_count = 0
        # Fresh adapter per build unless one was injected
        hasher = self.hasher if self.hasher is not None else HexHasher()
        leaves: List[str] = leaves_from_path(file_name, block_size, hasher)
        root = reduce_leaves(leaves, hasher)
        self._root = root
        self.leaf_count = len(leaves)
        return root


def compute_root(file_name: str, block_size: int, hasher: Optional[HexHasher] = None) -> str:
    return MerkleTree(hasher).make(file_name, block_size)
