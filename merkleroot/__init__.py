"""
merkleroot — binary Merkle tree fingerprints for files.

Features:

- Splits a file into fixed-size blocks and hashes each block (SHA-256 leaves).
- Reduces the leaves pairwise through a FIFO queue to a single root; an odd
  leaf count is padded once with an empty-string node.
- CLI prints ``Root: <hex>`` and can check the result against an expected root.

Parent nodes hash the lowercase hex of their children, concatenated left then right.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "errors",
    "hashutil",
    "leaves",
    "tree",
    "cli",
]

# Importable programmatic API is available via merkleroot.tree (MerkleTree,
# compute_root, reduce_leaves) and merkleroot.leaves (extract_leaves).
