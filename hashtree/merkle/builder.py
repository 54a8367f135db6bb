"""
Merkle Tree Construction
Deterministic balanced-split construction of a binary Merkle hash tree.

Canonical Construction Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256(block)
2. Parent hashing: parent = sha256(left + right), raw bytes, never hex
3. Split rule: for n > 1 blocks the left subtree takes the first k blocks,
   where k is the largest power of two strictly less than n; the right
   subtree takes the remaining n - k
4. Empty input: a single node whose hash is sha256(b"")
5. Single block: a single leaf, hash = sha256(block)

Example shapes:
    n=2 -> (a, b)
    n=3 -> ((a, b), c)
    n=4 -> ((a, b), (c, d))
    n=7 -> (((a, b), (c, d)), ((e, f), g))

Determinism Notes:
- The shape is a pure function of n, the hashes a pure function of the
  ordered blocks
- This module never sorts blocks - it trusts input order
- There is no odd-node promotion or duplication: every inner node has
  exactly two children
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from hashtree.crypto.hashing import hash_concat, sha256, to_hex
from hashtree.merkle.blocks import BlockLike, CanonicalData, to_block_bytes
from hashtree.merkle.node import MerkleNode
from hashtree.merkle.tree import MerkleTree

logger = logging.getLogger(__name__)


# Empty tree sentinel: sha256 of empty bytes
EMPTY_TREE_ROOT: bytes = sha256(b"")


def split_point(n: int) -> int:
    """
    Number of blocks that go to the left subtree of an n-block tree.

    This is the largest power of two strictly less than n, i.e.
    2 ** ceil(log2(n) - 1).

    Raises:
        ValueError: If n < 2 (no split exists)
    """
    if n < 2:
        raise ValueError(f"Cannot split fewer than 2 blocks, got {n}")
    return 1 << ((n - 1).bit_length() - 1)


def _build_subtree(blocks: Sequence[bytes]) -> MerkleNode:
    n = len(blocks)
    if n == 1:
        return MerkleNode(sha256(blocks[0]))

    k = split_point(n)
    left = _build_subtree(blocks[:k])
    right = _build_subtree(blocks[k:])
    return MerkleNode(hash_concat(left.hash, right.hash), left, right)


def build_root(blocks: Iterable[BlockLike]) -> MerkleNode:
    """
    Build the node graph for a sequence of blocks and return its root.

    Args:
        blocks: Ordered blocks (bytes-like or Block objects)

    Returns:
        Root node of the tree

    Raises:
        InvalidBlockException: If a block cannot be converted to bytes
    """
    data = [to_block_bytes(block) for block in blocks]
    if not data:
        return MerkleNode(EMPTY_TREE_ROOT)
    return _build_subtree(data)


def build_tree(blocks: Iterable[BlockLike] = ()) -> MerkleTree:
    """
    Build an immutable Merkle hash tree over an ordered sequence of blocks.

    Args:
        blocks: Ordered blocks. Order matters and is preserved.

    Returns:
        MerkleTree owning the node graph

    Example:
        >>> tree = build_tree([b"a", b"b", b"c"])
        >>> len(tree.root_hash)
        32
    """
    data = [to_block_bytes(block) for block in blocks]
    root = build_root(data)
    tree = MerkleTree(root, block_count=len(data))
    logger.debug("Built Merkle tree over %d blocks, root=%s", len(data), to_hex(root.hash))
    return tree


class HashTreeBuilder:
    """
    Class-based entry point for tree construction.

    Example:
        >>> tree = HashTreeBuilder.build([b"a", b"b"])
        >>> tree.leaf_count
        2
    """

    @staticmethod
    def build(blocks: Iterable[BlockLike] = ()) -> MerkleTree:
        """Build a tree over raw or adapted blocks."""
        return build_tree(blocks)

    @staticmethod
    def build_from_objects(objects: Iterable[object]) -> MerkleTree:
        """
        Build a tree over structured objects.

        Each object is turned into a block via canonical JSON, so the
        tree is independent of dict key insertion order.
        """
        return build_tree(CanonicalData(obj) for obj in objects)


__all__ = [
    "EMPTY_TREE_ROOT",
    "split_point",
    "build_root",
    "build_tree",
    "HashTreeBuilder",
]
