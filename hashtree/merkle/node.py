"""
Merkle Node
A single element of the hash tree: a digest plus its relationships.

Ownership runs parent -> children. The parent back-reference is a weak
reference used only for upward traversal (audit paths, rendering), so a
tree is reclaimed as a whole once its owning handle is dropped.
"""
from __future__ import annotations

import weakref
from typing import Iterator, Optional


class MerkleNode:
    """
    A node in a binary Merkle hash tree.

    Invariant: a node has either zero or two children, never one.

    Attributes:
        hash: 32-byte SHA-256 digest
        left: Left child (None for leaves)
        right: Right child (None for leaves)
    """

    __slots__ = ("hash", "left", "right", "_parent", "__weakref__")

    def __init__(
        self,
        hash: bytes,
        left: Optional["MerkleNode"] = None,
        right: Optional["MerkleNode"] = None,
    ) -> None:
        if (left is None) != (right is None):
            raise ValueError("A Merkle node must have either zero or two children")
        self.hash = hash
        self.left = left
        self.right = right
        self._parent: Optional[weakref.ref] = None
        if left is not None and right is not None:
            left._parent = weakref.ref(self)
            right._parent = weakref.ref(self)

    @property
    def parent(self) -> Optional["MerkleNode"]:
        """The parent node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_left_child(self) -> bool:
        parent = self.parent
        return parent is not None and parent.left is self

    @property
    def is_right_child(self) -> bool:
        parent = self.parent
        return parent is not None and parent.right is self

    def left_depth(self) -> int:
        """Number of edges on the leftmost path below this node."""
        depth = 0
        node = self.left
        while node is not None:
            depth += 1
            node = node.left
        return depth

    def height(self) -> int:
        """Number of levels in the subtree rooted here (a leaf has height 1)."""
        if self.is_leaf:
            return 1
        return 1 + max(self.left.height(), self.right.height())

    def iter_leaves(self) -> Iterator["MerkleNode"]:
        """Yield the leaves below this node, left to right."""
        if self.is_leaf:
            yield self
            return
        yield from self.left.iter_leaves()
        yield from self.right.iter_leaves()

    def find_leaf(self, target: bytes) -> Optional["MerkleNode"]:
        """
        Find the first leaf whose hash equals ``target``.

        Search is depth-first pre-order, left before right, so with
        duplicate blocks the leftmost matching leaf wins.
        """
        if self.is_leaf:
            return self if self.hash == target else None
        leaf = self.left.find_leaf(target)
        if leaf is None:
            leaf = self.right.find_leaf(target)
        return leaf

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "inner"
        return f"MerkleNode({kind}, hash={self.hash.hex()[:16]}...)"


__all__ = ["MerkleNode"]
