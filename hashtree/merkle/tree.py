"""
Merkle Tree Handle
The immutable, read-only view over a built node graph.

Trees are created by hashtree.merkle.builder.build_tree and never
mutated afterwards, so any number of audit-path, verification and
rendering queries may run against one tree concurrently.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from hashtree.config.runtime import get_default_config
from hashtree.merkle.audit_path import AuditPath, extract_audit_path
from hashtree.merkle.blocks import BlockLike
from hashtree.merkle.node import MerkleNode
from hashtree.render.ascii import render_tree, render_tree_string


class MerkleTree:
    """
    A binary Merkle hash tree.

    Attributes:
        root: Root node (owns the whole node graph)
        block_count: Number of blocks the tree was built from
    """

    __slots__ = ("root", "block_count")

    def __init__(self, root: MerkleNode, block_count: Optional[int] = None) -> None:
        self.root = root
        self.block_count = block_count if block_count is not None else sum(1 for _ in root.iter_leaves())

    @classmethod
    def from_blocks(cls, blocks: Iterable[BlockLike] = ()) -> "MerkleTree":
        """Build a tree; equivalent to build_tree(blocks)."""
        from hashtree.merkle.builder import build_tree

        return build_tree(blocks)

    @property
    def root_hash(self) -> bytes:
        return self.root.hash

    @property
    def hash(self) -> bytes:
        """Alias for root_hash."""
        return self.root.hash

    @property
    def leaf_count(self) -> int:
        """Number of leaf nodes (1 for the empty tree's sentinel node)."""
        return sum(1 for _ in self.root.iter_leaves())

    @property
    def height(self) -> int:
        return self.root.height()

    def leaves(self) -> Iterator[MerkleNode]:
        """Iterate over leaf nodes, left to right."""
        return self.root.iter_leaves()

    def get_audit_path(self, data: BlockLike) -> AuditPath:
        """
        Return the audit path proving ``data`` is a leaf of this tree.

        Raises:
            LeafNotFoundException: If sha256(data) matches no leaf
        """
        return extract_audit_path(self.root, data)

    def pretty(self, node_width: Optional[int] = None) -> list[str]:
        """
        Render the tree as ASCII art lines.

        Args:
            node_width: Leading hex characters shown per node; defaults to
                the configured render.node_width
        """
        if node_width is None:
            node_width = get_default_config().render.node_width
        return render_tree(self.root, node_width)

    def pretty_string(self, node_width: Optional[int] = None) -> str:
        """Render the tree as a single newline-joined string."""
        if node_width is None:
            node_width = get_default_config().render.node_width
        return render_tree_string(self.root, node_width)

    def __len__(self) -> int:
        return self.block_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MerkleTree):
            return NotImplemented
        return self.root.hash == other.root.hash

    def __hash__(self) -> int:
        return hash(self.root.hash)

    def __repr__(self) -> str:
        return f"MerkleTree(blocks={self.block_count}, root={self.root.hash.hex()[:16]}...)"


__all__ = ["MerkleTree"]
