"""
Audit Path Convenience Wrappers
Thin class-based wrappers around audit path extraction and verification.

This module provides:
- AuditPathExtractor: Produce audit paths from a built tree
- AuditPathVerifier: Check audit paths against a root hash

These are convenience wrappers around the functions in audit_path.py.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from hashtree.merkle.audit_path import (
    AuditPath,
    Side,
    extract_audit_path,
    verify_audit_path,
)
from hashtree.merkle.blocks import BlockLike, CanonicalData
from hashtree.merkle.tree import MerkleTree


class AuditPathExtractor:
    """
    Convenience class for extracting audit paths.

    Example:
        >>> tree = build_tree([b"a", b"b", b"c"])
        >>> AuditPathExtractor.extract(tree, b"b").sides
        [<Side.LEFT: 'left'>, <Side.RIGHT: 'right'>]
    """

    @staticmethod
    def extract(tree: MerkleTree, data: BlockLike) -> AuditPath:
        """
        Extract the audit path for a block.

        Raises:
            LeafNotFoundException: If the block is not a leaf of the tree
        """
        return extract_audit_path(tree.root, data)

    @staticmethod
    def extract_object(tree: MerkleTree, obj: Any) -> AuditPath:
        """
        Extract the audit path for a structured object.

        The object is canonically serialized the same way
        HashTreeBuilder.build_from_objects does.
        """
        return extract_audit_path(tree.root, CanonicalData(obj))


class AuditPathVerifier:
    """
    Convenience class for verifying audit paths.

    Example:
        >>> path = AuditPathExtractor.extract(tree, b"b")
        >>> AuditPathVerifier.verify(b"b", path, tree.root_hash)
        True
    """

    @staticmethod
    def verify(
        data: BlockLike,
        audit_path: Optional[Iterable[tuple[bytes, Side]]],
        root_hash: bytes,
    ) -> bool:
        """
        Verify an audit path.

        Returns:
            True if the path is valid, False otherwise (including None paths)
        """
        return verify_audit_path(data, audit_path, root_hash)

    @staticmethod
    def verify_in_tree(data: BlockLike, audit_path: Optional[AuditPath], tree: MerkleTree) -> bool:
        """Verify an audit path against a tree's root hash."""
        return verify_audit_path(data, audit_path, tree.root_hash)

    @staticmethod
    def verify_object(
        obj: Any,
        audit_path: Optional[Iterable[tuple[bytes, Side]]],
        root_hash: bytes,
    ) -> bool:
        """
        Verify that a structured object is included under root_hash.

        The object is canonically serialized to produce the block.
        """
        return verify_audit_path(CanonicalData(obj), audit_path, root_hash)


__all__ = [
    "AuditPathExtractor",
    "AuditPathVerifier",
]
