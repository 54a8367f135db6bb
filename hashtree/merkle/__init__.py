"""
Merkle hash tree construction, audit paths and verification.

This package provides:
- MerkleNode / MerkleTree: the immutable node graph and its handle
- build_tree: balanced power-of-two split construction
- AuditPath: inclusion proofs, extracted and verified
- Block adapters: StringData, CanonicalData

Canonical Commitment Rules:
1. Leaf hashing: sha256(block)
2. Parent hashing: sha256(left + right)
3. Split: left subtree holds the largest power of two strictly below n
4. Empty tree: sha256(b"")
5. Single block: root = sha256(block)

Usage:
    from hashtree.merkle import build_tree, verify_audit_path

    tree = build_tree([b"a", b"b", b"c"])
    path = tree.get_audit_path(b"b")
    assert verify_audit_path(b"b", path, tree.root_hash)
"""
from .node import MerkleNode
from .blocks import (
    Block,
    BlockLike,
    StringData,
    CanonicalData,
    to_block_bytes,
)
from .audit_path import (
    Side,
    AuditStep,
    AuditPath,
    extract_audit_path,
    verify_audit_path,
)
from .tree import MerkleTree
from .builder import (
    EMPTY_TREE_ROOT,
    split_point,
    build_root,
    build_tree,
    HashTreeBuilder,
)
from .proofs import (
    AuditPathExtractor,
    AuditPathVerifier,
)


__all__ = [
    # Core types
    "MerkleNode",
    "MerkleTree",
    "Side",
    "AuditStep",
    "AuditPath",
    "EMPTY_TREE_ROOT",
    # Blocks
    "Block",
    "BlockLike",
    "StringData",
    "CanonicalData",
    "to_block_bytes",
    # Core functions
    "split_point",
    "build_root",
    "build_tree",
    "extract_audit_path",
    "verify_audit_path",
    # Convenience classes
    "HashTreeBuilder",
    "AuditPathExtractor",
    "AuditPathVerifier",
]
