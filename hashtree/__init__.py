"""
hashtree - binary Merkle hash trees with audit paths and ASCII rendering.

Usage:
    from hashtree import build_tree, verify_audit_path

    tree = build_tree([b"a", b"b", b"c"])
    path = tree.get_audit_path(b"c")
    assert verify_audit_path(b"c", path, tree.root_hash)
    print(tree.pretty_string(4))
"""
from hashtree.merkle import (
    EMPTY_TREE_ROOT,
    AuditPath,
    AuditPathExtractor,
    AuditPathVerifier,
    AuditStep,
    Block,
    CanonicalData,
    HashTreeBuilder,
    MerkleNode,
    MerkleTree,
    Side,
    StringData,
    build_tree,
    extract_audit_path,
    verify_audit_path,
)
from hashtree.render import TreeRenderer, render_tree, render_tree_string
from hashtree.schemas.errors import (
    HashTreeError,
    HashTreeException,
    InvalidBlockException,
    LeafNotFoundException,
)
from hashtree.config import HashTreeConfig, setup_logging

__version__ = "0.1.0"

__all__ = [
    "EMPTY_TREE_ROOT",
    "AuditPath",
    "AuditPathExtractor",
    "AuditPathVerifier",
    "AuditStep",
    "Block",
    "CanonicalData",
    "HashTreeBuilder",
    "MerkleNode",
    "MerkleTree",
    "Side",
    "StringData",
    "build_tree",
    "extract_audit_path",
    "verify_audit_path",
    "TreeRenderer",
    "render_tree",
    "render_tree_string",
    "HashTreeError",
    "HashTreeException",
    "InvalidBlockException",
    "LeafNotFoundException",
    "HashTreeConfig",
    "setup_logging",
]
