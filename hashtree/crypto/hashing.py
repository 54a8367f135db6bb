"""
Hashing Utilities
Raw-byte SHA-256 helpers used by tree construction, audit paths and rendering.

This module provides:
- SHA-256 hashing for raw bytes
- Parent hashing over concatenated child digests
- Hex helpers for display (0x-prefixed, and short labels for rendering)

Security/Determinism Notes:
- Internal hashing always operates on raw bytes, never on hex text
- Hex encoding is used for display only
- All operations are deterministic
"""
from __future__ import annotations

import hashlib

# Digest size of the tree hash function, in bytes
DIGEST_SIZE: int = hashlib.sha256().digest_size


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is used for computing Merkle parent hashes:
    parent = sha256(left + right)

    Args:
        left: Left child hash (32 bytes)
        right: Right child hash (32 bytes)

    Returns:
        32-byte SHA-256 digest of concatenation
    """
    return sha256(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def hex_prefix(digest: bytes, width: int) -> str:
    """Leading ``width`` characters of the lowercase hex encoding of ``digest``."""
    if width < 1:
        return ""
    return digest.hex()[:width]


__all__ = [
    "DIGEST_SIZE",
    "sha256",
    "hash_concat",
    "to_hex",
    "hex_prefix",
]
