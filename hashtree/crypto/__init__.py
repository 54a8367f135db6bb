"""
Core cryptographic utilities.

SHA-256 hashing over raw bytes plus display helpers.
"""
from .hashing import (
    DIGEST_SIZE,
    sha256,
    hash_concat,
    to_hex,
    hex_prefix,
)

__all__ = [
    "DIGEST_SIZE",
    "sha256",
    "hash_concat",
    "to_hex",
    "hex_prefix",
]
