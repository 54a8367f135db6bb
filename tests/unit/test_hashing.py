"""
Hashing Unit Tests
Tests for hashtree/crypto/hashing.py

Tests:
- sha256 stability and raw-byte semantics
- hash_concat as the parent rule
- hex display helpers
"""
import hashlib

from hashtree.crypto.hashing import (
    DIGEST_SIZE,
    sha256,
    hash_concat,
    to_hex,
    hex_prefix,
)


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        """sha256 produces the standard digest for a known input."""
        result = sha256(b"hello")

        assert result.hex() == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        assert len(result) == DIGEST_SIZE == 32

    def test_sha256_empty_bytes(self):
        """sha256 of empty bytes matches hashlib."""
        assert sha256(b"") == hashlib.sha256(b"").digest()

    def test_sha256_different_inputs_different_outputs(self):
        assert sha256(b"input1") != sha256(b"input2")


class TestHashConcat:
    """Tests for hash_concat() parent rule."""

    def test_hash_concat_is_sha256_of_concatenation(self):
        left = sha256(b"a")
        right = sha256(b"b")

        assert hash_concat(left, right) == hashlib.sha256(left + right).digest()

    def test_hash_concat_order_matters(self):
        left = sha256(b"a")
        right = sha256(b"b")

        assert hash_concat(left, right) != hash_concat(right, left)

    def test_hash_concat_uses_raw_bytes_not_hex(self):
        """Parent hashing concatenates digests, never their hex text."""
        left = sha256(b"a")
        right = sha256(b"b")
        hex_based = hashlib.sha256((left.hex() + right.hex()).encode()).digest()

        assert hash_concat(left, right) != hex_based


class TestHexHelpers:
    """Tests for to_hex() and hex_prefix()."""

    def test_to_hex_has_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"

    def test_hex_prefix_lowercase(self):
        assert hex_prefix(bytes.fromhex("ABCDEF"), 4) == "abcd"

    def test_hex_prefix_zero_width(self):
        assert hex_prefix(sha256(b"a"), 0) == ""

    def test_hex_prefix_longer_than_digest(self):
        digest = sha256(b"a")

        assert hex_prefix(digest, 100) == digest.hex()
