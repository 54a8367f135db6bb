"""
Tree test fixtures.

Digest helpers that recompute expected hashes independently of the
builder, plus factory functions for the block lists used across tests.
"""

import hashlib


def h(data: bytes) -> bytes:
    """sha256 of raw bytes, computed without going through hashtree."""
    return hashlib.sha256(data).digest()


def hp(left: bytes, right: bytes) -> bytes:
    """Parent digest of two child digests."""
    return h(left + right)


def label(digest: bytes, width: int) -> str:
    """Leading hex characters of a digest, as drawn by the renderer."""
    return digest.hex()[:width]


def make_blocks(text: str) -> list[bytes]:
    """One single-byte block per character: make_blocks("abc") -> [b"a", b"b", b"c"]."""
    return [ch.encode() for ch in text]


def make_numbered_blocks(n: int, prefix: str = "block") -> list[bytes]:
    """n distinct blocks: b"block0", b"block1", ..."""
    return [f"{prefix}{i}".encode() for i in range(n)]


def flip_bit(data: bytes, bit: int) -> bytes:
    """Return a copy of data with a single bit inverted."""
    buf = bytearray(data)
    buf[bit // 8] ^= 1 << (bit % 8)
    return bytes(buf)


def seven_leaf_digests() -> dict[str, bytes]:
    """Every node digest of build_tree(make_blocks("abcdefg")), keyed by covered blocks."""
    d = {ch: h(ch.encode()) for ch in "abcdefg"}
    d["ab"] = hp(d["a"], d["b"])
    d["cd"] = hp(d["c"], d["d"])
    d["ef"] = hp(d["e"], d["f"])
    d["abcd"] = hp(d["ab"], d["cd"])
    d["efg"] = hp(d["ef"], d["g"])
    d["abcdefg"] = hp(d["abcd"], d["efg"])
    return d
