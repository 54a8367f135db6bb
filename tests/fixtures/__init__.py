"""
Test fixtures package for hashtree tests.

This package provides digest helpers and block factories:
- trees.py: independent hash helpers and block lists

Usage:
    from fixtures import h, hp, make_blocks

    def test_something():
        tree = build_tree(make_blocks("ab"))
        assert tree.root_hash == hp(h(b"a"), h(b"b"))
"""

from .trees import (
    h,
    hp,
    label,
    make_blocks,
    make_numbered_blocks,
    flip_bit,
    seven_leaf_digests,
)

__all__ = [
    "h",
    "hp",
    "label",
    "make_blocks",
    "make_numbered_blocks",
    "flip_bit",
    "seven_leaf_digests",
]
