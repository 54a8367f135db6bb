"""
ASCII Tree Rendering
Lays out a Merkle hash tree as monospace text with diagonal branches.

Each node is drawn as the first ``node_width`` characters of its lowercase
hex digest. Children hang off ``/`` and ``\\`` diagonals whose length
depends on how deep the subtree below them reaches, so that sibling
subtrees never overlap:

                   *             **            ***            ****
                  / \\           / \\            / \\            / \\
                 *   *         /   \\          /   \\          /   \\
                              **   **       ***   ***       /     \\
                                                          ****   ****

    node_width =   1             2              3              4
        offset =   1             1              2              2
      branches = {1,3,7,15}   {2,4,9,19}     {2,5,11,23}    {3,6,13,27}

The layout is a compatibility contract: output is compared byte for byte,
so the geometry below must not be "simplified".
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from hashtree.crypto.hashing import hex_prefix
from hashtree.merkle.node import MerkleNode

if TYPE_CHECKING:
    from hashtree.merkle.tree import MerkleTree

logger = logging.getLogger(__name__)


def branch_lengths(node_width: int, levels: int) -> list[int]:
    """
    Diagonal branch length for a subtree whose leftmost path has
    ``i`` edges, for i in range(levels).
    """
    offset = (node_width + 1) // 2
    branches: list[int] = []
    length = node_width // 2 + 1
    for i in range(levels):
        if i == 0:
            branches.append(length)
            continue
        branch = length + i + offset
        branches.append(branch)
        length += branch
    return branches


def canvas_size(node_width: int, branches: list[int]) -> tuple[int, int]:
    """
    Upper bound (height, width) of the canvas needed for a tree.

        node_width = 1  -> height 1, 3, 7, 15   width 1, 5, 13, 29
        node_width = 2  -> height 1, 4, 9, 19   width 2, 7, 17, 37
        node_width = 3  -> height 1, 4, 10, 22  width 3, 9, 21, 45
        node_width = 4  -> height 1, 5, 12, 26  width 4, 11, 25, 53
    """
    offset = (node_width + 1) // 2
    height = 1
    width = node_width
    for i, branch in enumerate(branches):
        if i == 0:
            width = offset * 2 - 1
        height += branch + 1
        width += (branch + 1) * 2
    return height, width


class _Canvas:
    """Character grid plus the bounding box of what has been drawn."""

    def __init__(self, height: int, width: int) -> None:
        self.cells = [[" "] * width for _ in range(height)]
        self.max_row = 0
        self.min_col = width - 1
        self.max_col = 0

    def put(self, row: int, col: int, text: str) -> None:
        self.cells[row][col:col + len(text)] = list(text)

    def include(self, row: int, first_col: int, last_col: int) -> None:
        self.max_row = max(self.max_row, row)
        self.min_col = min(self.min_col, first_col)
        self.max_col = max(self.max_col, last_col)

    def lines(self) -> list[str]:
        rows = self.cells[:self.max_row + 1]
        return ["".join(row[self.min_col:self.max_col + 1]).rstrip(" ") for row in rows]


def render_tree(tree: Union["MerkleTree", MerkleNode, None], node_width: int) -> list[str]:
    """
    Render a tree as a list of ASCII art lines.

    Args:
        tree: A MerkleTree, or the root MerkleNode of one
        node_width: Number of leading hex characters shown per node

    Returns:
        Lines of the drawing with trailing spaces removed; an empty list
        for a None tree or node_width < 1
    """
    root = _resolve_root(tree)
    if root is None or node_width < 1:
        return []

    offset = (node_width + 1) // 2
    right_shift = node_width // 2
    branches = branch_lengths(node_width, root.left_depth())
    height, width = canvas_size(node_width, branches)
    canvas = _Canvas(height, width)

    def draw(node: MerkleNode, row: int, col: int) -> None:
        label = hex_prefix(node.hash, node_width)
        canvas.put(row, col, label)
        # Left children bound the bottom and left edges, right children the
        # right edge; the root bounds itself.
        if node.is_left_child:
            canvas.include(row, col, canvas.max_col)
        elif node.is_right_child:
            canvas.include(canvas.max_row, canvas.min_col, col + node_width - 1)
        else:
            canvas.include(row, col, col + node_width - 1)

        if node.is_leaf:
            return

        length = branches[node.right.left_depth()]
        # Even widths put right children one column off-centre
        correction = (node_width + 1) % 2 if node.is_right_child else 0

        lrow, lcol = row + 1, col + offset - 2 + correction
        while lrow <= row + length:
            canvas.put(lrow, lcol, "/")
            lrow += 1
            lcol -= 1
        draw(node.left, lrow, lcol - offset + 1)

        rrow, rcol = row + 1, col + offset + correction
        while rrow <= row + length:
            canvas.put(rrow, rcol, "\\")
            rrow += 1
            rcol += 1
        draw(node.right, rrow, rcol - right_shift)

    draw(root, 0, width // 2 - offset + 1)
    lines = canvas.lines()
    logger.debug("Rendered tree at width %d into %d lines", node_width, len(lines))
    return lines


def render_tree_string(tree: Union["MerkleTree", MerkleNode, None], node_width: int) -> str:
    """Render a tree as a single string, lines joined with newlines."""
    return "\n".join(render_tree(tree, node_width))


def _resolve_root(tree: Union["MerkleTree", MerkleNode, None]) -> Optional[MerkleNode]:
    if tree is None or isinstance(tree, MerkleNode):
        return tree
    return tree.root


class TreeRenderer:
    """
    Renderer bound to a fixed node width.

    Example:
        >>> renderer = TreeRenderer(node_width=2)
        >>> print(renderer.pretty_string(tree))
    """

    def __init__(self, node_width: int) -> None:
        self.node_width = node_width

    def pretty(self, tree: Union["MerkleTree", MerkleNode, None]) -> list[str]:
        return render_tree(tree, self.node_width)

    def pretty_string(self, tree: Union["MerkleTree", MerkleNode, None]) -> str:
        return render_tree_string(tree, self.node_width)


__all__ = [
    "branch_lengths",
    "canvas_size",
    "render_tree",
    "render_tree_string",
    "TreeRenderer",
]
