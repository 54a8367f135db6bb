"""
Merkle Audit Paths
Extraction and verification of inclusion proofs for a single block.

An audit path is the ordered list of sibling hashes (leaf to root) needed
to recompute the root hash from one block, together with the side each
sibling sits on.

Recombination Rules (Hard Contracts):
1. Start with h = sha256(data)
2. Sibling on the LEFT:  h = sha256(sibling + h)
3. Sibling on the RIGHT: h = sha256(h + sibling)
4. The path is valid iff the final h equals the expected root, byte for byte

Side tags always describe the SIBLING's position, never the current node's.

A single-block tree yields an EMPTY path (the leaf is the root). A block
that is not in the tree raises LeafNotFoundException; it never yields an
empty path. A missing path (None) never verifies.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Optional

from hashtree.crypto.hashing import hash_concat, sha256, to_hex
from hashtree.merkle.blocks import BlockLike, to_block_bytes
from hashtree.merkle.node import MerkleNode
from hashtree.schemas.errors import LeafNotFoundException

logger = logging.getLogger(__name__)


class Side(str, Enum):
    """Which side a sibling occupies when two hashes are recombined."""
    LEFT = "left"
    RIGHT = "right"


class AuditStep(NamedTuple):
    """One entry of an audit path: a sibling hash and its side."""
    sibling: bytes
    side: Side


@dataclass(frozen=True)
class AuditPath:
    """
    An inclusion proof for a single block, in leaf-to-root order.

    Note that an empty path is a valid proof for a single-block tree;
    check ``path is None`` rather than truthiness to detect a missing proof.

    Attributes:
        steps: Sibling hashes with their sides, bottom to top
    """
    steps: tuple[AuditStep, ...] = ()

    def __post_init__(self) -> None:
        """Normalize steps to an immutable tuple of AuditStep."""
        steps = tuple(AuditStep(bytes(sibling), Side(side)) for sibling, side in self.steps)
        object.__setattr__(self, "steps", steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[AuditStep]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> AuditStep:
        return self.steps[index]

    @property
    def siblings(self) -> list[bytes]:
        return [step.sibling for step in self.steps]

    @property
    def sides(self) -> list[Side]:
        return [step.side for step in self.steps]

    def compute_root(self, data: BlockLike) -> bytes:
        """Recompute the root hash implied by this path for ``data``."""
        return _fold(sha256(to_block_bytes(data)), self.steps)

    def is_valid(self, data: BlockLike, root_hash: bytes) -> bool:
        """Check that ``data`` is a leaf of the tree whose root is ``root_hash``."""
        return verify_audit_path(data, self, root_hash)


def _fold(leaf_hash: bytes, steps: Iterable[tuple[bytes, Side]]) -> Optional[bytes]:
    current = leaf_hash
    for sibling, side in steps:
        if not isinstance(sibling, (bytes, bytearray, memoryview)):
            logger.debug("Audit path sibling is %s, not bytes", type(sibling).__name__)
            return None
        sibling = bytes(sibling)
        if side == Side.LEFT:
            current = hash_concat(sibling, current)
        elif side == Side.RIGHT:
            current = hash_concat(current, sibling)
        else:
            logger.debug("Audit path step has unknown side %r", side)
            return None
    return current


def extract_audit_path(root: MerkleNode, data: BlockLike) -> AuditPath:
    """
    Build the audit path for ``data`` in the tree rooted at ``root``.

    Algorithm:
    1. target = sha256(data)
    2. Find the first leaf (pre-order, left before right) with that hash
    3. Walk up via parent links until the root is reached:
       - current is a left child  -> record (parent.right.hash, RIGHT)
       - current is a right child -> record (parent.left.hash, LEFT)

    Args:
        root: Root node of a built tree
        data: The block to prove

    Returns:
        AuditPath in leaf-to-root order (empty if the leaf is the root)

    Raises:
        LeafNotFoundException: If no leaf hash matches sha256(data)
    """
    target = sha256(to_block_bytes(data))
    node = root.find_leaf(target)
    if node is None:
        raise LeafNotFoundException(
            "Failed to find leaf node for data",
            leaf_hash=to_hex(target),
        )

    steps: list[AuditStep] = []
    while node.hash != root.hash:
        parent = node.parent
        if parent.left is node:
            steps.append(AuditStep(parent.right.hash, Side.RIGHT))
        else:
            steps.append(AuditStep(parent.left.hash, Side.LEFT))
        node = parent

    logger.debug("Audit path for leaf %s has %d steps", to_hex(target), len(steps))
    return AuditPath(tuple(steps))


def verify_audit_path(
    data: BlockLike,
    audit_path: Optional[Iterable[tuple[bytes, Side]]],
    root_hash: bytes,
) -> bool:
    """
    Verify an audit path against an expected root hash.

    Args:
        data: The block whose inclusion is claimed
        audit_path: AuditPath (or any iterable of (sibling, side) pairs);
            None means "no proof" and is always invalid
        root_hash: The expected root hash

    Returns:
        True if the path recombines to root_hash, False otherwise
    """
    if audit_path is None:
        return False

    computed = _fold(sha256(to_block_bytes(data)), audit_path)
    if computed is None or computed != root_hash:
        logger.debug(
            "Audit path mismatch: expected root %s, computed %s",
            to_hex(root_hash) if isinstance(root_hash, bytes) else root_hash,
            to_hex(computed) if computed is not None else None,
        )
        return False
    return True


__all__ = [
    "Side",
    "AuditStep",
    "AuditPath",
    "extract_audit_path",
    "verify_audit_path",
]
