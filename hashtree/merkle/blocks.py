"""
Data Block Adapters
Conversion of caller-supplied values into the raw bytes that get hashed.

A tree is built over opaque byte blocks. Callers may pass:
- bytes / bytearray / memoryview (used as-is)
- any object implementing the Block protocol (``to_bytes()``)

Plain ``str`` is rejected on purpose: text has no single byte encoding,
so it must be wrapped (StringData) to make the encoding explicit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

from hashtree.schemas.canonical import dumps_canonical
from hashtree.schemas.errors import InvalidBlockException


@runtime_checkable
class Block(Protocol):
    """Arbitrary content that can be stored in a tree."""

    def to_bytes(self) -> bytes:
        ...


BlockLike = Union[bytes, bytearray, memoryview, Block]


@dataclass(frozen=True)
class StringData:
    """A text block, encoded before hashing."""
    value: str
    encoding: str = "utf-8"

    def to_bytes(self) -> bytes:
        return self.value.encode(self.encoding)


@dataclass(frozen=True)
class CanonicalData:
    """
    A structured block (dict, list, Pydantic model, ...).

    The block bytes are the UTF-8 canonical JSON of the object, so two
    objects that differ only in dict key order are the same block.
    """
    obj: Any

    def to_bytes(self) -> bytes:
        return dumps_canonical(self.obj).encode("utf-8")


def to_block_bytes(value: BlockLike) -> bytes:
    """
    Normalize a block value to ``bytes``.

    Raises:
        InvalidBlockException: If the value is neither bytes-like nor a Block
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        raise InvalidBlockException(
            "str blocks must be encoded explicitly (wrap them in StringData)",
            type_name="str",
        )
    # int.to_bytes exists but is not a block encoding
    if isinstance(value, Block) and not isinstance(value, int):
        data = value.to_bytes()
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidBlockException(
                f"{type(value).__name__}.to_bytes() returned {type(data).__name__}, expected bytes",
                type_name=type(value).__name__,
            )
        return bytes(data)
    raise InvalidBlockException(
        f"Cannot use value of type {type(value).__name__} as a data block",
        type_name=type(value).__name__,
    )


__all__ = [
    "Block",
    "BlockLike",
    "StringData",
    "CanonicalData",
    "to_block_bytes",
]
