"""
Canonical JSON for structured blocks.

CanonicalData blocks are hashed as the UTF-8 bytes of this encoding, so
one logical object always maps to one block:
- object keys sorted, no insignificant whitespace
- bytes written as lowercase hex strings
- Pydantic models dumped in JSON mode first
- NaN and Infinity rejected
"""

import json
import math
from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException

CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")

_SCALARS = (str, int, bool, type(None))


def _normalize(value: Any, path: str) -> Any:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise CanonicalizationException(
                message=f"Non-finite float at {path or '<root>'}",
                details={"path": path, "value": repr(value)},
            )
        return value
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, BaseModel):
        return _normalize(value.model_dump(mode="json"), path)
    if isinstance(value, dict):
        out = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise CanonicalizationException(
                    message=f"Object keys must be str, got {type(key).__name__}",
                    details={"path": path, "type": type(key).__name__},
                )
            out[key] = _normalize(item, f"{path}.{key}" if path else key)
        return out
    if isinstance(value, (list, tuple)):
        return [_normalize(item, f"{path}[{i}]") for i, item in enumerate(value)]
    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize ``obj`` to canonical JSON text.

    Raises:
        CanonicalizationException: For non-finite floats, non-str keys or
            unsupported value types

    Example:
        >>> dumps_canonical({"b": 2, "a": b"\\x01"})
        '{"a":"01","b":2}'
    """
    return json.dumps(
        _normalize(obj, ""),
        sort_keys=True,
        separators=CANONICAL_JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )


__all__ = [
    "CANONICAL_JSON_SEPARATORS",
    "dumps_canonical",
]
