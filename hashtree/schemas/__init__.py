"""
Schemas: error taxonomy and canonical serialization.
"""

from .errors import (
    ErrorCodes,
    HashTreeError,
    HashTreeException,
    LeafNotFoundException,
    InvalidBlockException,
    CanonicalizationException,
    ConfigurationException,
)
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    dumps_canonical,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "LeafNotFoundException",
    "InvalidBlockException",
    "CanonicalizationException",
    "ConfigurationException",
    # Canonical serialization
    "CANONICAL_JSON_SEPARATORS",
    "dumps_canonical",
]
