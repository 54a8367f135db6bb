"""
Error taxonomy for hashtree.

Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Invalid audit paths are NOT errors: verification returns False.
Exceptions are reserved for caller mistakes (bad block types, malformed
configuration) and for lookups that cannot succeed (leaf not found).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the library."""

    # Tree & Audit Path Errors
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"
    INVALID_BLOCK = "INVALID_BLOCK"

    # Serialization Errors
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Configuration Errors
    CONFIG_INVALID = "CONFIG_INVALID"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class HashTreeError(BaseModel):
    """
    Base error model for structured error communication.

    Lets a host system pass failures around (or serialize them) without
    raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.LEAF_NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "HashTreeException":
        """Convert this error model to a raisable exception."""
        return HashTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class HashTreeException(Exception):
    """
    Base exception for all hashtree errors.

    Carries structured error information and can be converted
    to/from HashTreeError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "HASHTREE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> HashTreeError:
        """Convert this exception to a HashTreeError model."""
        return HashTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class LeafNotFoundException(HashTreeException):
    """Raised when an audit path is requested for data that matches no leaf."""

    def __init__(
        self,
        message: str,
        leaf_hash: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_hash:
            full_details["leaf_hash"] = leaf_hash
        super().__init__(
            message=message,
            code=ErrorCodes.LEAF_NOT_FOUND,
            details=full_details,
        )


class InvalidBlockException(HashTreeException, TypeError):
    """Raised when a value cannot be interpreted as a data block."""

    def __init__(
        self,
        message: str,
        type_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if type_name:
            full_details["type"] = type_name
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_BLOCK,
            details=full_details,
        )


class CanonicalizationException(HashTreeException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
        )


class ConfigurationException(HashTreeException):
    """Exception raised when configuration data is malformed."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key:
            full_details["key"] = key
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_INVALID,
            details=full_details,
        )


__all__ = [
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "LeafNotFoundException",
    "InvalidBlockException",
    "CanonicalizationException",
    "ConfigurationException",
]
