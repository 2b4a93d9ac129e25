"""
Byte Buffer Error Model

This module provides the error handling framework for bytebuff. Every failure
raised by the buffer, the stream reader and the encoding collaborators is one
of the classes below, each tagged with an ErrorCode.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for byte buffer operations."""

    # General errors (1-99)
    UNKNOWN = 1

    # Reader errors (100-199)
    SIZE_EXCEEDED = 100
    INVALID_PREFIX = 101

    # Value errors (200-299)
    VALUE_TOO_LARGE = 200
    OFFSET_OVERFLOW = 201

    # Encoding errors (300-399)
    ENCODING_ERROR = 300
    MALFORMED_ENCODING = 301


class BuffError(Exception):
    """
    Base class for all bytebuff errors.

    Provides structured error information: a message, a code, free-form
    details and the underlying exception, if any.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a buffer error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class SizeExceededError(BuffError):
    """Read or peek larger than the bytes remaining in a stream."""

    def __init__(self, size: int, remaining: int, cause: Optional[Exception] = None):
        super().__init__(
            f"Size greater than stream: {size} > {remaining}",
            ErrorCode.SIZE_EXCEEDED,
            {"size": size, "remaining": remaining},
            cause,
        )
        self.size = size
        self.remaining = remaining


class InvalidPrefixError(BuffError):
    """Varint leading byte outside of the known prefix forms."""

    def __init__(self, prefix: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Varint is out of range: {prefix}", ErrorCode.INVALID_PREFIX, details)
        self.prefix = prefix


class ValueTooLargeError(BuffError):
    """Integer value cannot be represented in the requested width."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.VALUE_TOO_LARGE, details, cause)


class OffsetOverflowError(BuffError):
    """In-place write would run past the end of the buffer."""

    def __init__(self, offset: int, length: int, capacity: int):
        super().__init__(
            f"Write out of bounds: {offset} + {length} > {capacity}",
            ErrorCode.OFFSET_OVERFLOW,
            {"offset": offset, "length": length, "capacity": capacity},
        )


class EncodingError(BuffError):
    """Data encoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MalformedEncodingError(EncodingError):
    """A decoder rejected its input."""

    def __init__(self, message: str = "Malformed encoding",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_ENCODING, details, cause)


__all__ = [
    "ErrorCode",
    "BuffError",
    "SizeExceededError",
    "InvalidPrefixError",
    "ValueTooLargeError",
    "OffsetOverflowError",
    "EncodingError",
    "MalformedEncodingError",
]
