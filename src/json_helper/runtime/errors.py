"""
JSON Helper Error Model

This module provides the error handling framework for json_helper. Every
failure carries a numeric code, a details dictionary and the underlying
exception that caused it, so a conversion error can be diagnosed without
re-running it.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """json_helper error codes."""

    # General errors (1-99)
    UNKNOWN = 1
    CONFIG_ERROR = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_JSON = 101
    MARSHAL_ERROR = 103
    UNMARSHAL_ERROR = 104
    BYTES_DECODE_ERROR = 105


class JsonHelperError(Exception):
    """
    Base class for all json_helper errors.

    Provides structured error information: a message, an error code,
    free-form details and an optional cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a json_helper error.

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


class ConfigError(JsonHelperError):
    """Invalid configuration value."""

    def __init__(self, message: str = "Invalid configuration",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CONFIG_ERROR, details, cause)


class EncodingError(JsonHelperError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MarshalError(EncodingError):
    """Data marshaling error."""

    def __init__(self, message: str = "Marshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MARSHAL_ERROR, details, cause)


class UnmarshalError(EncodingError):
    """Data unmarshaling error."""

    def __init__(self, message: str = "Unmarshal error", code: ErrorCode = ErrorCode.UNMARSHAL_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class BytesDecodeError(UnmarshalError, ValueError):
    """
    A JSON node could not be decoded into a byte sequence.

    ``details`` always holds the raw offending ``value`` and the ``reason``.
    Subclasses ValueError so it can be raised from inside validators.
    """

    def __init__(self, reason: str, value: Any,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        merged = {"value": value, "reason": reason}
        if details:
            merged.update(details)
        super().__init__(f"Invalid byte sequence: {reason}", ErrorCode.BYTES_DECODE_ERROR, merged, cause)
        self.reason = reason
        self.value = value


__all__ = [
    "ErrorCode",
    "JsonHelperError",
    "ConfigError",
    "EncodingError",
    "MarshalError",
    "UnmarshalError",
    "BytesDecodeError",
]
