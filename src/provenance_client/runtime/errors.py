"""
Provenance Client Error Model

This module provides the error handling framework for the transaction
construction, signing and display pipelines.

Only a FormattingError raised by a display hook is ever recovered inside
the library (that field falls back to its default rendering). Every other
error reaches the caller: an unrecognized or undecodable message must never
be shown to a human reviewer as if it were understood.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes grouped by pipeline stage."""

    UNKNOWN = 1

    # Wire and transport decoding (100-199)
    INVALID_BASE64 = 101
    INVALID_BINARY = 102
    INVALID_JSON = 103
    TRUNCATED_INPUT = 104
    WIRE_TYPE_MISMATCH = 105

    # Builder parameters (200-299)
    INVALID_FIELD = 200
    MISSING_FIELD = 201
    INVALID_AMOUNT = 202
    INVALID_DENOM = 203

    # Type registry (300-399)
    UNSUPPORTED_TYPE = 300
    UNSUPPORTED_ENUM_VALUE = 301
    BUILDER_MISMATCH = 302

    # Keys and signatures (400-499)
    INVALID_KEY = 400
    SIGNING_FAILED = 401

    # Display (500-599)
    FORMATTING_FAILED = 500
    DISPLAY_TOO_DEEP = 501


class ProvenanceError(Exception):
    """
    Root of the library's exception hierarchy.

    Every error carries a code, a details mapping (empty when there is
    nothing to add) and, when it wraps another exception, that cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Args:
            message: Human readable summary
            code: Machine readable error code
            details: Structured context, e.g. the offending field
            cause: Wrapped lower-level exception
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = dict(details) if details else {}
        self.cause = cause

    def __str__(self) -> str:
        text = f"{self.code.name}: {self.message}"
        if self.details:
            text += f" {self.details}"
        if self.cause is not None:
            text += f" (caused by {type(self.cause).__name__}: {self.cause})"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form for wallets that relay errors to a UI."""
        payload: Dict[str, Any] = {"code": self.code.name, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

class UnsupportedTypeError(ProvenanceError):
    """Unrecognized message kind, type url or enum value."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNSUPPORTED_TYPE,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class DecodeError(ProvenanceError):
    """Malformed wire bytes, transport text or embedded JSON payload."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_BINARY,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ValidationError(ProvenanceError):
    """Missing or malformed required field."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_FIELD,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class BuilderError(ProvenanceError):
    """Unrecognized message kind / parameter shape combination."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.BUILDER_MISMATCH,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class SigningError(ProvenanceError):
    """Invalid private key material or signature failure."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.SIGNING_FAILED,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class FormattingError(ProvenanceError):
    """A display object could not be formatted (a failing hook, or nesting too deep)."""

    def __init__(self, message: str = "Formatting failed",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None,
                 code: ErrorCode = ErrorCode.FORMATTING_FAILED):
        super().__init__(message, code, details, cause)


__all__ = [
    "ErrorCode",
    "ProvenanceError",
    "UnsupportedTypeError",
    "DecodeError",
    "ValidationError",
    "BuilderError",
    "SigningError",
    "FormattingError",
]
