"""Runtime helpers for the Provenance transaction client"""

from .errors import (
    ErrorCode,
    ProvenanceError,
    UnsupportedTypeError,
    DecodeError,
    ValidationError,
    BuilderError,
    SigningError,
    FormattingError,
)

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
