"""
Hash Functions

SHA-256 helpers shared by the signer and fee-estimation request construction.
"""

import hashlib


def sha256(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(bytes(input_bytes)).digest()


def sha256_hex(input_bytes: bytes) -> str:
    """SHA-256 of input bytes as upper-case hex, the form nodes report tx hashes in."""
    return sha256(input_bytes).hex().upper()


__all__ = ["sha256", "sha256_hex"]
