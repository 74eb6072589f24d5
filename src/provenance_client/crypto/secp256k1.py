"""
SECP256K1 signing for Provenance transactions.

Signatures are the Cosmos SDK form: SHA-256 digest of the payload,
RFC 6979 deterministic ECDSA, S normalized to the lower half of the curve
order, returned as the 64-byte compact concatenation r || s (no DER
wrapping, no recovery byte).
"""

from __future__ import annotations
import hashlib
import logging

from ecdsa import SECP256k1, BadSignatureError, MalformedPointError, SigningKey, VerifyingKey
from ecdsa.util import sigdecode_string, sigencode_string

from ..codec.hashes import sha256
from ..runtime.errors import ErrorCode, SigningError

logger = logging.getLogger(__name__)

PRIVATE_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64
CURVE_ORDER = SECP256k1.order


def _sigencode_low_s(r: int, s: int, order: int) -> bytes:
    if s > order // 2:
        s = order - s
    return sigencode_string(r, s, order)


def _signing_key(private_key: bytes) -> SigningKey:
    if not isinstance(private_key, (bytes, bytearray)):
        raise SigningError(
            f"Private key must be bytes, got {type(private_key).__name__}",
            ErrorCode.INVALID_KEY,
        )
    if len(private_key) != PRIVATE_KEY_LENGTH:
        raise SigningError(
            f"Private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(private_key)}",
            ErrorCode.INVALID_KEY,
        )
    secret = int.from_bytes(private_key, "big")
    if not 1 <= secret < CURVE_ORDER:
        raise SigningError("Private key is outside the secp256k1 scalar range", ErrorCode.INVALID_KEY)
    try:
        return SigningKey.from_string(bytes(private_key), curve=SECP256k1)
    except MalformedPointError as e:
        raise SigningError(f"Invalid private key: {e}", ErrorCode.INVALID_KEY, cause=e)


def sign_bytes(payload: bytes, private_key: bytes) -> bytes:
    """
    Sign a payload.

    Args:
        payload: Bytes to sign (a serialized SignDoc)
        private_key: 32-byte secp256k1 private key

    Returns:
        64-byte compact signature, low-S normalized

    Raises:
        SigningError: If the private key is malformed
    """
    signing_key = _signing_key(private_key)
    digest = sha256(payload)
    signature = signing_key.sign_digest_deterministic(
        digest, hashfunc=hashlib.sha256, sigencode=_sigencode_low_s
    )
    logger.debug("Signed %d-byte payload", len(payload))
    return signature


def verify_signature(payload: bytes, signature: bytes, public_key: bytes) -> bool:
    """
    Verify a compact signature over a payload.

    High-S signatures are rejected, matching chain-side verification.

    Args:
        payload: Signed bytes
        signature: 64-byte r || s signature
        public_key: Compressed (33-byte) or uncompressed public key

    Returns:
        True if the signature is valid
    """
    if len(signature) != SIGNATURE_LENGTH:
        return False
    _, s = sigdecode_string(signature, CURVE_ORDER)
    if s > CURVE_ORDER // 2:
        return False
    try:
        verifying_key = VerifyingKey.from_string(bytes(public_key), curve=SECP256k1)
        return verifying_key.verify_digest(signature, sha256(payload), sigdecode=sigdecode_string)
    except (BadSignatureError, MalformedPointError):
        return False


class Secp256k1KeyPair:
    """SECP256K1 key pair producing Cosmos SDK compact signatures."""

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize key pair.

        Args:
            private_key_bytes: 32-byte private key

        Raises:
            SigningError: If the key is malformed
        """
        self._signing_key = _signing_key(private_key_bytes)
        self._private_key_bytes = bytes(private_key_bytes)
        self.public_key_bytes = self._signing_key.get_verifying_key().to_string("compressed")

    @classmethod
    def generate(cls) -> Secp256k1KeyPair:
        """Generate a new random key pair."""
        return cls(SigningKey.generate(curve=SECP256k1).to_string())

    @classmethod
    def from_hex(cls, private_key_hex: str) -> Secp256k1KeyPair:
        """Create key pair from private key hex string."""
        try:
            private_key_bytes = bytes.fromhex(private_key_hex)
        except ValueError as e:
            raise SigningError(f"Invalid hex string: {e}", ErrorCode.INVALID_KEY, cause=e)
        return cls(private_key_bytes)

    def sign(self, message: bytes) -> bytes:
        """Sign a message; see sign_bytes()."""
        return sign_bytes(message, self._private_key_bytes)

    def verify(self, message: bytes, signature: bytes) -> bool:
        return verify_signature(message, signature, self.public_key_bytes)

    def to_bytes(self) -> bytes:
        """Get private key as bytes."""
        return self._private_key_bytes

    def to_hex(self) -> str:
        return self._private_key_bytes.hex()

    def __repr__(self) -> str:
        return f"Secp256k1KeyPair(public={self.public_key_bytes.hex()[:16]}...)"


__all__ = [
    "Secp256k1KeyPair",
    "sha256",
    "sign_bytes",
    "verify_signature",
]
