"""
Cryptographic primitives: SHA-256, secp256k1 signing and the Wallet model.
"""

from .secp256k1 import Secp256k1KeyPair, sha256, sign_bytes, verify_signature
from .wallet import Wallet

__all__ = [
    "Secp256k1KeyPair",
    "Wallet",
    "sha256",
    "sign_bytes",
    "verify_signature",
]
