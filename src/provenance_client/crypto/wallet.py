"""
Signing identity used by the transaction envelope.
"""

from __future__ import annotations
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .secp256k1 import Secp256k1KeyPair


class Wallet(BaseModel):
    """A compressed secp256k1 public key and its 32-byte private key."""

    model_config = ConfigDict(frozen=True)

    public_key: bytes = Field(min_length=33, max_length=33)
    private_key: bytes = Field(min_length=32, max_length=32, repr=False)

    @classmethod
    def from_private_key(cls, private_key: Union[bytes, str]) -> "Wallet":
        """
        Derive a wallet from raw private key bytes or their hex form.

        Raises:
            SigningError: If the key is malformed
        """
        if isinstance(private_key, str):
            key_pair = Secp256k1KeyPair.from_hex(private_key)
        else:
            key_pair = Secp256k1KeyPair(private_key)
        return cls(public_key=key_pair.public_key_bytes, private_key=key_pair.to_bytes())


__all__ = ["Wallet"]
