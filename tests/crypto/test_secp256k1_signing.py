"""
Test secp256k1 signing with compact low-S signatures.
"""

import pytest
from ecdsa import SECP256k1
from ecdsa.util import sigdecode_string, sigencode_string

from provenance_client.crypto import Secp256k1KeyPair, Wallet, sha256, sign_bytes, verify_signature
from provenance_client.runtime.errors import ErrorCode, SigningError


ORDER = SECP256k1.order
TEST_PRIVATE_KEY = bytes(range(1, 33))


def test_generator_public_key():
    """Private key 1 yields the compressed curve generator."""
    key_pair = Secp256k1KeyPair((1).to_bytes(32, "big"))
    assert key_pair.public_key_bytes.hex().upper() == (
        "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
    )


def test_sha256_vector():
    assert sha256(b"abc").hex() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestSigning:
    """Compact deterministic signatures."""

    def test_signature_shape(self, key_pair):
        signature = key_pair.sign(b"payload")
        assert len(signature) == 64

    def test_signature_verifies(self, key_pair):
        signature = key_pair.sign(b"payload")
        assert key_pair.verify(b"payload", signature)
        assert verify_signature(b"payload", signature, key_pair.public_key_bytes)

    def test_deterministic(self, key_pair):
        assert key_pair.sign(b"payload") == key_pair.sign(b"payload")
        assert key_pair.sign(b"payload") != key_pair.sign(b"other")

    @pytest.mark.parametrize("payload", [b"", b"payload", bytes(range(256)), b"\xff" * 1000])
    def test_low_s(self, payload):
        _, s = sigdecode_string(sign_bytes(payload, TEST_PRIVATE_KEY), ORDER)
        assert s <= ORDER // 2

    def test_module_function_matches_key_pair(self, key_pair):
        assert sign_bytes(b"payload", TEST_PRIVATE_KEY) == key_pair.sign(b"payload")


class TestVerification:
    """Verification rejects anything the chain would reject."""

    def test_tampered_payload(self, key_pair):
        signature = key_pair.sign(b"payload")
        assert not key_pair.verify(b"payloae", signature)

    def test_wrong_key(self, key_pair):
        signature = key_pair.sign(b"payload")
        other = Secp256k1KeyPair((2).to_bytes(32, "big"))
        assert not verify_signature(b"payload", signature, other.public_key_bytes)

    def test_high_s_rejected(self, key_pair):
        r, s = sigdecode_string(key_pair.sign(b"payload"), ORDER)
        high_s = sigencode_string(r, ORDER - s, ORDER)
        assert not key_pair.verify(b"payload", high_s)

    @pytest.mark.parametrize("length", [0, 63, 65, 71])
    def test_wrong_length(self, key_pair, length):
        assert not key_pair.verify(b"payload", b"\x01" * length)

    def test_malformed_public_key(self, key_pair):
        signature = key_pair.sign(b"payload")
        assert not verify_signature(b"payload", signature, b"\x02" + b"\x00" * 31)


class TestKeys:
    """Private key validation and wallet derivation."""

    @pytest.mark.parametrize("private_key", [
        b"\x01" * 31,
        b"\x01" * 33,
        b"\x00" * 32,
        ORDER.to_bytes(32, "big"),
        (ORDER + 1).to_bytes(32, "big"),
    ])
    def test_invalid_private_key(self, private_key):
        with pytest.raises(SigningError) as exc_info:
            sign_bytes(b"payload", private_key)
        assert exc_info.value.code == ErrorCode.INVALID_KEY

    def test_private_key_must_be_bytes(self):
        with pytest.raises(SigningError):
            Secp256k1KeyPair("01" * 32)

    def test_from_hex(self, key_pair):
        assert Secp256k1KeyPair.from_hex(TEST_PRIVATE_KEY.hex()).public_key_bytes == key_pair.public_key_bytes

    def test_from_bad_hex(self):
        with pytest.raises(SigningError) as exc_info:
            Secp256k1KeyPair.from_hex("zz")
        assert exc_info.value.code == ErrorCode.INVALID_KEY

    def test_generate(self):
        key_pair = Secp256k1KeyPair.generate()
        assert len(key_pair.to_bytes()) == 32
        assert key_pair.verify(b"x", key_pair.sign(b"x"))

    def test_wallet_from_hex_and_bytes(self, wallet, key_pair):
        assert Wallet.from_private_key(TEST_PRIVATE_KEY.hex()) == wallet
        assert wallet.public_key == key_pair.public_key_bytes
        assert len(wallet.public_key) == 33
        assert wallet.public_key[0] in (2, 3)

    def test_wallet_repr_hides_private_key(self, wallet):
        assert TEST_PRIVATE_KEY.hex() not in repr(wallet)
        assert repr(TEST_PRIVATE_KEY) not in repr(wallet)
