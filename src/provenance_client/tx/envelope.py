"""
Transaction envelope assembly.

Builds SignerInfo, AuthInfo and TxBody, derives the SignDoc, signs it and
wraps the result into broadcast and fee-calculation requests.

The body and auth info are serialized exactly once per transaction; the
same buffers go into the SignDoc and into the TxRaw so the signed bytes
and the submitted bytes cannot diverge.
"""

from __future__ import annotations
import base64
import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ..codec.hashes import sha256_hex
from ..codec.message import ProtoMessage
from ..config import DEFAULT_TX_OPTIONS, TxOptions
from ..crypto.secp256k1 import sign_bytes
from ..crypto.wallet import Wallet
from ..proto.base import BaseAccount, GenericMessage, Secp256k1PubKey
from ..proto.tx import (
    AuthInfo, BroadcastTxRequest, CalculateTxFeesRequest, Fee, ModeInfo,
    ModeInfoSingle, SignDoc, SignerInfo, SignMode, TxBody, TxRaw,
)
from ..runtime.errors import DecodeError, ErrorCode
from .builders.base import BaseParams
from .builders.registry import build_message
from .coins import aggregate_coins
from .registry import MessageKind, pack_message

logger = logging.getLogger(__name__)

Messages = Union[GenericMessage, Sequence[GenericMessage]]


def build_signer_info(base_account: BaseAccount, pub_key_bytes: bytes) -> SignerInfo:
    """
    Describe the single signer of a transaction.

    Args:
        base_account: Signer's on-chain account; supplies the sequence
        pub_key_bytes: 33-byte compressed secp256k1 public key

    Returns:
        SignerInfo in SIGN_MODE_DIRECT
    """
    return SignerInfo(
        public_key=GenericMessage.pack(Secp256k1PubKey(key=pub_key_bytes)),
        mode_info=ModeInfo(single=ModeInfoSingle(mode=SignMode.SIGN_MODE_DIRECT)),
        sequence=base_account.sequence,
    )


def build_auth_info(
    signer_info: Optional[SignerInfo],
    fee_denom: str,
    fee_estimate: Optional[Iterable[Any]] = None,
    gas_limit: int = 0,
) -> AuthInfo:
    """
    Build the AuthInfo carrying the signer and the fee.

    Args:
        signer_info: The signer; None leaves signer_infos empty
        fee_denom: Denomination fees are paid in. Accepted for call-site
            symmetry with fee calculation; the fee amounts come from fee_estimate
        fee_estimate: Coins to pay; aggregated per denom and sorted
        gas_limit: Gas limit for the transaction

    Raises:
        ValidationError: If any fee coin is malformed
    """
    fee = Fee(amount=aggregate_coins(fee_estimate or ()), gas_limit=gas_limit)
    signer_infos = [info for info in (signer_info,) if info is not None]
    logger.debug("AuthInfo fee=%s gas_limit=%d denom=%s", fee.amount, gas_limit, fee_denom)
    return AuthInfo(signer_infos=signer_infos, fee=fee)


def build_tx_body(messages: Messages, memo: str = "", timeout_height: int = 0) -> TxBody:
    """Wrap one message or a sequence of messages, preserving their order."""
    if isinstance(messages, GenericMessage):
        messages = [messages]
    return TxBody(messages=list(messages), memo=memo, timeout_height=timeout_height)


def build_sign_doc(account_number: int, chain_id: str, body_bytes: bytes, auth_info_bytes: bytes) -> SignDoc:
    """
    Build the SignDoc from already-serialized body and auth info.

    Its serialization is the exact byte sequence that gets signed.
    """
    return SignDoc(
        body_bytes=body_bytes,
        auth_info_bytes=auth_info_bytes,
        chain_id=chain_id,
        account_number=account_number,
    )


def build_tx_raw(body_bytes: bytes, auth_info_bytes: bytes, signatures: Sequence[bytes]) -> TxRaw:
    """Assemble the signed envelope from the serialized parts."""
    return TxRaw(body_bytes=body_bytes, auth_info_bytes=auth_info_bytes, signatures=list(signatures))


def sign_tx(
    messages: Messages,
    base_account: BaseAccount,
    chain_id: str,
    wallet: Wallet,
    fee_estimate: Optional[Iterable[Any]] = None,
    gas_limit: int = 0,
    memo: Optional[str] = None,
    options: Optional[TxOptions] = None,
) -> TxRaw:
    """
    Build and sign a single-signer transaction.

    Args:
        messages: Packed message or messages
        base_account: Signer's account (account number and sequence)
        chain_id: Target chain id
        wallet: Signer's keys
        fee_estimate: Fee coins
        gas_limit: Gas limit
        memo: Memo; defaults to options.memo
        options: Transaction defaults

    Returns:
        TxRaw whose body and auth info bytes are the ones that were signed

    Raises:
        ValidationError: If a fee coin is malformed
        SigningError: If the wallet's private key is malformed
    """
    options = options or DEFAULT_TX_OPTIONS
    signer_info = build_signer_info(base_account, wallet.public_key)
    auth_info = build_auth_info(signer_info, options.fee_denom, fee_estimate, gas_limit)
    tx_body = build_tx_body(messages, options.memo if memo is None else memo)

    body_bytes = tx_body.to_bytes()
    auth_info_bytes = auth_info.to_bytes()

    sign_doc_bytes = build_sign_doc(base_account.account_number, chain_id, body_bytes, auth_info_bytes).to_bytes()
    signature = sign_bytes(sign_doc_bytes, wallet.private_key)
    logger.debug(
        "Signed tx on %s: body=%d auth_info=%d sign_doc=%d bytes, %d messages",
        chain_id, len(body_bytes), len(auth_info_bytes), len(sign_doc_bytes), len(tx_body.messages),
    )
    return build_tx_raw(body_bytes, auth_info_bytes, [signature])


def build_broadcast_tx_request(
    messages: Messages,
    base_account: BaseAccount,
    chain_id: str,
    wallet: Wallet,
    fee_estimate: Optional[Iterable[Any]] = None,
    gas_limit: int = 0,
    memo: Optional[str] = None,
    options: Optional[TxOptions] = None,
) -> BroadcastTxRequest:
    """
    Sign a transaction and wrap it for submission.

    The request mode comes from options.broadcast_mode (block by default).
    """
    options = options or DEFAULT_TX_OPTIONS
    tx_raw = sign_tx(messages, base_account, chain_id, wallet, fee_estimate, gas_limit, memo, options)
    return BroadcastTxRequest(tx_bytes=tx_raw.to_bytes(), mode=options.broadcast_mode)


def build_calculate_tx_fee_request(
    messages: Messages,
    base_account: BaseAccount,
    public_key: bytes,
    gas_limit: int = 0,
    gas_price_denom: Optional[str] = None,
    gas_adjustment: Optional[float] = None,
    options: Optional[TxOptions] = None,
) -> CalculateTxFeesRequest:
    """
    Build a fee simulation request.

    The enclosed TxRaw carries one empty placeholder signature so the
    envelope has a realistic shape. It is not a validly signed transaction.

    Args:
        messages: Packed message or messages
        base_account: Signer's account
        public_key: Signer's compressed public key
        gas_limit: Gas limit placed in the fee
        gas_price_denom: Base denom for the estimate; defaults to options.fee_denom
        gas_adjustment: Simulation multiplier; defaults to options.gas_adjustment
    """
    options = options or DEFAULT_TX_OPTIONS
    denom = gas_price_denom or options.fee_denom
    adjustment = options.gas_adjustment if gas_adjustment is None else gas_adjustment

    auth_info = build_auth_info(build_signer_info(base_account, public_key), denom, None, gas_limit)
    tx_body = build_tx_body(messages)
    tx_raw = build_tx_raw(tx_body.to_bytes(), auth_info.to_bytes(), [b""])
    return CalculateTxFeesRequest(
        tx_bytes=tx_raw.to_bytes(),
        default_base_denom=denom,
        gas_adjustment=adjustment,
    )


def compute_tx_hash(tx_bytes: bytes) -> str:
    """Transaction hash as reported by the chain: upper-case hex SHA-256 of the TxRaw bytes."""
    return sha256_hex(tx_bytes)


def create_any_message_base64(
    kind: Union[MessageKind, str],
    message: Union[ProtoMessage, BaseParams, Mapping[str, Any]],
    prefix: Optional[str] = None,
) -> str:
    """
    Pack a message and encode the envelope as standard base64 text.

    Args:
        kind: Readable message name
        message: Typed message, or builder parameters for it
        prefix: Type url prefix; defaults to the configured type_url_prefix

    Raises:
        UnsupportedTypeError: If kind is not registered or does not match message
        BuilderError, ValidationError: If building from parameters fails
    """
    if not isinstance(message, ProtoMessage):
        message = build_message(kind, message)
    packed = pack_message(kind, message, DEFAULT_TX_OPTIONS.type_url_prefix if prefix is None else prefix)
    return base64.b64encode(packed.to_bytes()).decode("ascii")


def msg_any_b64_to_any(text: str) -> GenericMessage:
    """
    Decode base64 transport text into a GenericMessage.

    Whitespace anywhere in the text, such as line breaks in wrapped base64,
    is ignored. Anything else outside the base64 alphabet is rejected.

    Raises:
        DecodeError: If the text is not valid base64 or not a serialized envelope
    """
    if not isinstance(text, str):
        raise DecodeError(f"Expected base64 text, got {type(text).__name__}", ErrorCode.INVALID_BASE64)
    try:
        data = base64.b64decode("".join(text.split()), validate=True)
    except ValueError as e:
        raise DecodeError("Message is not valid base64", ErrorCode.INVALID_BASE64, cause=e)
    return GenericMessage.from_bytes(data)


__all__ = [
    "Messages",
    "build_signer_info",
    "build_auth_info",
    "build_tx_body",
    "build_sign_doc",
    "build_tx_raw",
    "sign_tx",
    "build_broadcast_tx_request",
    "build_calculate_tx_fee_request",
    "compute_tx_hash",
    "create_any_message_base64",
    "msg_any_b64_to_any",
]
