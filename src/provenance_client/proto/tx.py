"""
Transaction envelope types (cosmos.tx.v1beta1) plus the broadcast and
fee-calculation request carriers.
"""

from enum import IntEnum
from typing import ClassVar, List, Optional

from ..codec.message import ProtoMessage, proto_field
from .base import Coin, GenericMessage


class SignMode(IntEnum):
    """cosmos.tx.signing.v1beta1.SignMode"""

    SIGN_MODE_UNSPECIFIED = 0
    SIGN_MODE_DIRECT = 1
    SIGN_MODE_TEXTUAL = 2
    SIGN_MODE_DIRECT_AUX = 3
    SIGN_MODE_LEGACY_AMINO_JSON = 127
    SIGN_MODE_EIP_191 = 191


class BroadcastMode(IntEnum):
    """cosmos.tx.v1beta1.BroadcastMode"""

    BROADCAST_MODE_UNSPECIFIED = 0
    BROADCAST_MODE_BLOCK = 1
    BROADCAST_MODE_SYNC = 2
    BROADCAST_MODE_ASYNC = 3


class TxBody(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.tx.v1beta1.TxBody"

    messages: List[GenericMessage] = proto_field(1, "message", repeated=True)
    memo: str = proto_field(2, "string")
    timeout_height: int = proto_field(3, "uint64")


class ModeInfoSingle(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.tx.v1beta1.ModeInfo.Single"

    mode: int = proto_field(1, "enum")


class ModeInfo(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.tx.v1beta1.ModeInfo"

    single: Optional[ModeInfoSingle] = proto_field(1, "message")


class SignerInfo(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.tx.v1beta1.SignerInfo"

    public_key: Optional[GenericMessage] = proto_field(1, "message")
    mode_info: Optional[ModeInfo] = proto_field(2, "message")
    sequence: int = proto_field(3, "uint64")


class Fee(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.tx.v1beta1.Fee"

    amount: List[Coin] = proto_field(1, "message", repeated=True)
    gas_limit: int = proto_field(2, "uint64")
    payer: str = proto_field(3, "string")
    granter: str = proto_field(4, "string")


class AuthInfo(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.tx.v1beta1.AuthInfo"

    signer_infos: List[SignerInfo] = proto_field(1, "message", repeated=True)
    fee: Optional[Fee] = proto_field(2, "message")


class SignDoc(ProtoMessage):
    """The exact structure whose serialization is hashed and signed."""

    type_name: ClassVar[str] = "cosmos.tx.v1beta1.SignDoc"

    body_bytes: bytes = proto_field(1, "bytes")
    auth_info_bytes: bytes = proto_field(2, "bytes")
    chain_id: str = proto_field(3, "string")
    account_number: int = proto_field(4, "uint64")


class TxRaw(ProtoMessage):
    """Signed envelope; signatures align positionally with AuthInfo.signer_infos."""

    type_name: ClassVar[str] = "cosmos.tx.v1beta1.TxRaw"

    body_bytes: bytes = proto_field(1, "bytes")
    auth_info_bytes: bytes = proto_field(2, "bytes")
    signatures: List[bytes] = proto_field(3, "bytes", repeated=True)


class BroadcastTxRequest(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.tx.v1beta1.BroadcastTxRequest"

    tx_bytes: bytes = proto_field(1, "bytes")
    mode: int = proto_field(2, "enum")


class CalculateTxFeesRequest(ProtoMessage):
    """provenance.msgfees.v1.CalculateTxFeesRequest"""

    type_name: ClassVar[str] = "provenance.msgfees.v1.CalculateTxFeesRequest"

    tx_bytes: bytes = proto_field(1, "bytes")
    default_base_denom: str = proto_field(2, "string")
    gas_adjustment: float = proto_field(3, "float")


__all__ = [
    "SignMode",
    "BroadcastMode",
    "TxBody",
    "ModeInfoSingle",
    "ModeInfo",
    "SignerInfo",
    "Fee",
    "AuthInfo",
    "SignDoc",
    "TxRaw",
    "BroadcastTxRequest",
    "CalculateTxFeesRequest",
]
