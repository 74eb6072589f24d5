"""
Shared protobuf types: Any, Timestamp, Coin, public keys and BaseAccount.
"""

from datetime import datetime, timezone
from typing import ClassVar, Optional, Type, TypeVar

from ..codec.message import ProtoMessage, proto_field

M = TypeVar("M", bound=ProtoMessage)


class GenericMessage(ProtoMessage):
    """
    google.protobuf.Any: a type-tagged opaque payload.

    The only way a TxBody carries heterogeneous messages.
    """

    type_name: ClassVar[str] = "google.protobuf.Any"

    type_url: str = proto_field(1, "string")
    value: bytes = proto_field(2, "bytes")

    @classmethod
    def pack_bytes(cls, data: bytes, type_name: str, prefix: str = "/") -> "GenericMessage":
        """
        Wrap already-serialized message bytes.

        Args:
            data: Serialized message
            type_name: Fully-qualified protobuf type name
            prefix: Type url prefix; a trailing slash is added when missing
        """
        if prefix and not prefix.endswith("/"):
            prefix += "/"
        return cls(type_url=f"{prefix}{type_name}", value=data)

    @classmethod
    def pack(cls, message: ProtoMessage, prefix: str = "/") -> "GenericMessage":
        """Serialize and wrap a message under its own type name."""
        return cls.pack_bytes(message.to_bytes(), message.type_name, prefix)

    @property
    def packed_type_name(self) -> str:
        """Type url with everything through the last slash removed."""
        return self.type_url.rsplit("/", 1)[-1]

    def unpack(self, message_cls: Type[M]) -> Optional[M]:
        """Decode the payload as message_cls, or None when the type does not match."""
        if self.packed_type_name != message_cls.type_name:
            return None
        return message_cls.from_bytes(self.value)


class Timestamp(ProtoMessage):
    """google.protobuf.Timestamp"""

    type_name: ClassVar[str] = "google.protobuf.Timestamp"

    seconds: int = proto_field(1, "int64")
    nanos: int = proto_field(2, "int32")

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        delta = value - epoch
        seconds = delta.days * 86400 + delta.seconds
        return cls(seconds=seconds, nanos=delta.microseconds * 1000)

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.seconds, tz=timezone.utc).replace(microsecond=self.nanos // 1000)


class Coin(ProtoMessage):
    """cosmos.base.v1beta1.Coin; amount is an integer in string form."""

    type_name: ClassVar[str] = "cosmos.base.v1beta1.Coin"

    denom: str = proto_field(1, "string")
    amount: str = proto_field(2, "string")


class Secp256k1PubKey(ProtoMessage):
    """cosmos.crypto.secp256k1.PubKey (33-byte compressed key)"""

    type_name: ClassVar[str] = "cosmos.crypto.secp256k1.PubKey"

    key: bytes = proto_field(1, "bytes")


class Ed25519PubKey(ProtoMessage):
    """cosmos.crypto.ed25519.PubKey, used for validator consensus keys."""

    type_name: ClassVar[str] = "cosmos.crypto.ed25519.PubKey"

    key: bytes = proto_field(1, "bytes")


class BaseAccount(ProtoMessage):
    """cosmos.auth.v1beta1.BaseAccount as returned by an account query."""

    type_name: ClassVar[str] = "cosmos.auth.v1beta1.BaseAccount"

    address: str = proto_field(1, "string")
    pub_key: Optional[GenericMessage] = proto_field(2, "message")
    account_number: int = proto_field(3, "uint64")
    sequence: int = proto_field(4, "uint64")


__all__ = [
    "GenericMessage",
    "Timestamp",
    "Coin",
    "Secp256k1PubKey",
    "Ed25519PubKey",
    "BaseAccount",
]
