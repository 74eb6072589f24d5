"""
Message type registry.

Closed bidirectional mapping between readable message names (MessageKind)
and fully-qualified protobuf type names, with pack/unpack between typed
messages and GenericMessage envelopes.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Type, Union

from ..codec.message import ProtoMessage
from ..proto import messages as m
from ..proto.base import GenericMessage, Secp256k1PubKey
from ..runtime.errors import UnsupportedTypeError

logger = logging.getLogger(__name__)

PUB_KEY_TYPE_NAME = Secp256k1PubKey.type_name


class MessageKind(str, Enum):
    """Readable names of every supported transaction message."""

    SEND = "MsgSend"
    EXECUTE_CONTRACT = "MsgExecuteContract"
    GRANT = "MsgGrant"
    VERIFY_INVARIANT = "MsgVerifyInvariant"
    SET_WITHDRAW_ADDRESS = "MsgSetWithdrawAddress"
    WITHDRAW_DELEGATOR_REWARD = "MsgWithdrawDelegatorReward"
    WITHDRAW_VALIDATOR_COMMISSION = "MsgWithdrawValidatorCommission"
    FUND_COMMUNITY_POOL = "MsgFundCommunityPool"
    SUBMIT_EVIDENCE = "MsgSubmitEvidence"
    SUBMIT_PROPOSAL = "MsgSubmitProposal"
    VOTE = "MsgVote"
    VOTE_WEIGHTED = "MsgVoteWeighted"
    DEPOSIT = "MsgDeposit"
    UNJAIL = "MsgUnjail"
    CREATE_VALIDATOR = "MsgCreateValidator"
    EDIT_VALIDATOR = "MsgEditValidator"
    DELEGATE = "MsgDelegate"
    BEGIN_REDELEGATE = "MsgBeginRedelegate"
    UNDELEGATE = "MsgUndelegate"
    CREATE_VESTING_ACCOUNT = "MsgCreateVestingAccount"
    ADD_MARKER = "MsgAddMarkerRequest"
    ACTIVATE_MARKER = "MsgActivateRequest"
    FINALIZE_MARKER = "MsgFinalizeRequest"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RegisteredType:
    """One registry row: readable kind, wire type and decoder class."""

    kind: MessageKind
    message_cls: Type[ProtoMessage]

    @property
    def type_name(self) -> str:
        return self.message_cls.type_name

    @property
    def type_url(self) -> str:
        return f"/{self.type_name}"


_ENTRIES: Tuple[RegisteredType, ...] = (
    RegisteredType(MessageKind.SEND, m.MsgSend),
    RegisteredType(MessageKind.EXECUTE_CONTRACT, m.MsgExecuteContract),
    RegisteredType(MessageKind.GRANT, m.MsgGrant),
    RegisteredType(MessageKind.VERIFY_INVARIANT, m.MsgVerifyInvariant),
    RegisteredType(MessageKind.SET_WITHDRAW_ADDRESS, m.MsgSetWithdrawAddress),
    RegisteredType(MessageKind.WITHDRAW_DELEGATOR_REWARD, m.MsgWithdrawDelegatorReward),
    RegisteredType(MessageKind.WITHDRAW_VALIDATOR_COMMISSION, m.MsgWithdrawValidatorCommission),
    RegisteredType(MessageKind.FUND_COMMUNITY_POOL, m.MsgFundCommunityPool),
    RegisteredType(MessageKind.SUBMIT_EVIDENCE, m.MsgSubmitEvidence),
    RegisteredType(MessageKind.SUBMIT_PROPOSAL, m.MsgSubmitProposal),
    RegisteredType(MessageKind.VOTE, m.MsgVote),
    RegisteredType(MessageKind.VOTE_WEIGHTED, m.MsgVoteWeighted),
    RegisteredType(MessageKind.DEPOSIT, m.MsgDeposit),
    RegisteredType(MessageKind.UNJAIL, m.MsgUnjail),
    RegisteredType(MessageKind.CREATE_VALIDATOR, m.MsgCreateValidator),
    RegisteredType(MessageKind.EDIT_VALIDATOR, m.MsgEditValidator),
    RegisteredType(MessageKind.DELEGATE, m.MsgDelegate),
    RegisteredType(MessageKind.BEGIN_REDELEGATE, m.MsgBeginRedelegate),
    RegisteredType(MessageKind.UNDELEGATE, m.MsgUndelegate),
    RegisteredType(MessageKind.CREATE_VESTING_ACCOUNT, m.MsgCreateVestingAccount),
    RegisteredType(MessageKind.ADD_MARKER, m.MsgAddMarkerRequest),
    RegisteredType(MessageKind.ACTIVATE_MARKER, m.MsgActivateRequest),
    RegisteredType(MessageKind.FINALIZE_MARKER, m.MsgFinalizeRequest),
)

_BY_KIND: Dict[MessageKind, RegisteredType] = {entry.kind: entry for entry in _ENTRIES}
_BY_TYPE_NAME: Dict[str, RegisteredType] = {entry.type_name: entry for entry in _ENTRIES}

_unregistered = [kind.value for kind in MessageKind if kind not in _BY_KIND]
if _unregistered:
    raise TypeError(f"Message kinds without a registry entry: {_unregistered}")
if len(_BY_TYPE_NAME) != len(_ENTRIES) or len(_BY_KIND) != len(_ENTRIES):
    raise TypeError("Message registry contains duplicate kinds or type names")


def registered_types() -> Tuple[RegisteredType, ...]:
    """All registry rows in declaration order."""
    return _ENTRIES


def resolve_kind(kind: Union[MessageKind, str]) -> MessageKind:
    """
    Resolve a readable name to its MessageKind.

    Raises:
        UnsupportedTypeError: If the name is not registered
    """
    if isinstance(kind, MessageKind):
        return kind
    try:
        return MessageKind(kind)
    except ValueError:
        raise UnsupportedTypeError(
            f"Message type: {kind} is not supported",
            details={"readableName": str(kind)},
        ) from None


def type_name_for(kind: Union[MessageKind, str]) -> str:
    """Fully-qualified protobuf type name for a readable name."""
    return _BY_KIND[resolve_kind(kind)].type_name


def message_class_for(kind: Union[MessageKind, str]) -> Type[ProtoMessage]:
    """Message model class for a readable name."""
    return _BY_KIND[resolve_kind(kind)].message_cls


def kind_for_type_name(type_name: str) -> MessageKind:
    """
    Readable name for a type name or type url.

    Raises:
        UnsupportedTypeError: If the type is not registered
    """
    entry = _BY_TYPE_NAME.get(type_name.rsplit("/", 1)[-1])
    if entry is None:
        raise UnsupportedTypeError(
            f"Message type: {type_name} is not supported",
            details={"typeName": type_name},
        )
    return entry.kind


def pack(kind: Union[MessageKind, str], message_bytes: bytes, prefix: str = "/") -> GenericMessage:
    """
    Wrap serialized message bytes in a GenericMessage.

    Args:
        kind: Readable message name
        message_bytes: Serialized message
        prefix: Type url prefix

    Raises:
        UnsupportedTypeError: If kind is not registered
    """
    return GenericMessage.pack_bytes(message_bytes, type_name_for(kind), prefix)


def pack_message(kind: Union[MessageKind, str], message: ProtoMessage, prefix: str = "/") -> GenericMessage:
    """
    Serialize and pack a typed message.

    Raises:
        UnsupportedTypeError: If kind is not registered or message is not its type
    """
    expected = message_class_for(kind)
    if not isinstance(message, expected):
        raise UnsupportedTypeError(
            f"{type(message).__name__} cannot be packed as {resolve_kind(kind).value}",
            details={"expected": expected.__name__},
        )
    return pack(kind, message.to_bytes(), prefix)


def unpack(generic_message: GenericMessage) -> Tuple[MessageKind, ProtoMessage]:
    """
    Decode a GenericMessage into its readable name and typed message.

    Accepts type urls with or without a prefix.

    Raises:
        UnsupportedTypeError: If the type url is not registered
        DecodeError: If the payload does not decode as the registered type
    """
    kind = kind_for_type_name(generic_message.type_url)
    message_cls = _BY_KIND[kind].message_cls
    logger.debug("Unpacking %s (%d bytes)", message_cls.type_name, len(generic_message.value))
    return kind, message_cls.from_bytes(generic_message.value)


__all__ = [
    "PUB_KEY_TYPE_NAME",
    "MessageKind",
    "RegisteredType",
    "registered_types",
    "resolve_kind",
    "type_name_for",
    "message_class_for",
    "kind_for_type_name",
    "pack",
    "pack_message",
    "unpack",
]
