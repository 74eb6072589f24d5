"""
Wallet message unpacking for display.

Decodes base64 transport text into a GenericMessage, resolves its type
through the registry, decodes the typed message and converts it into a
generic mapping tagged with a `typeName` discriminator. Unknown types and
undecodable payloads always raise; nothing unrecognized is shown.
"""

from __future__ import annotations
import json
import logging
from enum import IntEnum
from typing import Any, Callable, Dict, Type

from ..codec.message import ProtoMessage
from ..proto.messages import (
    Access, MarkerStatus, MarkerType, MsgAddMarkerRequest,
    MsgExecuteContract, MsgSend, MsgVote, MsgVoteWeighted, VoteOption,
)
from ..runtime.errors import DecodeError, ErrorCode, UnsupportedTypeError
from ..tx.envelope import msg_any_b64_to_any
from ..tx.registry import MessageKind, unpack

logger = logging.getLogger(__name__)

GENERIC_TYPE_NAME = "MsgGeneric"
EXECUTE_CONTRACT_TYPE_NAME = "MsgExecuteContractGeneric"

DisplayObject = Dict[str, Any]
DisplayHandler = Callable[[Any], DisplayObject]


def enum_name(enum_cls: Type[IntEnum], value: int) -> str:
    """
    Symbolic name of an enum wire value.

    Raises:
        UnsupportedTypeError: If the value is not defined by the enum
    """
    try:
        return enum_cls(value).name
    except ValueError:
        raise UnsupportedTypeError(
            f"Unknown {enum_cls.__name__} value: {value}",
            ErrorCode.UNSUPPORTED_ENUM_VALUE,
            details={"enum": enum_cls.__name__, "value": value},
        ) from None


def _generic(message: ProtoMessage) -> DisplayObject:
    return {"typeName": GENERIC_TYPE_NAME, **message.to_object()}


def _send(message: MsgSend) -> DisplayObject:
    return {"typeName": MessageKind.SEND.value, **message.to_object()}


def _execute_contract(message: MsgExecuteContract) -> DisplayObject:
    try:
        msg = json.loads(message.msg.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError("Contract message is not valid UTF-8 JSON", ErrorCode.INVALID_JSON, cause=e)
    except RecursionError as e:
        raise DecodeError("Contract message JSON is nested too deeply", ErrorCode.INVALID_JSON, cause=e)
    try:
        funds = [{"denom": coin.denom, "amount": int(coin.amount)} for coin in message.funds]
    except ValueError as e:
        raise DecodeError("Contract funds carry a non-integer amount", ErrorCode.INVALID_BINARY, cause=e)
    return {
        "typeName": EXECUTE_CONTRACT_TYPE_NAME,
        "sender": message.sender,
        "msg": msg,
        "fundsList": funds,
    }


def _add_marker(message: MsgAddMarkerRequest) -> DisplayObject:
    return {
        "typeName": MessageKind.ADD_MARKER.value,
        **message.to_object(),
        "markerType": enum_name(MarkerType, message.marker_type),
        "status": enum_name(MarkerStatus, message.status),
        "accessListList": [
            {
                "address": grant.address,
                "permissionsList": [enum_name(Access, perm) for perm in grant.permissions],
            }
            for grant in message.access_list
        ],
    }


def _vote(message: MsgVote) -> DisplayObject:
    return {**_generic(message), "option": enum_name(VoteOption, message.option)}


def _vote_weighted(message: MsgVoteWeighted) -> DisplayObject:
    return {
        **_generic(message),
        "optionsList": [
            {"option": enum_name(VoteOption, item.option), "weight": item.weight}
            for item in message.options
        ],
    }


DISPLAY_HANDLERS: Dict[MessageKind, DisplayHandler] = {
    MessageKind.SEND: _send,
    MessageKind.EXECUTE_CONTRACT: _execute_contract,
    MessageKind.ADD_MARKER: _add_marker,
    MessageKind.VOTE: _vote,
    MessageKind.VOTE_WEIGHTED: _vote_weighted,
    MessageKind.GRANT: _generic,
    MessageKind.VERIFY_INVARIANT: _generic,
    MessageKind.SET_WITHDRAW_ADDRESS: _generic,
    MessageKind.WITHDRAW_DELEGATOR_REWARD: _generic,
    MessageKind.WITHDRAW_VALIDATOR_COMMISSION: _generic,
    MessageKind.FUND_COMMUNITY_POOL: _generic,
    MessageKind.SUBMIT_EVIDENCE: _generic,
    MessageKind.SUBMIT_PROPOSAL: _generic,
    MessageKind.DEPOSIT: _generic,
    MessageKind.UNJAIL: _generic,
    MessageKind.CREATE_VALIDATOR: _generic,
    MessageKind.EDIT_VALIDATOR: _generic,
    MessageKind.DELEGATE: _generic,
    MessageKind.BEGIN_REDELEGATE: _generic,
    MessageKind.UNDELEGATE: _generic,
    MessageKind.CREATE_VESTING_ACCOUNT: _generic,
    MessageKind.ACTIVATE_MARKER: _generic,
    MessageKind.FINALIZE_MARKER: _generic,
}

_missing = [kind.value for kind in MessageKind if kind not in DISPLAY_HANDLERS]
if _missing:
    raise TypeError(f"Message kinds without a display handler: {_missing}")


def unpack_display_object_from_wallet_message(any_b64: str) -> DisplayObject:
    """
    Decode a base64 wallet message into a display object.

    Args:
        any_b64: Base64 text of a serialized GenericMessage

    Returns:
        Mapping with a "typeName" discriminator: "MsgSend",
        "MsgExecuteContractGeneric", "MsgAddMarkerRequest" or "MsgGeneric"

    Raises:
        DecodeError: If the text, envelope, payload or contract JSON is malformed
        UnsupportedTypeError: If the type url or an enum value is not recognized
    """
    generic_message = msg_any_b64_to_any(any_b64)
    kind, message = unpack(generic_message)
    display_object = DISPLAY_HANDLERS[kind](message)
    logger.debug("Unpacked %s for display as %s", kind.value, display_object["typeName"])
    return display_object


__all__ = [
    "DISPLAY_HANDLERS",
    "EXECUTE_CONTRACT_TYPE_NAME",
    "GENERIC_TYPE_NAME",
    "DisplayObject",
    "enum_name",
    "unpack_display_object_from_wallet_message",
]
