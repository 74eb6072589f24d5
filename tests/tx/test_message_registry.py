"""
Test the readable name <-> protobuf type name registry.
"""

import pytest

from provenance_client.proto import Coin, GenericMessage, MsgDelegate, MsgSend
from provenance_client.runtime.errors import ErrorCode, UnsupportedTypeError
from provenance_client.tx.registry import (
    PUB_KEY_TYPE_NAME,
    MessageKind,
    kind_for_type_name,
    message_class_for,
    pack,
    pack_message,
    registered_types,
    resolve_kind,
    type_name_for,
    unpack,
)


def test_every_kind_is_registered():
    kinds = [entry.kind for entry in registered_types()]
    assert sorted(kinds, key=lambda k: k.value) == sorted(MessageKind, key=lambda k: k.value)


@pytest.mark.parametrize("kind", list(MessageKind))
def test_mapping_is_bidirectional(kind):
    type_name = type_name_for(kind)
    assert kind_for_type_name(type_name) == kind
    assert kind_for_type_name(f"/{type_name}") == kind
    assert message_class_for(kind).type_name == type_name


def test_known_type_names():
    assert type_name_for(MessageKind.SEND) == "cosmos.bank.v1beta1.MsgSend"
    assert type_name_for("MsgExecuteContract") == "cosmwasm.wasm.v1.MsgExecuteContract"
    assert type_name_for("MsgAddMarkerRequest") == "provenance.marker.v1.MsgAddMarkerRequest"
    assert PUB_KEY_TYPE_NAME == "cosmos.crypto.secp256k1.PubKey"


def test_resolve_kind_by_readable_name():
    assert resolve_kind("MsgVote") is MessageKind.VOTE
    assert resolve_kind(MessageKind.VOTE) is MessageKind.VOTE


def test_unknown_readable_name():
    with pytest.raises(UnsupportedTypeError) as exc_info:
        type_name_for("MsgTeleport")
    assert exc_info.value.code == ErrorCode.UNSUPPORTED_TYPE
    assert "MsgTeleport" in str(exc_info.value)


def test_unknown_type_name():
    with pytest.raises(UnsupportedTypeError):
        kind_for_type_name("/cosmos.bank.v1beta1.MsgMultiSend")


class TestPacking:
    """Typed messages are wrapped in and recovered from GenericMessage."""

    def test_pack_message_sets_type_url(self):
        message = MsgSend(from_address="a", to_address="b", amount=[Coin(denom="nhash", amount="1")])
        packed = pack_message(MessageKind.SEND, message)
        assert packed.type_url == "/cosmos.bank.v1beta1.MsgSend"
        assert packed.value == message.to_bytes()

    def test_custom_prefix(self):
        packed = pack(MessageKind.SEND, b"", prefix="type.googleapis.com")
        assert packed.type_url == "type.googleapis.com/cosmos.bank.v1beta1.MsgSend"
        assert unpack(packed) == (MessageKind.SEND, MsgSend())

    def test_pack_wrong_message_class(self):
        with pytest.raises(UnsupportedTypeError):
            pack_message(MessageKind.SEND, MsgDelegate(delegator_address="a"))

    def test_unpack_roundtrip(self):
        message = MsgDelegate(
            delegator_address="tp1del",
            validator_address="tpvaloper1val",
            amount=Coin(denom="nhash", amount="10"),
        )
        kind, decoded = unpack(pack_message("MsgDelegate", message))
        assert kind is MessageKind.DELEGATE
        assert decoded == message

    def test_unpack_without_slash(self):
        packed = GenericMessage(type_url="cosmos.bank.v1beta1.MsgSend", value=b"")
        assert unpack(packed)[0] is MessageKind.SEND

    def test_unpack_unregistered(self):
        with pytest.raises(UnsupportedTypeError):
            unpack(GenericMessage(type_url="/cosmos.bank.v1beta1.MsgMultiSend", value=b""))
