"""
Test decoding base64 wallet messages into display objects.
"""

import base64

import pytest

from provenance_client.display import (
    EXECUTE_CONTRACT_TYPE_NAME,
    GENERIC_TYPE_NAME,
    DISPLAY_HANDLERS,
    enum_name,
    format_display_object,
    unpack_display_object_from_wallet_message,
)
from provenance_client.proto import (
    Coin, GenericMessage, MarkerStatus, MsgAddMarkerRequest, MsgExecuteContract, VoteOption,
)
from provenance_client.runtime.errors import DecodeError, ErrorCode, FormattingError, UnsupportedTypeError
from provenance_client.tx import MessageKind, create_any_message_base64


def _b64(generic_message):
    return base64.b64encode(generic_message.to_bytes()).decode("ascii")


def test_every_kind_has_a_handler():
    assert set(DISPLAY_HANDLERS) == set(MessageKind)


@pytest.mark.parametrize("kind", list(MessageKind))
def test_every_kind_unpacks(kind, sample_params):
    display_object = unpack_display_object_from_wallet_message(create_any_message_base64(kind, sample_params[kind]))
    assert display_object["typeName"] in (kind.value, GENERIC_TYPE_NAME, EXECUTE_CONTRACT_TYPE_NAME)


class TestExecuteContract:
    """Contract messages show their JSON payload and integer funds."""

    def test_unprefixed_type_url(self):
        message = MsgExecuteContract(
            sender="tp1sender",
            contract="tp1contract",
            msg=b'{"swap":{"amount":"5"}}',
            funds=[Coin(denom="nhash", amount="1000")],
        )
        generic = GenericMessage(type_url="cosmwasm.wasm.v1.MsgExecuteContract", value=message.to_bytes())

        display_object = unpack_display_object_from_wallet_message(_b64(generic))

        assert display_object == {
            "typeName": "MsgExecuteContractGeneric",
            "sender": "tp1sender",
            "msg": {"swap": {"amount": "5"}},
            "fundsList": [{"denom": "nhash", "amount": 1000}],
        }

    def test_flattened(self):
        message = MsgExecuteContract(
            sender="tp1sender",
            contract="tp1contract",
            msg=b'{"swap":{"amount":"5"}}',
            funds=[Coin(denom="nhash", amount="1000")],
        )
        display_object = unpack_display_object_from_wallet_message(_b64(GenericMessage.pack(message)))

        assert format_display_object(display_object) == {
            "typeName": "MsgExecuteContractGeneric",
            "sender": "tp1sender",
            "msg": {},
            "swap": {"amount": "5"},
            "fundsList": {"denom": "nhash", "amount": 1000},
        }

    @pytest.mark.parametrize("payload", [b"{not json", b"\xff\xfe", b""])
    def test_invalid_json(self, payload):
        message = MsgExecuteContract(sender="s", contract="c", msg=payload)
        with pytest.raises(DecodeError) as exc_info:
            unpack_display_object_from_wallet_message(_b64(GenericMessage.pack(message)))
        assert exc_info.value.code == ErrorCode.INVALID_JSON

    def test_deeply_nested_msg_is_rejected_when_formatted(self):
        payload = b'{"a":' * 600 + b"1" + b"}" * 600
        message = MsgExecuteContract(sender="s", contract="c", msg=payload)
        display_object = unpack_display_object_from_wallet_message(_b64(GenericMessage.pack(message)))

        with pytest.raises(FormattingError) as exc_info:
            format_display_object(display_object)
        assert exc_info.value.code == ErrorCode.DISPLAY_TOO_DEEP

    def test_json_too_deep_to_parse(self):
        message = MsgExecuteContract(sender="s", contract="c", msg=b"[" * 200000 + b"]" * 200000)
        with pytest.raises(DecodeError) as exc_info:
            unpack_display_object_from_wallet_message(_b64(GenericMessage.pack(message)))
        assert exc_info.value.code == ErrorCode.INVALID_JSON

    def test_non_integer_funds(self):
        message = MsgExecuteContract(sender="s", contract="c", msg=b"{}", funds=[Coin(denom="nhash", amount="1.5")])
        with pytest.raises(DecodeError):
            unpack_display_object_from_wallet_message(_b64(GenericMessage.pack(message)))


class TestTypedDisplay:
    """Send and marker messages keep their own type names."""

    def test_send(self, sample_params):
        text = create_any_message_base64(MessageKind.SEND, sample_params[MessageKind.SEND])
        assert unpack_display_object_from_wallet_message(text) == {
            "typeName": "MsgSend",
            "fromAddress": "tp1from",
            "toAddress": "tp1to",
            "amountList": [{"denom": "nhash", "amount": "150"}],
        }

    def test_add_marker_enum_names(self, sample_params):
        text = create_any_message_base64(MessageKind.ADD_MARKER, sample_params[MessageKind.ADD_MARKER])
        display_object = unpack_display_object_from_wallet_message(text)

        assert display_object["typeName"] == "MsgAddMarkerRequest"
        assert display_object["markerType"] == "MARKER_TYPE_RESTRICTED"
        assert display_object["status"] == "MARKER_STATUS_PROPOSED"
        assert display_object["accessListList"] == [
            {"address": "tp1manager", "permissionsList": ["ACCESS_MINT", "ACCESS_ADMIN"]},
        ]
        assert display_object["amount"] == {"denom": "mycoin", "amount": "1000000"}
        assert display_object["requiredAttributesList"] == ["kyc.pb"]
        assert display_object["supplyFixed"] is True

    def test_add_marker_unknown_status(self):
        message = MsgAddMarkerRequest(from_address="tp1from", status=9, marker_type=1)
        with pytest.raises(UnsupportedTypeError) as exc_info:
            unpack_display_object_from_wallet_message(_b64(GenericMessage.pack(message)))
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_ENUM_VALUE


class TestGenericDisplay:
    """Every other kind is shown as MsgGeneric with its fields."""

    def test_delegate(self, sample_params):
        text = create_any_message_base64(MessageKind.DELEGATE, sample_params[MessageKind.DELEGATE])
        assert unpack_display_object_from_wallet_message(text) == {
            "typeName": "MsgGeneric",
            "delegatorAddress": "tp1del",
            "validatorAddress": "tpvaloper1val",
            "amount": {"denom": "nhash", "amount": "1000"},
        }

    def test_vote_option_name(self, sample_params):
        text = create_any_message_base64(MessageKind.VOTE, sample_params[MessageKind.VOTE])
        display_object = unpack_display_object_from_wallet_message(text)
        assert display_object["typeName"] == GENERIC_TYPE_NAME
        assert display_object["option"] == "VOTE_OPTION_YES"
        assert display_object["proposalId"] == 7

    def test_weighted_vote_option_names(self, sample_params):
        text = create_any_message_base64(MessageKind.VOTE_WEIGHTED, sample_params[MessageKind.VOTE_WEIGHTED])
        display_object = unpack_display_object_from_wallet_message(text)
        assert [item["option"] for item in display_object["optionsList"]] == ["VOTE_OPTION_YES", "VOTE_OPTION_NO"]

    def test_unset_submessage_is_none(self, sample_params):
        text = create_any_message_base64(MessageKind.EDIT_VALIDATOR, sample_params[MessageKind.EDIT_VALIDATOR])
        assert unpack_display_object_from_wallet_message(text)["description"] is None


class TestRejected:
    """Nothing unrecognized is ever displayed."""

    def test_unsupported_type_url(self):
        generic = GenericMessage(type_url="/cosmos.bank.v1beta1.MsgMultiSend", value=b"")
        with pytest.raises(UnsupportedTypeError) as exc_info:
            unpack_display_object_from_wallet_message(_b64(generic))
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_TYPE

    def test_malformed_base64(self):
        with pytest.raises(DecodeError) as exc_info:
            unpack_display_object_from_wallet_message("%%%")
        assert exc_info.value.code == ErrorCode.INVALID_BASE64

    def test_malformed_payload(self):
        generic = GenericMessage(type_url="/cosmos.bank.v1beta1.MsgSend", value=b"\x0a\x05ab")
        with pytest.raises(DecodeError):
            unpack_display_object_from_wallet_message(_b64(generic))


def test_enum_name():
    assert enum_name(VoteOption, 3) == "VOTE_OPTION_NO"
    assert enum_name(MarkerStatus, 3) == "MARKER_STATUS_ACTIVE"
    with pytest.raises(UnsupportedTypeError):
        enum_name(VoteOption, 42)
