"""
Test message builders and the builder registry.
"""

import pytest

from provenance_client.proto import (
    Coin, Ed25519PubKey, GenericAuthorization, MsgSend, TextProposal, VoteOption,
)
from provenance_client.runtime.errors import BuilderError, ErrorCode, ValidationError
from provenance_client.tx import (
    BUILDER_REGISTRY,
    MessageKind,
    build_message,
    pack_message,
    parse_params,
    unpack,
)
from provenance_client.tx.builders import MsgDelegateParams, MsgSendParams, legacy_dec


def test_registry_covers_every_kind():
    assert set(BUILDER_REGISTRY) == set(MessageKind)


@pytest.mark.parametrize("kind", list(MessageKind))
def test_build_pack_unpack(kind, sample_params):
    """Every kind builds from wallet-style parameters and survives the envelope."""
    message = build_message(kind, sample_params[kind])
    decoded_kind, decoded = unpack(pack_message(kind, message))
    assert decoded_kind is kind
    assert decoded == message


@pytest.mark.parametrize("kind", list(MessageKind))
def test_parse_params_selects_model(kind, sample_params):
    params = parse_params({"kind": kind.value, **sample_params[kind]})
    assert isinstance(params, BUILDER_REGISTRY[kind][0])
    assert params.kind is kind


class TestBankBuilders:
    """MsgSend and vesting accounts carry aggregated coin lists."""

    def test_send_aggregates_amounts(self, sample_params):
        message = build_message(MessageKind.SEND, sample_params[MessageKind.SEND])
        assert message == MsgSend(
            from_address="tp1from",
            to_address="tp1to",
            amount=[Coin(denom="nhash", amount="150")],
        )

    def test_send_sorts_denoms(self):
        message = build_message("MsgSend", {
            "fromAddress": "a",
            "toAddress": "b",
            "amountList": [{"denom": "nhash", "amount": 1}, {"denom": "atom", "amount": 2}],
        })
        assert [coin.denom for coin in message.amount] == ["atom", "nhash"]

    def test_snake_case_names_accepted(self):
        message = build_message(MessageKind.SEND, {
            "from_address": "a",
            "to_address": "b",
            "amount_list": [{"denom": "nhash", "amount": "5"}],
        })
        assert message.from_address == "a"

    def test_model_instance_accepted(self):
        params = MsgSendParams(from_address="a", to_address="b", amount_list=[{"denom": "nhash", "amount": 5}])
        assert build_message(MessageKind.SEND, params).amount == [Coin(denom="nhash", amount="5")]

    def test_vesting_account(self, sample_params):
        message = build_message(MessageKind.CREATE_VESTING_ACCOUNT, sample_params[MessageKind.CREATE_VESTING_ACCOUNT])
        assert message.end_time == 1800000000
        assert message.delayed is True


class TestParameterValidation:
    """Malformed parameters fail before any message is produced."""

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            build_message(MessageKind.SEND, {"toAddress": "b", "amountList": [{"denom": "nhash", "amount": 1}]})
        assert exc_info.value.code == ErrorCode.MISSING_FIELD
        locs = [item["loc"] for item in exc_info.value.details["errors"]]
        assert any(loc[0] in ("fromAddress", "from_address") for loc in locs)

    def test_empty_amount_list(self):
        with pytest.raises(ValidationError) as exc_info:
            build_message(MessageKind.SEND, {"fromAddress": "a", "toAddress": "b", "amountList": []})
        assert exc_info.value.code == ErrorCode.INVALID_FIELD

    @pytest.mark.parametrize("amount", ["1.5", "-3", 2.5, "ten"])
    def test_bad_amount(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            build_message(MessageKind.SEND, {
                "fromAddress": "a",
                "toAddress": "b",
                "amountList": [{"denom": "nhash", "amount": amount}],
            })
        assert exc_info.value.code == ErrorCode.INVALID_AMOUNT

    def test_unknown_vote_option(self):
        with pytest.raises(ValidationError):
            build_message(MessageKind.VOTE, {"proposalId": 1, "voter": "v", "option": "VOTE_OPTION_MAYBE"})

    def test_contract_msg_must_be_json(self):
        with pytest.raises(ValidationError) as exc_info:
            build_message(MessageKind.EXECUTE_CONTRACT, {"sender": "s", "contract": "c", "msg": {"x": {1, 2}}})
        assert exc_info.value.details == {"field": "msg"}

    @pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
    def test_contract_msg_rejects_non_finite_numbers(self, number):
        with pytest.raises(ValidationError) as exc_info:
            build_message(MessageKind.EXECUTE_CONTRACT, {"sender": "s", "contract": "c", "msg": {"price": number}})
        assert exc_info.value.code == ErrorCode.INVALID_FIELD
        assert exc_info.value.details == {"field": "msg"}


class TestBuilderMismatch:
    """Parameters are only accepted by the kind they belong to."""

    def test_wrong_params_model(self):
        params = MsgDelegateParams(
            delegator_address="d",
            validator_address="v",
            amount={"denom": "nhash", "amount": 1},
        )
        with pytest.raises(BuilderError) as exc_info:
            build_message(MessageKind.SEND, params)
        assert exc_info.value.code == ErrorCode.BUILDER_MISMATCH

    def test_declared_kind_mismatch(self, sample_params):
        with pytest.raises(BuilderError):
            build_message(MessageKind.DELEGATE, {"kind": "MsgSend", **sample_params[MessageKind.SEND]})

    def test_unknown_kind(self):
        with pytest.raises(BuilderError) as exc_info:
            build_message("MsgTeleport", {})
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_TYPE

    def test_unsupported_params_object(self):
        with pytest.raises(BuilderError):
            build_message(MessageKind.SEND, ["not", "a", "mapping"])

    def test_parse_params_without_kind(self, sample_params):
        with pytest.raises(BuilderError) as exc_info:
            parse_params(sample_params[MessageKind.SEND])
        assert exc_info.value.code == ErrorCode.MISSING_FIELD


class TestMessageContent:
    """Field conversions performed by individual builders."""

    def test_execute_contract_msg_is_compact_json(self, sample_params):
        message = build_message(MessageKind.EXECUTE_CONTRACT, sample_params[MessageKind.EXECUTE_CONTRACT])
        assert message.msg == b'{"swap":{"amount":"5"}}'
        assert message.funds == [Coin(denom="nhash", amount="1000")]

    def test_execute_contract_keeps_unicode(self):
        message = build_message(MessageKind.EXECUTE_CONTRACT, {"sender": "s", "contract": "c", "msg": {"memo": "é"}})
        assert message.msg == '{"memo":"é"}'.encode("utf-8")

    def test_commission_rates_are_scaled(self, sample_params):
        message = build_message(MessageKind.CREATE_VALIDATOR, sample_params[MessageKind.CREATE_VALIDATOR])
        assert message.commission.rate == "100000000000000000"
        assert message.commission.max_rate == "200000000000000000"
        assert message.commission.max_change_rate == "10000000000000000"
        assert message.pubkey.unpack(Ed25519PubKey).key == bytes(range(32))
        assert message.description.website == "https://node.example"

    def test_edit_validator_optional_fields(self, sample_params):
        message = build_message(MessageKind.EDIT_VALIDATOR, sample_params[MessageKind.EDIT_VALIDATOR])
        assert message.description is None
        assert message.commission_rate == "50000000000000000"
        assert message.min_self_delegation == ""

    def test_vote_option_by_name(self, sample_params):
        message = build_message(MessageKind.VOTE, sample_params[MessageKind.VOTE])
        assert message.option == VoteOption.VOTE_OPTION_YES

    def test_weighted_vote(self, sample_params):
        message = build_message(MessageKind.VOTE_WEIGHTED, sample_params[MessageKind.VOTE_WEIGHTED])
        assert [(o.option, o.weight) for o in message.options] == [
            (VoteOption.VOTE_OPTION_YES, "700000000000000000"),
            (VoteOption.VOTE_OPTION_NO, "300000000000000000"),
        ]

    def test_proposal_content_is_text_proposal(self, sample_params):
        message = build_message(MessageKind.SUBMIT_PROPOSAL, sample_params[MessageKind.SUBMIT_PROPOSAL])
        content = message.content.unpack(TextProposal)
        assert content.title == "Raise block gas"

    def test_grant_authorization_and_expiration(self, sample_params):
        message = build_message(MessageKind.GRANT, sample_params[MessageKind.GRANT])
        authorization = message.grant.authorization.unpack(GenericAuthorization)
        assert authorization.msg == "/cosmos.bank.v1beta1.MsgSend"
        assert message.grant.expiration.seconds == 1700000000

    def test_evidence_from_base64(self, sample_params):
        message = build_message(MessageKind.SUBMIT_EVIDENCE, sample_params[MessageKind.SUBMIT_EVIDENCE])
        assert message.evidence.value == b"\x0a\x01"

    def test_marker_enums_by_name(self, sample_params):
        message = build_message(MessageKind.ADD_MARKER, sample_params[MessageKind.ADD_MARKER])
        assert message.marker_type == 2
        assert message.status == 1
        assert message.access_list[0].permissions == [1, 6]
        assert message.required_attributes == ["kyc.pb"]


class TestLegacyDec:
    """Decimal strings become 18-digit fixed-point integers."""

    @pytest.mark.parametrize("value,expected", [
        ("0", "0"),
        ("1", "1000000000000000000"),
        ("0.05", "50000000000000000"),
        ("0.000000000000000001", "1"),
    ])
    def test_conversion(self, value, expected):
        assert legacy_dec(value) == expected

    @pytest.mark.parametrize("value", ["0.0000000000000000001", "-0.1", "abc", "NaN", "Infinity"])
    def test_rejected(self, value):
        with pytest.raises(ValidationError):
            legacy_dec(value)
