"""
Message builder registry.

Maps every MessageKind to its parameter model and builder function. The
mapping is checked for completeness at import time.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Mapping, Tuple, Type, Union

from pydantic import ValidationError as PydanticValidationError

from ...codec.message import ProtoMessage
from ...runtime.errors import BuilderError, ErrorCode, UnsupportedTypeError, ValidationError
from ..registry import MessageKind, resolve_kind
from .bank import (
    MsgCreateVestingAccountParams, MsgSendParams,
    build_msg_create_vesting_account, build_msg_send,
)
from .base import BaseParams
from .distribution import (
    MsgFundCommunityPoolParams, MsgSetWithdrawAddressParams,
    MsgWithdrawDelegatorRewardParams, MsgWithdrawValidatorCommissionParams,
    build_msg_fund_community_pool, build_msg_set_withdraw_address,
    build_msg_withdraw_delegator_reward, build_msg_withdraw_validator_commission,
)
from .gov import (
    MsgDepositParams, MsgSubmitProposalParams, MsgVoteParams, MsgVoteWeightedParams,
    build_msg_deposit, build_msg_submit_proposal, build_msg_vote, build_msg_vote_weighted,
)
from .marker import (
    MsgActivateRequestParams, MsgAddMarkerRequestParams, MsgFinalizeRequestParams,
    build_msg_activate, build_msg_add_marker, build_msg_finalize,
)
from .misc import (
    MsgGrantParams, MsgSubmitEvidenceParams, MsgUnjailParams, MsgVerifyInvariantParams,
    build_msg_grant, build_msg_submit_evidence, build_msg_unjail, build_msg_verify_invariant,
)
from .staking import (
    MsgBeginRedelegateParams, MsgCreateValidatorParams, MsgDelegateParams,
    MsgEditValidatorParams, MsgUndelegateParams,
    build_msg_begin_redelegate, build_msg_create_validator, build_msg_delegate,
    build_msg_edit_validator, build_msg_undelegate,
)
from .wasm import MsgExecuteContractParams, build_msg_execute_contract

logger = logging.getLogger(__name__)

Builder = Callable[[Any], ProtoMessage]

# Builder registry - maps each message kind to (parameter model, builder)
BUILDER_REGISTRY: Dict[MessageKind, Tuple[Type[BaseParams], Builder]] = {
    MessageKind.SEND: (MsgSendParams, build_msg_send),
    MessageKind.EXECUTE_CONTRACT: (MsgExecuteContractParams, build_msg_execute_contract),
    MessageKind.GRANT: (MsgGrantParams, build_msg_grant),
    MessageKind.VERIFY_INVARIANT: (MsgVerifyInvariantParams, build_msg_verify_invariant),
    MessageKind.SET_WITHDRAW_ADDRESS: (MsgSetWithdrawAddressParams, build_msg_set_withdraw_address),
    MessageKind.WITHDRAW_DELEGATOR_REWARD: (MsgWithdrawDelegatorRewardParams, build_msg_withdraw_delegator_reward),
    MessageKind.WITHDRAW_VALIDATOR_COMMISSION: (
        MsgWithdrawValidatorCommissionParams, build_msg_withdraw_validator_commission,
    ),
    MessageKind.FUND_COMMUNITY_POOL: (MsgFundCommunityPoolParams, build_msg_fund_community_pool),
    MessageKind.SUBMIT_EVIDENCE: (MsgSubmitEvidenceParams, build_msg_submit_evidence),
    MessageKind.SUBMIT_PROPOSAL: (MsgSubmitProposalParams, build_msg_submit_proposal),
    MessageKind.VOTE: (MsgVoteParams, build_msg_vote),
    MessageKind.VOTE_WEIGHTED: (MsgVoteWeightedParams, build_msg_vote_weighted),
    MessageKind.DEPOSIT: (MsgDepositParams, build_msg_deposit),
    MessageKind.UNJAIL: (MsgUnjailParams, build_msg_unjail),
    MessageKind.CREATE_VALIDATOR: (MsgCreateValidatorParams, build_msg_create_validator),
    MessageKind.EDIT_VALIDATOR: (MsgEditValidatorParams, build_msg_edit_validator),
    MessageKind.DELEGATE: (MsgDelegateParams, build_msg_delegate),
    MessageKind.BEGIN_REDELEGATE: (MsgBeginRedelegateParams, build_msg_begin_redelegate),
    MessageKind.UNDELEGATE: (MsgUndelegateParams, build_msg_undelegate),
    MessageKind.CREATE_VESTING_ACCOUNT: (MsgCreateVestingAccountParams, build_msg_create_vesting_account),
    MessageKind.ADD_MARKER: (MsgAddMarkerRequestParams, build_msg_add_marker),
    MessageKind.ACTIVATE_MARKER: (MsgActivateRequestParams, build_msg_activate),
    MessageKind.FINALIZE_MARKER: (MsgFinalizeRequestParams, build_msg_finalize),
}

_missing = [kind.value for kind in MessageKind if kind not in BUILDER_REGISTRY]
if _missing:
    raise TypeError(f"Message kinds without a builder: {_missing}")

MessageParams = Union[tuple(params_cls for params_cls, _ in BUILDER_REGISTRY.values())]


def _validation_error(kind: MessageKind, error: PydanticValidationError) -> ValidationError:
    errors = error.errors(include_url=False, include_context=False)
    missing = any(item.get("type") == "missing" for item in errors)
    return ValidationError(
        f"Invalid {kind.value} parameters: {error.error_count()} error(s)",
        ErrorCode.MISSING_FIELD if missing else ErrorCode.INVALID_FIELD,
        details={"errors": [
            {"loc": list(item["loc"]), "type": item["type"], "msg": item["msg"]} for item in errors
        ]},
        cause=error,
    )


def _resolve(kind: Any) -> MessageKind:
    try:
        return resolve_kind(kind)
    except UnsupportedTypeError as e:
        raise BuilderError(e.message, ErrorCode.UNSUPPORTED_TYPE, details=e.details, cause=e)


def _validate_params(kind: MessageKind, data: Mapping[str, Any]) -> BaseParams:
    params_cls, _ = BUILDER_REGISTRY[kind]
    fields = {key: value for key, value in data.items() if key != "kind"}
    try:
        return params_cls.model_validate(fields)
    except PydanticValidationError as e:
        raise _validation_error(kind, e)


def parse_params(data: Mapping[str, Any]) -> BaseParams:
    """
    Validate a mapping carrying a "kind" key into its parameter model.

    Raises:
        BuilderError: If "kind" is missing or not a registered message
        ValidationError: If the parameters do not validate
    """
    if data.get("kind") is None:
        raise BuilderError("Message parameters carry no kind", ErrorCode.MISSING_FIELD)
    return _validate_params(_resolve(data["kind"]), data)


def build_message(kind: Union[MessageKind, str], params: Union[BaseParams, Mapping[str, Any]]) -> ProtoMessage:
    """
    Build a typed message from its parameters.

    Args:
        kind: Readable message name
        params: The kind's parameter model, or a mapping validated into it

    Returns:
        The typed message, ready for pack_message()

    Raises:
        BuilderError: If kind is unknown or params belong to another kind
        ValidationError: If required fields are missing or malformed
    """
    kind = _resolve(kind)
    params_cls, builder = BUILDER_REGISTRY[kind]

    if isinstance(params, BaseParams):
        if not isinstance(params, params_cls):
            raise BuilderError(
                f"{type(params).__name__} cannot build {kind.value}",
                details={"expected": params_cls.__name__},
            )
    elif isinstance(params, Mapping):
        declared = params.get("kind", kind)
        if declared != kind:
            raise BuilderError(
                f"Parameters for {declared} cannot build {kind.value}",
                details={"declared": str(declared)},
            )
        params = _validate_params(kind, params)
    else:
        raise BuilderError(f"Unsupported parameter object for {kind.value}: {type(params).__name__}")

    message = builder(params)
    logger.debug("Built %s", kind.value)
    return message


__all__ = [
    "BUILDER_REGISTRY",
    "MessageParams",
    "build_message",
    "parse_params",
]
