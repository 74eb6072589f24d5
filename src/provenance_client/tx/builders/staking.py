"""
Staking message builders.

Commission rates are given as decimals ("0.05") and converted to the
18-digit fixed-point integers the staking module expects on the wire.
"""

from __future__ import annotations
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from ...proto.base import Ed25519PubKey, GenericMessage
from ...proto.messages import (
    CommissionRates, Description, MsgBeginRedelegate, MsgCreateValidator,
    MsgDelegate, MsgEditValidator, MsgUndelegate,
)
from ..coins import canonical_amount
from ..registry import MessageKind
from .base import BaseParams, CoinParams, decode_bytes, legacy_dec


class DescriptionParams(BaseParams):
    moniker: str = Field(min_length=1)
    identity: str = ""
    website: str = ""
    security_contact: str = ""
    details: str = ""

    def to_proto(self) -> Description:
        return Description(**self.model_dump())


class CommissionParams(BaseParams):
    rate: str
    max_rate: str
    max_change_rate: str

    @field_validator("rate", "max_rate", "max_change_rate", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        return str(value)

    def to_proto(self) -> CommissionRates:
        return CommissionRates(
            rate=legacy_dec(self.rate),
            max_rate=legacy_dec(self.max_rate),
            max_change_rate=legacy_dec(self.max_change_rate),
        )


class MsgCreateValidatorParams(BaseParams):
    kind: Literal[MessageKind.CREATE_VALIDATOR] = MessageKind.CREATE_VALIDATOR
    description: DescriptionParams
    commission: CommissionParams
    min_self_delegation: str
    delegator_address: str = Field(min_length=1)
    validator_address: str = Field(min_length=1)
    pubkey: bytes = Field(description="ed25519 consensus public key, raw or base64")
    value: CoinParams

    @field_validator("min_self_delegation", mode="before")
    @classmethod
    def _canonical(cls, value: Any) -> str:
        return canonical_amount(value)

    @field_validator("pubkey", mode="before")
    @classmethod
    def _key_bytes(cls, value: Any) -> bytes:
        return decode_bytes(value)


class MsgEditValidatorParams(BaseParams):
    kind: Literal[MessageKind.EDIT_VALIDATOR] = MessageKind.EDIT_VALIDATOR
    validator_address: str = Field(min_length=1)
    description: Optional[DescriptionParams] = None
    commission_rate: Optional[str] = None
    min_self_delegation: Optional[str] = None

    @field_validator("commission_rate", mode="before")
    @classmethod
    def _rate_text(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("min_self_delegation", mode="before")
    @classmethod
    def _canonical(cls, value: Any) -> Optional[str]:
        return None if value is None else canonical_amount(value)


class MsgDelegateParams(BaseParams):
    kind: Literal[MessageKind.DELEGATE] = MessageKind.DELEGATE
    delegator_address: str = Field(min_length=1)
    validator_address: str = Field(min_length=1)
    amount: CoinParams


class MsgUndelegateParams(BaseParams):
    kind: Literal[MessageKind.UNDELEGATE] = MessageKind.UNDELEGATE
    delegator_address: str = Field(min_length=1)
    validator_address: str = Field(min_length=1)
    amount: CoinParams


class MsgBeginRedelegateParams(BaseParams):
    kind: Literal[MessageKind.BEGIN_REDELEGATE] = MessageKind.BEGIN_REDELEGATE
    delegator_address: str = Field(min_length=1)
    validator_src_address: str = Field(min_length=1)
    validator_dst_address: str = Field(min_length=1)
    amount: CoinParams


def build_msg_create_validator(params: MsgCreateValidatorParams) -> MsgCreateValidator:
    return MsgCreateValidator(
        description=params.description.to_proto(),
        commission=params.commission.to_proto(),
        min_self_delegation=params.min_self_delegation,
        delegator_address=params.delegator_address,
        validator_address=params.validator_address,
        pubkey=GenericMessage.pack(Ed25519PubKey(key=params.pubkey)),
        value=params.value.to_coin(),
    )


def build_msg_edit_validator(params: MsgEditValidatorParams) -> MsgEditValidator:
    return MsgEditValidator(
        description=params.description.to_proto() if params.description else None,
        validator_address=params.validator_address,
        commission_rate=legacy_dec(params.commission_rate) if params.commission_rate is not None else "",
        min_self_delegation=params.min_self_delegation or "",
    )


def build_msg_delegate(params: MsgDelegateParams) -> MsgDelegate:
    return MsgDelegate(
        delegator_address=params.delegator_address,
        validator_address=params.validator_address,
        amount=params.amount.to_coin(),
    )


def build_msg_undelegate(params: MsgUndelegateParams) -> MsgUndelegate:
    return MsgUndelegate(
        delegator_address=params.delegator_address,
        validator_address=params.validator_address,
        amount=params.amount.to_coin(),
    )


def build_msg_begin_redelegate(params: MsgBeginRedelegateParams) -> MsgBeginRedelegate:
    return MsgBeginRedelegate(
        delegator_address=params.delegator_address,
        validator_src_address=params.validator_src_address,
        validator_dst_address=params.validator_dst_address,
        amount=params.amount.to_coin(),
    )


__all__ = [
    "DescriptionParams",
    "CommissionParams",
    "MsgCreateValidatorParams",
    "MsgEditValidatorParams",
    "MsgDelegateParams",
    "MsgUndelegateParams",
    "MsgBeginRedelegateParams",
    "build_msg_create_validator",
    "build_msg_edit_validator",
    "build_msg_delegate",
    "build_msg_undelegate",
    "build_msg_begin_redelegate",
]
