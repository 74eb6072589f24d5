"""
Provenance marker message builders.

Status, type and access permissions accept enum members, numbers or names.
"""

from __future__ import annotations
from typing import Any, List, Literal

from pydantic import AliasChoices, Field, field_validator

from ...proto.messages import (
    Access, AccessGrant, MarkerStatus, MarkerType,
    MsgActivateRequest, MsgAddMarkerRequest, MsgFinalizeRequest,
)
from ..registry import MessageKind
from .base import BaseParams, CoinParams, enum_value


class AccessGrantParams(BaseParams):
    address: str = Field(min_length=1)
    permissions_list: List[Access] = Field(default_factory=list)

    @field_validator("permissions_list", mode="before")
    @classmethod
    def _permissions(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [enum_value(Access, item) for item in value]
        return value

    def to_proto(self) -> AccessGrant:
        return AccessGrant(address=self.address, permissions=list(self.permissions_list))


class MsgAddMarkerRequestParams(BaseParams):
    """Create a marker; the amount is the initial supply."""

    kind: Literal[MessageKind.ADD_MARKER] = MessageKind.ADD_MARKER
    amount: CoinParams
    manager: str = ""
    from_address: str = Field(min_length=1)
    status: MarkerStatus = MarkerStatus.MARKER_STATUS_PROPOSED
    marker_type: MarkerType = MarkerType.MARKER_TYPE_COIN
    access_list: List[AccessGrantParams] = Field(
        default_factory=list,
        validation_alias=AliasChoices("access_list", "accessList", "accessListList"),
    )
    supply_fixed: bool = False
    allow_governance_control: bool = False
    allow_forced_transfer: bool = False
    required_attributes_list: List[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> MarkerStatus:
        return enum_value(MarkerStatus, value)

    @field_validator("marker_type", mode="before")
    @classmethod
    def _marker_type(cls, value: Any) -> MarkerType:
        return enum_value(MarkerType, value)


class MsgActivateRequestParams(BaseParams):
    kind: Literal[MessageKind.ACTIVATE_MARKER] = MessageKind.ACTIVATE_MARKER
    denom: str = Field(min_length=1)
    administrator: str = Field(min_length=1)


class MsgFinalizeRequestParams(BaseParams):
    kind: Literal[MessageKind.FINALIZE_MARKER] = MessageKind.FINALIZE_MARKER
    denom: str = Field(min_length=1)
    administrator: str = Field(min_length=1)


def build_msg_add_marker(params: MsgAddMarkerRequestParams) -> MsgAddMarkerRequest:
    return MsgAddMarkerRequest(
        amount=params.amount.to_coin(),
        manager=params.manager,
        from_address=params.from_address,
        status=params.status,
        marker_type=params.marker_type,
        access_list=[grant.to_proto() for grant in params.access_list],
        supply_fixed=params.supply_fixed,
        allow_governance_control=params.allow_governance_control,
        allow_forced_transfer=params.allow_forced_transfer,
        required_attributes=list(params.required_attributes_list),
    )


def build_msg_activate(params: MsgActivateRequestParams) -> MsgActivateRequest:
    return MsgActivateRequest(denom=params.denom, administrator=params.administrator)


def build_msg_finalize(params: MsgFinalizeRequestParams) -> MsgFinalizeRequest:
    return MsgFinalizeRequest(denom=params.denom, administrator=params.administrator)


__all__ = [
    "AccessGrantParams",
    "MsgAddMarkerRequestParams",
    "MsgActivateRequestParams",
    "MsgFinalizeRequestParams",
    "build_msg_add_marker",
    "build_msg_activate",
    "build_msg_finalize",
]
