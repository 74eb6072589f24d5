"""
Authz, crisis, slashing and evidence message builders.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from ...proto.base import GenericMessage, Timestamp
from ...proto.messages import (
    GenericAuthorization, Grant, MsgGrant, MsgSubmitEvidence,
    MsgUnjail, MsgVerifyInvariant,
)
from ..registry import MessageKind
from .base import BaseParams, decode_bytes


class MsgGrantParams(BaseParams):
    """
    Grant a generic authorization for one message type.

    `expiration` accepts a datetime or Unix seconds; naive datetimes are UTC.
    """

    kind: Literal[MessageKind.GRANT] = MessageKind.GRANT
    granter: str = Field(min_length=1)
    grantee: str = Field(min_length=1)
    msg_type_url: str = Field(min_length=1)
    expiration: Optional[datetime] = None


class MsgVerifyInvariantParams(BaseParams):
    kind: Literal[MessageKind.VERIFY_INVARIANT] = MessageKind.VERIFY_INVARIANT
    sender: str = Field(min_length=1)
    invariant_module_name: str = Field(min_length=1)
    invariant_route: str = Field(min_length=1)


class MsgUnjailParams(BaseParams):
    kind: Literal[MessageKind.UNJAIL] = MessageKind.UNJAIL
    validator_addr: str = Field(min_length=1)


class EvidenceParams(BaseParams):
    """Already-packed evidence: its type url and serialized bytes (raw or base64)."""

    type_url: str = Field(min_length=1)
    value: bytes = b""

    @field_validator("value", mode="before")
    @classmethod
    def _value_bytes(cls, value: Any) -> bytes:
        return decode_bytes(value)


class MsgSubmitEvidenceParams(BaseParams):
    kind: Literal[MessageKind.SUBMIT_EVIDENCE] = MessageKind.SUBMIT_EVIDENCE
    submitter: str = Field(min_length=1)
    evidence: EvidenceParams


def build_msg_grant(params: MsgGrantParams) -> MsgGrant:
    authorization = GenericAuthorization(msg=params.msg_type_url)
    expiration = Timestamp.from_datetime(params.expiration) if params.expiration is not None else None
    return MsgGrant(
        granter=params.granter,
        grantee=params.grantee,
        grant=Grant(authorization=GenericMessage.pack(authorization), expiration=expiration),
    )


def build_msg_verify_invariant(params: MsgVerifyInvariantParams) -> MsgVerifyInvariant:
    return MsgVerifyInvariant(
        sender=params.sender,
        invariant_module_name=params.invariant_module_name,
        invariant_route=params.invariant_route,
    )


def build_msg_unjail(params: MsgUnjailParams) -> MsgUnjail:
    return MsgUnjail(validator_addr=params.validator_addr)


def build_msg_submit_evidence(params: MsgSubmitEvidenceParams) -> MsgSubmitEvidence:
    return MsgSubmitEvidence(
        submitter=params.submitter,
        evidence=GenericMessage(type_url=params.evidence.type_url, value=params.evidence.value),
    )


__all__ = [
    "MsgGrantParams",
    "MsgVerifyInvariantParams",
    "MsgUnjailParams",
    "EvidenceParams",
    "MsgSubmitEvidenceParams",
    "build_msg_grant",
    "build_msg_verify_invariant",
    "build_msg_unjail",
    "build_msg_submit_evidence",
]
