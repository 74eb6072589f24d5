"""
Governance message builders.

Vote options accept the enum member, its number or its name
("VOTE_OPTION_YES"). Weighted vote weights are decimals and are converted
to 18-digit fixed-point integers.
"""

from __future__ import annotations
from typing import Any, List, Literal

from pydantic import Field, field_validator

from ...proto.base import GenericMessage
from ...proto.messages import (
    MsgDeposit, MsgSubmitProposal, MsgVote, MsgVoteWeighted,
    TextProposal, VoteOption, WeightedVoteOption,
)
from ..registry import MessageKind
from .base import BaseParams, CoinParams, coins, enum_value, legacy_dec


class MsgSubmitProposalParams(BaseParams):
    """Submit a text proposal with an optional initial deposit."""

    kind: Literal[MessageKind.SUBMIT_PROPOSAL] = MessageKind.SUBMIT_PROPOSAL
    title: str = Field(min_length=1)
    description: str = ""
    initial_deposit_list: List[CoinParams] = Field(default_factory=list)
    proposer: str = Field(min_length=1)


class MsgVoteParams(BaseParams):
    kind: Literal[MessageKind.VOTE] = MessageKind.VOTE
    proposal_id: int = Field(ge=0)
    voter: str = Field(min_length=1)
    option: VoteOption

    @field_validator("option", mode="before")
    @classmethod
    def _option(cls, value: Any) -> VoteOption:
        return enum_value(VoteOption, value)


class WeightedVoteOptionParams(BaseParams):
    option: VoteOption
    weight: str

    @field_validator("option", mode="before")
    @classmethod
    def _option(cls, value: Any) -> VoteOption:
        return enum_value(VoteOption, value)

    @field_validator("weight", mode="before")
    @classmethod
    def _weight_text(cls, value: Any) -> str:
        return str(value)


class MsgVoteWeightedParams(BaseParams):
    kind: Literal[MessageKind.VOTE_WEIGHTED] = MessageKind.VOTE_WEIGHTED
    proposal_id: int = Field(ge=0)
    voter: str = Field(min_length=1)
    options_list: List[WeightedVoteOptionParams] = Field(min_length=1)


class MsgDepositParams(BaseParams):
    kind: Literal[MessageKind.DEPOSIT] = MessageKind.DEPOSIT
    proposal_id: int = Field(ge=0)
    depositor: str = Field(min_length=1)
    amount_list: List[CoinParams] = Field(min_length=1)


def build_msg_submit_proposal(params: MsgSubmitProposalParams) -> MsgSubmitProposal:
    content = TextProposal(title=params.title, description=params.description)
    return MsgSubmitProposal(
        content=GenericMessage.pack(content),
        initial_deposit=coins(params.initial_deposit_list),
        proposer=params.proposer,
    )


def build_msg_vote(params: MsgVoteParams) -> MsgVote:
    return MsgVote(proposal_id=params.proposal_id, voter=params.voter, option=params.option)


def build_msg_vote_weighted(params: MsgVoteWeightedParams) -> MsgVoteWeighted:
    return MsgVoteWeighted(
        proposal_id=params.proposal_id,
        voter=params.voter,
        options=[
            WeightedVoteOption(option=item.option, weight=legacy_dec(item.weight))
            for item in params.options_list
        ],
    )


def build_msg_deposit(params: MsgDepositParams) -> MsgDeposit:
    return MsgDeposit(
        proposal_id=params.proposal_id,
        depositor=params.depositor,
        amount=coins(params.amount_list),
    )


__all__ = [
    "MsgSubmitProposalParams",
    "MsgVoteParams",
    "WeightedVoteOptionParams",
    "MsgVoteWeightedParams",
    "MsgDepositParams",
    "build_msg_submit_proposal",
    "build_msg_vote",
    "build_msg_vote_weighted",
    "build_msg_deposit",
]
