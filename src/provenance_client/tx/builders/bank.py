"""
Bank and vesting message builders.
"""

from __future__ import annotations
from typing import List, Literal

from pydantic import Field

from ...proto.messages import MsgCreateVestingAccount, MsgSend
from ..registry import MessageKind
from .base import BaseParams, CoinParams, coins


class MsgSendParams(BaseParams):
    """Transfer coins between two accounts."""

    kind: Literal[MessageKind.SEND] = MessageKind.SEND
    from_address: str = Field(min_length=1)
    to_address: str = Field(min_length=1)
    amount_list: List[CoinParams] = Field(min_length=1)


class MsgCreateVestingAccountParams(BaseParams):
    kind: Literal[MessageKind.CREATE_VESTING_ACCOUNT] = MessageKind.CREATE_VESTING_ACCOUNT
    from_address: str = Field(min_length=1)
    to_address: str = Field(min_length=1)
    amount_list: List[CoinParams] = Field(min_length=1)
    end_time: int = Field(ge=0, description="Unix seconds at which vesting completes")
    delayed: bool = False


def build_msg_send(params: MsgSendParams) -> MsgSend:
    return MsgSend(
        from_address=params.from_address,
        to_address=params.to_address,
        amount=coins(params.amount_list),
    )


def build_msg_create_vesting_account(params: MsgCreateVestingAccountParams) -> MsgCreateVestingAccount:
    return MsgCreateVestingAccount(
        from_address=params.from_address,
        to_address=params.to_address,
        amount=coins(params.amount_list),
        end_time=params.end_time,
        delayed=params.delayed,
    )


__all__ = [
    "MsgSendParams",
    "MsgCreateVestingAccountParams",
    "build_msg_send",
    "build_msg_create_vesting_account",
]
