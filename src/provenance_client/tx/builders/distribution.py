"""
Distribution message builders.
"""

from __future__ import annotations
from typing import List, Literal

from pydantic import Field

from ...proto.messages import (
    MsgFundCommunityPool, MsgSetWithdrawAddress,
    MsgWithdrawDelegatorReward, MsgWithdrawValidatorCommission,
)
from ..registry import MessageKind
from .base import BaseParams, CoinParams, coins


class MsgSetWithdrawAddressParams(BaseParams):
    kind: Literal[MessageKind.SET_WITHDRAW_ADDRESS] = MessageKind.SET_WITHDRAW_ADDRESS
    delegator_address: str = Field(min_length=1)
    withdraw_address: str = Field(min_length=1)


class MsgWithdrawDelegatorRewardParams(BaseParams):
    kind: Literal[MessageKind.WITHDRAW_DELEGATOR_REWARD] = MessageKind.WITHDRAW_DELEGATOR_REWARD
    delegator_address: str = Field(min_length=1)
    validator_address: str = Field(min_length=1)


class MsgWithdrawValidatorCommissionParams(BaseParams):
    kind: Literal[MessageKind.WITHDRAW_VALIDATOR_COMMISSION] = MessageKind.WITHDRAW_VALIDATOR_COMMISSION
    validator_address: str = Field(min_length=1)


class MsgFundCommunityPoolParams(BaseParams):
    kind: Literal[MessageKind.FUND_COMMUNITY_POOL] = MessageKind.FUND_COMMUNITY_POOL
    amount_list: List[CoinParams] = Field(min_length=1)
    depositor: str = Field(min_length=1)


def build_msg_set_withdraw_address(params: MsgSetWithdrawAddressParams) -> MsgSetWithdrawAddress:
    return MsgSetWithdrawAddress(
        delegator_address=params.delegator_address,
        withdraw_address=params.withdraw_address,
    )


def build_msg_withdraw_delegator_reward(params: MsgWithdrawDelegatorRewardParams) -> MsgWithdrawDelegatorReward:
    return MsgWithdrawDelegatorReward(
        delegator_address=params.delegator_address,
        validator_address=params.validator_address,
    )


def build_msg_withdraw_validator_commission(
    params: MsgWithdrawValidatorCommissionParams,
) -> MsgWithdrawValidatorCommission:
    return MsgWithdrawValidatorCommission(validator_address=params.validator_address)


def build_msg_fund_community_pool(params: MsgFundCommunityPoolParams) -> MsgFundCommunityPool:
    return MsgFundCommunityPool(amount=coins(params.amount_list), depositor=params.depositor)


__all__ = [
    "MsgSetWithdrawAddressParams",
    "MsgWithdrawDelegatorRewardParams",
    "MsgWithdrawValidatorCommissionParams",
    "MsgFundCommunityPoolParams",
    "build_msg_set_withdraw_address",
    "build_msg_withdraw_delegator_reward",
    "build_msg_withdraw_validator_commission",
    "build_msg_fund_community_pool",
]
