"""
CosmWasm message builders.
"""

from __future__ import annotations
import json
from typing import Any, List, Literal

from pydantic import Field

from ...proto.messages import MsgExecuteContract
from ...runtime.errors import ErrorCode, ValidationError
from ..registry import MessageKind
from .base import BaseParams, CoinParams, coins


class MsgExecuteContractParams(BaseParams):
    """
    Execute a contract.

    `msg` is any JSON-serializable value; it travels as compact UTF-8 JSON.
    """

    kind: Literal[MessageKind.EXECUTE_CONTRACT] = MessageKind.EXECUTE_CONTRACT
    sender: str = Field(min_length=1)
    contract: str = Field(min_length=1)
    msg: Any
    funds_list: List[CoinParams] = Field(default_factory=list)


def encode_contract_msg(msg: Any) -> bytes:
    """
    Encode a contract message as compact UTF-8 JSON.

    Raises:
        ValidationError: If the value is not JSON-serializable or holds NaN
            or an infinity
    """
    try:
        return json.dumps(msg, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Contract message is not JSON-serializable: {e}",
            ErrorCode.INVALID_FIELD,
            details={"field": "msg"},
            cause=e,
        )


def build_msg_execute_contract(params: MsgExecuteContractParams) -> MsgExecuteContract:
    return MsgExecuteContract(
        sender=params.sender,
        contract=params.contract,
        msg=encode_contract_msg(params.msg),
        funds=coins(params.funds_list),
    )


__all__ = [
    "MsgExecuteContractParams",
    "build_msg_execute_contract",
    "encode_contract_msg",
]
