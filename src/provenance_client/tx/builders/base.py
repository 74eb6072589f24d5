"""
Base parameter models for message builders.

Each supported message kind has one pydantic parameter model carrying a
`kind` discriminator. Field names accept snake_case or camelCase.
"""

from __future__ import annotations
import base64
import binascii
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import Any, Iterable, List, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...proto.base import Coin
from ...runtime.errors import ErrorCode, ValidationError
from ..coins import aggregate_coins, canonical_amount

# sdk.Dec values travel as integers scaled by 10^18
LEGACY_DEC_PRECISION = 18


class BaseParams(BaseModel):
    """Base for all builder parameter models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CoinParams(BaseParams):
    """A denomination and an integer amount (int or digit string)."""

    denom: str = Field(min_length=1)
    amount: str

    @field_validator("amount", mode="before")
    @classmethod
    def _canonical(cls, value: Any) -> str:
        return canonical_amount(value)

    def to_coin(self) -> Coin:
        return Coin(denom=self.denom, amount=self.amount)


def coins(params: Iterable[CoinParams]) -> List[Coin]:
    """Aggregate a coin parameter list into a sorted, distinct-denom Coin list."""
    return aggregate_coins(params)


def legacy_dec(value: Any) -> str:
    """
    Convert a decimal ("0.05") to its on-chain sdk.Dec form ("50000000000000000").

    Raises:
        ValidationError: If the value is not a non-negative decimal with at
            most 18 fractional digits
    """
    try:
        dec = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Invalid decimal value: {value!r}", ErrorCode.INVALID_FIELD) from None
    if not dec.is_finite() or dec < 0:
        raise ValidationError(f"Decimal value must be finite and non-negative: {value!r}", ErrorCode.INVALID_FIELD)
    scaled = dec.scaleb(LEGACY_DEC_PRECISION)
    if scaled != scaled.to_integral_value():
        raise ValidationError(
            f"Decimal value has more than {LEGACY_DEC_PRECISION} fractional digits: {value!r}",
            ErrorCode.INVALID_FIELD,
        )
    return str(int(scaled))


def enum_value(enum_cls: Type[IntEnum], value: Any) -> IntEnum:
    """Accept an enum member, its numeric value or its name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value]
        except KeyError:
            raise ValueError(f"Unknown {enum_cls.__name__} name: {value}") from None
    return enum_cls(value)


def decode_bytes(value: Any) -> bytes:
    """Accept raw bytes or standard base64 text."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error:
            raise ValueError("Expected base64 encoded bytes") from None
    raise ValueError(f"Expected bytes or base64 text, got {type(value).__name__}")


__all__ = [
    "BaseParams",
    "CoinParams",
    "coins",
    "decode_bytes",
    "enum_value",
    "legacy_dec",
]
