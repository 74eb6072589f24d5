"""
Coin aggregation.

Merges coin amounts per denomination into the canonical, denom-sorted list
the chain expects for fee amounts and sdk.Coins fields.
"""

from __future__ import annotations
import re
from typing import Any, Iterable, List, Mapping, Union

from ..proto.base import Coin
from ..runtime.errors import ErrorCode, ValidationError

AmountLike = Union[int, str]

_DIGITS = re.compile(r"[0-9]+")


def coin_amount(value: AmountLike) -> int:
    """
    Parse a coin amount as an arbitrary-precision non-negative integer.

    Args:
        value: int or decimal-digit string

    Raises:
        ValidationError: For floats, booleans, negative numbers or non-digit strings
    """
    if isinstance(value, bool):
        raise ValidationError(f"Coin amount must be an integer, got {value!r}", ErrorCode.INVALID_AMOUNT)
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and _DIGITS.fullmatch(value.strip()):
        amount = int(value.strip())
    else:
        raise ValidationError(f"Coin amount must be an integer, got {value!r}", ErrorCode.INVALID_AMOUNT)
    if amount < 0:
        raise ValidationError(f"Coin amount must be non-negative, got {amount}", ErrorCode.INVALID_AMOUNT)
    return amount


def canonical_amount(value: AmountLike) -> str:
    """Canonical string form of a coin amount ("007" -> "7")."""
    return str(coin_amount(value))


def _denom_and_amount(coin: Any):
    if isinstance(coin, Mapping):
        denom, amount = coin.get("denom"), coin.get("amount")
    else:
        denom, amount = getattr(coin, "denom", None), getattr(coin, "amount", None)
    if not isinstance(denom, str) or not denom:
        raise ValidationError(f"Coin denom must be a non-empty string, got {denom!r}", ErrorCode.INVALID_DENOM)
    return denom, coin_amount(amount)


def aggregate_coins(coins: Iterable[Any] = ()) -> List[Coin]:
    """
    Merge coins by denomination and sort ascending by denom.

    Amounts with the same denom are summed as integers. Denoms are compared
    ordinally; no case folding is applied.

    Args:
        coins: Coin models, mappings or objects with denom/amount

    Returns:
        Distinct-denom Coin list sorted by denom

    Raises:
        ValidationError: If any denom or amount is malformed
    """
    totals: dict = {}
    for coin in coins or ():
        denom, amount = _denom_and_amount(coin)
        totals[denom] = totals.get(denom, 0) + amount

    return [Coin(denom=denom, amount=str(totals[denom])) for denom in sorted(totals)]


__all__ = ["AmountLike", "aggregate_coins", "canonical_amount", "coin_amount"]
