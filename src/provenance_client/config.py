"""
Option models for transaction construction and display formatting.

Every default used by the envelope pipeline and the display engine lives
here so applications can override them per call.
"""

from __future__ import annotations
from typing import Dict

from pydantic import BaseModel, Field

from .proto.tx import BroadcastMode


class TxOptions(BaseModel):
    """
    Defaults for building and submitting transactions.

    Matches the values the chain's wallet tooling uses when none are given.
    """
    fee_denom: str = Field(default="nhash", min_length=1, description="Denomination fees are paid in")
    gas_adjustment: float = Field(default=1.25, gt=0, description="Multiplier applied by fee simulation")
    memo: str = Field(default="", description="Transaction memo")
    broadcast_mode: BroadcastMode = Field(
        default=BroadcastMode.BROADCAST_MODE_BLOCK,
        description="Mode placed on broadcast requests",
    )
    type_url_prefix: str = Field(default="/", description="Prefix for packed type urls")

    model_config = {"frozen": True}


class DenomUnit(BaseModel):
    """A display unit for a base denomination."""
    display_denom: str = Field(min_length=1, description="Name shown to the reviewer")
    exponent: int = Field(ge=0, description="Power of ten between base and display unit")

    model_config = {"frozen": True}


class DisplayOptions(BaseModel):
    """
    Options for the default display formatting hooks.
    """
    denom_units: Dict[str, DenomUnit] = Field(
        default_factory=lambda: {"nhash": DenomUnit(display_denom="hash", exponent=9)},
        description="Base denom to display unit conversions",
    )
    timestamp_format: str = Field(default="%Y-%m-%dT%H:%M:%SZ", description="strftime format for timestamps")

    model_config = {"frozen": True}


DEFAULT_TX_OPTIONS = TxOptions()
DEFAULT_DISPLAY_OPTIONS = DisplayOptions()


__all__ = [
    "TxOptions",
    "DenomUnit",
    "DisplayOptions",
    "DEFAULT_TX_OPTIONS",
    "DEFAULT_DISPLAY_OPTIONS",
]
