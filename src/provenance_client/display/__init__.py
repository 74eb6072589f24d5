"""
Display engine: unpack wallet messages and flatten them for human review.
"""

from .format import MAX_DISPLAY_DEPTH, DisplayFormatter, format_display_object
from .hooks import FormatHook, HookScope, HookTable, coin_text, default_hook_table
from .unpack import (
    DISPLAY_HANDLERS,
    EXECUTE_CONTRACT_TYPE_NAME,
    GENERIC_TYPE_NAME,
    DisplayObject,
    enum_name,
    unpack_display_object_from_wallet_message,
)
from .values import DisplayValue, ObjectArray, ObjectValue, Scalar, ScalarArray, classify

__all__ = [
    "MAX_DISPLAY_DEPTH",
    "DisplayFormatter",
    "format_display_object",
    "FormatHook",
    "HookScope",
    "HookTable",
    "coin_text",
    "default_hook_table",
    "DISPLAY_HANDLERS",
    "EXECUTE_CONTRACT_TYPE_NAME",
    "GENERIC_TYPE_NAME",
    "DisplayObject",
    "enum_name",
    "unpack_display_object_from_wallet_message",
    "DisplayValue",
    "ObjectArray",
    "ObjectValue",
    "Scalar",
    "ScalarArray",
    "classify",
]
