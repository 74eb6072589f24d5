"""
Display object flattening.

Walks a display object depth-first and produces a flat mapping a wallet
can render field by field:

* scalars are attached under their field name, inside their parent's entry
  when they belong to a nested object;
* scalar arrays become one newline-joined string;
* an array holding exactly one object is attached under the field name,
  longer arrays under "<field> <n>" (1-based);
* nested objects and array elements always get their own top-level entry.

Hooks run before the default rendering. A failing hook is logged and that
field alone falls back to the default rendering.

Objects nested deeper than max_depth levels are rejected with a
FormattingError (DISPLAY_TOO_DEEP) rather than flattened.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Type

from ..runtime.errors import ErrorCode, FormattingError
from .hooks import HookScope, HookTable
from .values import ObjectArray, ObjectValue, Scalar, ScalarArray, classify

logger = logging.getLogger(__name__)

MAX_DISPLAY_DEPTH = 64


class DisplayFormatter:
    """Flattening visitor over classified display values."""

    def __init__(self, hooks: Optional[HookTable] = None, max_depth: int = MAX_DISPLAY_DEPTH):
        self.hooks = hooks if hooks is not None else HookTable()
        self.max_depth = max_depth

    def format(self, display_object: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if display_object:
            self._walk(result, display_object, None, 1)
        return result

    def _walk(self, result: Dict[str, Any], current: Mapping[str, Any], parent: Optional[str], depth: int) -> None:
        if depth > self.max_depth:
            raise FormattingError(
                f"Display object is nested deeper than {self.max_depth} levels",
                details={"field": parent, "max_depth": self.max_depth},
                code=ErrorCode.DISPLAY_TOO_DEEP,
            )
        for key, raw in current.items():
            key = str(key)
            value = classify(raw)
            if value is None:
                continue

            formatted = self._hooked(key, raw, HookScope.SCALAR if isinstance(value, Scalar) else HookScope.OBJECT)
            if formatted is not None:
                self._attach(result, parent, key, formatted)
                continue

            self._VISITORS[type(value)](self, value, result, key, parent, depth)

    def _hooked(self, key: str, raw: Any, scope: HookScope) -> Optional[Any]:
        try:
            return self.hooks.apply(scope, key, raw)
        except FormattingError as e:
            logger.warning("Formatting %s fell back to its default rendering: %s", key, e, exc_info=True)
            return None

    @staticmethod
    def _attach(result: Dict[str, Any], parent: Optional[str], key: str, value: Any) -> None:
        if parent is None:
            result[key] = value
        else:
            result[parent][key] = value

    def _visit_scalar(
        self, value: Scalar, result: Dict[str, Any], key: str, parent: Optional[str], depth: int,
    ) -> None:
        self._attach(result, parent, key, value.value)

    def _visit_scalar_array(
        self, value: ScalarArray, result: Dict[str, Any], key: str, parent: Optional[str], depth: int,
    ) -> None:
        self._attach(result, parent, key, value.joined())

    def _visit_object_array(
        self, value: ObjectArray, result: Dict[str, Any], key: str, parent: Optional[str], depth: int,
    ) -> None:
        for index, item in enumerate(value.items, start=1):
            label = key if len(value.items) == 1 else f"{key} {index}"
            result[label] = {}
            self._walk(result, item, label, depth + 1)

    def _visit_object(
        self, value: ObjectValue, result: Dict[str, Any], key: str, parent: Optional[str], depth: int,
    ) -> None:
        result[key] = {}
        self._walk(result, value.fields, key, depth + 1)

    _VISITORS: Dict[Type[Any], Callable[..., None]] = {
        Scalar: _visit_scalar,
        ScalarArray: _visit_scalar_array,
        ObjectArray: _visit_object_array,
        ObjectValue: _visit_object,
    }


def format_display_object(
    display_object: Optional[Mapping[str, Any]],
    hooks: Optional[HookTable] = None,
    max_depth: int = MAX_DISPLAY_DEPTH,
) -> Dict[str, Any]:
    """
    Flatten a display object for rendering.

    Args:
        display_object: Output of unpack_display_object_from_wallet_message()
            or any JSON-like mapping
        hooks: Formatting hooks; None applies no hooks
        max_depth: Deepest object nesting accepted

    Returns:
        The flattened display object

    Raises:
        FormattingError: If the object is nested deeper than max_depth
    """
    return DisplayFormatter(hooks, max_depth).format(display_object)


__all__ = ["MAX_DISPLAY_DEPTH", "DisplayFormatter", "format_display_object"]
