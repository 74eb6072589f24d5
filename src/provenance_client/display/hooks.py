"""
Per-field display formatting hooks.

A hook pairs a predicate over (field name, value) with a transform. A
HookTable evaluates its hooks in registration order; the first hook whose
predicate matches decides the field. A transform returning None means
"no formatted output" and the formatter falls back to its default path.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple

from ..config import DEFAULT_DISPLAY_OPTIONS, DisplayOptions
from ..proto.base import Timestamp
from ..runtime.errors import FormattingError
from ..tx.coins import coin_amount


class HookScope(Enum):
    """Which values a hook is offered."""

    SCALAR = "scalar"
    OBJECT = "object"


@dataclass(frozen=True)
class FormatHook:
    name: str
    scope: HookScope
    predicate: Callable[[str, Any], bool]
    transform: Callable[[str, Any], Any]


class HookTable:
    """Ordered, immutable collection of formatting hooks."""

    def __init__(self, hooks: Iterable[FormatHook] = ()):
        self._hooks: Tuple[FormatHook, ...] = tuple(hooks)
        names = [hook.name for hook in self._hooks]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate hook names: {names}")

    @property
    def hooks(self) -> Tuple[FormatHook, ...]:
        return self._hooks

    def with_hook(self, hook: FormatHook, first: bool = False) -> HookTable:
        """Return a new table with hook added at the lowest (or highest) priority."""
        if first:
            return HookTable((hook,) + self._hooks)
        return HookTable(self._hooks + (hook,))

    def apply(self, scope: HookScope, key: str, value: Any) -> Optional[Any]:
        """
        Run the first matching hook for a field.

        Returns:
            The formatted value, or None when no hook matched or the
            matching hook produced no output

        Raises:
            FormattingError: If the matching hook's predicate or transform raised
        """
        for hook in self._hooks:
            if hook.scope is not scope:
                continue
            try:
                if not hook.predicate(key, value):
                    continue
                return hook.transform(key, value)
            except Exception as e:
                raise FormattingError(
                    f"Hook {hook.name} failed for field {key}",
                    details={"hook": hook.name, "field": key},
                    cause=e,
                )
        return None

    def __len__(self) -> int:
        return len(self._hooks)


# =============================================================================
# Default hooks
# =============================================================================

def _is_coin(value: Any) -> bool:
    return isinstance(value, Mapping) and set(value) == {"denom", "amount"}


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, Mapping) and set(value) == {"seconds", "nanos"}


def coin_text(coin: Mapping[str, Any], options: DisplayOptions = DEFAULT_DISPLAY_OPTIONS) -> str:
    """
    Render a coin in its display unit.

    {"denom": "nhash", "amount": "1500000000"} -> "1.5 hash" with the default units;
    denoms without a configured unit are shown as "<amount> <denom>".
    """
    amount = coin_amount(coin["amount"])
    unit = options.denom_units.get(coin["denom"])
    if unit is None:
        return f"{amount} {coin['denom']}"
    value = Decimal(amount).scaleb(-unit.exponent).normalize()
    return f"{value:f} {unit.display_denom}"


def default_hook_table(options: Optional[DisplayOptions] = None) -> HookTable:
    """
    The hooks wallets apply by default.

    In priority order: booleans as "true"/"false", a coin object as display
    text, a list of coins as newline-separated display text, a timestamp
    object as a formatted UTC time.
    """
    options = options or DEFAULT_DISPLAY_OPTIONS

    def timestamp_text(_key: str, value: Mapping[str, Any]) -> str:
        stamp = Timestamp(seconds=int(value["seconds"]), nanos=int(value["nanos"]))
        return stamp.to_datetime().strftime(options.timestamp_format)

    return HookTable([
        FormatHook(
            name="bool_text",
            scope=HookScope.SCALAR,
            predicate=lambda _key, value: isinstance(value, bool),
            transform=lambda _key, value: "true" if value else "false",
        ),
        FormatHook(
            name="coin",
            scope=HookScope.OBJECT,
            predicate=lambda _key, value: _is_coin(value),
            transform=lambda _key, value: coin_text(value, options),
        ),
        FormatHook(
            name="coin_list",
            scope=HookScope.OBJECT,
            predicate=lambda _key, value: (
                isinstance(value, (list, tuple)) and bool(value) and all(_is_coin(item) for item in value)
            ),
            transform=lambda _key, value: "\n".join(coin_text(item, options) for item in value),
        ),
        FormatHook(
            name="timestamp",
            scope=HookScope.OBJECT,
            predicate=lambda _key, value: _is_timestamp(value),
            transform=timestamp_text,
        ),
    ])


__all__ = [
    "FormatHook",
    "HookScope",
    "HookTable",
    "coin_text",
    "default_hook_table",
]
