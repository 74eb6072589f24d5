"""
Typed value model for display formatting.

classify() sorts each field value of a display object into one of four
variants; the formatter dispatches on the variant.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Scalar:
    """A string, number or boolean."""

    value: Any


@dataclass(frozen=True)
class ScalarArray:
    """A list whose elements are all scalars; an empty list is one too."""

    values: Tuple[Any, ...]

    def joined(self) -> str:
        return "\n".join(scalar_text(item) for item in self.values)


@dataclass(frozen=True)
class ObjectArray:
    """A non-empty list whose elements are all mappings."""

    items: Tuple[Mapping[str, Any], ...]


@dataclass(frozen=True)
class ObjectValue:
    """A nested mapping."""

    fields: Mapping[str, Any]


DisplayValue = Union[Scalar, ScalarArray, ObjectArray, ObjectValue]


def scalar_text(value: Any) -> str:
    """Render a scalar the way the wallet shows it: lower-case booleans, integral floats without .0"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def classify(value: Any) -> Optional[DisplayValue]:
    """
    Classify a display field value.

    None yields None (the field is left out). A list mixing scalars and
    mappings is treated as an object keyed by element index.
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return ObjectValue(value)
    if isinstance(value, (list, tuple)):
        items = [item for item in value if item is not None]
        if all(isinstance(item, Mapping) for item in items) and items:
            return ObjectArray(tuple(items))
        if not any(isinstance(item, (Mapping, list, tuple)) for item in items):
            return ScalarArray(tuple(items))
        return ObjectValue({str(index): item for index, item in enumerate(items)})
    return Scalar(value)


__all__ = [
    "DisplayValue",
    "ObjectArray",
    "ObjectValue",
    "Scalar",
    "ScalarArray",
    "classify",
    "scalar_text",
]
