"""
Protobuf message models.

ProtoMessage is a pydantic model whose fields carry their protobuf field
number and kind. Serialization follows the proto3 canonical layout the chain
signs over: ascending field numbers, default values omitted, repeated numeric
fields packed.
"""

import base64
import functools
import typing
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..runtime.errors import DecodeError, ErrorCode
from .reader import ProtoReader
from .writer import PACKABLE_KINDS, WIRE_LEN, ProtoWriter

T = TypeVar("T", bound="ProtoMessage")

# proto3 default values; fields equal to these are not written
FIELD_DEFAULTS: Dict[str, Any] = {
    "string": "",
    "bytes": b"",
    "bool": False,
    "enum": 0,
    "int32": 0,
    "int64": 0,
    "uint32": 0,
    "uint64": 0,
    "float": 0.0,
    "double": 0.0,
    "message": None,
}


def proto_field(number: int, kind: str, *, repeated: bool = False, **kwargs: Any) -> Any:
    """
    Declare a protobuf-backed model field.

    Args:
        number: Protobuf field number
        kind: Field kind (string, bytes, bool, enum, int32, int64, uint32,
            uint64, float, double, message)
        repeated: Whether the field is a repeated field

    Returns:
        A pydantic FieldInfo carrying the protobuf metadata
    """
    if kind not in FIELD_DEFAULTS:
        raise TypeError(f"Unknown protobuf field kind: {kind}")
    extra = {"proto_number": number, "proto_kind": kind, "proto_repeated": repeated}
    if repeated:
        return Field(default_factory=list, json_schema_extra=extra, **kwargs)
    return Field(default=FIELD_DEFAULTS[kind], json_schema_extra=extra, **kwargs)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@dataclass(frozen=True)
class ProtoFieldSpec:
    """Resolved protobuf metadata for one model field."""

    name: str
    number: int
    kind: str
    repeated: bool
    message_cls: Optional[Type["ProtoMessage"]] = None

    @property
    def object_key(self) -> str:
        """Key used by to_object(): camelCase, repeated fields suffixed with List."""
        key = _camel(self.name)
        return key + "List" if self.repeated else key


def _message_type(annotation: Any) -> Optional[Type["ProtoMessage"]]:
    if isinstance(annotation, type) and issubclass(annotation, ProtoMessage):
        return annotation
    for arg in typing.get_args(annotation):
        found = _message_type(arg)
        if found is not None:
            return found
    return None


@functools.lru_cache(maxsize=None)
def proto_schema(cls: Type["ProtoMessage"]) -> Tuple[ProtoFieldSpec, ...]:
    """
    Collect the protobuf field specs of a model class, ordered by field number.

    Raises:
        TypeError: If the model declares a message field without a message
            annotation or reuses a field number
    """
    specs = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra
        if not isinstance(extra, dict) or "proto_number" not in extra:
            continue
        kind = extra["proto_kind"]
        message_cls = None
        if kind == "message":
            message_cls = _message_type(info.annotation)
            if message_cls is None:
                raise TypeError(f"{cls.__name__}.{name} is a message field without a message type")
        specs.append(ProtoFieldSpec(name, extra["proto_number"], kind, extra["proto_repeated"], message_cls))

    specs.sort(key=lambda s: s.number)
    numbers = [s.number for s in specs]
    if len(numbers) != len(set(numbers)):
        raise TypeError(f"{cls.__name__} reuses a protobuf field number")
    return tuple(specs)


class ProtoMessage(BaseModel):
    """
    Base class for protobuf wire models.

    Subclasses set `type_name` to their fully-qualified protobuf name and
    declare fields with proto_field().
    """

    model_config = ConfigDict(validate_assignment=True)

    type_name: ClassVar[str] = ""

    def to_bytes(self) -> bytes:
        """Serialize to canonical proto3 binary."""
        writer = ProtoWriter()
        for spec in proto_schema(type(self)):
            value = getattr(self, spec.name)
            if spec.repeated:
                if not value:
                    continue
                if spec.kind in PACKABLE_KINDS:
                    writer.write_packed(spec.number, spec.kind, value)
                else:
                    for item in value:
                        writer.write_field(spec.number, spec.kind, _wire_value(spec, item))
            elif spec.kind == "message":
                if value is not None:
                    writer.write_field(spec.number, spec.kind, value.to_bytes())
            elif value != FIELD_DEFAULTS[spec.kind]:
                writer.write_field(spec.number, spec.kind, value)
        return writer.to_bytes()

    @classmethod
    def from_bytes(cls: Type[T], data: bytes) -> T:
        """
        Deserialize from proto3 binary.

        Unknown fields are skipped. Repeated numeric fields are accepted in
        both packed and unpacked form.

        Raises:
            DecodeError: If the bytes are malformed or do not fit the model
        """
        specs = {spec.number: spec for spec in proto_schema(cls)}
        values: Dict[str, Any] = {}
        reader = ProtoReader(data)
        while not reader.eof:
            number, wire_type = reader.read_tag()
            spec = specs.get(number)
            if spec is None:
                reader.skip(wire_type)
                continue
            if spec.repeated:
                items = values.setdefault(spec.name, [])
                if wire_type == WIRE_LEN and spec.kind in PACKABLE_KINDS:
                    items.extend(reader.read_packed(spec.kind))
                else:
                    items.append(_decoded_value(spec, reader.read_field(spec.kind, wire_type)))
            else:
                values[spec.name] = _decoded_value(spec, reader.read_field(spec.kind, wire_type))

        try:
            return cls.model_validate(values)
        except PydanticValidationError as e:
            raise DecodeError(f"Invalid {cls.__name__} payload", ErrorCode.INVALID_BINARY, cause=e)

    def to_object(self) -> Dict[str, Any]:
        """
        Convert to a generic nested mapping.

        Keys are camelCase with repeated fields suffixed by "List", bytes are
        base64 text, enums are their numeric values and unset sub-messages
        are None.
        """
        return {
            spec.object_key: _object_value(spec, getattr(self, spec.name))
            for spec in proto_schema(type(self))
        }


def _wire_value(spec: ProtoFieldSpec, value: Any) -> Any:
    if spec.kind == "message":
        return value.to_bytes()
    return value


def _decoded_value(spec: ProtoFieldSpec, value: Any) -> Any:
    if spec.kind == "message":
        return spec.message_cls.from_bytes(value)
    return value


def _object_scalar(spec: ProtoFieldSpec, value: Any) -> Any:
    if spec.kind == "message":
        return value.to_object() if value is not None else None
    if spec.kind == "bytes":
        return base64.b64encode(value).decode("ascii")
    if spec.kind == "enum":
        return int(value)
    return value


def _object_value(spec: ProtoFieldSpec, value: Any) -> Any:
    if spec.repeated:
        return [_object_scalar(spec, item) for item in value]
    return _object_scalar(spec, value)


__all__ = [
    "FIELD_DEFAULTS",
    "ProtoFieldSpec",
    "ProtoMessage",
    "proto_field",
    "proto_schema",
]
