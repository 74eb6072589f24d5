"""
Protobuf Writer

Implements proto3 binary wire encoding: tags, base-128 varints,
little-endian fixed-width values and length-delimited payloads.
"""

import struct
from typing import Any, Iterable

from ..runtime.errors import ErrorCode, ValidationError

# Wire types
WIRE_VARINT = 0
WIRE_FIXED64 = 1
WIRE_LEN = 2
WIRE_FIXED32 = 5

VARINT_KINDS = frozenset({"bool", "enum", "int32", "int64", "uint32", "uint64"})

KIND_WIRE_TYPES = {
    "bool": WIRE_VARINT,
    "enum": WIRE_VARINT,
    "int32": WIRE_VARINT,
    "int64": WIRE_VARINT,
    "uint32": WIRE_VARINT,
    "uint64": WIRE_VARINT,
    "double": WIRE_FIXED64,
    "float": WIRE_FIXED32,
    "string": WIRE_LEN,
    "bytes": WIRE_LEN,
    "message": WIRE_LEN,
}

# Repeated fields of these kinds are written packed
PACKABLE_KINDS = VARINT_KINDS | {"double", "float"}

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF

# Inclusive value ranges of the integer kinds
INT_RANGES = {
    "enum": (-2**31, 2**31 - 1),
    "int32": (-2**31, 2**31 - 1),
    "int64": (-2**63, 2**63 - 1),
    "uint32": (0, 2**32 - 1),
    "uint64": (0, 2**64 - 1),
}


class ProtoWriter:
    """
    Protobuf wire writer.

    Accumulates encoded bytes; `to_bytes` returns the immutable result.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb = bytearray()

    def u8(self, v: int) -> None:
        """Write a single byte."""
        self._bb.append(v & 0xFF)

    def raw(self, v: bytes) -> None:
        """Write raw bytes without length prefix."""
        self._bb.extend(v)

    def uvarint(self, v: int) -> None:
        """
        Write unsigned varint in ULEB128 format.

        Negative values are written as their 64-bit two's complement, which is
        how proto3 encodes negative int32/int64/enum values (10 bytes). Range
        checks happen in write_value.

        Args:
            v: Integer value to encode as varint
        """
        x = v & _UINT64_MASK
        while x >= 0x80:
            self.u8((x & 0x7F) | 0x80)
            x >>= 7
        self.u8(x)

    def fixed32(self, v: float) -> None:
        """Write a little-endian IEEE-754 single."""
        self._bb.extend(struct.pack('<f', v))

    def fixed64(self, v: float) -> None:
        """Write a little-endian IEEE-754 double."""
        self._bb.extend(struct.pack('<d', v))

    def len_prefixed_bytes(self, v: bytes) -> None:
        """
        Write bytes with length prefix using uvarint.

        Args:
            v: Bytes to write with length prefix
        """
        self.uvarint(len(v))
        self.raw(v)

    def tag(self, field_number: int, wire_type: int) -> None:
        """Write a field key."""
        if field_number < 1:
            raise ValidationError(f"Invalid protobuf field number: {field_number}")
        self.uvarint((field_number << 3) | wire_type)

    def write_value(self, kind: str, value: Any) -> None:
        """Write a bare value (no tag) of the given kind."""
        if kind in VARINT_KINDS:
            value = int(value)
            low, high = INT_RANGES.get(kind, (0, 1))
            if not low <= value <= high:
                raise ValidationError(
                    f"Value {value} is out of range for {kind}",
                    ErrorCode.INVALID_FIELD,
                    details={"kind": kind, "value": value},
                )
            self.uvarint(value)
        elif kind == "double":
            self.fixed64(value)
        elif kind == "float":
            self.fixed32(value)
        elif kind == "string":
            self.len_prefixed_bytes(value.encode('utf-8'))
        elif kind in ("bytes", "message"):
            self.len_prefixed_bytes(value)
        else:
            raise ValidationError(f"Unsupported protobuf field kind: {kind}")

    def write_field(self, field_number: int, kind: str, value: Any) -> None:
        """
        Write a tagged field.

        Message-kind values must already be serialized to bytes.

        Args:
            field_number: Protobuf field number
            kind: Field kind name
            value: Field value
        """
        self.tag(field_number, KIND_WIRE_TYPES[kind])
        self.write_value(kind, value)

    def write_packed(self, field_number: int, kind: str, values: Iterable[Any]) -> None:
        """Write a packed repeated numeric field."""
        inner = ProtoWriter()
        for value in values:
            inner.write_value(kind, value)
        self.tag(field_number, WIRE_LEN)
        self.len_prefixed_bytes(inner.to_bytes())

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)


__all__ = [
    "ProtoWriter",
    "WIRE_VARINT",
    "WIRE_FIXED64",
    "WIRE_LEN",
    "WIRE_FIXED32",
    "KIND_WIRE_TYPES",
    "PACKABLE_KINDS",
    "VARINT_KINDS",
    "INT_RANGES",
]
