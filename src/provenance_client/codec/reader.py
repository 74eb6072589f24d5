"""
Protobuf Reader

Decodes proto3 binary wire data: tags, varints, fixed-width values and
length-delimited payloads. Every malformed input surfaces as DecodeError.
"""

import builtins
import struct
from typing import Any, List, Tuple

from ..runtime.errors import DecodeError, ErrorCode
from .writer import (
    KIND_WIRE_TYPES,
    PACKABLE_KINDS,
    VARINT_KINDS,
    WIRE_FIXED32,
    WIRE_FIXED64,
    WIRE_LEN,
    WIRE_VARINT,
)

_MAX_VARINT_BYTES = 10


class ProtoReader:
    """
    Protobuf wire reader over an immutable byte buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True when the whole buffer has been consumed."""
        return self._off >= len(self._buf)

    def _truncated(self, what: str) -> DecodeError:
        return DecodeError(
            f"Truncated input: attempting to read {what} beyond end",
            ErrorCode.TRUNCATED_INPUT,
            {"offset": self._off, "length": len(self._buf)},
        )

    def u8(self) -> int:
        """Read a single byte."""
        if self._off >= len(self._buf):
            raise self._truncated("byte")
        val = self._buf[self._off]
        self._off += 1
        return val

    def uvarint(self) -> int:
        """
        Read unsigned varint in ULEB128 format.

        Returns:
            Decoded unsigned integer value
        """
        x = 0
        s = 0
        for _ in range(_MAX_VARINT_BYTES):
            if self._off >= len(self._buf):
                raise self._truncated("varint")
            b = self.u8()
            x |= (b & 0x7F) << s
            if b < 0x80:
                return x & 0xFFFFFFFFFFFFFFFF
            s += 7
        raise DecodeError("Varint exceeds 10 bytes", ErrorCode.INVALID_BINARY, {"offset": self._off})

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        if self._off + n > len(self._buf):
            raise self._truncated(f"{n} bytes")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def fixed32(self) -> float:
        """Read a little-endian IEEE-754 single."""
        return struct.unpack('<f', self.bytes(4))[0]

    def fixed64(self) -> float:
        """Read a little-endian IEEE-754 double."""
        return struct.unpack('<d', self.bytes(8))[0]

    def len_prefixed_bytes(self) -> builtins.bytes:
        """
        Read bytes with length prefix using uvarint.

        Returns:
            Bytes with length read from uvarint prefix
        """
        n = self.uvarint()
        return self.bytes(n)

    def read_tag(self) -> Tuple[int, int]:
        """
        Read a field key.

        Returns:
            Tuple of (field_number, wire_type)
        """
        key = self.uvarint()
        field_number, wire_type = key >> 3, key & 0x07
        if field_number == 0:
            raise DecodeError("Invalid field number 0", ErrorCode.INVALID_BINARY, {"offset": self._off})
        return field_number, wire_type

    def skip(self, wire_type: int) -> None:
        """Skip over an unknown field's value."""
        if wire_type == WIRE_VARINT:
            self.uvarint()
        elif wire_type == WIRE_FIXED64:
            self.bytes(8)
        elif wire_type == WIRE_LEN:
            self.len_prefixed_bytes()
        elif wire_type == WIRE_FIXED32:
            self.bytes(4)
        else:
            raise DecodeError(f"Unsupported wire type: {wire_type}", ErrorCode.INVALID_BINARY)

    def read_value(self, kind: str) -> Any:
        """
        Read a bare value of the given kind.

        Message-kind values are returned as raw bytes for the caller to decode.
        """
        if kind in VARINT_KINDS:
            return _from_uvarint(kind, self.uvarint())
        if kind == "double":
            return self.fixed64()
        if kind == "float":
            return self.fixed32()
        if kind == "string":
            raw = self.len_prefixed_bytes()
            try:
                return raw.decode('utf-8')
            except UnicodeDecodeError as e:
                raise DecodeError("Invalid UTF-8 in string field", ErrorCode.INVALID_BINARY, cause=e)
        return self.len_prefixed_bytes()

    def read_field(self, kind: str, wire_type: int) -> Any:
        """Read a single value, checking the wire type matches the kind."""
        expected = KIND_WIRE_TYPES[kind]
        if wire_type != expected:
            raise DecodeError(
                f"Wire type {wire_type} does not match {kind} field",
                ErrorCode.WIRE_TYPE_MISMATCH,
                {"expected": expected, "actual": wire_type},
            )
        return self.read_value(kind)

    def read_packed(self, kind: str) -> List[Any]:
        """Read a packed repeated numeric field."""
        if kind not in PACKABLE_KINDS:
            raise DecodeError(f"Field kind {kind} cannot be packed", ErrorCode.WIRE_TYPE_MISMATCH)
        inner = ProtoReader(self.len_prefixed_bytes())
        values = []
        while not inner.eof:
            values.append(inner.read_value(kind))
        return values


def _from_uvarint(kind: str, raw: int) -> Any:
    if kind == "bool":
        return raw != 0
    if kind in ("int64", "int32", "enum"):
        if raw >= 1 << 63:
            raw -= 1 << 64
        if kind != "int64":
            # 32-bit kinds keep only the low word
            raw &= 0xFFFFFFFF
            if raw >= 1 << 31:
                raw -= 1 << 32
        return raw
    if kind == "uint32":
        return raw & 0xFFFFFFFF
    return raw


__all__ = ["ProtoReader"]
