"""
Protobuf Binary Codec Module

Canonical proto3 binary encoding/decoding for the fixed set of transaction and
message schemas shipped in provenance_client.proto.

Key components:
- writer.py: Wire writer with varint/fixed/length-delimited encoding
- reader.py: Wire reader with matching decoding and strict error reporting
- message.py: ProtoMessage pydantic base with field-number metadata
- hashes.py: SHA-256 helpers
"""

from .hashes import sha256, sha256_hex
from .message import ProtoMessage, proto_field, proto_schema
from .reader import ProtoReader
from .writer import ProtoWriter

__all__ = [
    "ProtoMessage",
    "ProtoReader",
    "ProtoWriter",
    "proto_field",
    "proto_schema",
    "sha256",
    "sha256_hex",
]
