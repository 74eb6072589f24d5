"""
Transaction construction: coin aggregation, the message type registry,
message builders and the signed envelope.
"""

from .builders import BUILDER_REGISTRY, MessageParams, build_message, parse_params
from .coins import aggregate_coins, canonical_amount, coin_amount
from .envelope import (
    build_auth_info,
    build_broadcast_tx_request,
    build_calculate_tx_fee_request,
    build_sign_doc,
    build_signer_info,
    build_tx_body,
    build_tx_raw,
    compute_tx_hash,
    create_any_message_base64,
    msg_any_b64_to_any,
    sign_tx,
)
from .registry import (
    MessageKind,
    RegisteredType,
    kind_for_type_name,
    message_class_for,
    pack,
    pack_message,
    registered_types,
    resolve_kind,
    type_name_for,
    unpack,
)

__all__ = [
    "BUILDER_REGISTRY",
    "MessageParams",
    "build_message",
    "parse_params",
    "aggregate_coins",
    "canonical_amount",
    "coin_amount",
    "build_auth_info",
    "build_broadcast_tx_request",
    "build_calculate_tx_fee_request",
    "build_sign_doc",
    "build_signer_info",
    "build_tx_body",
    "build_tx_raw",
    "compute_tx_hash",
    "create_any_message_base64",
    "msg_any_b64_to_any",
    "sign_tx",
    "MessageKind",
    "RegisteredType",
    "kind_for_type_name",
    "message_class_for",
    "pack",
    "pack_message",
    "registered_types",
    "resolve_kind",
    "type_name_for",
    "unpack",
]
