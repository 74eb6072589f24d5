"""
Provenance Python Client - transaction construction and display

Builds, canonically encodes and signs Provenance / Cosmos SDK transaction
envelopes, and decodes wallet messages into a human-reviewable display form.
"""

# Wire codec and models
from .codec import ProtoMessage, ProtoReader, ProtoWriter, sha256_hex
from .proto import *

# Errors and options
from .runtime.errors import *
from .config import DEFAULT_DISPLAY_OPTIONS, DEFAULT_TX_OPTIONS, DenomUnit, DisplayOptions, TxOptions

# Signing
from .crypto import *

# Transaction construction
from .tx import *

# Display
from .display import *

from . import crypto, display, proto, runtime, tx

__version__ = "0.1.0"
__all__ = (
    [
        "__version__",
        "ProtoMessage",
        "ProtoReader",
        "ProtoWriter",
        "sha256_hex",
        "DEFAULT_DISPLAY_OPTIONS",
        "DEFAULT_TX_OPTIONS",
        "DenomUnit",
        "DisplayOptions",
        "TxOptions",
    ]
    + proto.__all__
    + runtime.errors.__all__
    + crypto.__all__
    + tx.__all__
    + display.__all__
)
