"""
Protobuf wire models for the Provenance transaction schema.
"""

from .base import *
from .messages import *
from .tx import *

from . import base, messages, tx

__all__ = base.__all__ + tx.__all__ + messages.__all__
