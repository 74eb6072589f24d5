"""
Message builders: one parameter model and one builder per message kind.
"""

from .bank import *
from .base import *
from .distribution import *
from .gov import *
from .marker import *
from .misc import *
from .registry import *
from .staking import *
from .wasm import *

from . import bank, base, distribution, gov, marker, misc, registry, staking, wasm

__all__ = (
    base.__all__ + registry.__all__ + bank.__all__ + staking.__all__ + distribution.__all__
    + gov.__all__ + misc.__all__ + wasm.__all__ + marker.__all__
)
