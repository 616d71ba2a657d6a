# packages/inibincodec/src/inibincodec/__init__.py
from __future__ import annotations

"""inibin - format decoder (public surface).

bytes -> FlatMap (u32 name hash -> tagged Value), for both on-disk layouts
(v1 legacy offset table, v2 bit-flagged typed sections).
"""

__version__ = "0.3.0"

# API publique (stable)
from .config import ParseConfig, SCALED_FLOAT_FACTOR
from .values import Value, FloatVec, TAGS
from .flatmap import FlatMap
from .names import HashNames
from .format import parse, parse_file, from_reader

__all__ = [
    "__version__",
    "ParseConfig", "SCALED_FLOAT_FACTOR",
    "Value", "FloatVec", "TAGS",
    "FlatMap",
    "HashNames",
    "parse", "parse_file", "from_reader",
]
