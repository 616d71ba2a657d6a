# packages/inibincore/src/inibincore/__init__.py
from __future__ import annotations

from .hashing import hash_name, incremental_hash, split_name
from .errors import (
    InibinError,
    FormatError, InvalidVersionError, TruncatedError, InvalidStringError,
    DecodeError, FieldNotFoundError, TypeUnsupportedError,
    SchemaMismatchError, SchemaExhaustedError, CursorExhaustedError,
)

__all__ = [
    "hash_name", "incremental_hash", "split_name",
    "InibinError",
    "FormatError", "InvalidVersionError", "TruncatedError", "InvalidStringError",
    "DecodeError", "FieldNotFoundError", "TypeUnsupportedError",
    "SchemaMismatchError", "SchemaExhaustedError", "CursorExhaustedError",
]
