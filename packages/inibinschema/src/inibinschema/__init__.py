# packages/inibinschema/src/inibinschema/__init__.py
from __future__ import annotations

"""inibin - schema-driven decoder.

FlatMap + ordered field schema -> structured value. Field keys are never
stored by name: each one is recomputed from the struct name and the field
name, in declaration order.
"""

from .api import (
    KIND_I8, KIND_I16, KIND_I32, KIND_I64, KIND_F32, KIND_BOOL,
    KIND_STR, KIND_VEC, KIND_STRUCT, KIND_ANY,
    FIELD_KINDS, UNSUPPORTED_KINDS,
    FieldSpec, StructSchema,
)
from .visitor import Visitor, KindVisitor, AnyVisitor
from .decoder import ABSENT, Decoder, VectorCursor
from .walker import decode_struct
from .reflect import schema_of, from_flatmap, from_bytes

__all__ = [
    "KIND_I8", "KIND_I16", "KIND_I32", "KIND_I64", "KIND_F32", "KIND_BOOL",
    "KIND_STR", "KIND_VEC", "KIND_STRUCT", "KIND_ANY",
    "FIELD_KINDS", "UNSUPPORTED_KINDS",
    "FieldSpec", "StructSchema",
    "Visitor", "KindVisitor", "AnyVisitor",
    "ABSENT", "Decoder", "VectorCursor",
    "decode_struct",
    "schema_of", "from_flatmap", "from_bytes",
]
