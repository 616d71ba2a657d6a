from __future__ import annotations
import logging
from typing import Any

from inibincodec.flatmap import FlatMap
from inibincore.errors import FieldNotFoundError

from .api import KIND_STRUCT, FieldSpec, StructSchema
from .decoder import ABSENT, Decoder
from .visitor import KindVisitor

log = logging.getLogger(__name__)


def decode_struct(flat: FlatMap, schema: StructSchema) -> Any:
    """Decode one `schema` instance from `flat`.

    Returns `schema.build(values)`: a dict, or whatever `schema.factory` makes.
    Raises `FieldNotFoundError` / `TypeUnsupportedError` on data mismatches.
    """
    dec = Decoder(flat)
    out = walk(dec, schema)
    assert dec.depth == 0
    return out


def walk(dec: Decoder, schema: StructSchema) -> Any:
    dec.enter_struct(schema.name, schema.field_names())
    values: dict[str, Any] = {}
    for spec in schema.fields:
        dec.next_field()
        values[spec.name] = _read_field(dec, spec)
    dec.exit_struct()
    return schema.build(values)


def _read_field(dec: Decoder, spec: FieldSpec) -> Any:
    if spec.kind == KIND_STRUCT:
        # nested keys hash under the child's own name; the parent key is unused
        if not spec.optional:
            return walk(dec, spec.schema)
        depth = dec.depth
        try:
            return walk(dec, spec.schema)
        except FieldNotFoundError as exc:
            log.debug("optional struct %s dropped: %s", spec.name, exc)
            dec.unwind(depth)
            return spec.default
    v = dec.read_value(KindVisitor(spec.kind), required=not spec.optional, kind=spec.kind)
    return spec.default if v is ABSENT else v


__all__ = ["decode_struct", "walk"]
