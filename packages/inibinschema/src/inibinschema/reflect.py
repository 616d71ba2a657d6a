from __future__ import annotations
import dataclasses
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from inibincodec.config import ParseConfig
from inibincodec.flatmap import FlatMap
from inibincodec.format import parse

from .api import (
    KIND_ANY, KIND_BOOL, KIND_F32, KIND_I32, KIND_STR, KIND_STRUCT, KIND_VEC,
    FieldSpec, StructSchema,
)
from .walker import decode_struct

# Schemas derived from dataclasses, keyed by class
_REG: dict[type, StructSchema] = {}

_SCALARS = {bool: KIND_BOOL, int: KIND_I32, float: KIND_F32, str: KIND_STR}


def _unwrap_optional(tp: Any) -> tuple[Any, bool]:
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = get_args(tp)
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1 and len(args) == 2:
            return rest[0], True
    return tp, False


def _kind_of(tp: Any, owner: str, name: str) -> str:
    if tp is Any:
        return KIND_ANY
    if tp in _SCALARS:
        return _SCALARS[tp]
    if get_origin(tp) is tuple and all(a in (float, Ellipsis) for a in get_args(tp)):
        return KIND_VEC
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return KIND_STRUCT
    raise TypeError(f"{owner}.{name}: no inibin kind for annotation {tp!r}")


def _default_of(f: dataclasses.Field) -> Any:
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return None


def schema_of(cls: type) -> StructSchema:
    """Build (once) the `StructSchema` of a dataclass.

    - struct name: `cls.__inibin_name__`, else the class name
    - field key:   `field(metadata={"inibin_key": "AttackRange"})`, else the attribute name
    - field kind:  `metadata["inibin_kind"]`, else from the annotation
      (int -> i32, float -> f32, bool, str, tuple[float, ...] -> vec,
      nested dataclass -> struct, Any -> any)
    - `Optional[...]` annotations make the field optional
    """
    if cls in _REG:
        return _REG[cls]
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")

    hints = get_type_hints(cls)
    specs = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        tp, optional = _unwrap_optional(hints[f.name])
        kind = f.metadata.get("inibin_kind") or _kind_of(tp, cls.__name__, f.name)
        specs.append(FieldSpec(
            name=f.name,
            kind=kind,
            optional=optional,
            schema=schema_of(tp) if kind == KIND_STRUCT else None,
            key=f.metadata.get("inibin_key"),
            default=_default_of(f),
        ))
    schema = StructSchema(
        name=getattr(cls, "__inibin_name__", cls.__name__),
        fields=tuple(specs),
        factory=cls,
    )
    _REG[cls] = schema
    return schema


def from_flatmap(cls: type, flat: FlatMap) -> Any:
    return decode_struct(flat, schema_of(cls))


def from_bytes(cls: type, data: bytes, config: ParseConfig | None = None) -> Any:
    """parse + from_flatmap in one call."""
    return from_flatmap(cls, parse(data, config))


__all__ = ["schema_of", "from_flatmap", "from_bytes"]
