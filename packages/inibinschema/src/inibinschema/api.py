from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

KIND_I8 = "i8"
KIND_I16 = "i16"
KIND_I32 = "i32"
KIND_I64 = "i64"
KIND_F32 = "f32"
KIND_BOOL = "bool"
KIND_STR = "str"
KIND_VEC = "vec"
KIND_STRUCT = "struct"
KIND_ANY = "any"

#: kinds a field can be declared with
FIELD_KINDS: tuple[str, ...] = (
    KIND_I8, KIND_I16, KIND_I32, KIND_I64, KIND_F32, KIND_BOOL, KIND_STR, KIND_VEC,
    KIND_STRUCT, KIND_ANY,
)

#: representations the decoder never implements, whatever is stored
UNSUPPORTED_KINDS = frozenset({"bytes", "char", "unit", "enum", "map", "tuple", "seq_of_seq"})


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: str = KIND_ANY
    optional: bool = False
    schema: "StructSchema | None" = None
    key: str | None = None
    default: Any = None

    def __post_init__(self) -> None:
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"{self.name}: unknown field kind {self.kind!r}")
        if (self.kind == KIND_STRUCT) != (self.schema is not None):
            raise ValueError(f"{self.name}: a nested schema goes with kind='struct' only")

    @property
    def wire_name(self) -> str:
        """Identifier hashed under the struct name (`key` when renamed)."""
        return self.key or self.name


@dataclass(frozen=True)
class StructSchema:
    """Ordered field list of one structured type.

    The order is part of the wire contract: fields are resolved in exactly
    this order, one `next_field()` each.
    """
    name: str
    fields: tuple[FieldSpec, ...]
    factory: Callable[..., Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(f"{self.name}: duplicate field {f.name!r}")
            seen.add(f.name)

    def field_names(self) -> tuple[str, ...]:
        return tuple(f.wire_name for f in self.fields)

    def build(self, values: Mapping[str, Any]) -> Any:
        return self.factory(**values) if self.factory is not None else dict(values)


__all__ = [
    "KIND_I8", "KIND_I16", "KIND_I32", "KIND_I64", "KIND_F32", "KIND_BOOL",
    "KIND_STR", "KIND_VEC", "KIND_STRUCT", "KIND_ANY",
    "FIELD_KINDS", "UNSUPPORTED_KINDS",
    "FieldSpec", "StructSchema",
]
