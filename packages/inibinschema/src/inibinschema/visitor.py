from __future__ import annotations
from typing import Any

from inibincore.errors import TypeUnsupportedError

from .api import KIND_ANY, KIND_STRUCT, KIND_VEC, FIELD_KINDS


class Visitor:
    """Callbacks for `Decoder.read_value`, one per stored tag.

    Every callback refuses by default; a visitor only overrides the tags it
    can take. Nothing is converted from one numeric tag to another.
    """

    expecting = "a value"

    def _refuse(self, tag: str) -> Any:
        raise TypeUnsupportedError(f"stored {tag} value, expected {self.expecting}")

    def visit_i8(self, v: int) -> Any: return self._refuse("i8")
    def visit_i16(self, v: int) -> Any: return self._refuse("i16")
    def visit_i32(self, v: int) -> Any: return self._refuse("i32")
    def visit_i64(self, v: int) -> Any: return self._refuse("i64")
    def visit_f32(self, v: float) -> Any: return self._refuse("f32")
    def visit_bool(self, v: bool) -> Any: return self._refuse("bool")
    def visit_str(self, v: str) -> Any: return self._refuse("str")
    def visit_vec(self, cursor) -> Any: return self._refuse("vec")


def drain(cursor) -> tuple[float, ...]:
    out = []
    while not cursor.exhausted:
        out.append(cursor.next_element())
    return tuple(out)


class KindVisitor(Visitor):
    """Takes only the stored tag named by `kind` ("any" takes every tag).

    Vectors come back as tuples.
    """

    def __init__(self, kind: str = KIND_ANY):
        if kind not in FIELD_KINDS or kind == KIND_STRUCT:
            raise ValueError(f"no leaf visitor for kind {kind!r}")
        self.kind = kind
        self.expecting = "any value" if kind == KIND_ANY else kind

    def _take(self, tag: str, v: Any) -> Any:
        if self.kind != KIND_ANY and tag != self.kind:
            return self._refuse(tag)
        return v

    def visit_i8(self, v): return self._take("i8", v)
    def visit_i16(self, v): return self._take("i16", v)
    def visit_i32(self, v): return self._take("i32", v)
    def visit_i64(self, v): return self._take("i64", v)
    def visit_f32(self, v): return self._take("f32", v)
    def visit_bool(self, v): return self._take("bool", v)
    def visit_str(self, v): return self._take("str", v)

    def visit_vec(self, cursor):
        if self.kind not in (KIND_ANY, KIND_VEC):
            return self._refuse("vec")
        return drain(cursor)


class AnyVisitor(KindVisitor):
    def __init__(self):
        super().__init__(KIND_ANY)


__all__ = ["Visitor", "KindVisitor", "AnyVisitor", "drain"]
