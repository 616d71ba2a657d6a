from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from inibincodec.flatmap import FlatMap
from inibincodec.values import (
    TAG_BOOL, TAG_F32, TAG_I8, TAG_I16, TAG_I32, TAG_I64, TAG_STR, TAG_VEC,
    FloatVec, Value,
)
from inibincore.errors import (
    CursorExhaustedError, FieldNotFoundError, SchemaExhaustedError,
    SchemaMismatchError, TypeUnsupportedError,
)
from inibincore.hashing import hash_name, incremental_hash

from .api import KIND_ANY, UNSUPPORTED_KINDS
from .visitor import Visitor

log = logging.getLogger(__name__)

STATE_IDLE = "idle"
STATE_IN_STRUCT = "in_struct"


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


#: result of `read_value(required=False)` when the key is not stored
ABSENT = _Absent()


class VectorCursor:
    """Element-by-element reader over one stored vector (2, 3 or 4 floats)."""

    __slots__ = ("_vec", "_index")

    def __init__(self, vec: FloatVec):
        self._vec = vec
        self._index = 0

    def __len__(self) -> int:
        return len(self._vec)

    @property
    def index(self) -> int:
        return self._index

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._vec)

    def next_element(self) -> float:
        if self.exhausted:
            raise CursorExhaustedError(
                f"vector of {len(self._vec)} floats already fully read"
            )
        v = self._vec[self._index]
        self._index += 1
        return v


@dataclass
class Frame:
    struct_name: str
    struct_name_hash: int
    remaining: deque[str]
    current_field: str | None = None
    current_field_hash: int | None = None


@dataclass
class Decoder:
    """One decode session over a shared, read-only `FlatMap`.

    The caller walks its schema and announces each step:

        dec.enter_struct("Data", ["Name", "Health"])
        dec.next_field(); name = dec.read_value(KindVisitor("str"))
        dec.next_field(); hp = dec.read_value(KindVisitor("f32"))
        dec.exit_struct()

    Each `enter_struct` pushes a frame seeded with `hash_name(name, "")`; each
    field key is that seed extended with the field name. Frames live on this
    session's own stack and never see the enclosing frame's hash.
    """

    flat: FlatMap
    _stack: list[Frame] = field(default_factory=list, init=False, repr=False)

    # ------------------------------------------------------------------ state
    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def state(self) -> str:
        return STATE_IN_STRUCT if self._stack else STATE_IDLE

    def _top(self, op: str) -> Frame:
        if not self._stack:
            raise SchemaMismatchError(f"{op}() outside of any struct")
        return self._stack[-1]

    # ------------------------------------------------------------ struct scope
    def enter_struct(self, name: str, fields: Iterable[str]) -> Frame:
        frame = Frame(
            struct_name=name,
            struct_name_hash=hash_name(name, ""),
            remaining=deque(fields),
        )
        self._stack.append(frame)
        log.debug("enter %s (0x%08x) depth=%d fields=%d",
                  name, frame.struct_name_hash, self.depth, len(frame.remaining))
        return frame

    def next_field(self) -> str:
        frame = self._top("next_field")
        if not frame.remaining:
            raise SchemaExhaustedError(
                f"{frame.struct_name}: no field left in the declared schema"
            )
        name = frame.remaining.popleft()
        frame.current_field = name
        frame.current_field_hash = incremental_hash(frame.struct_name_hash, name)
        return name

    def exit_struct(self) -> None:
        frame = self._top("exit_struct")
        if frame.remaining:
            raise SchemaMismatchError(
                f"{frame.struct_name}: exit with {len(frame.remaining)} field(s) "
                f"not read ({', '.join(frame.remaining)})"
            )
        self._stack.pop()
        log.debug("exit %s depth=%d", frame.struct_name, self.depth)

    def iter_fields(self) -> Iterator[str]:
        """Yield the current struct's field names, then exit the struct."""
        frame = self._top("iter_fields")
        while frame.remaining:
            yield self.next_field()
        if not self._stack or self._stack[-1] is not frame:
            raise SchemaMismatchError(f"{frame.struct_name}: nested struct left open")
        self.exit_struct()

    def unwind(self, depth: int) -> None:
        """Drop frames above `depth` after an aborted nested decode."""
        del self._stack[depth:]

    # ------------------------------------------------------------------ values
    def read_value(self, visitor: Visitor, required: bool = True, kind: str = KIND_ANY) -> Any:
        """Resolve the pending field and hand its stored value to `visitor`.

        Returns the visitor's result, or `ABSENT` for a missing optional field.
        """
        frame = self._top("read_value")
        if kind in UNSUPPORTED_KINDS:
            raise TypeUnsupportedError(f"{kind} values are not supported")
        key = frame.current_field_hash
        if key is None:
            raise SchemaMismatchError(
                f"{frame.struct_name}: read_value() needs a next_field() first"
            )
        name = f"{frame.struct_name}*{frame.current_field}"
        frame.current_field_hash = None
        value = self.flat.lookup(key)
        if value is None:
            if required:
                raise FieldNotFoundError(key, name)
            log.debug("optional %s (0x%08x) absent", name, key)
            return ABSENT
        return dispatch(value, visitor)


def dispatch(value: Value, visitor: Visitor) -> Any:
    tag, data = value.tag, value.data
    if tag == TAG_I8:
        return visitor.visit_i8(data)
    elif tag == TAG_I16:
        return visitor.visit_i16(data)
    elif tag == TAG_I32:
        return visitor.visit_i32(data)
    elif tag == TAG_I64:
        return visitor.visit_i64(data)
    elif tag == TAG_F32:
        return visitor.visit_f32(data)
    elif tag == TAG_BOOL:
        return visitor.visit_bool(data)
    elif tag == TAG_STR:
        return visitor.visit_str(data)
    elif tag == TAG_VEC:
        return visitor.visit_vec(VectorCursor(data))
    raise AssertionError(f"unhandled value tag {tag!r}")


__all__ = [
    "ABSENT", "STATE_IDLE", "STATE_IN_STRUCT",
    "Decoder", "Frame", "VectorCursor", "dispatch",
]
