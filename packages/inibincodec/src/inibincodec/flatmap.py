from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, overload

from inibincore.hashing import hash_name

from .values import Value


class FlatMap(Mapping):
    """Immutable, insertion-ordered `u32 key -> Value` table built by `parse`.

    Duplicate keys keep their first position and the last value, like a dict.
    """

    __slots__ = ("_map",)

    def __init__(self, items: Iterable[tuple[int, Value]] = ()):
        m: dict[int, Value] = {}
        for key, value in items:
            if not (0 <= key <= 0xFFFFFFFF):
                raise ValueError(f"key out of u32 range: {key!r}")
            if not isinstance(value, Value):
                raise TypeError(f"FlatMap values must be Value, got {type(value).__name__}")
            m[int(key)] = value
        self._map = m

    # Mapping protocol
    def __getitem__(self, key: int) -> Value:
        return self._map[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        body = ", ".join(f"0x{k:08x}: {v.tag}={v.to_python()!r}" for k, v in self._map.items())
        return f"FlatMap({{{body}}})"

    @overload
    def lookup(self, key: int) -> Value | None: ...
    @overload
    def lookup(self, section: str, field: str) -> Value | None: ...

    def lookup(self, key_or_section, field=None):
        """`lookup(key)` by raw hash, or `lookup(section, field)` hashing the names."""
        if field is None:
            if isinstance(key_or_section, (str, bytes)):
                raise TypeError("lookup(section, field) needs both names")
            return self._map.get(int(key_or_section))
        return self._map.get(hash_name(key_or_section, field))

    def to_dict(self) -> dict[int, Any]:
        return {k: v.to_python() for k, v in self._map.items()}


__all__ = ["FlatMap"]
