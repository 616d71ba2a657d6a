from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

# Closed set of stored tags. The schema decoder dispatches on exactly these.
TAG_I8 = "i8"
TAG_I16 = "i16"
TAG_I32 = "i32"
TAG_I64 = "i64"
TAG_F32 = "f32"
TAG_BOOL = "bool"
TAG_STR = "str"
TAG_VEC = "vec"

TAGS: tuple[str, ...] = (TAG_I8, TAG_I16, TAG_I32, TAG_I64, TAG_F32, TAG_BOOL, TAG_STR, TAG_VEC)

_INT_BOUNDS = {
    TAG_I8: (-(1 << 7), (1 << 7) - 1),
    TAG_I16: (-(1 << 15), (1 << 15) - 1),
    TAG_I32: (-(1 << 31), (1 << 31) - 1),
    TAG_I64: (-(1 << 63), (1 << 63) - 1),
}

VEC_MIN = 2
VEC_MAX = 4


def f32(x: float) -> float:
    """Round a python float to the nearest float32 value."""
    return float(np.float32(x))


@dataclass(frozen=True, slots=True)
class FloatVec:
    """2 to 4 float32 components (colors, positions). Fixed capacity, immutable."""
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        n = len(self.values)
        if not (VEC_MIN <= n <= VEC_MAX):
            raise ValueError(f"FloatVec holds {VEC_MIN}..{VEC_MAX} floats, got {n}")
        object.__setattr__(self, "values", tuple(f32(v) for v in self.values))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "FloatVec":
        return cls(tuple(float(v) for v in arr.astype(np.float32, copy=False)))

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, i: int) -> float:
        return self.values[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)


@dataclass(frozen=True, slots=True)
class Value:
    """One stored inibin value: a tag from `TAGS` and its python payload."""
    tag: str
    data: Any

    def __post_init__(self) -> None:
        if self.tag not in TAGS:
            raise ValueError(f"unknown value tag {self.tag!r}")
        if self.tag in _INT_BOUNDS:
            lo, hi = _INT_BOUNDS[self.tag]
            if isinstance(self.data, bool) or not (lo <= int(self.data) <= hi):
                raise ValueError(f"{self.tag} out of range: {self.data!r}")
            object.__setattr__(self, "data", int(self.data))
        elif self.tag == TAG_F32:
            object.__setattr__(self, "data", f32(self.data))
        elif self.tag == TAG_BOOL:
            object.__setattr__(self, "data", bool(self.data))
        elif self.tag == TAG_STR and not isinstance(self.data, str):
            raise ValueError("str value must hold a str")
        elif self.tag == TAG_VEC and not isinstance(self.data, FloatVec):
            object.__setattr__(self, "data", FloatVec(tuple(self.data)))

    # Constructors, one per variant
    @classmethod
    def i8(cls, v: int) -> "Value": return cls(TAG_I8, v)
    @classmethod
    def i16(cls, v: int) -> "Value": return cls(TAG_I16, v)
    @classmethod
    def i32(cls, v: int) -> "Value": return cls(TAG_I32, v)
    @classmethod
    def i64(cls, v: int) -> "Value": return cls(TAG_I64, v)
    @classmethod
    def float32(cls, v: float) -> "Value": return cls(TAG_F32, v)
    @classmethod
    def boolean(cls, v: bool) -> "Value": return cls(TAG_BOOL, v)
    @classmethod
    def string(cls, v: str) -> "Value": return cls(TAG_STR, v)
    @classmethod
    def vec(cls, *v: float) -> "Value": return cls(TAG_VEC, FloatVec(tuple(v)))

    def to_python(self) -> Any:
        """Plain payload (vectors as tuples), for dumps and comparisons."""
        if self.tag == TAG_VEC:
            return tuple(self.data)
        return self.data


__all__ = [
    "TAG_I8", "TAG_I16", "TAG_I32", "TAG_I64", "TAG_F32", "TAG_BOOL", "TAG_STR", "TAG_VEC",
    "TAGS", "FloatVec", "Value", "f32",
]
