from __future__ import annotations
import logging
from typing import Callable, List, Tuple

import numpy as np

from ..config import ParseConfig
from ..values import TAG_VEC, FloatVec, Value
from .reader import ByteReader, read_cstring

log = logging.getLogger(__name__)

# v2 layout, after the version byte:
#   u16 str_len          size of the shared string buffer
#   u16 flags            one bit per typed section, read in ascending bit order
#   sections...
# Each section: u16 count, u32 keys[count], then the payloads in key order.

BIT_I32 = 0
BIT_F32 = 1
BIT_F32_SCALED = 2
BIT_I16 = 3
BIT_I8 = 4
BIT_BOOL = 5
BIT_VEC3_SCALED = 6
BIT_VEC3 = 7
BIT_VEC2_SCALED = 8
BIT_VEC2 = 9
BIT_VEC4_SCALED = 10
BIT_VEC4 = 11
BIT_STRING = 12

SECTION_COUNT = 13
KNOWN_FLAGS = (1 << SECTION_COUNT) - 1

Entries = List[Tuple[int, Value]]


def is_bit_set(flags: int, bit: int) -> bool:
    return flags & (1 << bit) != 0


def read_keys(r: ByteReader, what: str) -> list[int]:
    count = r.u16(f"{what} key count")
    return r.array("<u4", count, f"{what} keys").tolist()


def _scaled(raw: np.ndarray, cfg: ParseConfig) -> np.ndarray:
    # computed in float32, never float64
    return raw.astype(np.float32) * np.float32(cfg.scale)


# ----------------------------- scalar sections -----------------------------

def _scalar_section(dtype: str, make: Callable[[object], Value], scaled: bool = False):
    def read(r: ByteReader, cfg: ParseConfig, what: str) -> Entries:
        keys = read_keys(r, what)
        arr = r.array(dtype, len(keys), f"{what} payload")
        if scaled:
            arr = _scaled(arr, cfg)
        return [(k, make(v)) for k, v in zip(keys, arr.tolist())]
    return read


def _vec_section(width: int, scaled: bool):
    dtype = "u1" if scaled else "<f4"

    def read(r: ByteReader, cfg: ParseConfig, what: str) -> Entries:
        keys = read_keys(r, what)
        arr = r.array(dtype, len(keys) * width, f"{what} payload").reshape(len(keys), width)
        if scaled:
            arr = _scaled(arr, cfg)
        return [(k, Value(TAG_VEC, FloatVec.from_array(row))) for k, row in zip(keys, arr)]
    return read


# ----------------------------- packed sections -----------------------------

def read_bools(r: ByteReader, cfg: ParseConfig, what: str) -> Entries:
    """Key i -> bit (i % 8) of payload byte (i // 8), LSB first."""
    keys = read_keys(r, what)
    nbytes = (len(keys) + 7) // 8
    packed = r.array("u1", nbytes, f"{what} payload")
    bits = np.unpackbits(packed, bitorder="little")[:len(keys)] if nbytes else packed
    return [(k, Value.boolean(b)) for k, b in zip(keys, bits.tolist())]


def make_string_reader(str_len: int):
    def read_strings(r: ByteReader, cfg: ParseConfig, what: str) -> Entries:
        keys = read_keys(r, what)
        offsets = r.array("<u2", len(keys), f"{what} offsets").tolist()
        buf = r.take(str_len, f"{what} buffer")
        return [
            (k, Value.string(read_cstring(buf, off, k, cfg.strict_utf8)))
            for k, off in zip(keys, offsets)
        ]
    return read_strings


# ------------------------------ section table ------------------------------

SECTIONS = {
    BIT_I32: ("i32", _scalar_section("<i4", Value.i32)),
    BIT_F32: ("f32", _scalar_section("<f4", Value.float32)),
    BIT_F32_SCALED: ("f32 scaled", _scalar_section("u1", Value.float32, scaled=True)),
    BIT_I16: ("i16", _scalar_section("<i2", Value.i16)),
    BIT_I8: ("i8", _scalar_section("i1", Value.i8)),
    BIT_BOOL: ("bool", read_bools),
    BIT_VEC3_SCALED: ("vec3 scaled", _vec_section(3, scaled=True)),
    BIT_VEC3: ("vec3", _vec_section(3, scaled=False)),
    BIT_VEC2_SCALED: ("vec2 scaled", _vec_section(2, scaled=True)),
    BIT_VEC2: ("vec2", _vec_section(2, scaled=False)),
    BIT_VEC4_SCALED: ("vec4 scaled", _vec_section(4, scaled=True)),
    BIT_VEC4: ("vec4", _vec_section(4, scaled=False)),
    # BIT_STRING depends on str_len, built per file in read_v2
}


def read_v2(r: ByteReader, cfg: ParseConfig) -> Entries:
    str_len = r.u16("v2 str_len")
    flags = r.u16("v2 flags")
    if flags & ~KNOWN_FLAGS:
        log.debug("v2: ignoring unknown section bits 0x%04x", flags & ~KNOWN_FLAGS)

    table = dict(SECTIONS)
    table[BIT_STRING] = ("string", make_string_reader(str_len))

    out: Entries = []
    for bit in range(SECTION_COUNT):
        if not is_bit_set(flags, bit):
            continue
        name, read = table[bit]
        entries = read(r, cfg, name)
        log.debug("v2: section %s -> %d keys", name, len(entries))
        out.extend(entries)
    if r.remaining:
        log.debug("v2: %d trailing bytes ignored", r.remaining)
    return out


__all__ = [
    "BIT_I32", "BIT_F32", "BIT_F32_SCALED", "BIT_I16", "BIT_I8", "BIT_BOOL",
    "BIT_VEC3_SCALED", "BIT_VEC3", "BIT_VEC2_SCALED", "BIT_VEC2",
    "BIT_VEC4_SCALED", "BIT_VEC4", "BIT_STRING",
    "is_bit_set", "read_keys", "read_bools", "read_v2",
]
