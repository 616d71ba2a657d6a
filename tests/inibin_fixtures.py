"""Byte builders for synthetic inibin files (tests only)."""
from __future__ import annotations
import struct
from typing import Iterable, Sequence


def v1(entries: Sequence[tuple[int, int]], data: bytes, data_count: int | None = None) -> bytes:
    """Legacy layout: version 1, 3 reserved bytes, counts, (key, offset) pairs, data."""
    head = bytes([0x01, 0, 0, 0]) + struct.pack(
        "<II", len(entries), len(data) if data_count is None else data_count
    )
    table = b"".join(struct.pack("<II", k, off) for k, off in entries)
    return head + table + data


def keys(ks: Sequence[int]) -> bytes:
    return struct.pack("<H", len(ks)) + struct.pack(f"<{len(ks)}I", *ks)


def section(ks: Sequence[int], fmt: str, values: Iterable) -> bytes:
    """Key list + one `fmt` payload per key (`fmt` like "i", "B", "3f")."""
    payload = b"".join(
        struct.pack("<" + fmt, *(v if isinstance(v, (tuple, list)) else (v,))) for v in values
    )
    return keys(ks) + payload


def bools(ks: Sequence[int], bits: Sequence[bool]) -> bytes:
    packed = bytearray((len(ks) + 7) // 8)
    for i, b in enumerate(bits):
        if b:
            packed[i // 8] |= 1 << (i % 8)
    return keys(ks) + bytes(packed)


def strings(ks: Sequence[int], offsets: Sequence[int], buf: bytes) -> bytes:
    return keys(ks) + struct.pack(f"<{len(offsets)}H", *offsets) + buf


def v2(flags: int, *sections: bytes, str_len: int = 0) -> bytes:
    return bytes([0x02]) + struct.pack("<HH", str_len, flags) + b"".join(sections)


def bit(*bits: int) -> int:
    out = 0
    for b in bits:
        out |= 1 << b
    return out
