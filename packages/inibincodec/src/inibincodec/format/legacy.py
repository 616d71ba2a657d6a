from __future__ import annotations
import logging
from typing import List, Tuple

from ..config import ParseConfig
from ..values import Value
from .reader import ByteReader, read_cstring

log = logging.getLogger(__name__)

# v1 layout, after the version byte and 3 reserved bytes:
#   u32 entry_count
#   u32 data_count
#   (u32 key, u32 offset) * entry_count
#   u8  data[...]            NUL-terminated strings, rest of the input
# Every v1 value is a string.


def read_v1(r: ByteReader, cfg: ParseConfig) -> List[Tuple[int, Value]]:
    entry_count = r.u32("v1 entry_count")
    data_count = r.u32("v1 data_count")

    pairs = r.array("<u4", 2 * entry_count, "v1 entry table").reshape(entry_count, 2)
    data = r.rest()
    if data_count != len(data):
        log.debug("v1: header data_count=%d but %d data bytes follow", data_count, len(data))

    out: List[Tuple[int, Value]] = []
    for key, offset in pairs.tolist():
        out.append((key, Value.string(read_cstring(data, offset, key, cfg.strict_utf8))))
    log.debug("v1: %d entries, %d data bytes", entry_count, len(data))
    return out


__all__ = ["read_v1"]
