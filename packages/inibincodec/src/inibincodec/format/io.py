from __future__ import annotations
import logging
from pathlib import Path
from typing import BinaryIO

from inibincore.errors import InvalidVersionError

from ..config import DEFAULT_CONFIG, ParseConfig
from ..flatmap import FlatMap
from .legacy import read_v1
from .reader import ByteReader
from .sections import read_v2

log = logging.getLogger(__name__)

VERSION_LEGACY = 0x01
VERSION_TYPED = 0x02
V1_RESERVED = 3


def parse(data: bytes | bytearray | memoryview, config: ParseConfig | None = None) -> FlatMap:
    """Decode an inibin buffer into a `FlatMap`.

    Raises a `FormatError` subclass (unknown version, truncated input, bad
    UTF-8). Nothing is returned on failure, not even the keys read so far.
    """
    cfg = config or DEFAULT_CONFIG
    r = ByteReader(data)
    version = r.u8("version")
    if version == VERSION_LEGACY:
        r.skip(V1_RESERVED, "v1 reserved")
        entries = read_v1(r, cfg)
    elif version == VERSION_TYPED:
        entries = read_v2(r, cfg)
    else:
        raise InvalidVersionError(version)
    flat = FlatMap(entries)
    log.debug("parsed inibin v%d: %d keys", version, len(flat))
    return flat


def from_reader(fp: BinaryIO, config: ParseConfig | None = None) -> FlatMap:
    """Read a binary file object to the end, then `parse`."""
    return parse(fp.read(), config)


def parse_file(path: str | Path, config: ParseConfig | None = None) -> FlatMap:
    """Read an inibin file from disk (raw bytes), then `parse`."""
    return parse(Path(path).read_bytes(), config)


__all__ = ["parse", "parse_file", "from_reader", "VERSION_LEGACY", "VERSION_TYPED"]
