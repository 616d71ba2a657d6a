# packages/inibincodec/src/inibincodec/format/__init__.py
from __future__ import annotations

# Entry points (bytes / file object / path -> FlatMap)
from .io import parse, parse_file, from_reader, VERSION_LEGACY, VERSION_TYPED

# Low-level pieces, exposed for tooling and tests
from .reader import ByteReader, read_cstring
from .legacy import read_v1
from .sections import read_v2, is_bit_set

__all__ = [
    "parse", "parse_file", "from_reader", "VERSION_LEGACY", "VERSION_TYPED",
    "ByteReader", "read_cstring",
    "read_v1", "read_v2", "is_bit_set",
]
