"""inibin - unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import inibin as ib
    flat = ib.parse(open("Annie.inibin", "rb").read())
    flat.lookup("Data", "AttackRange")

    @dataclass
    class Data:
        AttackRange: float
        Name: Optional[str] = None

    data = ib.from_flatmap(Data, flat)

Or detailed modules:

    from inibin import core, codec, schema, wf
"""

__version__ = "0.3.0"

import inibincore as core
import inibincodec as codec
import inibinschema as schema
import inibinwf as wf

# High-level convenience re-exports (top-level functions)
from inibincore import (
    hash_name, incremental_hash,
    InibinError, FormatError, InvalidVersionError, TruncatedError, InvalidStringError,
    DecodeError, FieldNotFoundError, TypeUnsupportedError,
    SchemaMismatchError, SchemaExhaustedError, CursorExhaustedError,
)
from inibincodec import (
    FlatMap, Value, FloatVec, HashNames, ParseConfig, SCALED_FLOAT_FACTOR,
    parse, parse_file, from_reader,
)
from inibinschema import (
    ABSENT, Decoder, VectorCursor, Visitor, KindVisitor, AnyVisitor,
    FieldSpec, StructSchema, decode_struct, schema_of, from_flatmap, from_bytes,
)

__all__ = [
    # sub-namespaces
    "core", "codec", "schema", "wf",
    # hashing
    "hash_name", "incremental_hash",
    # errors
    "InibinError", "FormatError", "InvalidVersionError", "TruncatedError", "InvalidStringError",
    "DecodeError", "FieldNotFoundError", "TypeUnsupportedError",
    "SchemaMismatchError", "SchemaExhaustedError", "CursorExhaustedError",
    # format decoder
    "FlatMap", "Value", "FloatVec", "HashNames", "ParseConfig", "SCALED_FLOAT_FACTOR",
    "parse", "parse_file", "from_reader",
    # schema decoder
    "ABSENT", "Decoder", "VectorCursor", "Visitor", "KindVisitor", "AnyVisitor",
    "FieldSpec", "StructSchema", "decode_struct", "schema_of", "from_flatmap", "from_bytes",
    "__version__",
]
