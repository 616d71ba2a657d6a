from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

import pytest

from inibincodec import FlatMap, Value
from inibincodec.format.sections import BIT_BOOL, BIT_F32, BIT_I16, BIT_STRING, BIT_VEC3_SCALED
from inibincore.errors import FieldNotFoundError, TypeUnsupportedError
from inibincore.hashing import hash_name
from inibinschema import (
    FieldSpec, StructSchema, decode_struct, from_bytes, from_flatmap, schema_of,
)

from inibin_fixtures import bit, bools, section, strings, v2


@dataclass
class Tint:
    __inibin_name__ = "Tint"
    rgb: tuple[float, float, float] = field(metadata={"inibin_key": "RGB"})


@dataclass
class Unit:
    __inibin_name__ = "Data"
    name: str = field(metadata={"inibin_key": "Name"})
    hp: float = field(metadata={"inibin_key": "BaseHP"})
    level: int = field(metadata={"inibin_key": "Level", "inibin_kind": "i16"})
    tint: Tint
    ranged: Optional[bool] = field(default=False, metadata={"inibin_key": "IsRanged"})
    title: Optional[str] = None


@dataclass
class Spell:
    Cooldown: float
    Extra: Optional[Tint] = None
    Anything: Optional[Any] = None


def _unit_flat() -> FlatMap:
    items = {
        hash_name("Data", "Name"): Value.string("Annie"),
        hash_name("Data", "BaseHP"): Value.float32(384.0),
        hash_name("Data", "Level"): Value.i16(6),
        hash_name("Tint", "RGB"): Value.vec(1.0, 0.5, 0.25),
        hash_name("Data", "IsRanged"): Value.boolean(True),
    }
    return FlatMap(items.items())


def test_schema_of_dataclass():
    s = schema_of(Unit)
    assert s.name == "Data"
    assert s.field_names() == ("Name", "BaseHP", "Level", "tint", "IsRanged", "title")
    kinds = {f.name: f.kind for f in s.fields}
    assert kinds == {
        "name": "str", "hp": "f32", "level": "i16", "tint": "struct",
        "ranged": "bool", "title": "str",
    }
    assert s.fields[3].schema.name == "Tint"
    assert s.fields[4].optional and not s.fields[0].optional
    assert schema_of(Unit) is s  # built once


def test_from_flatmap_dataclass():
    u = from_flatmap(Unit, _unit_flat())
    assert u == Unit(name="Annie", hp=384.0, level=6, tint=Tint((1.0, 0.5, 0.25)), ranged=True)
    assert u.title is None


def test_optional_defaults_when_absent():
    items = [(k, v) for k, v in _unit_flat().items() if k != hash_name("Data", "IsRanged")]
    u = from_flatmap(Unit, FlatMap(items))
    assert u.ranged is False


def test_required_field_missing():
    items = [(k, v) for k, v in _unit_flat().items() if k != hash_name("Data", "BaseHP")]
    with pytest.raises(FieldNotFoundError) as ei:
        from_flatmap(Unit, FlatMap(items))
    assert ei.value.key == hash_name("Data", "BaseHP")


def test_nested_required_struct_missing():
    items = [(k, v) for k, v in _unit_flat().items() if k != hash_name("Tint", "RGB")]
    with pytest.raises(FieldNotFoundError):
        from_flatmap(Unit, FlatMap(items))


def test_stored_type_must_match_declared_kind():
    flat = FlatMap(
        (k, Value.i32(384) if k == hash_name("Data", "BaseHP") else v)
        for k, v in _unit_flat().items()
    )
    with pytest.raises(TypeUnsupportedError):
        from_flatmap(Unit, flat)


def test_optional_nested_struct():
    flat = FlatMap([(hash_name("Spell", "Cooldown"), Value.float32(8.0))])
    s = from_flatmap(Spell, flat)
    assert s == Spell(Cooldown=8.0)

    flat = FlatMap([
        (hash_name("Spell", "Cooldown"), Value.float32(8.0)),
        (hash_name("Tint", "RGB"), Value.vec(0.0, 1.0, 0.0)),
        (hash_name("Spell", "Anything"), Value.i8(-3)),
    ])
    s = from_flatmap(Spell, flat)
    assert s.Extra == Tint((0.0, 1.0, 0.0))
    assert s.Anything == -3


def test_manual_schema_returns_dict():
    schema = StructSchema("Data", (
        FieldSpec("Name", "str"),
        FieldSpec("Pos", "struct", schema=StructSchema("Point", (FieldSpec("XY", "vec"),))),
        FieldSpec("Flag", "bool", optional=True, default=True),
    ))
    flat = FlatMap([
        (hash_name("Data", "Name"), Value.string("n")),
        (hash_name("Point", "XY"), Value.vec(1.0, 2.0)),
    ])
    assert decode_struct(flat, schema) == {"Name": "n", "Pos": {"XY": (1.0, 2.0)}, "Flag": True}


def test_field_spec_validation():
    with pytest.raises(ValueError):
        FieldSpec("x", "struct")
    with pytest.raises(ValueError):
        FieldSpec("x", "u32")
    with pytest.raises(ValueError):
        StructSchema("S", (FieldSpec("a"), FieldSpec("a")))


def test_schema_of_rejects_unmapped_types():
    @dataclass
    class Bad:
        xs: list

    with pytest.raises(TypeError):
        schema_of(Bad)
    with pytest.raises(TypeError):
        schema_of(int)


def test_from_bytes_end_to_end():
    # a v2 file as the encoder would write it for Unit
    names = b"Annie\x00"
    buf = v2(
        bit(BIT_F32, BIT_I16, BIT_BOOL, BIT_VEC3_SCALED, BIT_STRING),
        section([hash_name("Data", "BaseHP")], "f", [384.0]),
        section([hash_name("Data", "Level")], "h", [6]),
        bools([hash_name("Data", "IsRanged")], [True]),
        section([hash_name("Tint", "RGB")], "3B", [(10, 5, 0)]),
        strings([hash_name("Data", "Name")], [0], names),
        str_len=len(names),
    )
    u = from_bytes(Unit, buf)
    assert u.name == "Annie" and u.hp == 384.0 and u.level == 6 and u.ranged is True
    assert u.tint.rgb == pytest.approx((1.0, 0.5, 0.0))
