from __future__ import annotations

import pytest

from inibincodec import FlatMap, FloatVec, HashNames, Value
from inibincore.hashing import hash_name


def test_value_int_ranges():
    assert Value.i8(-128).data == -128
    with pytest.raises(ValueError):
        Value.i8(128)
    with pytest.raises(ValueError):
        Value.i16(1 << 15)
    with pytest.raises(ValueError):
        Value.i32(True)  # bool is not an integer value
    assert Value.i64(-(1 << 63)).to_python() == -(1 << 63)


def test_value_f32_is_rounded():
    v = Value.float32(0.1)
    assert v.data != 0.1  # float32 nearest, not the float64 literal
    assert v.data == pytest.approx(0.1)


def test_unknown_tag_rejected():
    with pytest.raises(ValueError):
        Value("u32", 1)


def test_floatvec_capacity():
    assert len(FloatVec((1.0, 2.0))) == 2
    assert list(FloatVec((1.0, 2.0, 3.0, 4.0))) == [1.0, 2.0, 3.0, 4.0]
    for bad in [(), (1.0,), (1.0,) * 5]:
        with pytest.raises(ValueError):
            FloatVec(bad)


def test_flatmap_is_read_only():
    flat = FlatMap([(1, Value.i8(1))])
    with pytest.raises(TypeError):
        flat[2] = Value.i8(2)  # type: ignore[index]
    assert not hasattr(flat, "__setitem__")


def test_flatmap_lookup_forms():
    key = hash_name("Data", "AttackRange")
    flat = FlatMap([(key, Value.float32(625.0)), (7, Value.boolean(True))])
    assert flat.lookup(key) == Value.float32(625.0)
    assert flat.lookup("data", "attackrange") == Value.float32(625.0)
    assert flat.lookup(8) is None
    assert flat.lookup("Data", "Missing") is None
    with pytest.raises(TypeError):
        flat.lookup("Data")


def test_flatmap_rejects_bad_entries():
    with pytest.raises(ValueError):
        FlatMap([(1 << 32, Value.i8(0))])
    with pytest.raises(TypeError):
        FlatMap([(1, 5)])


def test_flatmap_order_and_to_dict():
    flat = FlatMap([(3, Value.string("c")), (1, Value.vec(1.0, 2.0)), (2, Value.i16(2))])
    assert list(flat) == [3, 1, 2]
    assert flat.to_dict() == {3: "c", 1: (1.0, 2.0), 2: 2}
    assert "0x00000003" in repr(flat)


def test_hash_names_labels():
    names = HashNames(["Data*Name", "Data*AttackRange"])
    assert len(names) == 2
    assert names.name_of(hash_name("data", "name")) == "Data*Name"
    assert names.get(hash_name("Data", "AttackRange")) == ("Data", "AttackRange")
    assert names.name_of(0x1234) == "0x00001234"


def test_hash_names_from_file(tmp_path):
    p = tmp_path / "names.txt"
    p.write_text("# comment\nData*Name\n\nSpell*Cooldown\n", encoding="utf-8")
    names = HashNames.from_file(p)
    assert hash_name("Spell", "Cooldown") in names
    assert len(names) == 2
