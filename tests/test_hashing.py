from __future__ import annotations

from inibincore.hashing import hash_name, incremental_hash, split_name

NAMES = [
    ("Data", "AttackRange"),
    ("data", ""),
    ("", "Name"),
    ("SpellData", "Effect1Amount"),
    ("Mesh_Skin", "SkinScale"),
    ("Ünïcode", "Fëld"),
    ("A" * 300, "b" * 300),   # long enough to wrap many times
]


def _ref(s: bytes) -> int:
    h = 0
    for c in s.lower():
        h = (h * 65599 + c) % (1 << 32)
    return h


def test_known_values():
    assert hash_name("a") == 97 * 65599 + 42
    assert hash_name("a", "b") == 804121241
    assert hash_name("Data", "AttackRange") == _ref(b"data*attackrange")


def test_hash_chain_law():
    for section, ident in NAMES:
        seed = hash_name(section, "")
        assert hash_name(section, ident) == incremental_hash(seed, ident)


def test_chain_is_incremental_per_piece():
    # extending twice == extending once with the concatenation
    seed = hash_name("Data", "")
    assert incremental_hash(incremental_hash(seed, "Attack"), "Range") == hash_name("Data", "AttackRange")


def test_case_insensitive():
    assert hash_name("Foo", "Bar") == hash_name("foo", "bar") == hash_name("FOO", "BAR")


def test_str_and_bytes_agree():
    assert hash_name(b"Data", b"Name") == hash_name("Data", "Name")


def test_u32_range():
    for section, ident in NAMES:
        assert 0 <= hash_name(section, ident) <= 0xFFFFFFFF


def test_split_name():
    assert split_name("Data*AttackRange") == ("Data", "AttackRange")
    assert split_name("Data") == ("Data", "")
