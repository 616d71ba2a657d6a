from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MULT = 65599
_SEP = ord("*")


def _as_bytes(s: str | bytes) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def _lower(b: int) -> int:
    # ASCII only; non-ASCII bytes of UTF-8 sequences pass through unchanged
    return b + 32 if 65 <= b <= 90 else b


def incremental_hash(seed: int, ident: str | bytes) -> int:
    """Extend an existing name hash with `ident` (case-insensitive, u32 wrap)."""
    h = seed & _MASK32
    for b in _as_bytes(ident):
        h = (h * _MULT + _lower(b)) & _MASK32
    return h


def hash_name(section: str | bytes, ident: str | bytes = "") -> int:
    """Key of `section*ident`.

    `hash_name(s, "")` is the struct-scope seed: extending it with
    `incremental_hash(seed, ident)` gives the same key as `hash_name(s, ident)`.
    """
    h = incremental_hash(0, section)
    h = (h * _MULT + _SEP) & _MASK32
    return incremental_hash(h, ident)


def split_name(name: str) -> tuple[str, str]:
    """'Section*Field' -> ('Section', 'Field'). A name without '*' is a bare section."""
    section, _, ident = name.partition("*")
    return section, ident


__all__ = ["hash_name", "incremental_hash", "split_name"]
