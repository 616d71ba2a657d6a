from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable

from inibincore.hashing import hash_name, split_name

log = logging.getLogger(__name__)


class HashNames:
    """Reverse table `key -> (section, field)` built from known `Section*Field` names.

    Only used for display: the decoders never need names to find values.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._idx: dict[int, tuple[str, str]] = {}
        for n in names:
            self.add(n)

    @classmethod
    def from_file(cls, path: str | Path) -> "HashNames":
        """One `Section*Field` per line; blank lines and `#` comments are skipped."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        table = cls(ln.strip() for ln in lines if ln.strip() and not ln.lstrip().startswith("#"))
        log.info("loaded %d names from %s", len(table), path)
        return table

    def add(self, name: str) -> int:
        section, field = split_name(name)
        key = hash_name(section, field)
        prev = self._idx.get(key)
        if prev is not None and prev != (section, field):
            log.debug("hash collision 0x%08x: %s*%s vs %s", key, *prev, name)
        self._idx[key] = (section, field)
        return key

    def __len__(self) -> int:
        return len(self._idx)

    def __contains__(self, key: int) -> bool:
        return key in self._idx

    def get(self, key: int) -> tuple[str, str] | None:
        return self._idx.get(key)

    def name_of(self, key: int) -> str:
        pair = self._idx.get(key)
        return f"{pair[0]}*{pair[1]}" if pair else f"0x{key:08x}"


__all__ = ["HashNames"]
