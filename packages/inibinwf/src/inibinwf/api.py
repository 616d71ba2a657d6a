from __future__ import annotations
import json, os
from pathlib import Path
from typing import Any, Mapping

from inibincodec.flatmap import FlatMap
from inibincodec.names import HashNames


def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)


def names_path_from_env() -> Path | None:
    """INIBIN_HASH_NAMES -> path of a `Section*Field` name list (optional)."""
    v = os.getenv("INIBIN_HASH_NAMES")
    return Path(v) if v else None


def dump_flatmap(flat: FlatMap, names: HashNames | None = None) -> dict[str, Any]:
    """FlatMap -> JSON-ready dict, keys labelled `Section*Field` when known."""
    names = names or HashNames()
    return {names.name_of(k): v for k, v in flat.to_dict().items()}


def dumps_json(obj: Mapping[str, Any]) -> bytes:
    return json.dumps(obj, indent=2, ensure_ascii=False).encode("utf-8")


__all__ = ["atomic_write", "names_path_from_env", "dump_flatmap", "dumps_json"]
