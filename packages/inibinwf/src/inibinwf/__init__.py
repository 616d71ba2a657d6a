# packages/inibinwf/src/inibinwf/__init__.py
from __future__ import annotations

from .api import atomic_write, names_path_from_env, dump_flatmap, dumps_json

__all__ = [
    "atomic_write",
    "names_path_from_env",
    "dump_flatmap",
    "dumps_json",
    # le sous-module cli n'est pas importé ici (argparse/logging au top-level)
]

__version__ = "0.3.0"
