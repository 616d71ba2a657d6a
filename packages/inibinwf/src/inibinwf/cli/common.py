from __future__ import annotations
import logging, sys
from pathlib import Path
from typing import Optional


def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers, force=True)


VERSIONS = (0x01, 0x02)


def looks_like_inibin(p: Path) -> bool:
    try:
        with open(p, "rb") as f:
            return f.read(1) in {bytes([v]) for v in VERSIONS}
    except OSError:
        return False
