from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from inibincodec import HashNames, ParseConfig, SCALED_FLOAT_FACTOR, parse_file
from inibincore.errors import FormatError

from ..api import atomic_write, dump_flatmap, dumps_json, names_path_from_env
from .common import looks_like_inibin, setup_logging


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="inibin - dump .inibin files as JSON")
    p.add_argument("files", nargs="+", help="Fichiers .inibin / .troybin")
    p.add_argument("--names", default=None,
                   help="Liste 'Section*Field' pour nommer les clés (défaut: $INIBIN_HASH_NAMES)")
    p.add_argument("--lookup", nargs=2, metavar=("SECTION", "FIELD"), default=None,
                   help="N'affiche que cette valeur")
    p.add_argument("--scale", type=float, default=SCALED_FLOAT_FACTOR,
                   help="Facteur des sections 'scaled' (défaut: %(default)s)")
    p.add_argument("--json", dest="json_out", default=None, help="Écrit le dump dans ce fichier")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    names_path = Path(args.names) if args.names else names_path_from_env()
    names = HashNames.from_file(names_path) if names_path else HashNames()
    cfg = ParseConfig(scale=args.scale)

    dumps = {}
    ok = 0
    for i, p in enumerate(args.files, 1):
        p = Path(p)
        logging.info("[%d/%d] parse: %s", i, len(args.files), p)
        if not looks_like_inibin(p):
            logging.warning("%s: unknown version byte, trying anyway", p)
        try:
            flat = parse_file(p, cfg)
        except (OSError, FormatError) as e:
            logging.error("Échec parse %s: %s", p, e)
            continue
        if args.lookup:
            v = flat.lookup(*args.lookup)
            dumps[str(p)] = {"*".join(args.lookup): None if v is None else v.to_python()}
        else:
            dumps[str(p)] = dump_flatmap(flat, names)
        logging.info("→ OK %s (%d keys)", p, len(flat))
        ok += 1

    # one file: its dump directly; several: keyed by path
    out = next(iter(dumps.values())) if len(args.files) == 1 and dumps else dumps
    blob = dumps_json(out)
    if args.json_out:
        atomic_write(args.json_out, blob)
        logging.info("→ écrit %s", args.json_out)
    else:
        sys.stdout.write(blob.decode("utf-8") + "\n")
    return 0 if ok == len(args.files) else 1


if __name__ == "__main__":
    sys.exit(main())
