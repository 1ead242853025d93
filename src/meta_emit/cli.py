"""CLI entrypoint.

Commands:
- `meta-emit emit --config emitters.yaml --emitter fs --input batch.json`
- `meta-emit path --config emitters.yaml --emitter fs --input batch.json`
- `meta-emit list --config emitters.yaml`

`batch.json` is a JSON metadata list (see meta_emit.serialization).
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from .config import load_yaml, logging_options
from .emitters.fs import FileSystemEmitter
from .emitters.manager import EmitterManager
from .errors import EmissionError
from .logging_ import setup_logging
from .serialization import SerializationError, from_json

logger = logging.getLogger("meta_emit.cli")


def _read_batch(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return from_json(f)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="meta-emit")
    sub = p.add_subparsers(dest="cmd", required=True)

    pe = sub.add_parser("emit", help="Emit a metadata batch")
    pe.add_argument("--config", required=True)
    pe.add_argument("--emitter", required=True, help="Configured emitter name")
    pe.add_argument("--input", required=True, help="JSON metadata list file")

    pp = sub.add_parser("path", help="Print the output path without writing")
    pp.add_argument("--config", required=True)
    pp.add_argument("--emitter", required=True)
    pp.add_argument("--input", required=True)

    pl = sub.add_parser("list", help="List configured emitters")
    pl.add_argument("--config", required=True)

    args = p.parse_args(argv)

    cfg = load_yaml(args.config)
    setup_logging(**logging_options(cfg))
    manager = EmitterManager.from_config(cfg)

    if args.cmd == "list":
        for name in manager.names():
            emitter = manager.get(name)
            print(f"{name}\t{getattr(emitter, 'kind', type(emitter).__name__)}")
        return 0

    try:
        emitter = manager.get(args.emitter)
    except KeyError as e:
        logger.error(str(e.args[0]))
        return 1

    try:
        batch = _read_batch(args.input)
    except (OSError, SerializationError) as e:
        logger.error(f"Could not read batch from {args.input}: {e}")
        return 1

    try:
        if args.cmd == "path":
            if not isinstance(emitter, FileSystemEmitter):
                logger.error(f"Emitter '{args.emitter}' does not write to the filesystem")
                return 1
            print(emitter.output_path(batch))
            return 0
        emitter.emit(batch)
    except EmissionError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    if isinstance(emitter, FileSystemEmitter):
        print(emitter.output_path(batch))
    return 0


if __name__ == "__main__":
    sys.exit(main())
