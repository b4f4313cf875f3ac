"""Command-line driver: `cata FILE...`.

Runs each file in turn in one shared interpreter. An unreadable file is
reported and skipped; the first cata error stops everything with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from cata import __version__
from cata.config import get_log_level
from cata.interpreter import Interpreter
from cata.types.errors import CataError, ProgramExit

logger = logging.getLogger(__name__)

USAGE = "usage: cata <file>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cata", usage="cata [-v] <file>...")
    parser.add_argument("files", nargs="*", metavar="FILE", help="source files to run")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log each form as it is evaluated"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_source(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("could not read %s: %s", path, e)
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.files:
        print(USAGE)
        return 0

    interp = Interpreter()
    for filename in args.files:
        source = read_source(Path(filename))
        if source is None:
            print(f"error: could not read file {filename}")
            continue
        logger.debug("running %s", filename)
        try:
            interp.run(source)
        except ProgramExit as e:
            return e.status
        except CataError as e:
            sys.stdout.flush()
            print(f"error: {e}")
            return 1
    return 0
