# -*- coding: utf-8 -*-
import argparse
import logging
import sys

from core.config import DATABASE_PATH, DEFAULT_ROOT, LOG_LEVEL, STRICT_ROOT
from services.indexer import run_index

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Index every file under a directory into a fresh SQLite database"
    )
    parser.add_argument("root", nargs="?", default=DEFAULT_ROOT, help="Directory to index")
    parser.add_argument("--db", default=DATABASE_PATH, help="SQLite file, recreated on every run")
    parser.add_argument(
        "--strict-root", action="store_true", default=STRICT_ROOT,
        help="Fail instead of writing an empty index when ROOT is not a directory",
    )
    parser.add_argument(
        "--log-level", default=LOG_LEVEL, type=str.upper, choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stdout, level=args.log_level, format="%(message)s")

    run_index(args.root, args.db, strict_root=args.strict_root)
    print("File indexing complete.")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
