"""Application entry point.

Initializes configuration and logging, wires the storage backend and the
lexicon manager, and runs a command-line command.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    from models.enums import Binyan, Number
    from utils.constants import APP_TITLE, APP_VERSION

    parser = argparse.ArgumentParser(prog="heblex", description=APP_TITLE)
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--storage", type=Path, help="Lexicon file (.json or .db)")
    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="Resolve a vocalized word to an entry")
    lookup.add_argument("word")

    listing = sub.add_parser("list", help="List entries in alphabetical order")
    listing.add_argument("--query", default="")
    listing.add_argument("--pos", default=None, help="Part-of-speech name")
    listing.add_argument("--binyan", default="", choices=["", *Binyan])
    listing.add_argument("--number", default="", choices=["", *Number])
    listing.add_argument("--lesson", default="")
    listing.add_argument("--lesson-or-less", action="store_true")
    listing.add_argument("--entries-only", action="store_true")

    importer = sub.add_parser("import", help="Import a JSON or text word list")
    importer.add_argument("file", type=Path)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Application main function."""
    # Load .env from the working directory so overrides are available
    from dotenv import load_dotenv
    load_dotenv()

    args = _build_parser().parse_args(argv)

    # --- Configuration ---
    from config.settings import SettingsManager

    settings = SettingsManager().load()

    # --- Logging ---
    from utils.logging_config import get_logger, resolve_level, setup_logging

    setup_logging(
        level=resolve_level(settings.logging.level),
        console_level=resolve_level(settings.logging.console_level, logging.WARNING),
    )
    logger = get_logger("main")

    # --- Core components ---
    from core.entry_classifier import full_display_name
    from core.lexicon_manager import LexiconManager
    from core.search_engine import SearchCriteria
    from data.json_adapter import JSONAdapter
    from data.sqlite_adapter import SQLiteAdapter
    from utils.constants import STORAGE_PATH_ENV
    from utils.exceptions import HeblexError

    path = args.storage or Path(
        os.environ.get(STORAGE_PATH_ENV) or settings.storage.resolved_path()
    )
    if path.suffix == ".db" or (path.suffix != ".json" and settings.storage.backend == "sqlite"):
        storage = SQLiteAdapter()
    else:
        storage = JSONAdapter()

    manager = LexiconManager(storage=storage)

    try:
        if storage.exists(path):
            manager.load(path)

        if args.command == "lookup":
            if not args.word.strip():
                print("error: word parameter required", file=sys.stderr)
                return 2
            print(json.dumps(manager.lookup(args.word).to_dict(), ensure_ascii=False))

        elif args.command == "list":
            criteria = SearchCriteria(
                query=args.query,
                pos_name=args.pos,
                binyan=args.binyan,
                number=args.number,
                lesson=args.lesson,
                lesson_or_less=args.lesson_or_less,
                show_all=settings.search.show_all and not args.entries_only,
            )
            for entry in manager.search(criteria):
                print(f"{full_display_name(entry)}\t{entry.pos_display}\t{', '.join(entry.glosses)}")

        elif args.command == "import":
            content = args.file.read_text(encoding="utf-8")
            entries = manager.import_content(content, source=args.file.name)
            manager.save(path)
            print(f"Imported {len(entries)} entries into {path}")

    except (HeblexError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
