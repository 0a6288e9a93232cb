"""CLI entry-point for speller archive discovery."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from speller_archives import __version__
from speller_archives.core import app_config
from speller_archives.core.speller_repository import SpellerRepository


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speller-archives",
        description="List speller archives and the locale tags they serve.",
    )
    parser.add_argument(
        "--root",
        dest="roots",
        action="append",
        type=Path,
        help="speller root directory (repeatable; overrides config/app.toml)",
    )
    parser.add_argument(
        "--config-root",
        type=Path,
        help="folder holding config/app.toml (defaults to current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log enumeration progress",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("archives", help="print every discovered archive path")
    sub.add_parser("languages", help="print every supported locale tag")
    find = sub.add_parser("find", help="print the archive serving a locale tag")
    find.add_argument("tag", help="locale tag, e.g. se-NO")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = app_config.load(args.config_root)
    repo = SpellerRepository.from_config(cfg)
    if args.roots:
        repo = SpellerRepository(
            args.roots,
            expander=repo.expander,
            extensions=cfg.archive_extensions,
        )

    if args.command == "archives":
        for path in repo.get_speller_archives():
            print(path)
        return 0
    if args.command == "languages":
        for tag in repo.get_supported_languages():
            print(tag)
        return 0
    archive = repo.get_speller_archive(args.tag)
    if archive is None:
        print(f"no speller archive for {args.tag!r}", file=sys.stderr)
        return 1
    print(archive)
    return 0


if __name__ == "__main__":
    sys.exit(main())
