"""Command-line entry point: ``rawhash [--fix] [--diff] PATH...``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import check_file, collect_files, fix_file
from .config import LintConfig
from . import constants


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rawhash",
        description="Report raw string literals that use more hashes than needed",
    )
    parser.add_argument("paths", nargs="+", type=Path,
                        help="Rust source files or directories to check")
    parser.add_argument("--fix", action="store_true",
                        help="Rewrite literals in place")
    parser.add_argument("--diff", action="store_true",
                        help="Show the source lines before and after each rewrite")
    parser.add_argument("--allow-one-hash", action="store_true",
                        help='Do not report r#"..."# when r"..." would do')
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log per-file and per-literal decisions")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    config = LintConfig(allow_one_hash=args.allow_one_hash)

    failed = False
    remaining = 0
    for path in collect_files(args.paths, config):
        try:
            if args.fix:
                fixed = fix_file(path, config)
                if fixed:
                    print(f"{path}: fixed {len(fixed)} raw string literal(s)")
                continue
            diagnostics = check_file(path, config)
            source_lines = (
                path.read_bytes().decode("utf-8").split("\n") if args.diff else None
            )
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{path}: error: {exc}", file=sys.stderr)
            failed = True
            continue
        for diag in diagnostics:
            print(diag.format(source_lines))
        remaining += len(diagnostics)

    if failed:
        return constants.EXIT_ERROR
    if remaining:
        return constants.EXIT_FINDINGS
    return constants.EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
