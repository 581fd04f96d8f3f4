"""Composable API functions for checking and fixing raw string literals.

Each function corresponds to a CLI workflow (check, --diff, --fix) but is
callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_CONFIG, LintConfig
from .diagnostics import Diagnostic
from .literal import RawLiteral
from .parser import Parser, TreeSitterParserFactory
from .scanner import RawStringScanner
from .suggestion import suggest_for_literal

logger = logging.getLogger(__name__)


def scan_source(source: str, config: LintConfig = DEFAULT_CONFIG) -> list[RawLiteral]:
    """Parse *source* and return every raw string literal in source order."""
    source_bytes = source.encode("utf-8")
    tree = Parser(TreeSitterParserFactory()).parse(source_bytes, config.language)
    return RawStringScanner().scan(tree, source_bytes)


def check_source(
    source: str, config: LintConfig = DEFAULT_CONFIG, path: str = "<source>"
) -> list[Diagnostic]:
    """Return a diagnostic for each raw literal that uses more hashes than needed.

    Args:
        source: The source code text.
        config: Lint settings.
        path: Name reported in each diagnostic.

    Returns:
        Diagnostics in source order; empty when every literal is minimal.
    """
    diagnostics: list[Diagnostic] = []
    for literal in scan_source(source, config):
        suggestion = suggest_for_literal(literal, config)
        if suggestion is None:
            continue
        logger.debug(
            "%s:%s %d -> %d hashes",
            path,
            literal.span,
            suggestion.original_hash_count,
            suggestion.minimal_hash_count,
        )
        diagnostics.append(Diagnostic.from_literal(literal, suggestion, path))
    return diagnostics


def check_file(path: Path, config: LintConfig = DEFAULT_CONFIG) -> list[Diagnostic]:
    """Read *path* and check it. ``OSError`` propagates to the caller."""
    logger.info("Checking %s", path)
    source = path.read_bytes().decode("utf-8")
    return check_source(source, config, str(path))


def apply_fixes(source: str, diagnostics: list[Diagnostic]) -> str:
    """Splice every suggested rewrite into *source*."""
    source_bytes = source.encode("utf-8")
    ordered = sorted(diagnostics, key=lambda d: d.span.start_byte, reverse=True)
    for diag in ordered:
        replacement = diag.suggestion.rewritten_text.encode("utf-8")
        source_bytes = (
            source_bytes[: diag.span.start_byte]
            + replacement
            + source_bytes[diag.span.end_byte :]
        )
    return source_bytes.decode("utf-8")


def fix_source(
    source: str, config: LintConfig = DEFAULT_CONFIG
) -> tuple[str, list[Diagnostic]]:
    """Rewrite every over-hashed literal in *source*.

    Returns:
        The fixed source and the diagnostics that were applied.
    """
    diagnostics = check_source(source, config)
    return apply_fixes(source, diagnostics), diagnostics


def fix_file(path: Path, config: LintConfig = DEFAULT_CONFIG) -> list[Diagnostic]:
    """Fix *path* in place; the file is only written when something changed."""
    source = path.read_bytes().decode("utf-8")
    diagnostics = check_source(source, config, str(path))
    if diagnostics:
        logger.info("Fixing %d literals in %s", len(diagnostics), path)
        path.write_bytes(apply_fixes(source, diagnostics).encode("utf-8"))
    return diagnostics


def collect_files(paths: list[Path], config: LintConfig = DEFAULT_CONFIG) -> list[Path]:
    """Expand directories into the matching source files beneath them, sorted."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                sorted(
                    p
                    for p in path.rglob("*")
                    if p.is_file() and p.suffix in config.extensions
                )
            )
        else:
            files.append(path)
    return files
