"""Lint configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class LintConfig:
    """Groups settings that decide which findings are reported and where."""

    allow_one_hash: bool = False
    language: str = constants.DEFAULT_LANGUAGE
    extensions: tuple[str, ...] = constants.DEFAULT_EXTENSIONS


DEFAULT_CONFIG = LintConfig()
