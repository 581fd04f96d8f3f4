"""SuggestionBuilder — rewrite proposals for over-hashed raw literals."""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT_CONFIG, LintConfig
from .hash_counter import minimal_hash_count
from .literal import (  # noqa: F401
    PrefixKind,
    RawLiteral,
    Suggestion,
    SuggestionKind,
    describe_removal,
)
from . import constants

logger = logging.getLogger(__name__)


def render_literal(prefix_kind: PrefixKind, hash_count: int, content: str) -> str:
    """Return the source text of a raw literal with *hash_count* hashes per side."""
    hashes = constants.HASH * hash_count
    return f"{prefix_kind.prefix}{hashes}{constants.QUOTE}{content}{constants.QUOTE}{hashes}"


def build_suggestion(
    prefix_kind: PrefixKind, original_hash_count: int, content: str
) -> Optional[Suggestion]:
    """Propose a rewrite using the fewest hashes, or ``None`` if already minimal."""
    minimal = minimal_hash_count(content, original_hash_count)
    if minimal >= original_hash_count:
        return None
    kind = SuggestionKind.REMOVE_ALL if minimal == 0 else SuggestionKind.REMOVE_N
    return Suggestion(
        kind=kind,
        original_hash_count=original_hash_count,
        minimal_hash_count=minimal,
        rewritten_text=render_literal(prefix_kind, minimal, content),
    )


def suggest_for_literal(
    literal: RawLiteral, config: LintConfig = DEFAULT_CONFIG
) -> Optional[Suggestion]:
    """Apply :func:`build_suggestion` to a scanned literal, honouring *config*."""
    if not literal.is_raw:
        return None
    suggestion = build_suggestion(
        literal.prefix_kind, literal.original_hash_count, literal.content
    )
    if (
        suggestion is not None
        and config.allow_one_hash
        and suggestion.original_hash_count == 1
        and suggestion.kind == SuggestionKind.REMOVE_ALL
    ):
        logger.debug("Allowing single hash at %s", literal.span)
        return None
    return suggestion
