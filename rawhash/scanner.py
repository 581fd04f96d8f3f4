"""Locate raw string literals in a tree-sitter Rust tree."""

from __future__ import annotations

import logging
import re
from typing import Optional

from tree_sitter import Node, Tree

from .literal import PrefixKind, RawLiteral, SourceLocation
from . import constants

logger = logging.getLogger(__name__)

_RAW_LITERAL_RE = re.compile(
    r'(?P<marker>[bc]?)r(?P<hashes>#*)"(?P<content>.*)"(?P=hashes)', re.DOTALL
)


def split_raw_literal(text: str) -> Optional[tuple[PrefixKind, int, str]]:
    """Split literal source text into ``(prefix_kind, hash_count, content)``.

    Returns ``None`` when *text* is not a well-formed raw literal, including
    when its content would close the literal early.
    """
    match = _RAW_LITERAL_RE.fullmatch(text)
    if match is None:
        return None
    hashes = match.group("hashes")
    content = match.group("content")
    if constants.QUOTE + hashes in content:
        return None
    return PrefixKind.from_marker(match.group("marker")), len(hashes), content


class RawStringScanner:
    """Collects every ``raw_string_literal`` node, macro token trees included."""

    NODE_TYPES: frozenset[str] = frozenset({constants.RAW_STRING_NODE_TYPE})

    def __init__(self):
        self._source: bytes = b""

    def scan(self, tree: Tree, source: bytes) -> list[RawLiteral]:
        self._source = source
        literals: list[RawLiteral] = []
        stack: list[Node] = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type in self.NODE_TYPES:
                literal = self._to_literal(node)
                if literal is not None:
                    literals.append(literal)
                continue
            stack.extend(reversed(node.children))
        logger.debug("Found %d raw string literals", len(literals))
        return literals

    def _node_text(self, node: Node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _char_col(self, byte_offset: int) -> int:
        line_start = self._source.rfind(b"\n", 0, byte_offset) + 1
        return len(self._source[line_start:byte_offset].decode("utf-8"))

    def _source_loc(self, node: Node) -> SourceLocation:
        return SourceLocation(
            start_line=node.start_point[0] + 1,
            start_col=self._char_col(node.start_byte),
            end_line=node.end_point[0] + 1,
            end_col=self._char_col(node.end_byte),
            start_byte=node.start_byte,
            end_byte=node.end_byte,
        )

    def _to_literal(self, node: Node) -> Optional[RawLiteral]:
        text = self._node_text(node)
        parts = split_raw_literal(text)
        if parts is None:
            logger.debug("Skipping malformed raw literal %r at %s", text, node.start_point)
            return None
        prefix_kind, hash_count, content = parts
        return RawLiteral(
            prefix_kind=prefix_kind,
            original_hash_count=hash_count,
            content=content,
            span=self._source_loc(node),
        )
