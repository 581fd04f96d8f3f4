"""Raw string literal data model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from . import constants


class PrefixKind(str, Enum):
    STR = "STR"
    BYTE_STR = "BYTE_STR"
    C_STR = "C_STR"

    @property
    def prefix(self) -> str:
        """Letters written before the hashes, e.g. ``br``."""
        return _PREFIX_LETTERS[self]

    @classmethod
    def from_marker(cls, marker: str) -> PrefixKind:
        """Map the optional ``b``/``c`` marker preceding ``r`` to a kind."""
        for kind, letters in _PREFIX_LETTERS.items():
            if letters == marker + constants.RAW_MARKER:
                return kind
        raise ValueError(f"Unknown raw literal marker: {marker!r}")


_PREFIX_LETTERS: dict[PrefixKind, str] = {
    PrefixKind.STR: constants.RAW_MARKER,
    PrefixKind.BYTE_STR: constants.BYTE_MARKER + constants.RAW_MARKER,
    PrefixKind.C_STR: constants.C_MARKER + constants.RAW_MARKER,
}


class SourceLocation(BaseModel):
    """Structured source span from tree-sitter AST nodes."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int
    start_byte: int = 0
    end_byte: int = 0

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


class RawLiteral(BaseModel):
    prefix_kind: PrefixKind = PrefixKind.STR
    is_raw: bool = True
    original_hash_count: int = Field(default=0, ge=0)
    content: str = ""
    span: SourceLocation = NO_SOURCE_LOCATION

    @property
    def text(self) -> str:
        hashes = constants.HASH * self.original_hash_count
        return (
            f"{self.prefix_kind.prefix}{hashes}{constants.QUOTE}"
            f"{self.content}{constants.QUOTE}{hashes}"
        )


def describe_removal(original_hash_count: int, removed_count: int) -> str:
    """Phrase the help text for removing *removed_count* hashes per side."""
    if removed_count == original_hash_count:
        return constants.HELP_REMOVE_ALL
    if removed_count == 1:
        return constants.HELP_REMOVE_ONE
    return constants.HELP_REMOVE_N_TEMPLATE.format(count=removed_count)


class SuggestionKind(str, Enum):
    REMOVE_ALL = "REMOVE_ALL"
    REMOVE_N = "REMOVE_N"


class Suggestion(BaseModel):
    kind: SuggestionKind
    original_hash_count: int = Field(ge=0)
    minimal_hash_count: int = Field(ge=0)
    rewritten_text: str

    @property
    def removed_count(self) -> int:
        return self.original_hash_count - self.minimal_hash_count

    @property
    def help_message(self) -> str:
        return describe_removal(self.original_hash_count, self.removed_count)
