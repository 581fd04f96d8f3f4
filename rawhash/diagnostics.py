"""Diagnostic records and their text rendering."""

from __future__ import annotations

from pydantic import BaseModel

from .literal import RawLiteral, SourceLocation, Suggestion
from . import constants


class Diagnostic(BaseModel):
    """One finding: an over-hashed literal and the rewrite that fixes it."""

    path: str = "<source>"
    span: SourceLocation
    original_text: str
    suggestion: Suggestion
    lint: str = constants.LINT_NAME
    level: str = constants.LINT_LEVEL
    message: str = constants.LINT_MESSAGE

    @classmethod
    def from_literal(
        cls, literal: RawLiteral, suggestion: Suggestion, path: str = "<source>"
    ) -> Diagnostic:
        return cls(
            path=path,
            span=literal.span,
            original_text=literal.text,
            suggestion=suggestion,
        )

    @property
    def help(self) -> str:
        return self.suggestion.help_message

    def header(self) -> str:
        return (
            f"{self.path}:{self.span.start_line}:{self.span.start_col + 1}: "
            f"{self.level}: {self.message} [{self.lint}]"
        )

    def diff_lines(self, source_lines: list[str]) -> list[str]:
        """Render the affected source lines before and after the rewrite.

        *source_lines* are the file's lines split on newlines. A trailing
        carriage return left by CRLF endings is dropped from every rendered line.
        """
        first = self.span.start_line - 1
        last = self.span.end_line - 1
        before = [line.removesuffix("\r") for line in source_lines[first : last + 1]]
        if not before:
            return []
        head = before[0][: self.span.start_col]
        tail = before[-1][self.span.end_col :]
        after = [
            line.removesuffix("\r")
            for line in (head + self.suggestion.rewritten_text + tail).split("\n")
        ]
        return [f"- {line}" for line in before] + [f"+ {line}" for line in after]

    def format(self, source_lines: list[str] | None = None) -> str:
        lines = [self.header(), f"  help: {self.help}"]
        if source_lines is not None:
            lines.extend(f"  {line}" for line in self.diff_lines(source_lines))
        return "\n".join(lines)
