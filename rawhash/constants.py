"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

QUOTE = '"'
HASH = "#"

RAW_MARKER = "r"
BYTE_MARKER = "b"
C_MARKER = "c"

RAW_STRING_NODE_TYPE = "raw_string_literal"

LINT_NAME = "needless_raw_string_hashes"
LINT_LEVEL = "warning"
LINT_MESSAGE = "unnecessary hashes around raw string literal"

HELP_REMOVE_ALL = "remove all the hashes around the string literal"
HELP_REMOVE_ONE = "remove one hash from both sides of the string literal"
HELP_REMOVE_N_TEMPLATE = "remove {count} hashes from both sides of the string literal"

DEFAULT_LANGUAGE = "rust"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".rs",)

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2
