"""Raw string literal hash minimisation."""

from .hash_counter import minimal_hash_count, longest_hash_run  # noqa: F401
from .suggestion import build_suggestion, suggest_for_literal  # noqa: F401
from .api import (  # noqa: F401
    check_source,
    check_file,
    fix_source,
    fix_file,
)
