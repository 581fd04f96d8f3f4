"""Minimal hash count for raw string literal delimiters."""

from __future__ import annotations

from . import constants


def longest_hash_run(content: str) -> int | None:
    """Return the longest run of ``#`` directly following a ``"`` in *content*.

    Returns ``None`` when *content* contains no quote at all. A quote inside
    a run ends that run and starts a new one, and line breaks are ordinary
    characters.
    """
    longest: int | None = None
    run: int | None = None
    for ch in content:
        if ch == constants.QUOTE:
            run = 0
        elif ch == constants.HASH and run is not None:
            run += 1
        else:
            run = None
        if run is not None and (longest is None or run > longest):
            longest = run
    return longest


def minimal_hash_count(content: str, original_hash_count: int) -> int:
    """Return the fewest hashes that still terminate a raw literal holding *content*.

    Args:
        content: The characters between the opening and closing quotes.
        original_hash_count: Hashes on each side of the literal as written.

    Returns:
        ``0`` if *content* has no quote, otherwise one more than the longest
        hash run following an internal quote.
    """
    assert original_hash_count >= 0, "hash count must be non-negative"
    longest = longest_hash_run(content)
    return 0 if longest is None else longest + 1
