"""Tests for minimal_hash_count and longest_hash_run."""

import pytest

from rawhash.hash_counter import longest_hash_run, minimal_hash_count


class TestLongestHashRun:
    def test_no_quote_returns_none(self):
        assert longest_hash_run("plain ### text") is None

    def test_bare_quote_is_zero_run(self):
        assert longest_hash_run('say "hi"') == 0

    def test_tracks_maximum_not_last(self):
        assert longest_hash_run(' "### "## "# ') == 3

    def test_hashes_not_after_quote_are_ignored(self):
        assert longest_hash_run('#### "a') == 0

    def test_quote_inside_run_starts_new_run(self):
        assert longest_hash_run('""#') == 1

    def test_run_at_end_of_content(self):
        assert longest_hash_run('abc"##') == 2


class TestMinimalHashCount:
    @pytest.mark.parametrize("k", [0, 1, 2, 7])
    def test_no_quote_needs_no_hashes(self, k):
        assert minimal_hash_count("no quotes # here", k) == 0

    def test_backslash_content(self):
        assert minimal_hash_count("\\aaa", 1) == 0

    def test_bare_internal_quotes_need_one_hash(self):
        assert minimal_hash_count('Hello "world"!', 2) == 1

    def test_descending_runs(self):
        assert minimal_hash_count(' "### "## "# ', 6) == 4

    def test_mixed_runs(self):
        assert minimal_hash_count(' "aa" "# "## ', 6) == 3

    def test_empty_content_is_fully_reducible(self):
        assert minimal_hash_count("", 3) == 0

    def test_empty_content_without_hashes(self):
        assert minimal_hash_count("", 0) == 0

    def test_already_minimal(self):
        assert minimal_hash_count('a"#b', 2) == 2

    def test_multiline_matches_single_line(self):
        multi = 'first "#\nsecond "##\nthird'
        single = multi.replace("\n", " ")
        assert minimal_hash_count(multi, 5) == minimal_hash_count(single, 5) == 3

    def test_line_break_ends_run(self):
        assert minimal_hash_count('"\n##', 1) == 1

    def test_never_exceeds_original_for_valid_literal(self):
        for content, k in [('x"', 1), ('"#"#', 2), ('a"##b', 3), ("", 0)]:
            assert minimal_hash_count(content, k) <= k


class TestMinimalHashCountProperties:
    def test_idempotent_after_rewrite(self):
        content = ' "# "aa" '
        minimal = minimal_hash_count(content, 6)
        assert minimal_hash_count(content, minimal) == minimal

    def test_inserting_hash_after_quote_is_monotonic(self):
        content = 'a"b"#c"d'
        before = minimal_hash_count(content, 10)
        for idx, ch in enumerate(content):
            if ch != '"':
                continue
            grown = content[: idx + 1] + "#" + content[idx + 1 :]
            after = minimal_hash_count(grown, 10)
            assert before <= after <= before + 1


class TestMinimalHashCountIsTotal:
    def test_content_longer_run_than_original_is_still_counted(self):
        assert minimal_hash_count('"#', 1) == 2

    def test_quote_with_zero_original_hashes(self):
        assert minimal_hash_count('a"b', 0) == 1
