"""
Unit tests for the search engine.

Tests literal and regex matching, case handling, zero-length matches and
invalid pattern handling across a multi-file corpus.
"""

import re

import pytest

from tex_toolkit.core.models import SourceFile
from tex_toolkit.search import (
    InvalidPatternError,
    SearchOptions,
    compile_pattern,
    iter_line_matches,
    search,
    search_with_outcome,
)


class TestCompilePattern:
    """Tests for compile_pattern()."""

    def test_compile_when_literal_then_metacharacters_escaped(self):
        """Literal patterns match metacharacters verbatim."""
        pattern = compile_pattern("a.b", use_regex=False)
        assert pattern.search("a.b")
        assert not pattern.search("axb")

    def test_compile_when_case_insensitive_then_ignorecase_flag(self):
        """Default compilation ignores case."""
        assert compile_pattern("x").flags & re.IGNORECASE
        assert not compile_pattern("x", case_sensitive=True).flags & re.IGNORECASE

    def test_compile_when_invalid_regex_then_raises_error(self):
        """Invalid regex raises InvalidPatternError (a ValueError)."""
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern("(unclosed", use_regex=True)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.pattern == "(unclosed"

    def test_compile_when_invalid_regex_used_literally_then_ok(self):
        """The same text is fine when not treated as a regex."""
        assert compile_pattern("(unclosed").search("x (unclosed y")


class TestSearchOptions:
    """Tests for SearchOptions."""

    def test_flags_when_case_sensitive_then_zero(self):
        """Case-sensitive search uses no flags."""
        assert SearchOptions(case_sensitive=True).flags == 0
        assert SearchOptions().flags == re.IGNORECASE


class TestIterLineMatches:
    """Tests for iter_line_matches()."""

    def test_iter_when_zero_length_pattern_then_terminates(self):
        """a* over 'baa' yields zero-length and non-empty matches and stops."""
        spans = [(m.start(), m.end()) for m in iter_line_matches(re.compile("a*"), "baa")]
        assert spans == [(0, 0), (1, 3), (3, 3)]

    def test_iter_when_empty_line_then_single_zero_length(self):
        """An empty line can still produce one zero-length match."""
        spans = [(m.start(), m.end()) for m in iter_line_matches(re.compile("x*"), "")]
        assert spans == [(0, 0)]


class TestSearch:
    """Tests for search()."""

    def test_search_when_case_insensitive_then_finds_all_cases(self, sample_corpus):
        """'the' matches The/the/THE/theorem across files."""
        matches = search(sample_corpus, "the")

        assert [(m.file_id, m.line, m.column) for m in matches] == [
            ("main.tex", 2, 1),
            ("main.tex", 2, 13),
            ("main.tex", 3, 1),
            ("chapters/proof.tex", 1, 4),
            ("chapters/proof.tex", 1, 8),
        ]

    def test_search_when_case_sensitive_then_exact_case_only(self, sample_corpus):
        """Case-sensitive search skips 'The' and 'THE'."""
        matches = search(sample_corpus, "the", case_sensitive=True)

        assert [(m.file_id, m.line, m.column) for m in matches] == [
            ("main.tex", 2, 13),
            ("chapters/proof.tex", 1, 4),
            ("chapters/proof.tex", 1, 8),
        ]

    def test_search_when_match_found_then_line_context_populated(self, sample_corpus):
        """Matches carry line content and 0-based offsets."""
        match = search(sample_corpus, "dog")[0]

        assert match.file_name == "main.tex"
        assert match.line_content == "The fox and the dog."
        assert (match.match_start, match.match_end) == (16, 19)
        assert match.matched_text == "dog"

    def test_search_when_regex_then_pattern_interpreted(self, sample_corpus):
        """Regex search supports character classes and escapes."""
        matches = search(sample_corpus, r"\\section\{(\w+)\}", use_regex=True)

        assert len(matches) == 1
        assert matches[0].matched_text == "\\section{Intro}"

    def test_search_when_literal_backslash_then_escaped(self, sample_corpus):
        """Literal search treats backslashes as text."""
        matches = search(sample_corpus, "\\section")
        assert [(m.line, m.column) for m in matches] == [(1, 1)]

    def test_search_when_invalid_regex_then_empty(self, sample_corpus):
        """An invalid regex yields no results instead of raising."""
        assert search(sample_corpus, "[unclosed", use_regex=True) == []

    def test_search_when_empty_regex_then_terminates(self):
        """An empty pattern returns a finite (empty) result."""
        corpus = [SourceFile("1", "a.tex", "a")]
        assert search(corpus, "", use_regex=True) == []

    @pytest.mark.parametrize("pattern", [" ", "  ", "\t"])
    def test_search_when_whitespace_only_pattern_then_empty(self, pattern):
        """Blank patterns do not match every space in the corpus."""
        corpus = [SourceFile("1", "a.tex", "a b\tc  d")]

        assert search(corpus, pattern) == []
        assert search_with_outcome(corpus, pattern, use_regex=True).is_empty

    def test_search_when_pattern_has_inner_space_then_matched(self):
        """Spaces inside a non-blank pattern are still significant."""
        corpus = [SourceFile("1", "a.tex", "the dog and the cat")]
        assert [m.column for m in search(corpus, "the ")] == [1, 13]

    def test_search_when_zero_length_regex_then_advances(self):
        """Zero-length matches are recorded once per position."""
        corpus = [SourceFile("1", "a.tex", "ab")]
        matches = search(corpus, "x*", use_regex=True)

        assert [(m.match_start, m.match_end) for m in matches] == [(0, 0), (1, 1), (2, 2)]

    def test_search_when_lookahead_then_zero_length_matches(self):
        """Pure lookahead patterns terminate and report every hit."""
        corpus = [SourceFile("1", "a.tex", "aXbX")]
        matches = search(corpus, "(?=X)", use_regex=True, case_sensitive=True)

        assert [m.column for m in matches] == [2, 4]

    def test_search_when_repeated_then_identical_results(self, sample_corpus):
        """Searching twice on an unchanged corpus is idempotent."""
        first = search(sample_corpus, "t", use_regex=True)
        second = search(sample_corpus, "t", use_regex=True)
        assert first == second

    def test_search_when_empty_buffer_then_no_matches(self):
        """Files without content yield nothing."""
        corpus = [SourceFile("1", "empty.tex", "")]
        assert search(corpus, "x*", use_regex=True) == []

    def test_search_when_mapping_corpus_then_coerced(self):
        """Plain dict entries with camelCase keys are accepted."""
        corpus = [{"fileId": "9", "fileName": "main.tex", "content": "The qick fox"}]
        matches = search(corpus, "qick")

        assert matches[0].file_id == "9"
        assert matches[0].column == 5

    def test_search_when_overlapping_candidates_then_non_overlapping_matches(self):
        """Each search resumes at the previous match end."""
        corpus = [SourceFile("1", "a.tex", "aaaa")]
        matches = search(corpus, "aa")

        assert [m.match_start for m in matches] == [0, 2]


class TestSearchWithOutcome:
    """Tests for search_with_outcome()."""

    def test_outcome_when_invalid_regex_then_error_reported(self, sample_corpus):
        """Invalid patterns are distinguishable from no matches."""
        outcome = search_with_outcome(sample_corpus, "(", use_regex=True)

        assert not outcome.ok
        assert outcome.error
        assert outcome.is_empty

    def test_outcome_when_no_matches_then_ok_and_empty(self, sample_corpus):
        """A valid pattern without hits is ok with no matches."""
        outcome = search_with_outcome(sample_corpus, "zebra")

        assert outcome.ok
        assert outcome.is_empty

    def test_outcome_when_matches_then_files_matched(self, sample_corpus):
        """files_matched reports every file with a hit."""
        outcome = search_with_outcome(sample_corpus, "the")
        assert outcome.files_matched == ("main.tex", "chapters/proof.tex")
