"""
Unit tests for replace_one() and replace_all().

Verifies splice positions, reverse-order application for several matches
on one line, and silent skipping of unknown files.
"""

import pytest

from tex_toolkit.core.models import SearchMatch, SourceFile
from tex_toolkit.search import replace_all, replace_one, search


class TestReplaceOne:
    """Tests for replace_one()."""

    def test_replace_one_when_valid_match_then_splices_line(self):
        """Only the selected occurrence changes."""
        content = "The qick fox\nqick again"
        match = search([SourceFile("1", "a.tex", content)], "qick")[1]

        result = replace_one(content, match, "quick")

        assert result == "The qick fox\nquick again"

    def test_replace_one_when_replacement_longer_then_rest_of_line_kept(self):
        """Text after the match is preserved."""
        content = "a b c"
        match = SearchMatch("1", "a.tex", 1, 3, "a b c", 2, 3)

        assert replace_one(content, match, "BETA") == "a BETA c"

    def test_replace_one_when_line_missing_then_unchanged(self):
        """A stale match pointing past the buffer leaves content untouched."""
        match = SearchMatch("1", "a.tex", 5, 1, "x", 0, 1)
        assert replace_one("only one line", match, "y") == "only one line"

    def test_replace_one_when_zero_length_match_then_inserts(self):
        """Zero-length matches insert the replacement."""
        match = SearchMatch("1", "a.tex", 1, 1, "abc", 0, 0)
        assert replace_one("abc", match, ">") == ">abc"


class TestReplaceAll:
    """Tests for replace_all()."""

    def test_replace_all_when_several_matches_on_one_line_then_all_replaced(self):
        """Reverse-order application keeps pending offsets valid."""
        corpus = [SourceFile("1", "a.tex", "cat cat cat")]
        matches = search(corpus, "cat")

        result = replace_all(corpus, matches, "tiger")

        assert result == {"1": "tiger tiger tiger"}

    def test_replace_all_when_matches_unsorted_then_same_result(self):
        """Input order of matches does not matter."""
        corpus = [SourceFile("1", "a.tex", "ab ab\nab")]
        matches = search(corpus, "ab")

        forward = replace_all(corpus, matches, "xyz")
        shuffled = replace_all(corpus, [matches[1], matches[2], matches[0]], "xyz")

        assert forward == shuffled == {"1": "xyz xyz\nxyz"}

    def test_replace_all_when_replacement_shorter_then_correct(self):
        """Shrinking replacements also work."""
        corpus = [SourceFile("1", "a.tex", "alpha beta alpha")]
        result = replace_all(corpus, search(corpus, "alpha"), "a")
        assert result["1"] == "a beta a"

    def test_replace_all_when_multiple_files_then_each_file_returned(self, sample_corpus):
        """Every affected file gets new content; others are absent."""
        matches = search(sample_corpus, "the", case_sensitive=True)
        result = replace_all(sample_corpus, matches, "a")

        assert result == {
            "main.tex": "\\section{Intro}\nThe fox and a dog.\nTHE end",
            "chapters/proof.tex": "By a aorem, $x = y$.",
        }

    def test_replace_all_when_file_missing_from_corpus_then_skipped(self):
        """Matches for unknown files are ignored without error."""
        corpus = [SourceFile("1", "a.tex", "x")]
        ghost = SearchMatch("ghost", "ghost.tex", 1, 1, "x", 0, 1)

        assert replace_all(corpus, [ghost], "y") == {}

    def test_replace_all_when_no_matches_then_empty(self, sample_corpus):
        """No matches means no changed files."""
        assert replace_all(sample_corpus, [], "x") == {}

    @pytest.mark.parametrize("replacement", ["dog", "DOGGO", "bird"])
    def test_replace_all_when_searching_replacement_then_same_count(self, replacement):
        """Replacing N matches then searching the replacement finds N."""
        corpus = [SourceFile("1", "a.tex", "cat and cat\ncat, cat!")]
        matches = search(corpus, "cat", case_sensitive=True)

        new_content = replace_all(corpus, matches, replacement)["1"]
        found = search([SourceFile("1", "a.tex", new_content)], replacement, case_sensitive=True)

        assert len(found) == len(matches) == 4
