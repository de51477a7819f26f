"""
Unit tests for check_spelling() and the technical-token heuristics.
"""

import pytest

from tex_toolkit.core.models import SpellIssue
from tex_toolkit.spellcheck import (
    SpellCheckConfig,
    add_to_ignore_list,
    check_spelling,
    filter_ignored,
    should_ignore,
)


class TestShouldIgnore:
    """Tests for should_ignore()."""

    @pytest.mark.parametrize(
        "word",
        ["\\alpha", "\\section*", "42", "x", "NASA", "x1", "LaTeX", "TeH"],
    )
    def test_should_ignore_when_technical_token_then_true(self, word):
        """Commands, numbers, single letters, acronyms, variables, CamelCase."""
        assert should_ignore(word)

    @pytest.mark.parametrize("word", ["teh", "Teh", "document"])
    def test_should_ignore_when_prose_then_false(self, word):
        """Ordinary words are not ignored."""
        assert not should_ignore(word)


class TestCheckSpelling:
    """Tests for check_spelling()."""

    def test_check_when_known_misspelling_then_flagged(self):
        """'teh' is flagged with 'the' and 1-based columns."""
        issues = check_spelling("This is teh document.")

        assert issues == [SpellIssue("teh", 1, 9, 12, ("the",))]

    def test_check_when_capitalized_then_suggestion_capitalized(self):
        """Suggestions follow the token's first-letter case."""
        issues = check_spelling("Teh cat")

        assert len(issues) == 1
        assert issues[0].word == "Teh"
        assert issues[0].suggestions == ("The",)

    def test_check_when_usepackage_argument_then_no_issues(self):
        """Package names are never tokenized."""
        assert check_spelling("\\usepackage{xcolor}") == []

    def test_check_when_word_not_in_dictionary_then_not_flagged(self):
        """Only dictionary entries are reported."""
        assert check_spelling("The qick fox") == []

    def test_check_when_in_comment_then_ignored(self):
        """Comment text is not checked."""
        assert check_spelling("Fine text % teh") == []

    def test_check_when_escaped_percent_then_text_after_checked(self):
        """\\% does not start a comment."""
        issues = check_spelling("100\\% teh")
        assert [(i.word, i.start_column) for i in issues] == [("teh", 7)]

    def test_check_when_comment_after_line_break_then_ignored(self):
        """\\\\ does not escape the % that follows it."""
        assert check_spelling("First line\\\\% teh comment") == []

    def test_check_when_math_after_line_break_then_skipped(self):
        """\\\\ does not escape the $ that follows it."""
        assert check_spelling("end\\\\$teh$ more") == []

    def test_check_when_odd_backslashes_before_percent_then_text_checked(self):
        """\\\\\\% is a line break followed by a literal percent."""
        issues = check_spelling("a\\\\\\% teh")
        assert [(i.word, i.start_column) for i in issues] == [("teh", 7)]

    def test_check_when_inline_math_then_math_skipped_and_columns_kept(self):
        """Math content is skipped; prose columns refer to the source line."""
        issues = check_spelling("$teh$ and teh")

        assert [(i.word, i.start_column, i.end_column) for i in issues] == [("teh", 11, 14)]

    def test_check_when_display_brackets_then_skipped(self):
        """\\[..\\] on one line is skipped."""
        issues = check_spelling("\\[ teh \\] teh")
        assert [i.start_column for i in issues] == [11]

    def test_check_when_math_spans_lines_then_inner_words_checked(self):
        """Multi-line math is not stripped by the line-local pass."""
        issues = check_spelling("$$\nteh\n$$")
        assert [(i.word, i.line) for i in issues] == [("teh", 2)]

    def test_check_when_non_prose_command_then_argument_skipped(self):
        """\\cite, \\label, \\ref arguments are not prose."""
        assert check_spelling("\\cite{teh} \\label{adn} \\ref{hte}") == []

    def test_check_when_acronym_or_camel_case_then_skipped(self):
        """All-caps and CamelCase tokens are not checked."""
        assert check_spelling("TEH and TeH") == []

    def test_check_when_short_dictionary_word_then_skipped(self):
        """Words shorter than three letters are never flagged."""
        assert check_spelling("fo ot ti") == []

    def test_check_when_multiple_lines_then_line_numbers_set(self):
        """Issues carry the 1-based line they were found on."""
        document = "\\begin{document}\nA seperate line.\n\nWe recieve it.\n\\end{document}"
        issues = check_spelling(document)

        assert [(i.word, i.line, i.suggestions) for i in issues] == [
            ("seperate", 2, ("separate",)),
            ("recieve", 4, ("receive",)),
        ]

    def test_check_when_academic_term_then_flagged(self):
        """Academic misspellings are covered."""
        issues = check_spelling("By the theorm we get a polynominal.")
        assert [i.suggestions[0] for i in issues] == ["theorem", "polynomial"]

    def test_check_when_min_word_length_raised_then_short_words_skipped(self):
        """SpellCheckConfig controls the minimum length."""
        config = SpellCheckConfig(min_word_length=4)
        assert check_spelling("teh", config=config) == []

    def test_check_when_called_twice_then_same_result(self):
        """The checker is a pure function of its input."""
        document = "teh adn hte"
        assert check_spelling(document) == check_spelling(document)

    def test_check_when_word_ignored_then_still_reported(self):
        """The checker does not consult the ignore list."""
        add_to_ignore_list("teh")

        issues = check_spelling("This is teh document.")

        assert [i.word for i in issues] == ["teh"]
        assert filter_ignored(issues) == []


class TestSpellCheckConfig:
    """Tests for SpellCheckConfig validation."""

    def test_init_when_defaults_then_documented_values(self):
        """Defaults match the checker's documented limits."""
        config = SpellCheckConfig()
        assert (config.min_word_length, config.max_suggestions, config.max_edit_distance) == (3, 5, 2)

    def test_init_when_zero_suggestions_then_raises_error(self):
        """max_suggestions must be positive."""
        with pytest.raises(ValueError, match="max_suggestions must be positive"):
            SpellCheckConfig(max_suggestions=0)

    def test_init_when_negative_distance_then_raises_error(self):
        """max_edit_distance must be non-negative."""
        with pytest.raises(ValueError, match="max_edit_distance must be non-negative"):
            SpellCheckConfig(max_edit_distance=-1)
