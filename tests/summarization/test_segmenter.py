"""Tests für die naive Satz- und Absatzzerlegung."""

from summary_tool.services.summarization import (
    canonicalize_sentence,
    split_to_paragraphs,
    split_to_sentences,
)


class TestSplitToSentences:
    def test_splits_on_period_space_and_newline(self):
        text = "The cat sat. The cat ran\nThe dog slept."
        assert split_to_sentences(text) == ["The cat sat", "The cat ran", "The dog slept."]

    def test_no_delimiter_returns_whole_text(self):
        assert split_to_sentences("Hello world") == ["Hello world"]

    def test_empty_fragments_are_dropped(self):
        assert split_to_sentences("a\n\nb. \nc") == ["a", "b", "c"]

    def test_fragments_are_not_trimmed(self):
        """Whitespace bleibt erhalten, getrimmt wird erst in der Summary."""
        assert split_to_sentences("A.  B\n\tC") == ["A", " B", "\tC"]

    def test_period_without_space_is_not_a_delimiter(self):
        assert split_to_sentences("Version 1.5 is out.") == ["Version 1.5 is out."]

    def test_empty_and_whitespace_input(self):
        assert split_to_sentences("") == []
        assert split_to_sentences("   ") == []
        assert split_to_sentences("\n\n") == []


class TestSplitToParagraphs:
    def test_splits_on_double_newline_and_tab_line(self):
        text = "p1 a. p1 b\n\np2\n\t\np3"
        assert split_to_paragraphs(text) == ["p1 a. p1 b", "p2", "p3"]

    def test_single_newline_keeps_paragraph(self):
        assert split_to_paragraphs("line one\nline two") == ["line one\nline two"]

    def test_empty_fragments_are_dropped(self):
        assert split_to_paragraphs("p1\n\n\n\np2") == ["p1", "p2"]

    def test_odd_newline_run_keeps_leading_newline(self):
        assert split_to_paragraphs("p1\n\n\np2") == ["p1", "\np2"]

    def test_empty_input(self):
        assert split_to_paragraphs("") == []
        assert split_to_paragraphs("\n\n\n\t\n") == []


class TestCanonicalizeSentence:
    def test_removes_punctuation_and_spaces(self):
        assert canonicalize_sentence("Hello, world!") == "Helloworld"

    def test_keeps_digits_underscore_and_unicode_letters(self):
        assert canonicalize_sentence("über_alles 42.") == "über_alles42"

    def test_is_case_sensitive(self):
        assert canonicalize_sentence("The Cat") != canonicalize_sentence("the cat")

    def test_typographic_quotes_are_removed(self):
        assert canonicalize_sentence("It’s “good”") == "Itsgood"

    def test_only_punctuation_gives_empty_key(self):
        assert canonicalize_sentence(" ... !? ") == ""
