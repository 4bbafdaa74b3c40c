"""Tests for freqcountable/counting/metrics.compute_metrics()."""

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from freqcountable.counting.metrics import MetricsResult, compute_metrics
from freqcountable.sources.memory_source import EditableTextSource, StaticTextSource


class TestEmptyText:
    def test_empty_string(self):
        result = compute_metrics("")
        assert result == MetricsResult(0, 0, 0, 0, 0)

    def test_empty_source(self):
        result = compute_metrics(StaticTextSource(""))
        assert result.to_dict() == {
            "paragraphs": 0, "sentences": 0, "words": 0,
            "characters": 0, "all": 0,
        }

    def test_whitespace_only_counts_raw_length_only(self):
        result = compute_metrics("   \n  ")
        assert result.paragraphs == 0
        assert result.sentences == 0
        assert result.words == 0
        assert result.characters == 0
        assert result.all == 6

    def test_zero_width_only(self):
        result = compute_metrics("\u200b")
        assert result.words == 0
        assert result.characters == 0
        assert result.all == 1


class TestBasicCounts:
    def test_hello_world(self):
        result = compute_metrics("Hello, world!")
        assert result.words == 2
        assert result.sentences == 1
        assert result.paragraphs == 1
        assert result.characters == 12
        assert result.all == 13

    def test_multiple_sentences(self):
        result = compute_metrics("One. Two! Three?")
        assert result.sentences == 3
        assert result.words == 3

    def test_ellipsis_run_is_one_terminator(self):
        assert compute_metrics("Wait... what?").sentences == 2
        assert compute_metrics("Wait… what?").sentences == 2

    def test_terminator_at_end_of_line_not_counted(self):
        assert compute_metrics("First.\nSecond").sentences == 1

    def test_punctuation_removed_from_words(self):
        result = compute_metrics("don't stop - go")
        assert result.words == 3

    def test_spanish_punctuation(self):
        result = compute_metrics("¿Qué tal? ¡Hola!")
        assert result.words == 3

    def test_punctuation_only(self):
        result = compute_metrics("- - -")
        assert result.words == 0
        assert result.paragraphs == 1
        assert result.characters == 3

    def test_surrogate_pairs_count_once(self):
        result = compute_metrics("\U0001F600 \U0001F600")
        assert result.characters == 2
        assert result.all == 3

    def test_results_are_integers(self):
        result = compute_metrics("Hello world. Second sentence!")
        for key, value in result.to_dict().items():
            assert isinstance(value, int), f"{key} should be int, got {type(value)}"


class TestParagraphs:
    def test_soft_returns(self):
        assert compute_metrics("line one\nline two").paragraphs == 2

    def test_hard_returns_single_newline(self):
        result = compute_metrics("line one\nline two", {"hard_returns": True})
        assert result.paragraphs == 1

    def test_hard_returns_blank_line(self):
        result = compute_metrics("para one\n\npara two", {"hardReturns": True})
        assert result.paragraphs == 2

    def test_consecutive_newlines_are_one_break(self):
        assert compute_metrics("a\n\n\nb\nc").paragraphs == 3

    def test_surrounding_newlines_trimmed(self):
        assert compute_metrics("\n\nbody\n\n").paragraphs == 1


class TestOptions:
    HTML = "<p>Hello <b>world</b></p>"

    def test_strip_tags(self):
        result = compute_metrics(self.HTML, {"strip_tags": True})
        assert result.words == 2
        assert result.characters == 10

    def test_all_measures_raw_text_with_tags(self):
        result = compute_metrics(self.HTML, {"strip_tags": True})
        assert result.all == 25

    def test_tags_kept_by_default(self):
        result = compute_metrics(self.HTML)
        assert result.characters == 24

    def test_every_zero_width_space_removed(self):
        result = compute_metrics("a\u200bb\u200bc")
        assert result.characters == 3
        assert result.all == 5

    def test_keep_zero_width(self):
        result = compute_metrics("a\u200bb\u200bc", {"ignore_zero_width": False})
        assert result.characters == 5

    @pytest.mark.parametrize("text", ["a\nb", "a\r\nb", "a\rb"])
    def test_ignore_returns(self, text):
        result = compute_metrics(text, {"ignore_returns": True})
        assert result.all == 2

    def test_returns_counted_by_default(self):
        assert compute_metrics("a\r\nb").all == 4


class TestIdempotence:
    def test_same_source_same_result(self):
        source = EditableTextSource("Some text. More text!\n\nAnother paragraph.")
        assert compute_metrics(source) == compute_metrics(source)

    def test_recount_after_change(self):
        source = EditableTextSource("one two")
        assert compute_metrics(source).words == 2
        source.set_text("one two three")
        assert compute_metrics(source).words == 3
