"""
Tests for spans, detection results and whitespace scanning.
"""

import pytest

from nuboundary.core.spans import (
    DetectionResult,
    Span,
    first_non_whitespace,
    first_whitespace,
    starts_to_spans,
    whitespace_split,
)


class TestSpan:
    def test_length_and_text(self):
        span = Span(2, 5)
        assert len(span) == 3
        assert span.covered_text("abcdefg") == "cde"
        assert span.as_tuple() == (2, 5)

    @pytest.mark.parametrize("start,end", [(3, 3), (4, 2), (-1, 2)])
    def test_invalid_spans(self, start, end):
        with pytest.raises(ValueError):
            Span(start, end)

    def test_ordering(self):
        spans = [Span(5, 7), Span(0, 2), Span(0, 1)]
        assert sorted(spans) == [Span(0, 1), Span(0, 2), Span(5, 7)]


class TestDetectionResult:
    def test_pairs(self):
        result = DetectionResult([Span(0, 2), Span(3, 4)], [0.5, 1.0])
        assert list(result) == [(Span(0, 2), 0.5), (Span(3, 4), 1.0)]
        assert len(result) == 2
        assert result

    def test_empty(self):
        result = DetectionResult()
        assert len(result) == 0
        assert not result
        assert list(result) == []

    def test_lengths_must_match(self):
        with pytest.raises(ValueError, match="2 units but 1 probabilities"):
            DetectionResult([1, 2], [0.5])

    def test_immutable(self):
        result = DetectionResult([1], [0.5])
        assert isinstance(result.units, tuple)
        with pytest.raises(AttributeError):
            result.units = (2,)


class TestWhitespaceScanning:
    def test_whitespace_split(self):
        assert whitespace_split("  ab  c\td\n") == [Span(2, 4), Span(6, 7), Span(8, 9)]

    def test_whitespace_split_no_whitespace(self):
        assert whitespace_split("abc") == [Span(0, 3)]

    @pytest.mark.parametrize("text", ["", " ", "\n\t  "])
    def test_whitespace_split_empty(self, text):
        assert whitespace_split(text) == []

    def test_whitespace_split_unicode_spaces(self):
        assert whitespace_split("a\u00a0b\u2003c") == [Span(0, 1), Span(2, 3), Span(4, 5)]

    def test_first_whitespace(self):
        assert first_whitespace("abc def", 0) == 3
        assert first_whitespace("abc def", 3) == 3
        assert first_whitespace("abc", 1) == 3

    def test_first_whitespace_clamps(self):
        assert first_whitespace("abc", 10) == 3

    def test_first_non_whitespace(self):
        assert first_non_whitespace("a   b", 1) == 4
        assert first_non_whitespace("a   b", 0) == 0
        assert first_non_whitespace("a  ", 1) == 3
        assert first_non_whitespace("a", 5) == 1


class TestStartsToSpans:
    def test_pairs_starts(self):
        assert starts_to_spans("Hello. World.", [7]) == [Span(0, 7), Span(7, 13)]

    def test_no_starts(self):
        assert starts_to_spans("abc", []) == [Span(0, 3)]

    def test_empty_text(self):
        assert starts_to_spans("", []) == []

    def test_out_of_range_starts_ignored(self):
        assert starts_to_spans("abc", [0, 3]) == [Span(0, 3)]
