"""
Tests for the default scanner and context generators.
"""

import pytest

from nuboundary.context import (
    DefaultEndOfSentenceScanner,
    SentenceContextGenerator,
    TokenContextGenerator,
    char_class,
)
from nuboundary.core.interfaces import ContextGenerator, EndOfSentenceScanner

MR_SMITH = "Mr. Smith went home. He slept."


class TestScanner:
    def test_finds_all_eos_characters(self):
        assert DefaultEndOfSentenceScanner().find_candidates("Hi! Ok? Yes.") == [2, 6, 11]

    def test_contiguous_characters(self):
        assert DefaultEndOfSentenceScanner().find_candidates("end...") == [3, 4, 5]

    def test_custom_characters(self):
        scanner = DefaultEndOfSentenceScanner(eos_characters=".;")
        assert scanner.find_candidates("a; b! c.") == [1, 7]

    def test_no_characters(self):
        with pytest.raises(ValueError):
            DefaultEndOfSentenceScanner(eos_characters="")

    def test_satisfies_protocol(self):
        assert isinstance(DefaultEndOfSentenceScanner(), EndOfSentenceScanner)


class TestSentenceContext:
    @pytest.fixture
    def cgen(self):
        return SentenceContextGenerator()

    def test_mid_text_candidate(self, cgen):
        context = cgen.get_context(MR_SMITH, 19)
        assert "eos=." in context
        assert "x=home" in context
        assert "xlow" in context
        assert "snull" in context
        assert "v=went" in context
        assert "n=He" in context
        assert "ncap" in context
        assert "end" not in context

    def test_abbreviation_candidate(self, cgen):
        context = cgen.get_context(MR_SMITH, 2)
        assert "x=Mr" in context
        assert "xcap" in context
        assert "vnull" in context
        assert "n=Smith" in context

    def test_final_candidate(self, cgen):
        context = cgen.get_context(MR_SMITH, 29)
        assert "x=slept" in context
        assert "v=He" in context
        assert "end" in context

    def test_suffix_features(self, cgen):
        text = 'He said "Stop." Then'
        context = cgen.get_context(text, 13)
        assert 's="' in context
        assert "spunct" in context
        assert 'x="Stop' in context

    def test_dotted_prefix(self, cgen):
        context = cgen.get_context("the U.S. army", 7)
        assert "x=U.S" in context
        assert "xdots" in context
        assert "nlow" in context

    def test_satisfies_protocol(self, cgen):
        assert isinstance(cgen, ContextGenerator)


class TestTokenContext:
    def test_features(self):
        context = TokenContextGenerator().get_context("home.", 4)
        for feature in ["p=home", "s=.", "p1=e", "p2=me", "f1=.", "f2=.",
                        "p1c=lower", "f1c=punct", "p1c_f1c=lower_punct", "p1_f1=e.", "feok"]:
            assert feature in context
        assert "same" not in context

    def test_start_of_token(self):
        context = TokenContextGenerator().get_context("don't", 1)
        assert "pbok" in context
        assert "p1c_f1c=lower_lower" in context
        assert "same" in context

    def test_affix_length(self):
        context = TokenContextGenerator(affix_length=2).get_context("abcdef", 3)
        assert "p=bc" in context
        assert "s=de" in context

    @pytest.mark.parametrize(
        "char,expected",
        [("A", "upper"), ("a", "lower"), ("7", "digit"), (".", "punct"), (" ", "space"), ("", "none")],
    )
    def test_char_class(self, char, expected):
        assert char_class(char) == expected
