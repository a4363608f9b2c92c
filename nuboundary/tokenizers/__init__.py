"""Sentence detector and tokenizer."""

from nuboundary.tokenizers.maxent_tokenizer import MaxentTokenizer
from nuboundary.tokenizers.sentence_detector import (
    MaxentSentenceDetector,
    make_abbreviation_filter,
    validate_candidates,
)

__all__ = [
    "MaxentSentenceDetector",
    "MaxentTokenizer",
    "make_abbreviation_filter",
    "validate_candidates",
]
