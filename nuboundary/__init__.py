"""
nuboundary is a Python library for sentence boundary detection and tokenization
with maximum entropy models.

A trained classifier is consulted at every candidate boundary: end-of-sentence
punctuation for the sentence detector, interior offsets of whitespace-delimited
chunks for the tokenizer. Every detection call returns the units together with
a per-unit probability.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Tuple, Union

from nuboundary._version import __version__
from nuboundary.context import DefaultEndOfSentenceScanner, SentenceContextGenerator, TokenContextGenerator
from nuboundary.core.exceptions import (
    InvalidCandidateSequenceError,
    ModelFormatError,
    NuboundaryError,
    TrainingError,
)
from nuboundary.core.parameters import TrainingParameters
from nuboundary.core.spans import DetectionResult, Span, whitespace_split
from nuboundary.models import MaxentModel, load_model
from nuboundary.tokenizers import MaxentSentenceDetector, MaxentTokenizer, make_abbreviation_filter
from nuboundary.trainers import Event, GISTrainer, SentenceEventStream, TokenEventStream


@lru_cache(maxsize=8)
def load_sentence_detector(model: str) -> MaxentSentenceDetector:
    """
    Load a sentence detector from a model file, caching the result.

    Args:
        model: Path to a ``.json`` or ``.json.xz`` model

    Returns:
        A MaxentSentenceDetector with the default scanner and context generator
    """
    return MaxentSentenceDetector.load(Path(model))


@lru_cache(maxsize=8)
def load_tokenizer(model: str, alpha_numeric_optimization: bool = False) -> MaxentTokenizer:
    """
    Load a tokenizer from a model file, caching the result.

    Args:
        model: Path to a ``.json`` or ``.json.xz`` model
        alpha_numeric_optimization: Keep purely alphanumeric chunks whole

    Returns:
        A MaxentTokenizer with the default context generator
    """
    return MaxentTokenizer.load(Path(model), alpha_numeric_optimization=alpha_numeric_optimization)


def sent_detect(text: str, model: Union[str, Path], return_probabilities: bool = False
                ) -> Union[List[str], List[Tuple[str, float]]]:
    """
    Split text into sentences.

    Args:
        text: The text to split
        model: Path to a sentence detection model
        return_probabilities: Return (sentence, probability) tuples instead of just sentences

    Returns:
        List of sentences, or list of (sentence, probability) tuples

    Examples:
        >>> sent_detect("Hello world. How are you?", "sent.json.xz")
        ['Hello world. ', 'How are you?']
    """
    result = load_sentence_detector(str(model)).span_detect(text)
    if return_probabilities:
        return [(span.covered_text(text), prob) for span, prob in result]
    return [span.covered_text(text) for span in result.units]


def tokenize(text: str, model: Union[str, Path], alpha_numeric_optimization: bool = False,
             return_probabilities: bool = False) -> Union[List[str], List[Tuple[str, float]]]:
    """
    Split text into tokens.

    Args:
        text: The text to split
        model: Path to a tokenizer model
        alpha_numeric_optimization: Keep purely alphanumeric chunks whole
        return_probabilities: Return (token, probability) tuples instead of just tokens

    Returns:
        List of tokens, or list of (token, probability) tuples
    """
    result = load_tokenizer(str(model), alpha_numeric_optimization).tokenize_pos(text)
    if return_probabilities:
        return [(span.covered_text(text), prob) for span, prob in result]
    return [span.covered_text(text) for span in result.units]


__all__ = [
    "__version__",
    "DefaultEndOfSentenceScanner",
    "DetectionResult",
    "Event",
    "GISTrainer",
    "InvalidCandidateSequenceError",
    "MaxentModel",
    "MaxentSentenceDetector",
    "MaxentTokenizer",
    "ModelFormatError",
    "NuboundaryError",
    "SentenceContextGenerator",
    "SentenceEventStream",
    "Span",
    "TokenContextGenerator",
    "TokenEventStream",
    "TrainingError",
    "TrainingParameters",
    "load_model",
    "load_sentence_detector",
    "load_tokenizer",
    "make_abbreviation_filter",
    "sent_detect",
    "tokenize",
    "whitespace_split",
]
