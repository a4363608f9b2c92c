"""
Sentence detector module for nuboundary.

This module provides the maxent sentence boundary detector. A boundary
scanner proposes candidate end-of-sentence characters, a classifier decides
each of them, and the detector turns accepted candidates into sentence start
offsets.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from nuboundary.context.sentence import DefaultEndOfSentenceScanner, SentenceContextGenerator
from nuboundary.core.base import MaxentDetectorBase
from nuboundary.core.constants import SPLIT
from nuboundary.core.exceptions import InvalidCandidateSequenceError
from nuboundary.core.interfaces import (
    BreakFilter,
    Classifier,
    ContextGenerator,
    EndOfSentenceScanner,
    accept_all_breaks,
)
from nuboundary.core.parameters import TrainingParameters
from nuboundary.core.spans import (
    DetectionResult,
    Span,
    first_non_whitespace,
    first_whitespace,
    starts_to_spans,
)
from nuboundary.models.maxent import MaxentModel
from nuboundary.trainers.events import SentenceEventStream
from nuboundary.trainers.gis import GISTrainer
from nuboundary.utils.compression import save_compressed_json
from nuboundary.utils.iteration import collapse_contiguous

logger = logging.getLogger(__name__)


def validate_candidates(text: str, candidates: Sequence[int]) -> None:
    """
    Check that candidate offsets are strictly ascending and inside the text.

    Args:
        text: The text the candidates refer to
        candidates: The offsets returned by a boundary scanner

    Raises:
        InvalidCandidateSequenceError: On the first offending offset
    """
    previous = -1
    for c in candidates:
        if not isinstance(c, int) or isinstance(c, bool):
            raise InvalidCandidateSequenceError(f"non-integer candidate {c!r}", -1)
        if c < 0 or c >= len(text):
            raise InvalidCandidateSequenceError(f"out of range for text of length {len(text)}", c)
        if c <= previous:
            raise InvalidCandidateSequenceError(
                "duplicate candidate" if c == previous else "candidates not ascending", c
            )
        previous = c


def make_abbreviation_filter(abbreviations: Iterable[str]) -> BreakFilter:
    """
    Build a break filter that vetoes breaks after known abbreviations.

    The word ending at the candidate is compared case-insensitively, without
    its trailing period and without leading brackets or quotes. Dotted forms
    match their undotted entry too, so "U.S." is caught by either "u.s" or "us".

    Args:
        abbreviations: Abbreviations such as "dr", "mr", "e.g"

    Returns:
        A predicate suitable for ``MaxentSentenceDetector(is_acceptable_break=...)``
    """
    known = frozenset(a.lower().rstrip(".") for a in abbreviations)

    def is_acceptable_break(text: str, last_accepted: int, candidate: int) -> bool:
        start = candidate
        while start > last_accepted and not text[start - 1].isspace():
            start -= 1
        word = text[start:candidate].lstrip("([{\"'").lower()
        if not word:
            return True
        return word not in known and word.replace(".", "") not in known

    return is_acceptable_break


class MaxentSentenceDetector(MaxentDetectorBase):
    """
    Sentence detector using a maximum entropy model.

    Every call returns a DetectionResult that carries the detected units and
    their probabilities together, so a detector can be reused freely between
    calls.
    """
    def __init__(
        self,
        model: Classifier,
        context_generator: Optional[ContextGenerator] = None,
        scanner: Optional[EndOfSentenceScanner] = None,
        is_acceptable_break: BreakFilter = accept_all_breaks,
        accept_outcome: str = SPLIT,
    ) -> None:
        """
        Initialize the detector.

        Args:
            model: The classifier that decides end-of-sentence candidates
            context_generator: Feature generator (default: SentenceContextGenerator)
            scanner: Candidate finder (default: DefaultEndOfSentenceScanner)
            is_acceptable_break: Veto for breaks the classifier predicts,
                called as ``(text, last_accepted, candidate)``
            accept_outcome: The classifier label that means "sentence ends here"
        """
        super().__init__(model, context_generator or SentenceContextGenerator(), accept_outcome)
        self._scanner = scanner or DefaultEndOfSentenceScanner()
        self._is_acceptable_break = is_acceptable_break

    @property
    def scanner(self) -> EndOfSentenceScanner:
        return self._scanner

    def detect_positions(self, text: str) -> DetectionResult[int]:
        """
        Detect the start offsets of every sentence after the first.

        Args:
            text: The text to process

        Returns:
            The start offsets with the probability of each accepted break

        Raises:
            InvalidCandidateSequenceError: If the scanner output is not strictly
                ascending or falls outside the text
        """
        if not text:
            return DetectionResult()

        candidates = self._scanner.find_candidates(text)
        validate_candidates(text, candidates)

        positions: List[int] = []
        probs: List[float] = []
        last_accepted = 0
        evaluated = 0
        for candidate in collapse_contiguous(candidates):
            evaluated += 1
            is_split, prob = self._decide(text, candidate)
            if not is_split or not self._is_acceptable_break(text, last_accepted, candidate):
                continue

            if candidate != last_accepted:
                start = first_non_whitespace(text, first_whitespace(text, candidate + 1))
                if start < len(text) and (not positions or start > positions[-1]):
                    positions.append(start)
                    probs.append(prob)
            last_accepted = candidate + 1

        logger.debug(
            "%d candidates, %d evaluated, %d sentence breaks", len(candidates), evaluated, len(positions)
        )
        return DetectionResult(positions, probs)

    def span_detect(self, text: str) -> DetectionResult[Span]:
        """
        Detect contiguous sentence spans covering the whole text.

        The first sentence is not the result of a break decision and gets
        probability 1.0; every later sentence carries the probability of the
        break that started it.

        Args:
            text: The text to process

        Returns:
            Sentence spans and their probabilities
        """
        if not text:
            return DetectionResult()
        starts = self.detect_positions(text)
        spans = starts_to_spans(text, starts.units)
        return DetectionResult(spans, (1.0,) + starts.probabilities)

    def sent_detect(self, text: str) -> List[str]:
        """
        Split text into sentences.

        Args:
            text: The text to process

        Returns:
            The sentences, including any whitespace that follows each one
        """
        return [span.covered_text(text) for span in self.span_detect(text).units]

    def detect_with_spans(self, text: str) -> List[Tuple[str, Tuple[int, int]]]:
        """
        Split text into sentences along with their character spans.

        Returns:
            A list of (sentence, (start, end)) tuples
        """
        return [(span.covered_text(text), span.as_tuple()) for span in self.span_detect(text).units]

    @classmethod
    def train(
        cls,
        sentences: Iterable[str],
        parameters: Optional[TrainingParameters] = None,
        context_generator: Optional[ContextGenerator] = None,
        scanner: Optional[EndOfSentenceScanner] = None,
        is_acceptable_break: BreakFilter = accept_all_breaks,
    ) -> "MaxentSentenceDetector":
        """
        Train a detector from one-sentence-per-item text.

        Args:
            sentences: Training sentences; an empty item separates paragraphs
            parameters: GIS settings (default: TrainingParameters.for_sentences())
            context_generator: Feature generator used for training and detection
            scanner: Candidate finder used for training and detection
            is_acceptable_break: Veto passed on to the trained detector

        Returns:
            A detector using the trained model
        """
        context_generator = context_generator or SentenceContextGenerator()
        scanner = scanner or DefaultEndOfSentenceScanner()
        events = SentenceEventStream(sentences, scanner, context_generator)
        model = GISTrainer(parameters or TrainingParameters.for_sentences()).train(events)
        return cls(model, context_generator, scanner, is_acceptable_break)

    def save(self, file_path: Union[str, Path], compress: bool = True, compression_level: int = 1) -> Path:
        """
        Save the detector's model to a JSON file, optionally with LZMA compression.

        Args:
            file_path: The path to save the file to
            compress: Whether to compress the file using LZMA (default: True)
            compression_level: LZMA compression level (0-9), lower is faster but less compressed

        Returns:
            The path written
        """
        return save_compressed_json(
            self._model_json(),
            file_path,
            level=compression_level,
            use_compression=compress,
        )

    @classmethod
    def load(cls, file_path: Union[str, Path], **kwargs) -> "MaxentSentenceDetector":
        """
        Load a detector from a model file, which may be compressed with LZMA.

        Args:
            file_path: The path to load the file from
            **kwargs: Passed on to the constructor (context_generator, scanner, ...)

        Returns:
            A new MaxentSentenceDetector instance
        """
        return cls(MaxentModel.load(file_path), **kwargs)
