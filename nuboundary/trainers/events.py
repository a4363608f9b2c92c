"""
Training event module for nuboundary.

This module turns annotated text into the (outcome, context) events the GIS
trainer learns from. Both event streams apply the same candidate handling as
the detectors, so training and detection see the same kinds of contexts.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from nuboundary.context.sentence import DefaultEndOfSentenceScanner, SentenceContextGenerator
from nuboundary.context.token import TokenContextGenerator
from nuboundary.core.constants import NO_SPLIT, SPLIT, SPLIT_MARKER
from nuboundary.core.interfaces import ContextGenerator, EndOfSentenceScanner
from nuboundary.core.spans import first_whitespace
from nuboundary.utils.iteration import collapse_contiguous


@dataclass(frozen=True)
class Event:
    """A single training observation: the outcome seen for a feature context."""
    outcome: str
    context: Tuple[str, ...]


class SentenceEventStream:
    """
    Produces sentence detection events from one-sentence-per-item text.

    Consecutive sentences are joined with single spaces into a paragraph; an
    empty item starts a new paragraph. Every end-of-sentence candidate of a
    paragraph yields one event, with outcome ``SPLIT`` only for the last
    candidate of a sentence that has no whitespace between it and the end of
    the sentence.
    """
    def __init__(
        self,
        sentences: Iterable[str],
        scanner: Optional[EndOfSentenceScanner] = None,
        context_generator: Optional[ContextGenerator] = None,
    ) -> None:
        self._sentences = sentences
        self._scanner = scanner or DefaultEndOfSentenceScanner()
        self._cgen = context_generator or SentenceContextGenerator()

    def __iter__(self) -> Iterator[Event]:
        paragraph: List[str] = []
        for sentence in self._sentences:
            sentence = sentence.strip()
            if sentence:
                paragraph.append(sentence)
                continue
            if paragraph:
                yield from self._paragraph_events(paragraph)
                paragraph = []
        if paragraph:
            yield from self._paragraph_events(paragraph)

    def _paragraph_events(self, sentences: List[str]) -> Iterator[Event]:
        text = " ".join(sentences)
        bounds: List[Tuple[int, int]] = []
        start = 0
        for sentence in sentences:
            bounds.append((start, start + len(sentence)))
            start += len(sentence) + 1

        candidates = list(collapse_contiguous(self._scanner.find_candidates(text)))
        breaks = self._true_breaks(text, bounds, candidates)
        for c in candidates:
            outcome = SPLIT if c in breaks else NO_SPLIT
            yield Event(outcome, tuple(self._cgen.get_context(text, c)))

    @staticmethod
    def _true_breaks(text: str, bounds: List[Tuple[int, int]], candidates: List[int]) -> Set[int]:
        breaks = set()
        idx = 0
        for start, end in bounds:
            last = None
            while idx < len(candidates) and candidates[idx] < end:
                if candidates[idx] >= start:
                    last = candidates[idx]
                idx += 1
            if last is not None and first_whitespace(text, last + 1) >= end:
                breaks.add(last)
        return breaks


class TokenEventStream:
    """
    Produces tokenizer events from whitespace-separated training lines.

    Inside a whitespace chunk, ``split_marker`` marks a token boundary, e.g.
    ``"don<SPLIT>'t"`` or ``"home<SPLIT>."``. Each interior offset of a
    chunk yields one event.
    """
    def __init__(
        self,
        lines: Iterable[str],
        context_generator: Optional[ContextGenerator] = None,
        split_marker: str = SPLIT_MARKER,
        skip_alpha_numeric: bool = False,
    ) -> None:
        if not split_marker:
            raise ValueError("split_marker must not be empty")
        self._lines = lines
        self._cgen = context_generator or TokenContextGenerator()
        self._marker = split_marker
        self._skip_alpha_numeric = skip_alpha_numeric

    def __iter__(self) -> Iterator[Event]:
        for line in self._lines:
            for chunk in line.split():
                yield from self._chunk_events(chunk)

    def _chunk_events(self, chunk: str) -> Iterator[Event]:
        pieces = [p for p in chunk.split(self._marker) if p]
        token = "".join(pieces)
        if len(token) < 2:
            return
        if self._skip_alpha_numeric and token.isalnum():
            return

        splits = set()
        offset = 0
        for piece in pieces[:-1]:
            offset += len(piece)
            splits.add(offset)

        for j in range(1, len(token)):
            outcome = SPLIT if j in splits else NO_SPLIT
            yield Event(outcome, tuple(self._cgen.get_context(token, j)))
