"""
Span module for nuboundary.

This module provides the span and result types shared by the sentence detector
and the tokenizer, together with the whitespace scanning helpers used for
boundary arithmetic.
"""

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

U = TypeVar("U")


@dataclass(frozen=True, order=True)
class Span:
    """
    A half-open ``[start, end)`` interval over character offsets.

    Spans order by ``start`` and then ``end``, so sorting a list of spans
    gives their left-to-right order in the source text.
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def covered_text(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text[self.start : self.end]

    def as_tuple(self) -> Tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True)
class DetectionResult(Generic[U]):
    """
    The outcome of a single detection call.

    Holds the emitted units (sentence start offsets or spans) and the
    probability trail aligned with them. Both are produced in one pass, so
    they always have the same length.
    """
    units: Tuple[U, ...] = field(default_factory=tuple)
    probabilities: Tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        object.__setattr__(self, "units", tuple(self.units))
        object.__setattr__(self, "probabilities", tuple(self.probabilities))
        if len(self.units) != len(self.probabilities):
            raise ValueError(
                f"{len(self.units)} units but {len(self.probabilities)} probabilities"
            )

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[Tuple[U, float]]:
        return iter(zip(self.units, self.probabilities))

    def __bool__(self) -> bool:
        return bool(self.units)


def first_whitespace(text: str, pos: int) -> int:
    """
    Find the first whitespace character at or after ``pos``.

    Args:
        text: The text to scan
        pos: The starting position

    Returns:
        The offset of the whitespace character, or ``len(text)`` if none
    """
    length = len(text)
    while pos < length and not text[pos].isspace():
        pos += 1
    return min(pos, length)


def first_non_whitespace(text: str, pos: int) -> int:
    """
    Find the first non-whitespace character at or after ``pos``.

    Args:
        text: The text to scan
        pos: The starting position

    Returns:
        The offset of the character, or ``len(text)`` if only whitespace remains
    """
    length = len(text)
    while pos < length and text[pos].isspace():
        pos += 1
    return min(pos, length)


def whitespace_split(text: str) -> List[Span]:
    """
    Split text into maximal runs of non-whitespace characters.

    Args:
        text: The text to split

    Returns:
        One span per whitespace-delimited chunk, in order
    """
    spans: List[Span] = []
    tok_start = -1
    for i, char in enumerate(text):
        if char.isspace():
            if tok_start >= 0:
                spans.append(Span(tok_start, i))
                tok_start = -1
        elif tok_start < 0:
            tok_start = i
    if tok_start >= 0:
        spans.append(Span(tok_start, len(text)))
    return spans


def starts_to_spans(text: str, starts: Sequence[int]) -> List[Span]:
    """
    Turn sentence start offsets into contiguous sentence spans.

    The first sentence starts at 0 and the last one ends at ``len(text)``.

    Args:
        text: The text the offsets refer to
        starts: Strictly increasing start offsets of every sentence after the first

    Returns:
        Contiguous spans covering the whole text
    """
    if not text:
        return []
    bounds = [0] + [s for s in starts if 0 < s < len(text)] + [len(text)]
    return [Span(a, b) for a, b in zip(bounds, bounds[1:]) if b > a]
