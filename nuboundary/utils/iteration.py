"""
Iteration utilities for nuboundary.

This module provides the lookahead iteration used when walking boundary
candidates.
"""

from typing import Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


def pair_iter(iterable: Iterable[T]) -> Iterator[Tuple[T, Optional[T]]]:
    """
    Iterate through pairs of items from an iterable, where the second item
    is None for the last item.

    Args:
        iterable: The input iterable

    Yields:
        Pairs of (current_item, next_item) where next_item is None for the last item
    """
    it = iter(iterable)
    sentinel = object()
    prev = next(it, sentinel)
    if prev is sentinel:
        return
    for current in it:
        yield prev, current
        prev = current
    yield prev, None


def collapse_contiguous(candidates: Iterable[int]) -> Iterator[int]:
    """
    Drop every candidate that is immediately followed by ``candidate + 1``.

    Runs of adjacent offsets (an ellipsis, "?!") collapse onto their
    rightmost member.

    Args:
        candidates: Ascending offsets

    Yields:
        The offsets that survive collapsing, in order
    """
    for current, following in pair_iter(candidates):
        if following is not None and following == current + 1:
            continue
        yield current
