"""
Collaborator contracts for nuboundary.

The decision engines only talk to their collaborators through these
protocols, so any object with matching methods can stand in for the
bundled implementations.
"""

from typing import Callable, List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Classifier(Protocol):
    """A trained model that scores a feature context over a fixed outcome alphabet."""

    def evaluate(self, context: Sequence[str]) -> Sequence[float]:
        """Return one probability per outcome, summing to 1."""
        ...

    def best_outcome(self, probs: Sequence[float]) -> str:
        """Return the label of the most probable outcome in ``probs``."""
        ...

    def index_of(self, outcome: str) -> int:
        """Return the position of ``outcome`` in the distributions returned by evaluate()."""
        ...


@runtime_checkable
class ContextGenerator(Protocol):
    """Maps a text and a position in it to a list of feature identifiers."""

    def get_context(self, text: str, position: int) -> List[str]:
        ...


@runtime_checkable
class EndOfSentenceScanner(Protocol):
    """Finds offsets of characters that might end a sentence."""

    def find_candidates(self, text: str) -> List[int]:
        ...


# (text, last_accepted, candidate) -> whether a predicted break may stand
BreakFilter = Callable[[str, int, int], bool]


def accept_all_breaks(text: str, last_accepted: int, candidate: int) -> bool:
    """Default break filter: take every break the classifier predicts."""
    return True
