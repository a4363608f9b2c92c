"""Pytest configuration for nuboundary tests."""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest

from nuboundary.core.constants import NO_SPLIT, SPLIT

Decision = Tuple[str, float]


def features(context: Sequence[str]) -> Dict[str, str]:
    """Turn ``key=value`` context entries into a dict."""
    result = {}
    for feature in context:
        key, _, value = feature.partition("=")
        result[key] = value
    return result


class RecordingContextGenerator:
    """Context generator exposing the position and neighbouring characters."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, int]] = []

    def get_context(self, text: str, position: int) -> List[str]:
        self.calls.append((text, position))
        prev = text[position - 1] if position > 0 else ""
        return [f"pos={position}", f"char={text[position]}", f"prev={prev}"]


class ScriptedClassifier:
    """
    Classifier answering from a script instead of a model.

    Decisions come from ``decide(features)`` when given, otherwise from
    ``decisions`` keyed by the ``pos`` feature, falling back to ``default``.
    Every evaluated context is recorded. ``labels`` gives the (split,
    no-split) outcome names.
    """

    def __init__(
        self,
        decisions: Optional[Dict[int, Decision]] = None,
        default: Decision = (NO_SPLIT, 0.9),
        decide: Optional[Callable[[Dict[str, str]], Decision]] = None,
        labels: Tuple[str, str] = (SPLIT, NO_SPLIT),
    ) -> None:
        self.outcomes = labels
        self.decisions = decisions or {}
        self.default = default
        self.decide = decide
        self.contexts: List[List[str]] = []

    @property
    def positions(self) -> List[int]:
        return [int(features(ctx)["pos"]) for ctx in self.contexts]

    def evaluate(self, context: Sequence[str]) -> List[float]:
        self.contexts.append(list(context))
        feats = features(context)
        if self.decide is not None:
            outcome, prob = self.decide(feats)
        else:
            outcome, prob = self.decisions.get(int(feats["pos"]), self.default)
        return [prob, 1.0 - prob] if outcome == self.outcomes[0] else [1.0 - prob, prob]

    def best_outcome(self, probs: Sequence[float]) -> str:
        return self.outcomes[0] if probs[0] > probs[1] else self.outcomes[1]

    def index_of(self, outcome: str) -> int:
        return self.outcomes.index(outcome)


class FixedScanner:
    """Boundary scanner returning a fixed list of offsets."""

    def __init__(self, offsets: Sequence[int]) -> None:
        self.offsets = list(offsets)
        self.calls: List[str] = []

    def find_candidates(self, text: str) -> List[int]:
        self.calls.append(text)
        return list(self.offsets)


@pytest.fixture
def context_generator() -> RecordingContextGenerator:
    """Return a context generator that records its calls."""
    return RecordingContextGenerator()


@pytest.fixture
def make_classifier() -> Callable[..., ScriptedClassifier]:
    """Return a factory for scripted classifiers."""
    return ScriptedClassifier


@pytest.fixture
def make_scanner() -> Callable[[Sequence[int]], FixedScanner]:
    """Return a factory for fixed-offset scanners."""
    return FixedScanner


@pytest.fixture
def sentence_corpus() -> List[str]:
    """Return one-sentence-per-line training data with abbreviations."""
    return [
        "The dog barked loudly.",
        "Mr. Smith went home.",
        "He slept until noon.",
        "We saw Dr. Jones at the park.",
        "The weather was cold.",
        "",
        "Mr. Brown bought bread.",
        "It was fresh.",
        "They called Dr. Lee yesterday.",
        "She answered quickly.",
        "Where did the cat go?",
        "It ran away!",
        "",
        "The meeting ended early.",
        "Mr. White left first.",
        "Everyone else stayed.",
        "Ask Dr. Gray about it.",
        "Nobody knew the answer.",
    ]


@pytest.fixture
def token_corpus() -> List[str]:
    """Return <SPLIT>-annotated tokenizer training lines."""
    return [
        "The dog barked<SPLIT>.",
        "Hello<SPLIT>, world<SPLIT>!",
        "Where is the cat<SPLIT>?",
        "We ate apples<SPLIT>, pears<SPLIT>, and plums<SPLIT>.",
        "It was cold<SPLIT>, so we left<SPLIT>.",
        "Birds fly south<SPLIT>.",
        "Stop<SPLIT>!",
        "The meeting ended early<SPLIT>.",
        "Really<SPLIT>?",
        "Cats<SPLIT>, dogs<SPLIT>, and fish swim<SPLIT>.",
    ]
