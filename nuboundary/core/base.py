"""
Base module for nuboundary.

This module provides the base class shared by the maxent sentence detector
and the maxent tokenizer.
"""

from typing import Any, Dict, Tuple

from nuboundary.core.constants import SPLIT
from nuboundary.core.interfaces import Classifier, ContextGenerator


class MaxentDetectorBase:
    """
    Base class for the boundary detectors.

    This class holds the classifier and context generator collaborators and
    turns a feature context into an outcome decision. Collaborators are set
    once at construction and never mutated.
    """
    def __init__(self, model: Classifier, context_generator: ContextGenerator,
                 accept_outcome: str = SPLIT) -> None:
        """
        Initialize the detector.

        Args:
            model: The classifier used to score candidate boundaries
            context_generator: Builds feature contexts for the classifier
            accept_outcome: The classifier label that means "boundary here"
        """
        self._model = model
        self._cgen = context_generator
        self._accept_outcome = accept_outcome

    @property
    def model(self) -> Classifier:
        return self._model

    @property
    def context_generator(self) -> ContextGenerator:
        return self._cgen

    @property
    def accept_outcome(self) -> str:
        return self._accept_outcome

    def _decide(self, text: str, position: int) -> Tuple[bool, float]:
        """
        Score one candidate position.

        Args:
            text: The text handed to the context generator
            position: The position within ``text``

        Returns:
            Whether the best outcome is the accept outcome, and that outcome's probability
        """
        context = self._cgen.get_context(text, position)
        probs = self._model.evaluate(context)
        best = self._model.best_outcome(probs)
        prob = probs[self._model.index_of(best)]
        return best == self._accept_outcome, prob

    def _model_json(self) -> Dict[str, Any]:
        to_json = getattr(self._model, "to_json", None)
        if to_json is None:
            raise TypeError(f"{type(self._model).__name__} cannot be serialized")
        return to_json()
