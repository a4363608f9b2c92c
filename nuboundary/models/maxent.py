"""
Maximum entropy model module for nuboundary.

This module provides the log-linear classifier used by the detectors. A model
holds one weight per (predicate, outcome) pair seen in training plus the
weight of the GIS correction feature.
"""

import math
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from nuboundary.core.constants import MODEL_FORMAT, MODEL_FORMAT_VERSION
from nuboundary.core.exceptions import ModelFormatError
from nuboundary.core.parameters import TrainingParameters
from nuboundary.utils.compression import load_compressed_json, save_compressed_json


class MaxentModel:
    """
    A trained maximum entropy classifier.

    The probability of outcome ``y`` for a context ``x`` is proportional to
    ``exp(sum of weights of active (predicate, y) pairs + correction_param * slack)``
    where ``slack`` is ``correction_constant`` minus the number of active pairs.
    """
    def __init__(
        self,
        outcomes: Sequence[str],
        predicates: Mapping[str, Mapping[str, float]],
        correction_constant: int = 1,
        correction_param: float = 0.0,
        training: Optional[TrainingParameters] = None,
    ) -> None:
        """
        Initialize the model.

        Args:
            outcomes: The outcome labels, in distribution order
            predicates: Weights keyed by predicate and then by outcome label
            correction_constant: The maximum number of active features seen in training
            correction_param: The weight of the correction feature
            training: The parameters the model was trained with, if known
        """
        if not outcomes:
            raise ModelFormatError("A model needs at least one outcome")
        if len(set(outcomes)) != len(outcomes):
            raise ModelFormatError(f"Duplicate outcome labels: {list(outcomes)}")
        self._outcomes: Tuple[str, ...] = tuple(outcomes)
        self._outcome_index: Dict[str, int] = {o: i for i, o in enumerate(self._outcomes)}
        self._params: Dict[str, Tuple[Tuple[int, float], ...]] = {}
        for pred, weights in predicates.items():
            try:
                self._params[pred] = tuple(
                    (self._outcome_index[outcome], float(weight))
                    for outcome, weight in weights.items()
                )
            except KeyError as e:
                raise ModelFormatError(f"Predicate {pred!r} refers to unknown outcome {e}") from e
        self._correction_constant = max(1, int(correction_constant))
        self._correction_param = float(correction_param)
        self.training = training

    @property
    def outcomes(self) -> Tuple[str, ...]:
        return self._outcomes

    @property
    def num_predicates(self) -> int:
        return len(self._params)

    def evaluate(self, context: Sequence[str]) -> List[float]:
        """
        Evaluate a context.

        Predicates the model has never seen are ignored; repeated predicates
        count once.

        Args:
            context: The feature identifiers

        Returns:
            One probability per outcome, in the order of ``outcomes``
        """
        num_outcomes = len(self._outcomes)
        sums = [0.0] * num_outcomes
        active = [0] * num_outcomes
        for pred in dict.fromkeys(context):
            pairs = self._params.get(pred)
            if pairs is None:
                continue
            for oid, weight in pairs:
                sums[oid] += weight
                active[oid] += 1

        scores = [
            sums[oid] + (self._correction_constant - active[oid]) * self._correction_param
            for oid in range(num_outcomes)
        ]
        top = max(scores)
        exps = [math.exp(score - top) for score in scores]
        total = sum(exps)
        return [e / total for e in exps]

    def best_outcome(self, probs: Sequence[float]) -> str:
        """Return the label with the highest probability; ties go to the earlier outcome."""
        best = 0
        for i in range(1, len(probs)):
            if probs[i] > probs[best]:
                best = i
        return self._outcomes[best]

    def index_of(self, outcome: str) -> int:
        try:
            return self._outcome_index[outcome]
        except KeyError:
            raise ValueError(f"Unknown outcome {outcome!r}; model outcomes are {list(self._outcomes)}") from None

    def to_json(self) -> Dict[str, Any]:
        """Convert the model to a JSON-serializable dictionary."""
        return {
            "format": MODEL_FORMAT,
            "version": MODEL_FORMAT_VERSION,
            "outcomes": list(self._outcomes),
            "correction_constant": self._correction_constant,
            "correction_param": self._correction_param,
            "predicates": {
                pred: {self._outcomes[oid]: weight for oid, weight in pairs}
                for pred, pairs in sorted(self._params.items())
            },
            "training": self.training.to_json() if self.training else None,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "MaxentModel":
        """
        Create a MaxentModel from a JSON dictionary.

        Raises:
            ModelFormatError: If the dictionary is not a supported model
        """
        if data.get("format") != MODEL_FORMAT:
            raise ModelFormatError(f"Not a {MODEL_FORMAT} model (format={data.get('format')!r})")
        if data.get("version") != MODEL_FORMAT_VERSION:
            raise ModelFormatError(f"Unsupported model version {data.get('version')!r}")
        try:
            training = data.get("training")
            return cls(
                outcomes=data["outcomes"],
                predicates=data["predicates"],
                correction_constant=data["correction_constant"],
                correction_param=data["correction_param"],
                training=TrainingParameters.from_json(training) if training else None,
            )
        except KeyError as e:
            raise ModelFormatError(f"Model is missing field {e}") from e

    def save(self, file_path: Union[str, Path], compress: bool = True, compression_level: int = 1) -> Path:
        """
        Save the model to a JSON file, optionally with LZMA compression.

        Args:
            file_path: The path to save the file to
            compress: Whether to compress the file using LZMA (default: True)
            compression_level: LZMA compression level (0-9), lower is faster but less compressed

        Returns:
            The path written
        """
        return save_compressed_json(
            self.to_json(),
            file_path,
            level=compression_level,
            use_compression=compress,
        )

    @classmethod
    def load(cls, file_path: Union[str, Path]) -> "MaxentModel":
        """Load a model from a JSON file, which may be compressed with LZMA."""
        return cls.from_json(load_compressed_json(file_path))

    def __repr__(self) -> str:
        return f"MaxentModel(outcomes={list(self._outcomes)}, predicates={self.num_predicates})"
