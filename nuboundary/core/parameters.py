"""
TrainingParameters module - Contains the settings used to train maxent models.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from nuboundary.core.constants import (
    SENTENCE_CUTOFF,
    SENTENCE_ITERATIONS,
    TOKEN_CUTOFF,
    TOKEN_ITERATIONS,
)
from nuboundary.core.exceptions import TrainingError


@dataclass
class TrainingParameters:
    """
    Stores the settings for GIS training.

    This includes:
    - The number of scaling iterations
    - The predicate count cutoff (predicates seen fewer times are dropped)
    - Whether to report progress while training
    """
    iterations: int = SENTENCE_ITERATIONS
    cutoff: int = SENTENCE_CUTOFF
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.iterations < 1:
            raise TrainingError(f"iterations must be at least 1, got {self.iterations}")
        if self.cutoff < 0:
            raise TrainingError(f"cutoff must not be negative, got {self.cutoff}")

    @classmethod
    def for_sentences(cls, **overrides: Any) -> "TrainingParameters":
        """Defaults used for sentence detection models."""
        return cls(**{"iterations": SENTENCE_ITERATIONS, "cutoff": SENTENCE_CUTOFF, **overrides})

    @classmethod
    def for_tokens(cls, **overrides: Any) -> "TrainingParameters":
        """Defaults used for tokenizer models."""
        return cls(**{"iterations": TOKEN_ITERATIONS, "cutoff": TOKEN_CUTOFF, **overrides})

    def to_json(self) -> Dict[str, Any]:
        """Convert parameters to a JSON-serializable dictionary."""
        data = asdict(self)
        # Progress reporting is not a property of the trained model
        data.pop("verbose")
        return data

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "TrainingParameters":
        """Create a TrainingParameters instance from a JSON dictionary."""
        return cls(
            iterations=int(data.get("iterations", SENTENCE_ITERATIONS)),
            cutoff=int(data.get("cutoff", SENTENCE_CUTOFF)),
        )
