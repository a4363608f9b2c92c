"""
GIS trainer module for nuboundary.

This module estimates maximum entropy model weights from training events
using Generalized Iterative Scaling.
"""

import logging
import math
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from tqdm import tqdm

from nuboundary.core.exceptions import TrainingError
from nuboundary.core.parameters import TrainingParameters
from nuboundary.models.maxent import MaxentModel
from nuboundary.trainers.events import Event

logger = logging.getLogger(__name__)


class GISTrainer:
    """
    Trains a MaxentModel with Generalized Iterative Scaling.

    Predicates occurring in fewer than ``cutoff`` events are dropped before
    training. Identical events are counted once with a multiplicity, which
    keeps each iteration proportional to the number of distinct events.
    """
    def __init__(self, parameters: Optional[TrainingParameters] = None) -> None:
        self.parameters = parameters or TrainingParameters()

    def train(self, events: Iterable[Event]) -> MaxentModel:
        """
        Train a model.

        Args:
            events: The training events

        Returns:
            The trained model

        Raises:
            TrainingError: If there are no events or no predicate survives the cutoff
        """
        params = self.parameters
        events = list(events)
        if not events:
            raise TrainingError("No training events")

        pred_counts = Counter(pred for event in events for pred in set(event.context))
        predicates = sorted(p for p, n in pred_counts.items() if n >= params.cutoff)
        if not predicates:
            raise TrainingError(
                f"No predicate occurs at least {params.cutoff} times in {len(events)} events"
            )
        outcomes = sorted({event.outcome for event in events})
        pred_index = {p: i for i, p in enumerate(predicates)}
        outcome_index = {o: i for i, o in enumerate(outcomes)}

        compressed: Counter = Counter()
        for event in events:
            pids = tuple(sorted({pred_index[p] for p in event.context if p in pred_index}))
            compressed[(outcome_index[event.outcome], pids)] += 1
        logger.info(
            "Training on %d events (%d distinct), %d predicates, %d outcomes",
            len(events), len(compressed), len(predicates), len(outcomes),
        )

        correction_constant = max(1, max(len(pids) for _, pids in compressed))
        observed: Dict[Tuple[int, int], float] = defaultdict(float)
        correction_observed = 0.0
        for (oid, pids), n in compressed.items():
            for pid in pids:
                observed[(pid, oid)] += n
            correction_observed += n * (correction_constant - len(pids))

        # Only (predicate, outcome) pairs seen in training get a weight
        weights: Dict[Tuple[int, int], float] = {key: 0.0 for key in observed}
        pred_outcomes: List[List[int]] = [[] for _ in predicates]
        for pid, oid in sorted(weights):
            pred_outcomes[pid].append(oid)
        correction_param = 0.0

        iterations = tqdm(
            range(params.iterations),
            desc="GIS",
            unit="iter",
            disable=not params.verbose,
        )
        for iteration in iterations:
            expected: Dict[Tuple[int, int], float] = defaultdict(float)
            correction_expected = 0.0
            log_likelihood = 0.0
            for (oid, pids), n in compressed.items():
                probs = self._eval(pids, weights, pred_outcomes, len(outcomes),
                                   correction_constant, correction_param)
                log_likelihood += n * math.log(probs[oid])
                active = [0] * len(outcomes)
                for pid in pids:
                    for o in pred_outcomes[pid]:
                        expected[(pid, o)] += n * probs[o]
                        active[o] += 1
                for o, prob in enumerate(probs):
                    correction_expected += n * prob * (correction_constant - active[o])

            for key in weights:
                weights[key] += math.log(observed[key] / expected[key]) / correction_constant
            if correction_observed > 0 and correction_expected > 0:
                correction_param += math.log(correction_observed / correction_expected) / correction_constant

            if params.verbose:
                iterations.set_postfix(loglik=f"{log_likelihood:.4f}")
            logger.debug("Iteration %d: log-likelihood %.6f", iteration + 1, log_likelihood)

        named = {
            predicates[pid]: {outcomes[o]: weights[(pid, o)] for o in pred_outcomes[pid]}
            for pid in range(len(predicates))
        }
        return MaxentModel(
            outcomes=outcomes,
            predicates=named,
            correction_constant=correction_constant,
            correction_param=correction_param,
            training=params,
        )

    @staticmethod
    def _eval(
        pids: Tuple[int, ...],
        weights: Dict[Tuple[int, int], float],
        pred_outcomes: List[List[int]],
        num_outcomes: int,
        correction_constant: int,
        correction_param: float,
    ) -> List[float]:
        sums = [0.0] * num_outcomes
        active = [0] * num_outcomes
        for pid in pids:
            for o in pred_outcomes[pid]:
                sums[o] += weights[(pid, o)]
                active[o] += 1
        scores = [
            sums[o] + (correction_constant - active[o]) * correction_param
            for o in range(num_outcomes)
        ]
        top = max(scores)
        exps = [math.exp(s - top) for s in scores]
        total = sum(exps)
        return [e / total for e in exps]


def train_model(events: Iterable[Event], iterations: int = 100, cutoff: int = 5,
                verbose: bool = False) -> MaxentModel:
    """Train a maxent model from events with the given settings."""
    parameters = TrainingParameters(iterations=iterations, cutoff=cutoff, verbose=verbose)
    return GISTrainer(parameters).train(events)
