"""
Tokenizer module for nuboundary.

This module provides the maxent tokenizer, which splits whitespace-delimited
chunks of text further wherever its model predicts a token boundary.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from nuboundary.context.token import TokenContextGenerator
from nuboundary.core.base import MaxentDetectorBase
from nuboundary.core.constants import MIN_PROBABILITY, SPLIT
from nuboundary.core.interfaces import Classifier, ContextGenerator
from nuboundary.core.parameters import TrainingParameters
from nuboundary.core.spans import DetectionResult, Span, whitespace_split
from nuboundary.models.maxent import MaxentModel
from nuboundary.trainers.events import TokenEventStream
from nuboundary.trainers.gis import GISTrainer
from nuboundary.utils.compression import save_compressed_json

logger = logging.getLogger(__name__)


class MaxentTokenizer(MaxentDetectorBase):
    """
    Tokenizer using a maximum entropy model.

    Text is first split on whitespace; every chunk of two or more characters
    is then scored at each interior offset. With the alphanumeric
    optimization enabled, chunks made only of letters and digits are kept
    whole without consulting the model.
    """
    def __init__(
        self,
        model: Classifier,
        context_generator: Optional[ContextGenerator] = None,
        alpha_numeric_optimization: bool = False,
        accept_outcome: str = SPLIT,
    ) -> None:
        """
        Initialize the tokenizer.

        Args:
            model: The classifier that decides split positions
            context_generator: Feature generator (default: TokenContextGenerator)
            alpha_numeric_optimization: Skip purely alphanumeric chunks
            accept_outcome: The classifier label that means "split here"
        """
        super().__init__(model, context_generator or TokenContextGenerator(), accept_outcome)
        self.alpha_numeric_optimization = alpha_numeric_optimization

    def tokenize_pos(self, text: str) -> DetectionResult[Span]:
        """
        Tokenize text into spans.

        Args:
            text: The text to tokenize

        Returns:
            Token spans in order, with the probability of each token
        """
        spans: List[Span] = []
        probs: List[float] = []
        evaluated = 0
        for chunk in whitespace_split(text):
            if len(chunk) < 2:
                spans.append(chunk)
                probs.append(1.0)
                continue

            tok = chunk.covered_text(text)
            if self.alpha_numeric_optimization and tok.isalnum():
                spans.append(chunk)
                probs.append(1.0)
                continue

            start = chunk.start
            token_prob = 1.0
            for j in range(chunk.start + 1, chunk.end):
                is_split, prob = self._decide(tok, j - chunk.start)
                evaluated += 1
                # floor the product so very long chunks never reach 0.0
                token_prob = max(token_prob * prob, MIN_PROBABILITY)
                if is_split:
                    spans.append(Span(start, j))
                    probs.append(token_prob)
                    start = j
                    token_prob = 1.0
            # the end of a whitespace chunk always ends a token
            spans.append(Span(start, chunk.end))
            probs.append(token_prob)

        logger.debug("%d tokens, %d split decisions", len(spans), evaluated)
        return DetectionResult(spans, probs)

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text.

        Args:
            text: The text to tokenize

        Returns:
            The token strings
        """
        return [span.covered_text(text) for span in self.tokenize_pos(text).units]

    def tokenize_with_spans(self, text: str) -> List[Tuple[str, Tuple[int, int]]]:
        """Tokenize text, returning (token, (start, end)) tuples."""
        return [(span.covered_text(text), span.as_tuple()) for span in self.tokenize_pos(text).units]

    @classmethod
    def train(
        cls,
        lines: Iterable[str],
        parameters: Optional[TrainingParameters] = None,
        context_generator: Optional[ContextGenerator] = None,
        alpha_numeric_optimization: bool = False,
    ) -> "MaxentTokenizer":
        """
        Train a tokenizer from ``<SPLIT>``-annotated lines.

        Args:
            lines: Whitespace-separated text where ``<SPLIT>`` marks extra token
                boundaries inside a chunk
            parameters: GIS settings (default: TrainingParameters.for_tokens())
            context_generator: Feature generator used for training and tokenizing
            alpha_numeric_optimization: Skip alphanumeric chunks in training and
                enable the optimization on the returned tokenizer

        Returns:
            A tokenizer using the trained model
        """
        context_generator = context_generator or TokenContextGenerator()
        events = TokenEventStream(
            lines,
            context_generator,
            skip_alpha_numeric=alpha_numeric_optimization,
        )
        model = GISTrainer(parameters or TrainingParameters.for_tokens()).train(events)
        return cls(model, context_generator, alpha_numeric_optimization)

    def save(self, file_path: Union[str, Path], compress: bool = True, compression_level: int = 1) -> Path:
        """Save the tokenizer's model to a JSON file, optionally with LZMA compression."""
        return save_compressed_json(
            self._model_json(),
            file_path,
            level=compression_level,
            use_compression=compress,
        )

    @classmethod
    def load(cls, file_path: Union[str, Path], **kwargs) -> "MaxentTokenizer":
        """
        Load a tokenizer from a model file, which may be compressed with LZMA.

        Args:
            file_path: The path to load the file from
            **kwargs: Passed on to the constructor (context_generator, alpha_numeric_optimization)

        Returns:
            A new MaxentTokenizer instance
        """
        return cls(MaxentModel.load(file_path), **kwargs)
