"""Default feature context generators and boundary scanner."""

from nuboundary.context.sentence import DefaultEndOfSentenceScanner, SentenceContextGenerator
from nuboundary.context.token import TokenContextGenerator, char_class

__all__ = [
    "DefaultEndOfSentenceScanner",
    "SentenceContextGenerator",
    "TokenContextGenerator",
    "char_class",
]
