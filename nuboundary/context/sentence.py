"""
Sentence context module for nuboundary.

This module provides the default end-of-sentence scanner and the feature
context generator used by the sentence detector.
"""

from typing import List, Tuple

from nuboundary.core.constants import DEFAULT_EOS_CHARACTERS
from nuboundary.core.spans import first_non_whitespace, first_whitespace


class DefaultEndOfSentenceScanner:
    """
    Finds every occurrence of an end-of-sentence character.

    The offsets are returned in ascending order, one per character, so an
    ellipsis yields three contiguous candidates.
    """
    def __init__(self, eos_characters: str = DEFAULT_EOS_CHARACTERS) -> None:
        if not eos_characters:
            raise ValueError("At least one end-of-sentence character is required")
        self.eos_characters = frozenset(eos_characters)

    def find_candidates(self, text: str) -> List[int]:
        eos = self.eos_characters
        return [i for i, char in enumerate(text) if char in eos]


def _word_before(text: str, end: int) -> Tuple[int, int]:
    """Return the bounds of the whitespace-delimited word ending right before ``end``."""
    pos = end
    while pos > 0 and text[pos - 1].isspace():
        pos -= 1
    word_end = pos
    while pos > 0 and not text[pos - 1].isspace():
        pos -= 1
    return pos, word_end


class SentenceContextGenerator:
    """
    Builds the features for a candidate sentence end.

    For the candidate at ``position`` the features describe:
    - the candidate character itself
    - the prefix and suffix of the word containing it
    - the previous and following words
    - capitalization and digit flags of those strings
    """
    def __init__(self, eos_characters: str = DEFAULT_EOS_CHARACTERS) -> None:
        self.eos_characters = frozenset(eos_characters)

    def get_context(self, text: str, position: int) -> List[str]:
        """
        Get the feature context for a candidate sentence end.

        Args:
            text: The full text
            position: Offset of the end-of-sentence character

        Returns:
            The feature identifiers
        """
        word_start, _ = _word_before(text, position + 1)
        # A prefix never reaches past the candidate itself
        word_start = min(word_start, position)
        word_end = first_whitespace(text, position + 1)
        prefix = text[word_start:position]
        suffix = text[position + 1 : word_end]

        prev_start, prev_end = _word_before(text, word_start)
        previous = text[prev_start:prev_end]

        next_start = first_non_whitespace(text, word_end)
        next_end = first_whitespace(text, next_start)
        following = text[next_start:next_end]

        features = [f"eos={text[position]}", f"x={prefix}", f"s={suffix}"]
        features.extend(self._word_features("x", prefix))
        if not suffix:
            features.append("snull")
        elif all(c in self.eos_characters or not c.isalnum() for c in suffix):
            features.append("spunct")

        if previous:
            features.append(f"v={previous}")
            features.extend(self._word_features("v", previous))
        else:
            features.append("vnull")

        if following:
            features.append(f"n={following}")
            features.extend(self._word_features("n", following))
        else:
            features.append("end")
        return features

    @staticmethod
    def _word_features(key: str, word: str) -> List[str]:
        if not word:
            return [f"{key}null"]
        features = []
        first = word[0]
        if first.isupper():
            features.append(f"{key}cap")
        elif first.islower():
            features.append(f"{key}low")
        elif first.isdigit():
            features.append(f"{key}num")
        elif not first.isalnum():
            features.append(f"{key}punct")
        if "." in word[:-1]:
            features.append(f"{key}dots")
        if len(word) == 1:
            features.append(f"{key}single")
        return features
