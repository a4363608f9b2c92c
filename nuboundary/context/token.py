"""
Token context module for nuboundary.

This module provides the feature context generator used by the tokenizer to
decide whether a whitespace-delimited chunk splits at a given position.
"""

from typing import List


def char_class(char: str) -> str:
    """
    Get a coarse class for a character.

    Args:
        char: A single character, or an empty string for "no character"

    Returns:
        "none", "upper", "lower", "digit", "alpha", "space" or "punct"
    """
    if not char:
        return "none"
    if char.isupper():
        return "upper"
    if char.islower():
        return "lower"
    if char.isdigit():
        return "digit"
    if char.isalpha():
        return "alpha"
    if char.isspace():
        return "space"
    return "punct"


class TokenContextGenerator:
    """
    Builds the features for a split position inside a token.

    The position ``i`` splits ``token`` into ``token[:i]`` and ``token[i:]``.
    """
    def __init__(self, affix_length: int = 4) -> None:
        self.affix_length = affix_length

    def get_context(self, text: str, position: int) -> List[str]:
        prefix = text[:position]
        suffix = text[position:]
        p1 = prefix[-1:]
        p2 = prefix[-2:]
        f1 = suffix[:1]
        f2 = suffix[:2]
        p1_class = char_class(p1)
        f1_class = char_class(f1)

        features = [
            f"p={prefix[-self.affix_length:]}",
            f"s={suffix[: self.affix_length]}",
            f"p1={p1}",
            f"p2={p2}",
            f"f1={f1}",
            f"f2={f2}",
            f"p1c={p1_class}",
            f"f1c={f1_class}",
            f"p1c_f1c={p1_class}_{f1_class}",
            f"p1_f1={p1}{f1}",
        ]
        if len(prefix) == 1:
            features.append("pbok")
        if len(suffix) == 1:
            features.append("feok")
        if p1_class == f1_class:
            features.append("same")
        return features
