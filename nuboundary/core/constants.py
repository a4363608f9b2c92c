"""
Constants module for nuboundary.

This module holds the outcome labels, default character sets and training
defaults shared by the detectors and trainers.
"""

import sys

# Outcome labels shared by both pipelines
SPLIT = "T"
NO_SPLIT = "F"
OUTCOMES = (SPLIT, NO_SPLIT)

# Characters that may end a sentence
DEFAULT_EOS_CHARACTERS = ".!?"

# Marker used in tokenizer training data for a split inside a whitespace chunk
SPLIT_MARKER = "<SPLIT>"

# Training defaults
SENTENCE_ITERATIONS = 100
SENTENCE_CUTOFF = 5
TOKEN_ITERATIONS = 100
TOKEN_CUTOFF = 10

# Model file format
MODEL_FORMAT = "nuboundary-maxent"
MODEL_FORMAT_VERSION = 1

# Smallest probability reported for a unit
MIN_PROBABILITY = sys.float_info.min
