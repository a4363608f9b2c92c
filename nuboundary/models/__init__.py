"""
Model package for nuboundary.

This module provides the maxent classifier and helpers for loading trained
models from disk.
"""

from pathlib import Path
from typing import Union

from nuboundary.models.maxent import MaxentModel


def load_model(file_path: Union[str, Path]) -> MaxentModel:
    """
    Load a trained model.

    Args:
        file_path: Path to a ``.json`` or ``.json.xz`` model file

    Returns:
        MaxentModel: The loaded model
    """
    return MaxentModel.load(file_path)


__all__ = ["MaxentModel", "load_model"]
