"""
Compression utilities for nuboundary.

This module provides functions for writing and reading model files as plain
or LZMA-compressed JSON.
"""

import json
import lzma
from pathlib import Path
from typing import Any, Dict, Union

from nuboundary.core.exceptions import ModelFormatError


def model_path_for(file_path: Union[str, Path], use_compression: bool = True) -> Path:
    """
    Normalize the extension of a model path.

    Args:
        file_path: The requested path
        use_compression: Whether the file will be LZMA compressed

    Returns:
        The path ending in ``.json.xz`` when compressed, ``.json`` otherwise
    """
    name = str(file_path)
    if use_compression and not name.endswith(".json.xz"):
        name = name + ".xz" if name.endswith(".json") else name + ".json.xz"
    elif not use_compression and not name.endswith(".json"):
        name = name + ".json"
    return Path(name)


def save_compressed_json(data: Dict[str, Any], file_path: Union[str, Path],
                         level: int = 1, use_compression: bool = True) -> Path:
    """
    Save data as JSON, optionally compressed with LZMA.

    Args:
        data: The data to save
        file_path: The path to save the file to
        level: Compression level (0-9), lower is faster but less compressed
        use_compression: Whether to use compression (if False, saves as regular JSON)

    Returns:
        The path actually written, with its extension normalized
    """
    path = model_path_for(file_path, use_compression)
    json_str = json.dumps(data, ensure_ascii=False, indent=2)

    if use_compression:
        filters = [{"id": lzma.FILTER_LZMA2, "preset": level}]
        with lzma.open(path, "wt", encoding="utf-8", format=lzma.FORMAT_XZ, filters=filters) as f:
            f.write(json_str)
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(json_str)
    return path


def load_compressed_json(file_path: Union[str, Path], encoding: str = "utf-8") -> Dict[str, Any]:
    """
    Load data from a JSON file, which may be compressed with LZMA.

    Args:
        file_path: The path to the file
        encoding: The text encoding to use

    Returns:
        The loaded data

    Raises:
        FileNotFoundError: If the file does not exist
        ModelFormatError: If the file holds neither JSON nor LZMA-compressed JSON
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Model file not found: {path}")

    try:
        if path.name.endswith(".xz"):
            with lzma.open(path, "rt", encoding=encoding) as f:
                data = json.load(f)
        else:
            # Compressed files do not always carry the .xz extension
            try:
                with lzma.open(path, "rt", encoding=encoding) as f:
                    data = json.load(f)
            except lzma.LZMAError:
                with open(path, "r", encoding=encoding) as f:
                    data = json.load(f)
    except (lzma.LZMAError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ModelFormatError(f"Cannot read model file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ModelFormatError(f"Model file {path} does not contain a JSON object")
    return data
