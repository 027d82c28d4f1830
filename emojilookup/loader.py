# SPDX-License-Identifier: MIT
"""
Loading of the emoji dataset.

The dataset is a JSON array of objects in the emoji-java format:

    {
        "emoji": "😄",
        "description": "smiling face with open mouth and smiling eyes",
        "supports_fitzpatrick": false,
        "aliases": ["smile"],
        "tags": ["happy", "joy", "pleased"]
    }
"""

from . import logger
from .emoji import Emoji

import json
import os
from os import PathLike
from pathlib import Path
from typing import IO, Any, List, Optional, Union

#: Path of the dataset shipped with the package.
BUNDLED_DATASET = Path(__file__).parent / "data" / "emojis.json"

#: Environment variable that overrides the dataset path.
DATASET_ENV = "EMOJILOOKUP_DATASET"


class LoaderError(Exception):
    """Raised when the emoji dataset cannot be read or is malformed."""


def dataset_path(override: Optional[Union[str, PathLike]] = None) -> Path:
    """
    Resolve the path of the dataset to load.

    An explicit override wins over the EMOJILOOKUP_DATASET environment
    variable, which wins over the bundled dataset.
    """
    if override:
        return Path(override)
    if os.environ.get(DATASET_ENV):
        return Path(os.environ[DATASET_ENV])
    return BUNDLED_DATASET


def _string_set(obj: dict, key: str, index: int) -> frozenset:
    value = obj.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise LoaderError(f"Entry {index}: {key} must be a list of strings")
    return frozenset(value)


def parse_emoji(obj: Any, index: int = 0) -> Emoji:
    """
    Create an Emoji from one entry of the dataset.

    :raises LoaderError: if the entry is malformed.
    """
    if not isinstance(obj, dict):
        raise LoaderError(f"Entry {index}: expected an object, got {type(obj).__name__}")

    # Older dataset versions name the key "emojiChar".
    unicode = obj.get("emoji", obj.get("emojiChar"))
    if not unicode or not isinstance(unicode, str):
        raise LoaderError(f"Entry {index}: missing emoji")

    description = obj.get("description") or ""
    if not isinstance(description, str):
        raise LoaderError(f"Entry {index}: description must be a string")

    supports_fitzpatrick = obj.get("supports_fitzpatrick", False)
    if not isinstance(supports_fitzpatrick, bool):
        raise LoaderError(f"Entry {index}: supports_fitzpatrick must be true or false")

    return Emoji(
        unicode=unicode,
        aliases=_string_set(obj, "aliases", index),
        tags=_string_set(obj, "tags", index),
        description=description,
        supports_fitzpatrick=supports_fitzpatrick,
    )


def parse_emojis(data: Any) -> List[Emoji]:
    """
    Create Emoji records from a decoded dataset document.

    :raises LoaderError: if the document is not a list or an entry is malformed.
    """
    if not isinstance(data, list):
        raise LoaderError("Emoji dataset must be a JSON array")
    return [parse_emoji(obj, index) for index, obj in enumerate(data)]


def load_emojis(stream: IO) -> List[Emoji]:
    """
    Load emoji records from an open text or binary stream.

    :raises LoaderError: if the stream does not hold a valid dataset.
    """
    try:
        data = json.load(stream)
    except (ValueError, UnicodeDecodeError) as e:
        raise LoaderError(f"Invalid emoji dataset: {e}") from e

    emojis = parse_emojis(data)
    logger.debug(f"Loaded {len(emojis)} emoji")
    return emojis


def load_emojis_from_path(path: Optional[Union[str, PathLike]] = None) -> List[Emoji]:
    """
    Load emoji records from a dataset file.

    :param path: path to the file. Defaults to :func:`dataset_path`.
    :raises LoaderError: if the file cannot be read or is malformed.
    """
    path = dataset_path(path)
    logger.debug(f"Loading emoji dataset from {path}")
    try:
        with open(path, "rb") as f:
            return load_emojis(f)
    except OSError as e:
        raise LoaderError(f"Cannot read emoji dataset {path}: {e}") from e
