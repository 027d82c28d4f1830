# SPDX-License-Identifier: MIT
"""
The emoji index: alias and tag maps plus the trie of emoji sequences.
"""

from . import logger
from .emoji import Emoji
from .loader import LoaderError, load_emojis_from_path
from .matcher import is_emoji_sequence
from .trie import Trie, TrieError, build

from os import PathLike
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Set, Tuple, Union


class InitializationError(Exception):
    """Raised when the emoji index cannot be built. The index is unusable."""


def trim_alias(alias: str) -> str:
    """Strip at most one leading and one trailing colon from an alias."""
    if alias.startswith(":"):
        alias = alias[1:]
    if alias.endswith(":"):
        alias = alias[:-1]
    return alias


class EmojiIndex:
    """
    Read-only lookup structure over a batch of emoji.

    Build it with :func:`build_index` or :func:`load_index` once at startup and
    share it; nothing in it changes afterwards, so it is safe to query from
    any number of threads.
    """

    def __init__(
        self,
        trie: Trie,
        emojis: Tuple[Emoji, ...],
        by_alias: Mapping[str, Emoji],
        by_tag: Mapping[str, FrozenSet[Emoji]],
    ):
        self.trie = trie
        self._emojis = emojis
        self._by_alias = by_alias
        self._by_tag = by_tag

    def __len__(self) -> int:
        return len(self._emojis)

    def __repr__(self) -> str:
        return f"<EmojiIndex: {len(self)} emoji, {len(self._by_tag)} tags>"

    def get_for_alias(self, alias: Optional[str]) -> Optional[Emoji]:
        """
        Get the emoji for an alias. ":smile:", ":smile", "smile:" and "smile"
        are equivalent.

        :returns: the emoji, or None if the alias is unknown.
        """
        if alias is None:
            return None
        return self._by_alias.get(trim_alias(alias))

    def get_for_tag(self, tag: Optional[str]) -> FrozenSet[Emoji]:
        """
        Get all emoji with the given tag.

        :returns: the emoji, or an empty set if the tag is unknown.
        """
        if tag is None:
            return frozenset()
        return self._by_tag.get(tag, frozenset())

    def get_all(self) -> Tuple[Emoji, ...]:
        """Get every emoji, in dataset order."""
        return self._emojis

    def get_all_tags(self) -> FrozenSet[str]:
        return frozenset(self._by_tag)

    def is_emoji(self, text: Optional[str]) -> bool:
        """Check if the text is made up only of emoji sequences."""
        return is_emoji_sequence(self.trie, text)


def build_index(records: Iterable[Emoji]) -> EmojiIndex:
    """
    Build an EmojiIndex from a batch of emoji records.

    :raises InitializationError: if the trie cannot be built.
    """
    emojis = tuple(records)

    try:
        trie = build(emojis)
    except TrieError as e:
        raise InitializationError(str(e)) from e

    by_alias: Dict[str, Emoji] = {}
    by_tag: Dict[str, Set[Emoji]] = {}
    for emoji in emojis:
        for tag in emoji.tags:
            if tag in by_tag:
                by_tag[tag].add(emoji)
            else:
                by_tag[tag] = {emoji}
        for alias in emoji.aliases:
            if alias in by_alias and by_alias[alias] != emoji:
                logger.debug(f"Alias {alias} is shared, using {emoji.unicode}")
            by_alias[alias] = emoji

    logger.debug(f"Indexed {len(by_alias)} aliases and {len(by_tag)} tags")

    return EmojiIndex(
        trie=trie,
        emojis=emojis,
        by_alias=MappingProxyType(by_alias),
        by_tag=MappingProxyType({tag: frozenset(e) for tag, e in by_tag.items()}),
    )


def load_index(path: Optional[Union[str, PathLike]] = None) -> EmojiIndex:
    """
    Load the emoji dataset and build the index from it.

    :param path: dataset file to load. Defaults to the EMOJILOOKUP_DATASET
        environment variable, then to the bundled dataset.
    :raises InitializationError: if the dataset cannot be loaded or indexed.
    """
    try:
        emojis = load_emojis_from_path(path)
    except LoaderError as e:
        raise InitializationError(str(e)) from e

    return build_index(emojis)
