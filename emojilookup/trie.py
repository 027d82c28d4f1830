# SPDX-License-Identifier: MIT
"""
Prefix tree over Unicode code point sequences.

Nodes live in an arena owned by the Trie and are referred to by integer
handles. Each node has a mapping from code point to child handle and an
end-of-sequence flag. Handle 0 is the root and stands for the empty sequence.
"""

from . import logger
from .emoji import Emoji

from typing import Dict, Iterable, List, Union

MAX_CODE_POINT = 0x10FFFF

Sequence = Union[str, Iterable[int]]


class TrieError(Exception):
    """Base class for trie exceptions."""


class EmptySequenceError(TrieError, ValueError):
    """Raised when inserting a sequence with no code points."""


class NodeNotFound(TrieError, KeyError):
    """Raised when a node has no child for the requested code point."""


class TrieFrozenError(TrieError, RuntimeError):
    """Raised when inserting into a trie after the load phase has ended."""


class TrieBuildError(TrieError):
    """Raised when a trie cannot be built from a batch of emoji records."""


def _code_points(sequence: Sequence) -> List[int]:
    if isinstance(sequence, str):
        return [ord(char) for char in sequence]
    return list(sequence)


class Trie:
    """
    Append-only prefix tree keyed by code points.

    Sequences are inserted during the load phase; once :meth:`freeze` has been
    called the trie is read-only and may be shared between threads.
    """

    ROOT = 0

    def __init__(self):
        self._children: List[Dict[int, int]] = [{}]
        self._ends: List[bool] = [False]
        self._size = 0
        self._frozen = False

    @property
    def root(self) -> int:
        return self.ROOT

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def node_count(self) -> int:
        """Number of nodes, including the root."""
        return len(self._children)

    def __len__(self) -> int:
        """Number of distinct sequences stored in the trie."""
        return self._size

    def freeze(self):
        """End the load phase. Further insertions raise TrieFrozenError."""
        self._frozen = True

    def insert(self, sequence: Sequence):
        """
        Insert a code point sequence.

        :param sequence: a string or an iterable of integer code points.
        :raises EmptySequenceError: if the sequence is empty.
        :raises TrieError: if a code point is out of the Unicode range.
        :raises TrieFrozenError: if the trie has been frozen.
        """
        if self._frozen:
            raise TrieFrozenError("Cannot insert into a frozen trie")

        code_points = _code_points(sequence)
        if not code_points:
            raise EmptySequenceError("Cannot insert an empty sequence")

        for code_point in code_points:
            if not isinstance(code_point, int) or not 0 <= code_point <= MAX_CODE_POINT:
                raise TrieError(f"Not a valid code point: {code_point!r}")

        node = self.ROOT
        for code_point in code_points:
            children = self._children[node]
            if code_point not in children:
                children[code_point] = len(self._children)
                self._children.append({})
                self._ends.append(False)
            node = children[code_point]

        if not self._ends[node]:
            self._ends[node] = True
            self._size += 1

    def has_child(self, node: int, code_point: int) -> bool:
        return code_point in self._children[node]

    def child(self, node: int, code_point: int) -> int:
        """
        Get the handle of the child of ``node`` reached through ``code_point``.

        :raises NodeNotFound: if there is no such child.
        """
        try:
            return self._children[node][code_point]
        except KeyError:
            raise NodeNotFound(code_point) from None

    def is_terminal(self, node: int) -> bool:
        """Check if a complete sequence ends at this node."""
        return self._ends[node]

    def contains(self, sequence: Sequence) -> bool:
        """Check if exactly this sequence was inserted."""
        node = self.ROOT
        for code_point in _code_points(sequence):
            children = self._children[node]
            if code_point not in children:
                return False
            node = children[code_point]
        return self._ends[node]

    def longest_match(self, text: str, start: int = 0) -> int:
        """
        Find the longest inserted sequence that ``text`` starts with at ``start``.

        :returns: the length of the match in code points, 0 if nothing matches.
        """
        node = self.ROOT
        longest = 0
        for offset in range(start, len(text)):
            children = self._children[node]
            code_point = ord(text[offset])
            if code_point not in children:
                break
            node = children[code_point]
            if self._ends[node]:
                longest = offset - start + 1
        return longest


def build(records: Iterable[Emoji]) -> Trie:
    """
    Build a frozen trie from a batch of emoji records.

    :raises TrieBuildError: if any record cannot be inserted. No partially
        built trie is ever returned.
    """
    trie = Trie()
    count = 0
    for record in records:
        try:
            trie.insert(record.code_points)
        except TrieError as e:
            raise TrieBuildError(f"Cannot insert emoji {record.unicode!r}: {e}") from e
        count += 1

    if not count:
        raise TrieBuildError("No emoji records to build the trie from")

    trie.freeze()
    logger.debug(
        f"Built trie with {len(trie)} sequences from {count} records ({trie.node_count} nodes)"
    )
    return trie
