# SPDX-License-Identifier: MIT
"""Detection of strings made up entirely of emoji sequences."""

from .trie import Trie

from typing import Optional


def is_emoji_sequence(trie: Trie, text: Optional[str]) -> bool:
    """
    Check if ``text`` is one or more emoji sequences back to back.

    The scan follows the longest available path through the trie. When the
    current node has no child for the next code point the scan restarts from
    the root on that same code point; a miss at the root means the text holds
    something that is not an emoji. Reaching a terminal node does not end the
    current sequence by itself: the scan keeps descending while it can.

    :param trie: trie holding every known emoji sequence.
    :param text: the string to check. ``None`` and ``""`` are not emoji.
    """
    if not text:
        return False

    root = trie.root
    node = root
    position = 0
    length = len(text)

    while position < length:
        code_point = ord(text[position])
        if trie.has_child(node, code_point):
            node = trie.child(node, code_point)
            position += 1
        elif node == root:
            return False
        else:
            node = root

    return trie.is_terminal(node)
