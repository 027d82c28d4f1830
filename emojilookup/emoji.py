# SPDX-License-Identifier: MIT
"""Code for emoji records."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class Emoji:
    """Class representing a single emoji from the dataset."""

    #: Canonical rendering of the emoji. May span several code points
    #: (flags, keycaps, ZWJ sequences).
    unicode: str

    #: Short names the emoji can be looked up by, e.g. "smile".
    aliases: FrozenSet[str] = field(default_factory=frozenset)

    #: Descriptive tags shared between emoji, e.g. "happy".
    tags: FrozenSet[str] = field(default_factory=frozenset)

    #: Human-readable name of the emoji.
    description: str = ""

    #: Whether the emoji accepts a Fitzpatrick skin tone modifier.
    supports_fitzpatrick: bool = False

    @property
    def code_points(self) -> Tuple[int, ...]:
        """The canonical code point sequence of this emoji."""
        return tuple(ord(char) for char in self.unicode)

    @property
    def html_decimal(self) -> str:
        return "".join(f"&#{cp};" for cp in self.code_points)

    @property
    def html_hexadecimal(self) -> str:
        return "".join(f"&#x{cp:x};" for cp in self.code_points)

    def __str__(self) -> str:
        return self.unicode
