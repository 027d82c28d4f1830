# SPDX-License-Identifier: MIT
"""Miscellaneous helpers for the command line."""

import os
import sys

#: ANSI escape codes used to format terminal output.
colors = {
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "green": "\x1b[32m",
    "red": "\x1b[31m",
    "reset": "\x1b[0m",
}

#: Same keys as ``colors``, all empty, for output that is not a terminal.
no_colors = dict.fromkeys(colors, "")


def get_colors(stream=None) -> dict:
    """Get the colour codes to use when writing to ``stream``."""
    stream = stream or sys.stdout
    if os.environ.get("NO_COLOR") or not stream.isatty():
        return no_colors
    return colors
