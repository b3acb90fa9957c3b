"""Offsets and line ranges over rendered text."""

from prettypy.offsets.ranges import TextRange, line_ranges

__all__ = [
    "TextRange",
    "line_ranges",
]
