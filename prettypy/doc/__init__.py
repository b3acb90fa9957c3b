"""Document algebra and combinators."""

from prettypy.doc.combinators import flatten, group, join, parameters
from prettypy.doc.model import (
    EMPTY,
    LINE_BREAK_CHARS,
    NEWLINE,
    Doc,
    DocChoice,
    DocEmpty,
    DocHang,
    DocIndent,
    DocNewline,
    DocSequence,
    DocText,
    MalformedTextError,
    choice,
    concat,
    hang,
    indent,
    newline,
    text,
)

__all__ = [
    "EMPTY",
    "LINE_BREAK_CHARS",
    "NEWLINE",
    "Doc",
    "DocChoice",
    "DocEmpty",
    "DocHang",
    "DocIndent",
    "DocNewline",
    "DocSequence",
    "DocText",
    "MalformedTextError",
    "choice",
    "concat",
    "flatten",
    "group",
    "hang",
    "indent",
    "join",
    "newline",
    "parameters",
    "text",
]
