"""Wadler-style pretty printing: build a document once, render it at any width."""

from prettypy.doc import (
    EMPTY,
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
    flatten,
    group,
    hang,
    indent,
    join,
    newline,
    parameters,
    text,
)
from prettypy.pipeline import RenderRunResult, run_render
from prettypy.render import RenderOptions, Renderer, render

__all__ = [
    "EMPTY",
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
    "RenderOptions",
    "RenderRunResult",
    "Renderer",
    "choice",
    "concat",
    "flatten",
    "group",
    "hang",
    "indent",
    "join",
    "newline",
    "parameters",
    "render",
    "run_render",
    "text",
]
