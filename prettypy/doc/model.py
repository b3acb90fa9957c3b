"""Immutable document algebra."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from prettypy.render.options import RenderOptions

LINE_BREAK_CHARS: Final[frozenset[str]] = frozenset("\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029")
"""Characters `str.splitlines` treats as line boundaries."""


class MalformedTextError(ValueError):
    """Literal text contains a line break."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Text documents cannot contain line breaks: {value!r}")
        self.value = value


class _DocOps:
    """Operators shared by every document variant."""

    __slots__ = ()

    def __add__(self, other: Doc | str) -> DocSequence:
        if not isinstance(other, (str, _DocOps)):
            return NotImplemented
        return DocSequence(self, _coerce(other))  # type: ignore[arg-type]

    def __radd__(self, other: Doc | str) -> DocSequence:
        if not isinstance(other, (str, _DocOps)):
            return NotImplemented
        return DocSequence(_coerce(other), self)  # type: ignore[arg-type]

    def pretty(self, width: int, options: RenderOptions | None = None) -> str:
        """Render this document against `width` columns."""
        from prettypy.render.renderer import render

        return render(self, width, options)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class DocEmpty(_DocOps):
    pass


@dataclass(frozen=True, slots=True)
class DocText(_DocOps):
    text: str

    def __post_init__(self):
        if any(ch in LINE_BREAK_CHARS for ch in self.text):
            raise MalformedTextError(self.text)


@dataclass(frozen=True, slots=True)
class DocSequence(_DocOps):
    left: Doc
    right: Doc


@dataclass(frozen=True, slots=True)
class DocNewline(_DocOps):
    pass


@dataclass(frozen=True, slots=True)
class DocIndent(_DocOps):
    doc: Doc


@dataclass(frozen=True, slots=True)
class DocHang(_DocOps):
    """Aligns nested newlines to the column where the hang starts."""

    doc: Doc


@dataclass(frozen=True, slots=True)
class DocChoice(_DocOps):
    """Preferred layout with a fallback, picked by the renderer's fits check."""

    preferred: Doc
    fallback: Doc


type Doc = DocEmpty | DocText | DocSequence | DocNewline | DocIndent | DocHang | DocChoice

EMPTY: Final[DocEmpty] = DocEmpty()
NEWLINE: Final[DocNewline] = DocNewline()


def text(value: str) -> DocText:
    """Create a literal text document; `value` must not contain line breaks."""
    return DocText(value)


def newline() -> DocNewline:
    return NEWLINE


def indent(doc: Doc | str) -> DocIndent:
    return DocIndent(_coerce(doc))


def hang(doc: Doc | str) -> DocHang:
    return DocHang(_coerce(doc))


def choice(preferred: Doc | str, fallback: Doc | str) -> DocChoice:
    return DocChoice(_coerce(preferred), _coerce(fallback))


def concat(*docs: Doc | str) -> Doc:
    """Concatenate documents left to right.

    The result is a balanced tree of sequences, so nesting depth stays
    logarithmic in the number of parts.
    """
    if not docs:
        return EMPTY
    parts = [_coerce(doc) for doc in docs]
    return _concat_range(parts, 0, len(parts))


def _concat_range(parts: list[Doc], start: int, end: int) -> Doc:
    if end - start == 1:
        return parts[start]
    middle = (start + end) // 2
    return DocSequence(_concat_range(parts, start, middle), _concat_range(parts, middle, end))


def _coerce(value: Doc | str) -> Doc:
    if isinstance(value, str):
        return DocText(value)
    if isinstance(value, _DocOps):
        return value
    raise TypeError(f"Expected a document or str, got {type(value).__name__}")
