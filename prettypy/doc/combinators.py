"""Derived documents built from the core algebra."""

from __future__ import annotations

from collections.abc import Iterable

from prettypy.doc.model import (
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
    concat,
    text,
)

_SPACE = DocText(" ")


def flatten(doc: Doc) -> Doc:
    """Collapse `doc` to its one-line form.

    Newlines become single spaces and every choice commits to its preferred
    branch, so the result never renders a line break.
    """
    # Post-order walk on an explicit stack; `+` chains can nest deeper than
    # the interpreter recursion limit.
    built: list[Doc] = []
    work: list[tuple[Doc, bool]] = [(doc, False)]
    while work:
        node, children_done = work.pop()
        if children_done:
            if isinstance(node, DocSequence):
                right = built.pop()
                left = built.pop()
                built.append(DocSequence(left, right))
            elif isinstance(node, DocIndent):
                built.append(DocIndent(built.pop()))
            elif isinstance(node, DocHang):
                built.append(DocHang(built.pop()))
            continue

        if isinstance(node, (DocEmpty, DocText)):
            built.append(node)
        elif isinstance(node, DocNewline):
            built.append(_SPACE)
        elif isinstance(node, DocSequence):
            work.append((node, True))
            work.append((node.right, False))
            work.append((node.left, False))
        elif isinstance(node, (DocIndent, DocHang)):
            work.append((node, True))
            work.append((node.doc, False))
        elif isinstance(node, DocChoice):
            work.append((node.preferred, False))
        else:
            raise ValueError(f"Unsupported document node: {node!r}")
    return built[0]


def group(doc: Doc) -> DocChoice:
    """Prefer `doc` on one line, otherwise keep its original layout."""
    return DocChoice(flatten(doc), doc)


def join(docs: Iterable[Doc], separator: Doc) -> Doc:
    """Concatenate `docs` with `separator` strictly between neighbours."""
    parts: list[Doc] = []
    for doc in docs:
        if parts:
            parts.append(separator)
        parts.append(doc)
    if not parts:
        return EMPTY
    return concat(*parts)


def parameters(items: Iterable[Doc]) -> DocChoice:
    """Lay out a comma-separated parameter list.

    Preferred: hang the items at the column where the list starts, on one
    line if possible, else one item per line aligned under the first.
    Fallback: an indented block with one item per line and a trailing
    newline before whatever closing delimiter the caller appends.
    """
    joined = group(join(items, text(",") + NEWLINE))
    return DocChoice(DocHang(joined), DocIndent(NEWLINE + joined) + NEWLINE)
