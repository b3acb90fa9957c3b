"""Shared debug printers for document/renderer tests."""

from __future__ import annotations

import os

from prettypy import (
    Doc,
    DocChoice,
    DocEmpty,
    DocHang,
    DocIndent,
    DocNewline,
    DocSequence,
    DocText,
)
from prettypy.diagnostics import Diagnostic

PRINT_DOC = os.getenv("PRINT_DOC", "0").lower() in {"1", "true", "yes", "on"}
PRINT_RENDER = os.getenv("PRINT_RENDER", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_dump_doc(test_name: str, doc: Doc) -> None:
    if not PRINT_DOC:
        return
    print(f"\n===== {test_name} DOC =====")
    print(_dump_doc(doc))


def debug_dump_render(test_name: str, rendered: str, width: int) -> None:
    if not PRINT_RENDER:
        return
    print(f"\n===== {test_name} RENDER (width={width}) =====")
    print("." * width)
    print(rendered)


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic]) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    print(f"\n===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(f"{diagnostic.severity:<7} {diagnostic.code} range={diagnostic.range.as_tuple()} {diagnostic.message}")


def _dump_doc(doc: Doc, depth: int = 0) -> str:
    pad = "  " * depth
    if isinstance(doc, DocEmpty):
        return f"{pad}Empty"
    if isinstance(doc, DocText):
        return f"{pad}Text {doc.text!r}"
    if isinstance(doc, DocNewline):
        return f"{pad}Newline"
    if isinstance(doc, DocSequence):
        return "\n".join([f"{pad}Sequence", _dump_doc(doc.left, depth + 1), _dump_doc(doc.right, depth + 1)])
    if isinstance(doc, DocIndent):
        return "\n".join([f"{pad}Indent", _dump_doc(doc.doc, depth + 1)])
    if isinstance(doc, DocHang):
        return "\n".join([f"{pad}Hang", _dump_doc(doc.doc, depth + 1)])
    if isinstance(doc, DocChoice):
        return "\n".join([f"{pad}Choice", _dump_doc(doc.preferred, depth + 1), _dump_doc(doc.fallback, depth + 1)])
    return f"{pad}{doc!r}"
