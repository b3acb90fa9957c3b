"""Backtracking layout renderer."""

from __future__ import annotations

from dataclasses import dataclass

from prettypy.doc.model import (
    Doc,
    DocChoice,
    DocEmpty,
    DocHang,
    DocIndent,
    DocNewline,
    DocSequence,
    DocText,
)
from prettypy.render.options import RenderOptions


@dataclass(frozen=True, slots=True)
class PendingFrame:
    """One cell of the persistent pending-work stack."""

    indentation: int
    doc: Doc
    below: PendingFrame | None


@dataclass(frozen=True, slots=True)
class RendererCheckpoint:
    """Renderer checkpoint."""

    pending: PendingFrame | None
    column: int
    output_position: int


@dataclass(frozen=True, slots=True)
class ChoiceAttempt:
    """A choice whose preferred branch is being tried."""

    checkpoint: RendererCheckpoint
    indentation: int
    fallback: Doc


class Renderer:
    """Single-use render state for one document at one width.

    The pending stack is an immutable linked list, so a checkpoint is just a
    reference to the current top plus the cursor column and output length.
    Choices push an attempt, render the preferred branch and everything after
    it, and roll back to the checkpoint if the first emitted line is too wide.
    """

    def __init__(self, doc: Doc, width: int, options: RenderOptions | None = None) -> None:
        if width < 0:
            raise ValueError("Render width cannot be negative")
        options = options or RenderOptions()
        self._width = width
        self._tab_width = options.tab_width
        self._pending: PendingFrame | None = PendingFrame(0, doc, None)
        self._column = 0
        self._output: list[str] = []
        self._attempts: list[ChoiceAttempt] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def tab_width(self) -> int:
        return self._tab_width

    @property
    def column(self) -> int:
        """Current cursor column."""
        return self._column

    @property
    def output(self) -> str:
        """Text emitted so far."""
        return "".join(self._output)

    @property
    def checkpoint(self) -> RendererCheckpoint:
        return RendererCheckpoint(
            pending=self._pending,
            column=self._column,
            output_position=len(self._output),
        )

    def rewind(self, checkpoint: RendererCheckpoint) -> None:
        self._pending = checkpoint.pending
        self._column = checkpoint.column
        del self._output[checkpoint.output_position :]

    def render(self) -> str:
        while True:
            while self._pending is not None:
                self._step()
            if not self._attempts:
                break
            self._resolve_attempt()
        return self.output

    def _push(self, indentation: int, doc: Doc) -> None:
        self._pending = PendingFrame(indentation, doc, self._pending)

    def _step(self) -> None:
        frame = self._pending
        assert frame is not None
        self._pending = frame.below
        indentation = frame.indentation
        doc = frame.doc

        if isinstance(doc, DocEmpty):
            return
        if isinstance(doc, DocText):
            self._output.append(doc.text)
            self._column += len(doc.text)
            return
        if isinstance(doc, DocSequence):
            self._push(indentation, doc.right)
            self._push(indentation, doc.left)
            return
        if isinstance(doc, DocNewline):
            self._output.append("\n" + " " * indentation)
            self._column = indentation
            return
        if isinstance(doc, DocIndent):
            self._push(indentation + self._tab_width, doc.doc)
            return
        if isinstance(doc, DocHang):
            self._push(self._column, doc.doc)
            return
        if isinstance(doc, DocChoice):
            self._attempts.append(ChoiceAttempt(self.checkpoint, indentation, doc.fallback))
            self._push(indentation, doc.preferred)
            return
        raise ValueError(f"Unsupported document node: {doc!r}")

    def _resolve_attempt(self) -> None:
        # Runs once the pending stack has drained, innermost attempt first.
        attempt = self._attempts.pop()
        if self._fits(attempt.checkpoint):
            return
        self.rewind(attempt.checkpoint)
        self._push(attempt.indentation, attempt.fallback)

    def _fits(self, checkpoint: RendererCheckpoint) -> bool:
        """Check the first line emitted since `checkpoint` against the remaining width."""
        remaining = self._width - checkpoint.column
        used = 0
        for position in range(checkpoint.output_position, len(self._output)):
            chunk = self._output[position]
            # Only newlines emit chunks starting with a line break.
            if chunk.startswith("\n"):
                break
            used += len(chunk)
            if used > remaining:
                return False
        return used <= remaining


def render(doc: Doc, width: int, options: RenderOptions | None = None) -> str:
    """Render `doc` as a string that fits in `width` columns where possible."""
    return Renderer(doc, width, options).render()
