"""Render entrypoint that pairs output with width diagnostics."""

from __future__ import annotations

from prettypy.diagnostics import RENDER_LINE_OVERFLOW, Diagnostic
from prettypy.doc import Doc
from prettypy.pipeline.results import RenderRunResult
from prettypy.render import RenderOptions, render
from prettypy.offsets import line_ranges


def run_render(
    doc: Doc,
    width: int,
    options: RenderOptions | None = None,
) -> RenderRunResult:
    """Render `doc` and report every line wider than `width`."""
    resolved_options = options if options is not None else RenderOptions()
    text = render(doc, width, resolved_options)

    diagnostics: list[Diagnostic] = []
    overflowing: list[int] = []
    for index, line_range in enumerate(line_ranges(text)):
        if line_range.len() <= width:
            continue
        overflowing.append(index)
        diagnostics.append(
            Diagnostic(
                code=RENDER_LINE_OVERFLOW.code,
                message=(
                    f"{RENDER_LINE_OVERFLOW.message} "
                    f"Line {index + 1} is {line_range.len()} columns wide; target width is {width}."
                ),
                range=line_range,
                severity=RENDER_LINE_OVERFLOW.severity,
                hint=RENDER_LINE_OVERFLOW.hint,
                category=RENDER_LINE_OVERFLOW.category,
            )
        )

    return RenderRunResult(
        text=text,
        width=width,
        options=resolved_options,
        diagnostics=diagnostics,
        overflowing_lines=tuple(overflowing),
    )
