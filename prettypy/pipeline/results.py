"""Render run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from prettypy.diagnostics import Diagnostic
from prettypy.render.options import RenderOptions


@dataclass(frozen=True, slots=True)
class RenderRunResult:
    """Rendered text plus the lines that could not be kept within `width`."""

    text: str
    width: int
    options: RenderOptions
    diagnostics: list[Diagnostic]
    overflowing_lines: tuple[int, ...]

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @property
    def fits(self) -> bool:
        return not self.overflowing_lines
