"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "warning"
    category: str | None = None


RENDER_LINE_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RENDER_LINE_OVERFLOW",
    message="Rendered line is wider than the target width.",
    hint="Wrap long text in `group` or `parameters`, or render at a larger width.",
    category="render",
)
