"""Diagnostics core types."""

from dataclasses import dataclass

from prettypy.diagnostics.codes import Severity
from prettypy.offsets import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic reported about rendered output."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "warning"
    hint: str | None = None
    category: str | None = None
