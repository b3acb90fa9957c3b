"""Diagnostics."""

from prettypy.diagnostics.codes import RENDER_LINE_OVERFLOW, DiagnosticSpec, Severity
from prettypy.diagnostics.diagnostic import Diagnostic

__all__ = [
    "RENDER_LINE_OVERFLOW",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
]
