"""Layout renderer (options + backtracking render state)."""

from prettypy.render.options import DEFAULT_TAB_WIDTH, RenderOptions
from prettypy.render.renderer import (
    ChoiceAttempt,
    PendingFrame,
    Renderer,
    RendererCheckpoint,
    render,
)

__all__ = [
    "DEFAULT_TAB_WIDTH",
    "ChoiceAttempt",
    "PendingFrame",
    "RenderOptions",
    "Renderer",
    "RendererCheckpoint",
    "render",
]
