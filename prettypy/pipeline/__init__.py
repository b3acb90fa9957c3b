"""Render pipeline entrypoint and result carrier."""

from prettypy.pipeline.entrypoints import run_render
from prettypy.pipeline.results import RenderRunResult

__all__ = [
    "RenderRunResult",
    "run_render",
]
