"""Renderer configuration options."""

from dataclasses import dataclass, replace
from typing import Final

DEFAULT_TAB_WIDTH: Final[int] = 4


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Settings that stay constant for a whole render call."""

    tab_width: int = DEFAULT_TAB_WIDTH

    def __post_init__(self):
        if self.tab_width < 0:
            raise ValueError("tab_width cannot be negative")

    def with_tab_width(self, tab_width: int) -> "RenderOptions":
        return replace(self, tab_width=tab_width)
