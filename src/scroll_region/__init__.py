"""Scrolling logic for fixed-height, line-based terminal viewports."""

from scroll_region.domain import (
    AboveRegion,
    BelowRegion,
    LineRange,
    ScrollableRegion,
    Visibility,
    Visible,
    new,
)

__version__ = "0.1.0"

__all__ = [
    "AboveRegion",
    "BelowRegion",
    "LineRange",
    "ScrollableRegion",
    "Visibility",
    "Visible",
    "new",
]
