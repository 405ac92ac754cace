"""
Viewport domain module.

Provides the scrollable region and the values it derives: visible line
ranges and per-line visibility.
"""

from .models import AboveRegion, BelowRegion, LineRange, Visibility, Visible
from .region import ScrollableRegion, new

__all__ = [
    "AboveRegion",
    "BelowRegion",
    "LineRange",
    "ScrollableRegion",
    "Visibility",
    "Visible",
    "new",
]
