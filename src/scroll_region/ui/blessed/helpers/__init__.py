"""Blessed UI helper functions."""

from .scrolling import cursor_row, page_amount, page_down, page_up, scroll_step
from .terminal import available_rows, region_for_terminal, resize_region

__all__ = [
    "available_rows",
    "cursor_row",
    "page_amount",
    "page_down",
    "page_up",
    "region_for_terminal",
    "resize_region",
    "scroll_step",
]
