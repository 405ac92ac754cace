"""Terminal sizing utilities for regions hosted in a blessed Terminal."""

from typing import Optional

from blessed import Terminal
from loguru import logger

from scroll_region.core.config import ViewportConfig
from scroll_region.domain.region import ScrollableRegion


def available_rows(term: Terminal, reserved_rows: int = 0) -> int:
    """Rows of the terminal left for a region after reserved status lines.

    Args:
        term: Blessed terminal instance
        reserved_rows: Rows kept for status/command lines

    Returns:
        Usable row count, never negative
    """
    return max(0, term.height - reserved_rows)


def region_for_terminal(
    term: Terminal, viewport: Optional[ViewportConfig] = None
) -> ScrollableRegion:
    """Create an unscrolled region filling the terminal's usable rows."""
    viewport = viewport or ViewportConfig()
    return ScrollableRegion(available_rows(term, viewport.reserved_rows))


def resize_region(
    region: ScrollableRegion,
    term: Terminal,
    viewport: Optional[ViewportConfig] = None,
) -> ScrollableRegion:
    """Size a region to the current terminal, keeping its scroll position.

    Height is fixed per region, so a resize yields a new region. Returns the
    same region when the height is unchanged.
    """
    viewport = viewport or ViewportConfig()
    height = available_rows(term, viewport.reserved_rows)
    if height == region.height:
        return region

    logger.debug(
        f"Resizing region {region.height} -> {height} rows "
        f"(line_offset={region.line_offset})"
    )
    return ScrollableRegion(height, line_offset=region.line_offset)
