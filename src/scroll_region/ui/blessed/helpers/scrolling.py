"""Scrolling helpers built on ScrollableRegion for cursor and paging moves."""

from typing import Optional

from scroll_region.core.config import ViewportConfig
from scroll_region.domain.models import Visible
from scroll_region.domain.region import ScrollableRegion


def cursor_row(region: ScrollableRegion, line: int) -> int:
    """Keep a cursor line on screen and return its viewport row.

    Scrolls the minimum distance needed ("jump scroll"), so the cursor lands
    on the edge it approached from.

    Args:
        region: Region to scroll (mutated)
        line: Absolute cursor line (0-based)

    Returns:
        Row of the cursor relative to the top of the viewport

    Raises:
        ValueError: If the region has no rows to show the cursor on

    Examples:
        >>> region = ScrollableRegion(10)
        >>> cursor_row(region, 15)
        9
        >>> region.line_offset
        6
    """
    region.scroll_into_view(line)
    position = region.relative_position(line)
    if not isinstance(position, Visible):
        raise ValueError(f"Region of height {region.height} cannot show line {line}")
    return position.relative_index


def scroll_step(
    region: ScrollableRegion,
    direction: int,
    viewport: Optional[ViewportConfig] = None,
) -> None:
    """Scroll by the configured step.

    Args:
        region: Region to scroll (mutated)
        direction: -1 for up, 1 for down
        viewport: Viewport settings (default: ViewportConfig())
    """
    viewport = viewport or ViewportConfig()
    if direction == -1:
        region.scroll_up(viewport.scroll_step)
    elif direction == 1:
        region.scroll_down(viewport.scroll_step)
    else:
        raise ValueError(f"direction must be -1 or 1, got {direction!r}")


def page_amount(region: ScrollableRegion, viewport: Optional[ViewportConfig] = None) -> int:
    """Lines moved by one page, keeping page_overlap lines from the last page."""
    viewport = viewport or ViewportConfig()
    return max(1, region.height - viewport.page_overlap)


def page_up(region: ScrollableRegion, viewport: Optional[ViewportConfig] = None) -> None:
    """Scroll up one page, stopping at line zero."""
    region.scroll_up(page_amount(region, viewport))


def page_down(region: ScrollableRegion, viewport: Optional[ViewportConfig] = None) -> None:
    """Scroll down one page."""
    region.scroll_down(page_amount(region, viewport))
