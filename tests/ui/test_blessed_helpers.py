"""Tests for blessed terminal sizing and scrolling helpers."""

from unittest.mock import MagicMock

import pytest

from scroll_region.core.config import ViewportConfig
from scroll_region.domain.region import ScrollableRegion
from scroll_region.ui.blessed.helpers import (
    available_rows,
    cursor_row,
    page_amount,
    page_down,
    page_up,
    region_for_terminal,
    resize_region,
    scroll_step,
)


@pytest.fixture
def term() -> MagicMock:
    """Stand-in for a blessed Terminal with 24 rows."""
    terminal = MagicMock()
    terminal.height = 24
    return terminal


class TestTerminalHelpers:
    """Tests for sizing regions from the terminal."""

    def test_available_rows(self, term: MagicMock) -> None:
        assert available_rows(term) == 24
        assert available_rows(term, 2) == 22
        assert available_rows(term, 30) == 0

    def test_region_for_terminal_uses_reserved_rows(self, term: MagicMock) -> None:
        region = region_for_terminal(term)
        assert region == ScrollableRegion(22)

        region = region_for_terminal(term, ViewportConfig(reserved_rows=0))
        assert region.visible_range() == (0, 24)

    def test_resize_keeps_offset(self, term: MagicMock) -> None:
        region = ScrollableRegion(22, line_offset=40)
        term.height = 12
        resized = resize_region(region, term)
        assert resized.height == 10
        assert resized.line_offset == 40
        assert region.height == 22

    def test_resize_same_height_returns_region(self, term: MagicMock) -> None:
        region = ScrollableRegion(22, line_offset=5)
        assert resize_region(region, term) is region


class TestCursorRow:
    """Tests for cursor_row()."""

    def test_cursor_below_lands_on_bottom_row(self) -> None:
        region = ScrollableRegion(10)
        assert cursor_row(region, 15) == 9
        assert region.line_offset == 6

    def test_cursor_above_lands_on_top_row(self) -> None:
        region = ScrollableRegion(10, line_offset=20)
        assert cursor_row(region, 3) == 0
        assert region.line_offset == 3

    def test_visible_cursor_does_not_scroll(self) -> None:
        region = ScrollableRegion(10, line_offset=20)
        assert cursor_row(region, 24) == 4
        assert region.line_offset == 20

    def test_zero_height_region_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot show line"):
            cursor_row(ScrollableRegion(0), 3)


class TestScrollStep:
    """Tests for scroll_step()."""

    def test_steps_down_and_up(self) -> None:
        region = ScrollableRegion(10)
        scroll_step(region, 1)
        assert region.line_offset == 3
        scroll_step(region, -1)
        scroll_step(region, -1)
        assert region.line_offset == 0

    def test_uses_configured_step(self) -> None:
        region = ScrollableRegion(10)
        scroll_step(region, 1, ViewportConfig(scroll_step=7))
        assert region.line_offset == 7

    def test_rejects_other_directions(self) -> None:
        with pytest.raises(ValueError, match="direction"):
            scroll_step(ScrollableRegion(10), 0)


class TestPaging:
    """Tests for page_up() and page_down()."""

    def test_page_amount_keeps_overlap(self) -> None:
        region = ScrollableRegion(20)
        assert page_amount(region) == 19
        assert page_amount(region, ViewportConfig(page_overlap=0)) == 20

    def test_page_amount_is_at_least_one(self) -> None:
        assert page_amount(ScrollableRegion(1)) == 1
        assert page_amount(ScrollableRegion(0)) == 1

    def test_page_down_then_up(self) -> None:
        region = ScrollableRegion(20)
        page_down(region)
        assert region.visible_range() == (19, 39)
        page_up(region)
        assert region.visible_range() == (0, 20)

    def test_page_up_stops_at_top(self) -> None:
        region = ScrollableRegion(20, line_offset=5)
        page_up(region)
        assert region.line_offset == 0
