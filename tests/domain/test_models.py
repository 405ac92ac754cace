"""Tests for viewport domain models."""

import dataclasses

import pytest

from scroll_region.domain.models import AboveRegion, BelowRegion, LineRange, Visible


class TestLineRange:
    """Tests for LineRange."""

    def test_compares_equal_to_plain_tuple(self) -> None:
        assert LineRange(5, 25) == (5, 25)
        start, end = LineRange(5, 25)
        assert (start, end) == (5, 25)

    def test_length(self) -> None:
        assert LineRange(5, 25).length == 20
        assert LineRange(4, 4).length == 0

    def test_includes_is_half_open(self) -> None:
        visible = LineRange(10, 30)
        assert visible.includes(10)
        assert visible.includes(29)
        assert not visible.includes(9)
        assert not visible.includes(30)

    def test_lines(self) -> None:
        assert list(LineRange(3, 6).lines()) == [3, 4, 5]
        assert list(LineRange(7, 7).lines()) == []


class TestVisibility:
    """Tests for the Visibility cases."""

    def test_visible_carries_relative_index(self) -> None:
        assert Visible(4).relative_index == 4
        assert Visible(4) == Visible(4)
        assert Visible(4) != Visible(5)

    def test_cases_are_distinct(self) -> None:
        assert AboveRegion() == AboveRegion()
        assert BelowRegion() == BelowRegion()
        assert AboveRegion() != BelowRegion()
        assert Visible(0) != AboveRegion()

    def test_cases_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Visible(1).relative_index = 2  # type: ignore[misc]
