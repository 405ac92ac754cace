"""
Scrollable region over a fixed-height viewport.

Tracks which absolute lines of a taller, line-based content area are on screen.
Knows nothing about content length: scrolling past the end of the content is
the caller's policy to enforce.
"""

from loguru import logger

from scroll_region.domain.models import (
    AboveRegion,
    BelowRegion,
    LineRange,
    Visibility,
    Visible,
)


def _require_unsigned(name: str, value: int) -> int:
    """Reject values outside the non-negative integer domain."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class ScrollableRegion:
    """Fixed-height section of the screen scrolled over absolute lines.

    Used to determine visible ranges of lines based on previous state,
    explicit line focus, and common scrolling behaviour. Height is fixed at
    construction; only the line offset changes.
    """

    __slots__ = ("_height", "_line_offset")

    def __init__(self, height: int, line_offset: int = 0) -> None:
        self._height = _require_unsigned("height", height)
        self._line_offset = _require_unsigned("line_offset", line_offset)

    @property
    def height(self) -> int:
        """Number of lines the viewport displays at once."""
        return self._height

    @property
    def line_offset(self) -> int:
        """Absolute line at the top of the viewport. Zero means unscrolled."""
        return self._line_offset

    def visible_range(self) -> LineRange:
        return LineRange(self._line_offset, self._line_offset + self._height)

    def scroll_into_view(self, line: int) -> None:
        """Move the offset the minimum distance needed to show `line`.

        A line above the range becomes the top row; a line below it becomes
        the bottom row. Lines already visible leave the region untouched.
        """
        _require_unsigned("line", line)
        visible = self.visible_range()

        if line < visible.start:
            self._set_offset(line)
        elif line >= visible.end:
            # New bottom row; floored at 0
            self._set_offset(max(0, line - self._height + 1))

    def relative_position(self, line: int) -> Visibility:
        """Convert an absolute line into one relative to the visible range."""
        _require_unsigned("line", line)
        if line < self._line_offset:
            return AboveRegion()

        relative = line - self._line_offset
        if relative >= self._height:
            return BelowRegion()
        return Visible(relative)

    def scroll_up(self, amount: int) -> None:
        """Scroll toward the top, stopping at line zero."""
        _require_unsigned("amount", amount)
        self._set_offset(max(0, self._line_offset - amount))

    def scroll_down(self, amount: int) -> None:
        """Scroll toward the bottom. No ceiling; the caller owns content length."""
        _require_unsigned("amount", amount)
        self._set_offset(self._line_offset + amount)

    def copy(self) -> "ScrollableRegion":
        return ScrollableRegion(self._height, self._line_offset)

    __copy__ = copy

    def _set_offset(self, offset: int) -> None:
        if offset != self._line_offset:
            logger.trace(f"line_offset {self._line_offset} -> {offset}")
        self._line_offset = offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScrollableRegion):
            return NotImplemented
        return (self._height, self._line_offset) == (
            other._height,
            other._line_offset,
        )

    # Mutable value: equal regions may diverge later, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ScrollableRegion(height={self._height}, "
            f"line_offset={self._line_offset})"
        )


def new(height: int) -> ScrollableRegion:
    """Create an unscrolled region of the given height."""
    return ScrollableRegion(height)
