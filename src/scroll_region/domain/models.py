"""
Viewport domain models.

Values derived from a ScrollableRegion: the range of lines currently on screen
and the visibility of a single line relative to that range.
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Union


class LineRange(NamedTuple):
    """Half-open range [start, end) of absolute line numbers.

    A plain tuple underneath, so it compares equal to (start, end).
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return max(0, self.end - self.start)

    def includes(self, line: int) -> bool:
        """Whether an absolute line falls inside the range."""
        return self.start <= line < self.end

    def lines(self) -> Iterator[int]:
        """Iterate the absolute line numbers in the range, top to bottom."""
        return iter(range(self.start, self.end))


@dataclass(frozen=True)
class AboveRegion:
    """Line lies before the top of the region (scrolled past upward)."""


@dataclass(frozen=True)
class Visible:
    """Line is on screen.

    relative_index is the zero-based row within the viewport.
    """

    relative_index: int


@dataclass(frozen=True)
class BelowRegion:
    """Line lies at or beyond the bottom of the region (scrolled past downward)."""


Visibility = Union[AboveRegion, Visible, BelowRegion]
