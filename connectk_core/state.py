from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import Coord, Symbol


@dataclass(frozen=True)
class WinCondition:
    """A single completed line, produced by the placement at `initiated_point`."""
    symbol: Symbol
    initiated_point: Coord
    first_segment: Tuple[Coord, ...]  # nearest first, initiating point excluded
    second_segment: Tuple[Coord, ...]

    def cells(self) -> Tuple[Coord, ...]:
        """All cells of the line, ordered from the far end of the first segment to the far end of the second."""
        return tuple(reversed(self.first_segment)) + (self.initiated_point,) + self.second_segment

    def length(self) -> int:
        return len(self.first_segment) + len(self.second_segment) + 1

    def contains(self, coord: Coord) -> bool:
        return coord == self.initiated_point or coord in self.first_segment or coord in self.second_segment
