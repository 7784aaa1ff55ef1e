from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

Symbol = str  # 'x' or 'o'
Coord = Tuple[int, int]  # (row, column)

SYMBOLS: Tuple[Symbol, Symbol] = ('x', 'o')


@dataclass
class SparseBoard:
    """Square board that stores only occupied cells, so memory follows the number of markers, not size**2."""
    size: int
    cells: Dict[Coord, Symbol] = field(default_factory=dict)

    def in_bounds(self, r: int, c: int) -> bool:
        """Checks whether a row and column lie inside the board."""
        return 0 <= r < self.size and 0 <= c < self.size

    def at(self, r: int, c: int) -> Optional[Symbol]:
        """Gets the symbol at a given row and column, or None when empty."""
        return self.cells.get((r, c))

    def is_occupied(self, r: int, c: int) -> bool:
        return (r, c) in self.cells

    def put(self, r: int, c: int, symbol: Symbol) -> None:
        """Records a symbol. Callers check bounds and occupancy first; cells are never erased."""
        self.cells[(r, c)] = symbol

    def __len__(self) -> int:
        return len(self.cells)

    def is_full(self) -> bool:
        return len(self.cells) == self.size ** 2
