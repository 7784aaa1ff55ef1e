from __future__ import annotations

import os
from typing import List, Optional

from .board import SYMBOLS, Coord, SparseBoard, Symbol
from .errors import InvalidCoordinate, InvalidSize
from .lines import find_win_conditions
from .state import WinCondition

MIN_BOARD_SIZE = 3
DEFAULT_WIN_LENGTH = 3


def _debug_enabled() -> bool:
    return os.getenv('CONNECTK_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TicTacToe:
    """
    Rules engine for connect-K on a square board of any side >= 3.

    Cells live in a sparse map, and wins are evaluated only from the cell just
    played, so placing a marker costs time proportional to the matching runs
    through it rather than to the board area. A single placement can complete
    several lines; each one is recorded as its own WinCondition. Once any win
    exists the board is frozen and every further placement returns False.
    """

    def __init__(self, board_size: int, win_length: int = DEFAULT_WIN_LENGTH) -> None:
        if board_size < MIN_BOARD_SIZE:
            raise InvalidSize(f'board size must be at least {MIN_BOARD_SIZE}, got {board_size}')
        if win_length < 1:
            raise ValueError(f'win length must be at least 1, got {win_length}')
        self._board = SparseBoard(size=board_size)
        self._win_length = win_length
        self._win_conditions: List[WinCondition] = []

    @property
    def board_size(self) -> int:
        return self._board.size

    @property
    def win_length(self) -> int:
        return self._win_length

    @property
    def marker_count(self) -> int:
        return len(self._board)

    @property
    def has_winner(self) -> bool:
        return len(self._win_conditions) > 0

    @property
    def winner(self) -> Optional[Symbol]:
        return self._win_conditions[0].symbol if self._win_conditions else None

    def place_marker(self, symbol: Symbol, row: int, column: int) -> bool:
        """
        Places `symbol` at (row, column).
        Returns False when the cell is taken or the game is already won; raises
        InvalidCoordinate when the point is not an integer pair inside the board
        and ValueError for a symbol other than x or o.
        """
        if not (_is_index(row) and _is_index(column)) or not self._board.in_bounds(row, column):
            raise InvalidCoordinate(row, column, self.board_size)
        if symbol not in SYMBOLS:
            raise ValueError(f"symbol must be one of {SYMBOLS}, got {symbol!r}")
        if self._board.is_occupied(row, column):
            if _debug_enabled():
                print(f"[engine] rejected {symbol} at ({row}, {column}): occupied")
            return False
        # Terminal state: after a win the board is frozen, even for empty cells.
        if self._win_conditions:
            if _debug_enabled():
                print(f"[engine] rejected {symbol} at ({row}, {column}): game already won")
            return False

        self._board.put(row, column, symbol)
        found = find_win_conditions(self._board, (row, column), self._win_length)
        if found and _debug_enabled():
            print(f"[engine] {symbol} completed {len(found)} line(s) at ({row}, {column})")
        self._win_conditions.extend(found)
        return True

    def is_board_filled(self) -> bool:
        return self._board.is_full()

    def get_symbol(self, coord: Coord) -> Optional[Symbol]:
        """Returns the symbol at `coord`, or None for empty and out-of-range cells."""
        row, column = coord
        if not self._board.in_bounds(row, column):
            return None
        return self._board.at(row, column)

    def get_win_conditions(self) -> List[WinCondition]:
        """All win conditions recorded so far, oldest first."""
        return list(self._win_conditions)
