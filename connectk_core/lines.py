from __future__ import annotations

from typing import Dict, List, Tuple

from .board import Coord, SparseBoard, Symbol
from .state import WinCondition

Direction = str

STEPS: Dict[Direction, Coord] = {
    'north': (-1, 0),
    'south': (1, 0),
    'west': (0, -1),
    'east': (0, 1),
    'north_west': (-1, -1),
    'south_east': (1, 1),
    'south_west': (1, -1),
    'north_east': (-1, 1),
}

# Checked in this order: vertical, horizontal, then the two diagonals.
AXES: Tuple[Tuple[Direction, Direction], ...] = (
    ('north', 'south'),
    ('west', 'east'),
    ('north_west', 'south_east'),
    ('south_west', 'north_east'),
)


def next_point(coord: Coord, direction: Direction) -> Coord:
    """Returns the neighbouring coordinate one step away in a direction."""
    dr, dc = STEPS[direction]
    return coord[0] + dr, coord[1] + dc


def walk_run(board: SparseBoard, start: Coord, direction: Direction, symbol: Symbol) -> List[Coord]:
    """
    Collects the consecutive cells holding `symbol` beyond `start` in one direction, nearest first.
    The walk stops at the board edge or at the first empty or mismatched cell.
    """
    run: List[Coord] = []
    r, c = next_point(start, direction)
    dr, dc = STEPS[direction]
    while board.in_bounds(r, c) and board.at(r, c) == symbol:
        run.append((r, c))
        r += dr
        c += dc
    return run


def find_win_conditions(board: SparseBoard, coord: Coord, win_length: int) -> List[WinCondition]:
    """Evaluates every axis through `coord` and returns one WinCondition per axis with a long enough run."""
    symbol = board.at(*coord)
    if symbol is None:
        return []
    found: List[WinCondition] = []
    for first_dir, second_dir in AXES:
        first = walk_run(board, coord, first_dir, symbol)
        second = walk_run(board, coord, second_dir, symbol)
        if len(first) + len(second) + 1 >= win_length:
            found.append(WinCondition(
                symbol=symbol,
                initiated_point=coord,
                first_segment=tuple(first),
                second_segment=tuple(second),
            ))
    return found
