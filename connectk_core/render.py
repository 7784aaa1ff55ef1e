from __future__ import annotations

from typing import Any, Dict, List, Optional

from .engine import TicTacToe
from .state import WinCondition

MATCHED_LINE = 'matched_line'
LAST_CONNECTING = 'last_connecting'


def highlight_for_cell(win: Optional[WinCondition], row: int, column: int) -> Optional[str]:
    """Determines whether a cell belongs to the winning line and which highlight it gets."""
    if win is None:
        return None
    coord = (row, column)
    if coord in win.first_segment or coord in win.second_segment:
        return MATCHED_LINE
    if coord == win.initiated_point:
        return LAST_CONNECTING
    return None


def _first_win(engine: TicTacToe) -> Optional[WinCondition]:
    conditions = engine.get_win_conditions()
    return conditions[0] if conditions else None


def board_view(
    engine: TicTacToe,
    top: int = 0,
    left: int = 0,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> List[List[Dict[str, Any]]]:
    """Builds a row-major grid of cell dicts for a window of the board, clipped to its edges."""
    win = _first_win(engine)
    top = max(top, 0)
    left = max(left, 0)
    bottom = engine.board_size if rows is None else min(engine.board_size, top + rows)
    right = engine.board_size if cols is None else min(engine.board_size, left + cols)
    grid: List[List[Dict[str, Any]]] = []
    for r in range(top, bottom):
        line: List[Dict[str, Any]] = []
        for c in range(left, right):
            line.append({
                'row': r,
                'column': c,
                'symbol': engine.get_symbol((r, c)),
                'highlight': highlight_for_cell(win, r, c),
            })
        grid.append(line)
    return grid


def render_text(
    engine: TicTacToe,
    top: int = 0,
    left: int = 0,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> str:
    """Generates a human-readable string of a board window."""
    lines: List[str] = []
    for line in board_view(engine, top, left, rows, cols):
        row: List[str] = []
        for cell in line:
            if cell['highlight'] == LAST_CONNECTING:
                row.append('*')
            elif cell['symbol'] is None:
                row.append('.')
            elif cell['highlight'] == MATCHED_LINE:
                row.append(cell['symbol'].upper())
            else:
                row.append(cell['symbol'])
        lines.append(' '.join(row))
    return '\n'.join(lines)
