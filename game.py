from __future__ import annotations

# Facade module that re-exports connectk core functionality.
# The Flask app and tests import from here; single-responsibility modules live under connectk_core/*.

from connectk_core.board import SYMBOLS, Coord, SparseBoard, Symbol  # noqa: F401
from connectk_core.errors import InvalidCoordinate, InvalidSize  # noqa: F401
from connectk_core.state import WinCondition  # noqa: F401
from connectk_core.lines import AXES, STEPS, find_win_conditions, next_point, walk_run  # noqa: F401
from connectk_core.engine import DEFAULT_WIN_LENGTH, MIN_BOARD_SIZE, TicTacToe  # noqa: F401
from connectk_core.session import CUE_REJECTED, CUE_WIN, GameSession, MoveOutcome, other_symbol  # noqa: F401
from connectk_core.render import (  # noqa: F401
    LAST_CONNECTING,
    MATCHED_LINE,
    board_view,
    highlight_for_cell,
    render_text,
)


def main() -> None:
    # CLI driver delegated to connectk_core.cli
    from connectk_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
