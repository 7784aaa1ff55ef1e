from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .board import SYMBOLS, Coord, Symbol
from .engine import DEFAULT_WIN_LENGTH, TicTacToe
from .state import WinCondition

CUE_REJECTED = 'rejected'
CUE_WIN = 'win'


@dataclass(frozen=True)
class MoveOutcome:
    """Result of one attempted move, with the feedback cue a front-end should play."""
    accepted: bool
    symbol: Symbol
    row: int
    column: int
    cue: str  # 'rejected', 'win', 'place_x' or 'place_o'
    winner: Optional[Symbol]
    ended: bool
    filled: bool


def other_symbol(symbol: Symbol) -> Symbol:
    return SYMBOLS[1] if symbol == SYMBOLS[0] else SYMBOLS[0]


class GameSession:
    """Drives one engine on behalf of a front-end: tracks whose turn it is and which moves were accepted."""

    def __init__(self, board_size: int, win_length: int = DEFAULT_WIN_LENGTH) -> None:
        self.board_size = board_size
        self.win_length = win_length
        self.engine = TicTacToe(board_size, win_length)
        self.current_symbol: Symbol = SYMBOLS[0]
        self._moves: List[Coord] = []

    @classmethod
    def replay(cls, board_size: int, moves: Iterable[Coord], win_length: int = DEFAULT_WIN_LENGTH) -> 'GameSession':
        """Rebuilds a session from its accepted moves; x always moves first."""
        session = cls(board_size, win_length)
        for row, column in moves:
            outcome = session.play(row, column)
            if not outcome.accepted:
                raise ValueError(f'move ({row}, {column}) was rejected during replay')
        return session

    @property
    def moves(self) -> List[Coord]:
        return list(self._moves)

    @property
    def ended(self) -> bool:
        return self.engine.has_winner or self.engine.is_board_filled()

    @property
    def winner(self) -> Optional[Symbol]:
        return self.engine.winner

    @property
    def first_win_condition(self) -> Optional[WinCondition]:
        conditions = self.engine.get_win_conditions()
        return conditions[0] if conditions else None

    def play(self, row: int, column: int) -> MoveOutcome:
        """Attempts a move for the current player. InvalidCoordinate propagates to the caller."""
        symbol = self.current_symbol
        accepted = self.engine.place_marker(symbol, row, column)
        if not accepted:
            cue = CUE_REJECTED
        else:
            self._moves.append((row, column))
            self.current_symbol = other_symbol(symbol)
            cue = CUE_WIN if self.engine.has_winner else f'place_{symbol}'
        return MoveOutcome(
            accepted=accepted,
            symbol=symbol,
            row=row,
            column=column,
            cue=cue,
            winner=self.engine.winner,
            ended=self.ended,
            filled=self.engine.is_board_filled(),
        )

    def reset(self) -> None:
        """Starts a new game by replacing the engine."""
        self.engine = TicTacToe(self.board_size, self.win_length)
        self.current_symbol = SYMBOLS[0]
        self._moves = []
