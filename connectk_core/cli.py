from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from .engine import MIN_BOARD_SIZE
from .errors import InvalidCoordinate
from .render import render_text
from .session import GameSession


def _parse_move(text: str) -> Tuple[int, int]:
    sep = ',' if ',' in text else ' '
    r_s, c_s = [t for t in text.split(sep) if t != '']
    return int(r_s), int(c_s)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Connect-K on a square board of any size')
    parser.add_argument('--size', type=int, default=3, help='Board side length (NxN), at least 3')
    parser.add_argument('--win-length', type=int, default=3, help='Markers in a row needed to win')
    parser.add_argument('--view', type=int, default=20, help='Max rows/columns printed for large boards')
    args = parser.parse_args(argv)

    if args.size < MIN_BOARD_SIZE:
        parser.error(f'--size must be at least {MIN_BOARD_SIZE}')
    if args.win_length < 1:
        parser.error('--win-length must be at least 1')

    session = GameSession(args.size, args.win_length)

    def show() -> None:
        print(render_text(session.engine, rows=args.view, cols=args.view))

    def prompt_move() -> Tuple[int, int]:
        while True:
            text = input(f'Player {session.current_symbol}, enter your move as r,c or r c: ').strip()
            try:
                return _parse_move(text)
            except ValueError:
                print('Could not parse. Try again.')

    print(f'Board {args.size}x{args.size}, {args.win_length} in a row wins.')
    show()
    while True:
        row, column = prompt_move()
        try:
            outcome = session.play(row, column)
        except InvalidCoordinate as e:
            print(f'error: {e}')
            continue
        if not outcome.accepted:
            print('Cell rejected. Try again.')
            continue
        show()
        if not outcome.ended:
            continue
        if outcome.winner is not None:
            print(f'Player {outcome.winner} wins!')
        else:
            print('Board filled, it is a draw.')
        again = input('Play again? [y/N]: ').strip().lower()
        if again not in ('y', 'yes'):
            break
        session.reset()
        show()


if __name__ == '__main__':
    main()
