"""
connectk core Python package.

This package contains the rules engine for connect-K on a square grid of any
size, plus the thin collaborators (session, rendering, CLI) built on top of it.
Modules:
- board.py: SparseBoard, Symbol, Coord
- state.py: WinCondition
- lines.py: directional run walking and win detection
- engine.py: TicTacToe
- session.py, render.py, cli.py: presentation-side helpers
"""
