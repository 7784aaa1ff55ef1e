from __future__ import annotations


class InvalidSize(ValueError):
    """Raised when a board is constructed with a side smaller than the minimum."""


class InvalidCoordinate(ValueError):
    """Raised when a marker is placed outside [0, board_size) on either axis."""

    def __init__(self, row: int, column: int, board_size: int) -> None:
        super().__init__(f'invalid coordinate ({row}, {column}) for board size {board_size}')
        self.row = row
        self.column = column
        self.board_size = board_size
