"""A square tic-tac-toe board."""

from __future__ import annotations

from typing import Optional

from .pieces import Piece, PieceType, create_piece


class Board:
    """A ``size`` by ``size`` grid of cells, each empty or holding a piece."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("board size must be at least 1")
        self.size = size
        self.grid: list[list[Optional[Piece]]] = [[None] * size for _ in range(size)]

    def _is_valid_index(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _placement_error(self, row: int, col: int) -> Optional[str]:
        if not self._is_valid_index(row, col):
            return (
                f"Given row and column are not in the range of 0 to {self.size - 1}"
            )
        if self.grid[row][col] is not None:
            return "Given row and column has the piece."
        return None

    def get_piece(self, row: int, col: int) -> Optional[Piece]:
        """The piece at ``row``, ``col``, or None for an empty cell."""
        if not self._is_valid_index(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        return self.grid[row][col]

    def can_place_piece(self, row: int, col: int) -> bool:
        """Whether a piece may go at ``row``, ``col``; prints why not."""
        error = self._placement_error(row, col)
        if error is not None:
            print(error)
            return False
        return True

    def set_piece(self, row: int, col: int, piece_type: PieceType) -> Piece:
        """Place a new piece of ``piece_type`` and return it."""
        error = self._placement_error(row, col)
        if error is not None:
            raise ValueError(error)
        piece = create_piece(piece_type)
        self.grid[row][col] = piece
        return piece

    def render(self) -> str:
        lines = []
        for cells in self.grid:
            marks = "".join(
                f"| {' ' if piece is None else piece.name} " for piece in cells
            )
            lines.append(marks + "|")
        return "\n".join(lines)

    def display_board(self) -> str:
        """Print the board row by row and return the printed text."""
        text = self.render()
        print(text)
        return text

    def __str__(self) -> str:
        return self.render()