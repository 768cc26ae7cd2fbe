"""Two players taking turns on a tic-tac-toe board."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence, TextIO

from .board import Board
from .pieces import PieceType, Player


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Game:
    """A game between two players; ``player1`` moves first."""

    def __init__(
        self,
        size: int,
        player1: Player,
        player2: Player,
        input_stream: Optional[TextIO] = None,
    ) -> None:
        self.size = size
        self.board = Board(size)
        self.player1 = player1
        self.player2 = player2
        self.input_stream = input_stream

    def is_win(self, piece_type: PieceType) -> bool:
        """Whether ``piece_type`` fills a whole row, column or diagonal."""
        grid = self.board.grid
        last = self.size - 1

        def owned(row: int, col: int) -> bool:
            piece = grid[row][col]
            return piece is not None and piece.piece_type is piece_type

        indices = range(self.size)
        lines = [[(row, col) for col in indices] for row in indices]
        lines += [[(row, col) for row in indices] for col in indices]
        lines.append([(i, i) for i in indices])
        lines.append([(i, last - i) for i in indices])
        return any(all(owned(row, col) for row, col in line) for line in lines)

    def _read_move(self, tokens: Iterator[str]) -> tuple[int, int]:
        values = []
        for _ in range(2):
            token = next(tokens, None)
            if token is None:
                raise EOFError("input ended before the game finished")
            try:
                values.append(int(token))
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None
        return values[0], values[1]

    def play(self) -> Optional[Player]:
        """Run the game to the end; return the winner, or None for a tie."""
        stream = self.input_stream if self.input_stream is not None else sys.stdin
        tokens = _tokens(stream)
        max_moves = self.size * self.size
        moves = 0
        player = self.player1
        last = self.size - 1

        while moves < max_moves:
            self.board.display_board()
            print(
                f"select row and column to place the piece : "
                f"row [0 to {last}], column [0 to {last}]"
            )
            row, col = self._read_move(tokens)

            if not self.board.can_place_piece(row, col):
                print("Try to select the row and column again!!")
                continue

            self.board.set_piece(row, col, player.piece_type)
            moves += 1

            if self.is_win(player.piece_type):
                print(f"Winner of the game is : {player.name}")
                return player

            player = self.player2 if player is self.player1 else self.player1

        print("Game is a tie")
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe on a 3x3 board, reading moves from standard input."
    )
    parser.parse_args(argv)

    player1 = Player("player1", PieceType.O)
    player2 = Player("player2", PieceType.X)
    Game(3, player1, player2).play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())