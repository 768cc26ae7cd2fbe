"""Game pieces, the factory that makes them, and the players who own them."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from enum import Enum


class PieceType(Enum):
    """Kinds of piece that can be placed on the board."""

    X = "X"
    O = "O"
    NONE = "NONE"


class Piece(ABC):
    """A piece placed on the board; every piece gets its own id."""

    _ids = itertools.count(1)

    def __init__(self, piece_type: PieceType) -> None:
        self.id = next(Piece._ids)
        self.piece_type = piece_type

    @property
    @abstractmethod
    def name(self) -> str:
        """The character this piece is drawn with."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"


class PieceX(Piece):
    """A cross."""

    def __init__(self) -> None:
        super().__init__(PieceType.X)

    @property
    def name(self) -> str:
        return "X"


class PieceO(Piece):
    """A nought."""

    def __init__(self) -> None:
        super().__init__(PieceType.O)

    @property
    def name(self) -> str:
        return "O"


def create_piece(piece_type: PieceType) -> Piece:
    """Make a new piece of ``piece_type``."""
    if piece_type is PieceType.O:
        return PieceO()
    if piece_type is PieceType.X:
        return PieceX()
    raise ValueError(f"cannot create a piece of type {piece_type!r}")


class Player:
    """A named player who places pieces of one type."""

    _ids = itertools.count(1)

    def __init__(self, name: str, piece_type: PieceType) -> None:
        self.name = name
        self.piece = create_piece(piece_type)
        self.id = next(Player._ids)

    @property
    def piece_type(self) -> PieceType:
        return self.piece.piece_type

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, piece={self.piece.name!r})"