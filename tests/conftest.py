"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square

PiecesOnBoard = dict[str, tuple[PieceType, Color]]


@pytest.fixture
def board_with_pieces() -> Callable[[PiecesOnBoard], Board]:
    """Call the inner function with a mapping of square names ('d4') to (piece type, color) to place on an empty board"""

    def _create_board(pieces: PiecesOnBoard) -> Board:
        board = Board.empty()
        for square_name, (piece_type, color) in pieces.items():
            board.place_piece(Piece(piece_type, color), Square.from_algebraic(square_name))
        return board

    return _create_board


@pytest.fixture
def starting_board() -> Board:
    return Board.initialize()
