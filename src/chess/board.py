"""The Game board: an 8x8 grid of (optional) pieces. Stores the position, knows nothing about the rules."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares

Grid = list[list[Optional[Piece]]]

# Black's back rank is the first row (top of the screen), White's back rank the last one
STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

BACK_RANK_ORDER: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# (back rank row, pawn row) per color
STARTING_ROWS: dict[Color, tuple[int, int]] = {
    Color.BLACK: (0, 1),
    Color.WHITE: (BOARD_DIMENSIONS[0] - 1, BOARD_DIMENSIONS[0] - 2),
}


@dataclass
class Board:
    """
    The grid is mutable, so a Board can be set up square by square (`place_piece`, `remove_piece`).
    Once a board is part of a game it is treated as a snapshot: `apply_move` returns a new board, and nothing
    in the game or service layers calls the mutating methods on it.
    """

    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls(
            [[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])]
        )

    @classmethod
    def initialize(cls) -> Self:
        """The standard starting position. Pawns in front, and R N B Q K B N R on the back rank for both colors."""
        board = cls.empty()
        for color, (back_row, pawn_row) in STARTING_ROWS.items():
            for col, piece_type in enumerate(BACK_RANK_ORDER):
                board.place_piece(Piece(piece_type, color), Square(back_row, col))
                board.place_piece(Piece(PieceType.PAWN, color), Square(pawn_row, col))
        return board

    @classmethod
    def from_placement(cls, placement: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * the first group is row 0 (the 8th rank): black pieces, starting with the rook on a8
        * black pawns cover row 1 entirely
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces.
        """
        board = cls.empty()
        for row, fen_one_row in enumerate(placement.split("/")):
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    board.place_piece(Piece.from_fen(character), Square(row, col))
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
        return board

    def to_placement(self) -> str:
        """Rows are separated by slashes, top row first."""
        return "/".join(self._row_to_placement(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_placement(self, row: int) -> str:
        """Placement string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in self.grid[row]:
            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def clone(self) -> Self:
        """Deep copy: moves are applied to the copy so the board before the move stays intact"""
        return deepcopy(self)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> None:
        self.grid[square.row][square.col] = None

    def apply_move(self, from_square: Square, to_square: Square) -> Self:
        """
        Relocate the piece on `from_square` to `to_square` (taking whatever stood there) on a copy of the board.

        NOTE: Does not check legality. That is the job of `is_valid_move()`.
        """
        new_board = self.clone()
        moving_piece = new_board.piece(from_square)
        new_board.remove_piece(from_square)
        if moving_piece is not None:
            new_board.place_piece(moving_piece, to_square)
        return new_board

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square in all_squares()
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    def count_pieces(self) -> dict[Color, int]:
        """Number of pieces each player still has on the board"""
        return {color: len(self.locate_color(color)) for color in Color}
