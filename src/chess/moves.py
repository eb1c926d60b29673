"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the movement rule for each piece type.
Every rule answers the same question: "may the piece on `from_square` go to `to_square`?"

The rules are plain functions on (board, from, to). Pieces carry no behavior of their own.
NOTE: There is no check detection. A move that leaves your own king under attack is still a valid move.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square, all_squares, sign


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    def __str__(self) -> str:
        """ex. 'e2e4': move the piece that was on e2 to e4"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


# --- PATH CLEARANCE ---
def is_path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Walk from `from_square` towards `to_square` one square at a time and report if anything is in the way.

    Neither end point is inspected: the source holds the moving piece, and the target is allowed to hold a piece
    that will be taken (same color targets are rejected before we get here).

    NOTE: Only meaningful for straight or diagonal lines. Only call it after checking the geometry of the move.
    """
    row_delta, col_delta = from_square.delta(to_square)
    row_step, col_step = sign(row_delta), sign(col_delta)

    square = from_square.shifted(row_step, col_step)
    while square != to_square:
        if not board.is_empty(square):
            return False
        square = square.shifted(row_step, col_step)
    return True


# --- MOVEMENT RULES ---
def pawn_direction(color: Color) -> int:
    """White moves UP the screen (towards row 0), Black moves DOWN"""
    return -1 if color == Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


def is_valid_pawn_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    A pawn:
    - moves by a single square forward (onto an empty square)
    - can move by two squares on its first move (so when on its starting row), if both squares are empty
    - takes diagonally: one square forward and one to the side, but only when an opponent's piece stands there

    NOTE: no en passant, no promotion
    """
    pawn = board.piece(from_square)
    if pawn is None:
        return False

    row_delta, col_delta = from_square.delta(to_square)
    direction = pawn_direction(pawn.color)
    target_is_empty = board.is_empty(to_square)

    if col_delta == 0 and row_delta == direction:
        return target_is_empty

    if col_delta == 0 and row_delta == 2 * direction:
        passed_square = from_square.shifted(direction, 0)
        return (
            from_square.row == pawn_start_row(pawn.color)
            and board.is_empty(passed_square)
            and target_is_empty
        )

    if abs(col_delta) == 1 and row_delta == direction:
        # same color targets were already rejected, so an occupied target holds an opponent's piece
        return not target_is_empty

    return False


def is_valid_knight_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """Knights jump in an L-shape: two squares in one direction and one in the other. Nothing can block them."""
    row_delta, col_delta = from_square.delta(to_square)
    return sorted((abs(row_delta), abs(col_delta))) == [1, 2]


def is_valid_bishop_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    row_delta, col_delta = from_square.delta(to_square)
    on_diagonal = abs(row_delta) == abs(col_delta)
    return on_diagonal and is_path_clear(board, from_square, to_square)


def is_valid_rook_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """Rooks move either horizontally or vertically"""
    row_delta, col_delta = from_square.delta(to_square)
    on_straight_line = row_delta == 0 or col_delta == 0
    return on_straight_line and is_path_clear(board, from_square, to_square)


def is_valid_queen_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_valid_rook_move(board, from_square, to_square) or is_valid_bishop_move(
        board, from_square, to_square
    )


def is_valid_king_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """The king can move by a single square at the time, in any direction. (No castling)"""
    row_delta, col_delta = from_square.delta(to_square)
    return abs(row_delta) <= 1 and abs(col_delta) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Board, Square, Square], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_valid_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Decide if the piece on `from_square` may move to `to_square`.
    ----

    1. There must be a piece to move
    2. You cannot take your own pieces. (This also rules out 'moving' a piece onto its own square)
    3. The rest depends on the type of piece (see MOVEMENT_RULES)
    """
    moving_piece = board.piece(from_square)
    if moving_piece is None:
        return False

    target_piece = board.piece(to_square)
    if target_piece is not None and target_piece.color == moving_piece.color:
        return False

    if from_square == to_square:
        return False

    movement_rule = MOVEMENT_RULES[moving_piece.type]
    return movement_rule(board, from_square, to_square)


def legal_destinations(board: Board, from_square: Square) -> list[Square]:
    """All squares the piece on `from_square` may move to. Used to highlight the options of a selected piece."""
    return [
        to_square
        for to_square in all_squares()
        if is_valid_move(board, from_square, to_square)
    ]
