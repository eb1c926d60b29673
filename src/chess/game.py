"""
The game module is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating the business logic required to handle a click on the board:
select a piece, or try to move the selected piece there.

Everything here is a pure function of the state that is passed in. The caller stores whatever comes back.
"""

import logging
from dataclasses import dataclass, replace
from string import ascii_lowercase
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, is_valid_move
from src.chess.pieces import FEN_TO_PIECE, Color
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import GameStateError
from src.core.models import GameModel

logger = logging.getLogger(__name__)

# NOTE: not str.isdigit(), which also accepts "²" and the like (int() cannot parse those)
RANK_DIGITS = "".join(str(rank) for rank in range(1, BOARD_DIMENSIONS[0] + 1))
EMPTY_RUN_DIGITS = "".join(str(count) for count in range(1, BOARD_DIMENSIONS[1] + 1))


@dataclass(frozen=True)
class GameState:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    white_to_move: bool = True
    selected: Optional[Square] = None

    @property
    def color_to_move(self) -> Color:
        return Color.WHITE if self.white_to_move else Color.BLACK

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""

        # Validation
        if not is_valid_placement(model.placement):
            raise GameStateError(f"Invalid piece placement: {model.placement!r}")

        if model.color_to_move not in (color.name.lower() for color in Color):
            raise GameStateError(
                f"Invalid color to move: {model.color_to_move!r}. \nPick one from {','.join([color.name.lower() for color in Color])}"
            )

        board = Board.from_placement(model.placement)
        white_to_move = model.color_to_move == Color.WHITE.name.lower()

        selected = None
        if model.selected is not None:
            if not is_valid_square_name(model.selected):
                raise GameStateError(f"Invalid selected square: {model.selected!r}")
            selected = Square.from_algebraic(model.selected)

            # only a piece of the side to move can be selected
            piece = board.piece(selected)
            if piece is None or piece.is_white != white_to_move:
                raise GameStateError(
                    f"Selected square {model.selected!r} does not hold a piece of the color to move."
                )

        return cls(board=board, white_to_move=white_to_move, selected=selected)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            placement=self.board.to_placement(),
            color_to_move=self.color_to_move.name.lower(),
            selected=self.selected.to_algebraic() if self.selected else None,
        )


def new_game() -> GameState:
    """Fresh board in the starting position. White moves first."""
    return GameState(board=Board.initialize())


def apply_click(state: GameState, square: Square) -> GameState:
    """
    Handle a click on the given square
    -----

    * Nothing selected yet: a click on one of your own pieces selects it. Anything else is ignored.
    * A piece is selected: try to move it to the clicked square. Whatever the outcome, the selection is cleared.
        - legal move: new board (the old one is left untouched) and the turn passes to the opponent
        - illegal move: nothing changes
    """
    if state.selected is None:
        return _select(state, square)

    move = Move(state.selected, square)
    if not is_valid_move(state.board, move.from_square, move.to_square):
        logger.debug("Rejected %s for %s", move, state.color_to_move.name.lower())
        return replace(state, selected=None)

    logger.info("%s %s", state.color_to_move.name.lower(), move)
    return GameState(
        board=state.board.apply_move(move.from_square, move.to_square),
        white_to_move=not state.white_to_move,
        selected=None,
    )


# -- PRIVATE HELPERS ---
def _select(state: GameState, square: Square) -> GameState:
    """You can only pick up your own pieces, and only when it is your turn."""
    piece = state.board.piece(square)
    if piece is None or piece.is_white != state.white_to_move:
        return state

    logger.debug("Selected %s on %s", piece.type.name.lower(), square.to_algebraic())
    return replace(state, selected=square)


def is_valid_square_name(name: str) -> bool:
    """'a8' - 'h1' style names"""
    if len(name) != 2:
        return False
    file, rank = name
    return file in ascii_lowercase[: BOARD_DIMENSIONS[1]] and rank in RANK_DIGITS


def is_valid_placement(placement: str) -> bool:
    """
    Check if the given string is a proper piece placement (first part of a FEN string).
    Every row must add up to exactly 8 squares, and only known piece letters may be used.
    """
    rows = placement.split("/")
    if len(rows) != BOARD_DIMENSIONS[0]:
        return False

    for row in rows:
        width = 0
        for character in row:
            if character in EMPTY_RUN_DIGITS:
                width += int(character)
            elif character.lower() in FEN_TO_PIECE:
                width += 1
            else:
                return False
        if width != BOARD_DIMENSIONS[1]:
            return False
    return True
