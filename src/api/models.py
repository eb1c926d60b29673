"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, model_validator

from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

SquareName = str
Glyph = str


# --- REQUEST MODELS ---
class ClickRequest(BaseModel):
    row: int
    col: int

    @model_validator(mode="after")
    def validate_on_board(self) -> Self:
        if not Square(self.row, self.col).is_within_bounds():
            raise InvalidRequestError(
                f"Click at ({self.row}, {self.col}) is outside of the board. Expected 0 - {BOARD_DIMENSIONS[0] - 1}."
            )
        return self


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    board: list[list[Glyph]]
    placement: str
    color_to_move: Color
    turn_label: str
    selected: Optional[SquareName]
    highlighted: list[SquareName]
