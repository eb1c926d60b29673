"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]


def sign(value: int) -> int:
    """-1, 0 or 1"""
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Square:
    """
    Grid coordinates as the screen shows them: row 0 is the top (Black's back rank), row 7 the bottom (White's back rank).
    Columns run left to right, so (0, 0) is a8 and (7, 7) is h1.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        col = ord(sq[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def is_light(self) -> bool:
        """a8 is a light square, and colors alternate from there"""
        return (self.row + self.col) % 2 == 0

    def delta(self, other: Square) -> Vector:
        """(row_delta, col_delta) needed to get from this square to the other one"""
        return other.row - self.row, other.col - self.col

    def shifted(self, row_step: int, col_step: int) -> Square:
        return Square(self.row + row_step, self.col + col_step)


def all_squares() -> list[Square]:
    """Every square on the board in row-major order (the order the screen draws them in)"""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
