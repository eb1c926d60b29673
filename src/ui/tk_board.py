"""
Presentation layer: a single tkinter window with the turn indicator, the board, and a reset button.

Only talks to the ChessService. Redraws everything from the GameResponse after every click.
"""

import logging
import tkinter as tk

from src.api.models import ClickRequest, GameResponse
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import GameError
from src.services.chess_service import ChessService

logger = logging.getLogger(__name__)

SIZE = 72
FONT = ("DejaVu Sans", SIZE // 2)
TITLE_FONT = ("DejaVu Sans", 20, "bold")
BACKGROUND = "#f5f5f5"
LIGHT_SQUARE = "#f0d9b5"
DARK_SQUARE = "#b58863"
SELECTED_SQUARE = "#ffff00"
HIGHLIGHTED_SQUARE = "#cdd26a"


class ChessBoardApp(tk.Frame):
    def __init__(self, parent: tk.Tk, service: ChessService) -> None:
        super().__init__(parent, bg=BACKGROUND, padx=16, pady=16)
        self.service = service

        self.turn_label = tk.Label(self, font=TITLE_FONT, bg=BACKGROUND)
        self.turn_label.pack(pady=(0, 16))

        self.canvas = tk.Canvas(
            self,
            width=SIZE * BOARD_DIMENSIONS[1],
            height=SIZE * BOARD_DIMENSIONS[0],
            highlightthickness=0,
        )
        self.canvas.pack()
        self.canvas.bind("<Button-1>", self.on_click)

        self.reset_button = tk.Button(self, text="New Game", command=self.on_reset)
        self.reset_button.pack(fill=tk.X, pady=(16, 0))

        self.draw(self.service.get_game_state())

    def on_click(self, event: tk.Event) -> None:
        """happens when the user clicks on the canvas"""
        row, col = event.y // SIZE, event.x // SIZE
        try:
            response = self.service.click(ClickRequest(row=row, col=col))
        except GameError as error:
            # clicks on the canvas border can land just outside the board
            logger.debug("Ignored click: %s", error)
            return
        self.draw(response)

    def on_reset(self) -> None:
        self.draw(self.service.new_game())

    def draw(self, response: GameResponse) -> None:
        self.turn_label.configure(text=response.turn_label)
        self.canvas.delete("all")
        for row, glyphs in enumerate(response.board):
            for col, glyph in enumerate(glyphs):
                x, y = col * SIZE, row * SIZE
                self.canvas.create_rectangle(
                    x,
                    y,
                    x + SIZE,
                    y + SIZE,
                    fill=self._square_color(row, col, response),
                    outline="black",
                )
                if glyph:
                    self.canvas.create_text(
                        x + SIZE // 2, y + SIZE // 2, text=glyph, font=FONT
                    )

    def _square_color(self, row: int, col: int, response: GameResponse) -> str:
        square = Square(row, col)
        name = square.to_algebraic()
        if name == response.selected:
            return SELECTED_SQUARE
        if name in response.highlighted:
            return HIGHLIGHTED_SQUARE
        return LIGHT_SQUARE if square.is_light() else DARK_SQUARE


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )
    root = tk.Tk()
    root.title("Chess")
    root.configure(bg=BACKGROUND)
    root.resizable(False, False)
    ChessBoardApp(root, ChessService()).pack()
    root.mainloop()


if __name__ == "__main__":
    main()
