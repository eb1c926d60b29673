"""Orchestration of communication from the presentation layer to the business logic (and the reverse direction)."""

import logging

from src.api.models import ClickRequest, GameResponse
from src.chess.game import GameState, apply_click, new_game
from src.chess.moves import legal_destinations
from src.chess.pieces import piece_label
from src.chess.square import Square
from src.core.models import GameModel
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


class ChessService:
    """
    Orchestration of layers for a game played on a single screen.

    The service owns the only mutable thing in the application: the current game state.
    Every request replaces it wholesale with the state returned by the domain layer.
    """

    def __init__(self, model: GameModel | None = None) -> None:
        self.state = GameState.from_model(model) if model else new_game()

    # -- Presentation layer logic ---
    def new_game(self) -> GameResponse:
        """Start over from the starting position (also used by the reset button)."""
        self.state = new_game()
        logger.info("New game started")
        return self._create_game_response(self.state)

    def click(self, request: ClickRequest) -> GameResponse:
        """A square on the board was clicked."""
        self.state = apply_click(self.state, Square(request.row, request.col))
        return self._create_game_response(self.state)

    def get_game_state(self) -> GameResponse:
        """Retrieve current game state (ex. to draw the first frame)."""
        return self._create_game_response(self.state)

    def export_game(self) -> GameModel:
        """Snapshot of the current game in its transport format."""
        return self.state.to_model()

    # -- Internal helpers --
    def _create_game_response(self, state: GameState) -> GameResponse:
        """Convert the game state into something the screen can draw directly."""
        model = state.to_model()
        color_to_move = Color(model.color_to_move)
        highlighted = (
            [square.to_algebraic() for square in legal_destinations(state.board, state.selected)]
            if state.selected is not None
            else []
        )
        return GameResponse(
            board=[[piece_label(piece) for piece in row] for row in state.board.grid],
            placement=model.placement,
            color_to_move=color_to_move,
            turn_label=f"{color_to_move.value.capitalize()}'s Turn",
            selected=model.selected,
            highlighted=highlighted,
        )
