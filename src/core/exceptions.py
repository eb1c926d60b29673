"""Errors raised at the boundaries of the application. The move-legality engine itself never raises."""


class GameError(Exception):
    """Base class for all errors the service layer may let through to the presentation layer."""


class InvalidRequestError(GameError):
    """A request could not be interpreted (ex. a click outside the board)."""


class GameStateError(GameError):
    """A stored/transported game could not be turned back into a valid game state."""
