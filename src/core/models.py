"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The presentation layer never touches the domain objects directly: it sends requests to the Service and
renders what comes back. (Decouples the domain data model from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
SquareName = str


@dataclass
class GameModel:
    """Transport-safe representation of the running game used between Service and Game layers."""

    placement: str
    color_to_move: PieceColor
    selected: Optional[SquareName] = None
