"""
Type definitions used across layers
"""

from enum import StrEnum


# --- NOTE: the domain layer has its own Color (src/chess/pieces.py). This string version is what crosses
# --- the service and API boundaries. Same name on purpose: the imports show which version is used where.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
