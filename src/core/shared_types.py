"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class PieceKind(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Orientation(StrEnum):
    """Which side of the board is rendered at the bottom of the screen."""

    WHITE_AT_BOTTOM = "white at bottom"
    BLACK_AT_BOTTOM = "black at bottom"

    def flipped(self) -> "Orientation":
        return (
            Orientation.BLACK_AT_BOTTOM
            if self == Orientation.WHITE_AT_BOTTOM
            else Orientation.WHITE_AT_BOTTOM
        )
