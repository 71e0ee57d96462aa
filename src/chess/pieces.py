"""Defines the pieces as the rest of the code sees them (read-only snapshots of what the rules engine reports)"""

from dataclasses import dataclass

from src.core.shared_types import Color, PieceKind

# Unicode glyphs, as shown on the flat board and in the promotion dialog
PIECE_GLYPHS: dict[Color, dict[PieceKind, str]] = {
    Color.WHITE: {
        PieceKind.KING: "♔",
        PieceKind.QUEEN: "♕",
        PieceKind.ROOK: "♖",
        PieceKind.BISHOP: "♗",
        PieceKind.KNIGHT: "♘",
        PieceKind.PAWN: "♙",
    },
    Color.BLACK: {
        PieceKind.KING: "♚",
        PieceKind.QUEEN: "♛",
        PieceKind.ROOK: "♜",
        PieceKind.BISHOP: "♝",
        PieceKind.KNIGHT: "♞",
        PieceKind.PAWN: "♟",
    },
}

# rank index (0-based) a pawn of this color promotes on
PROMOTION_RANKS: dict[Color, int] = {
    Color.WHITE: 7,
    Color.BLACK: 0,
}


@dataclass(frozen=True)
class Piece:
    color: Color
    kind: PieceKind

    @property
    def glyph(self) -> str:
        return PIECE_GLYPHS[self.color][self.kind]


def promotion_rank(color: Color) -> int:
    return PROMOTION_RANKS[color]
