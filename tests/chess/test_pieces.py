"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import PIECE_GLYPHS, Piece, promotion_rank
from src.core.shared_types import Color, PieceKind


@pytest.mark.parametrize("kind", [kind for kind in PieceKind])
@pytest.mark.parametrize("color", [color for color in Color])
def test_every_piece_has_its_own_glyph(color: Color, kind: PieceKind) -> None:
    piece = Piece(color=color, kind=kind)
    assert piece.glyph == PIECE_GLYPHS[color][kind]
    assert piece.glyph != PIECE_GLYPHS[color.opponent][kind]


def test_glyphs() -> None:
    assert Piece(Color.WHITE, PieceKind.KING).glyph == "♔"
    assert Piece(Color.BLACK, PieceKind.PAWN).glyph == "♟"


def test_promotion_ranks() -> None:
    """White promotes on the 8th rank, black on the 1st"""
    assert promotion_rank(Color.WHITE) == 7
    assert promotion_rank(Color.BLACK) == 0


def test_pieces_are_read_only() -> None:
    piece = Piece(Color.WHITE, PieceKind.PAWN)
    with pytest.raises(AttributeError):
        piece.kind = PieceKind.QUEEN  # type: ignore[misc]
