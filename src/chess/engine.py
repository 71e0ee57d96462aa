"""
Rules engine adapter.

The interaction layer never talks to python-chess directly. It only sees the RulesEngine protocol below,
with squares, pieces, and colors converted to our own types at this boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import chess

from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import IllegalMoveError, InvalidSquareError
from src.core.shared_types import Color, PieceKind

logger = logging.getLogger(__name__)

TO_PIECE_KIND: dict[chess.PieceType, PieceKind] = {
    chess.PAWN: PieceKind.PAWN,
    chess.KNIGHT: PieceKind.KNIGHT,
    chess.BISHOP: PieceKind.BISHOP,
    chess.ROOK: PieceKind.ROOK,
    chess.QUEEN: PieceKind.QUEEN,
    chess.KING: PieceKind.KING,
}

FROM_PIECE_KIND: dict[PieceKind, chess.PieceType] = {
    value: key for key, value in TO_PIECE_KIND.items()
}


@dataclass(frozen=True)
class Move:
    """A move the rules engine accepted. Only ever created by the adapter."""

    from_square: Square
    to_square: Square
    promotion: Optional[PieceKind]
    san: str

    def to_uci(self) -> str:
        uci = f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"
        if self.promotion is not None:
            uci += chess.piece_symbol(FROM_PIECE_KIND[self.promotion])
        return uci


@dataclass(frozen=True)
class MoveResult:
    """Outcome of apply_move: exactly one of move / error is set."""

    move: Optional[Move] = None
    error: Optional[IllegalMoveError] = None

    @classmethod
    def success(cls, move: Move) -> MoveResult:
        return cls(move=move)

    @classmethod
    def failure(cls, error: IllegalMoveError) -> MoveResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.move is not None


class RulesEngine(Protocol):
    """Everything the interaction layer needs from a chess rules engine."""

    def turn_to_move(self) -> Color: ...

    def piece_at(self, square: Square) -> Optional[Piece]: ...

    def legal_destinations(self, square: Square) -> set[Square]: ...

    def apply_move(
        self,
        from_square: Square,
        to_square: Square,
        promotion: Optional[PieceKind] = None,
    ) -> MoveResult: ...

    def undo_last_move(self) -> bool: ...

    def reset_to_start(self) -> None: ...

    def is_in_check(self) -> bool: ...

    def is_game_over(self) -> bool: ...

    def move_count(self) -> int: ...


def to_chess_square(square: Square) -> chess.Square:
    if not square.is_within_bounds():
        raise InvalidSquareError(f"{square!r} is not on the board.")
    return chess.square(square.file, square.rank)


def from_chess_square(index: chess.Square) -> Square:
    return Square(chess.square_file(index), chess.square_rank(index))


class PythonChessEngine:
    """RulesEngine backed by a python-chess Board."""

    def __init__(self, fen: Optional[str] = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()

    def turn_to_move(self) -> Color:
        return Color.WHITE if self._board.turn == chess.WHITE else Color.BLACK

    def piece_at(self, square: Square) -> Optional[Piece]:
        piece = self._board.piece_at(to_chess_square(square))
        if piece is None:
            return None
        color = Color.WHITE if piece.color == chess.WHITE else Color.BLACK
        return Piece(color=color, kind=TO_PIECE_KIND[piece.piece_type])

    def legal_destinations(self, square: Square) -> set[Square]:
        """
        Squares the piece on 'square' can move to right now.

        python-chess only generates moves for the side to move, so an empty square or an opponent's piece gives an empty set.
        The four promotion moves to one square collapse into a single destination.
        """
        origin = to_chess_square(square)
        return {
            from_chess_square(move.to_square)
            for move in self._board.legal_moves
            if move.from_square == origin
        }

    def apply_move(
        self,
        from_square: Square,
        to_square: Square,
        promotion: Optional[PieceKind] = None,
    ) -> MoveResult:
        """Play the move if it is legal. The board is left untouched when it is not."""
        move = chess.Move(
            to_chess_square(from_square),
            to_chess_square(to_square),
            promotion=FROM_PIECE_KIND[promotion] if promotion else None,
        )
        if not self._board.is_legal(move):
            error = IllegalMoveError(f"Move not allowed: {move.uci()}")
            logger.debug("rules engine rejected %s", move.uci())
            return MoveResult.failure(error)

        # SAN depends on the position before the move
        san = self._board.san(move)
        self._board.push(move)
        return MoveResult.success(
            Move(
                from_square=from_square,
                to_square=to_square,
                promotion=promotion,
                san=san,
            )
        )

    def undo_last_move(self) -> bool:
        if not self._board.move_stack:
            return False
        self._board.pop()
        return True

    def reset_to_start(self) -> None:
        """Back to the standard starting position, also for engines created from a FEN."""
        self._board.reset()

    def is_in_check(self) -> bool:
        return self._board.is_check()

    def is_game_over(self) -> bool:
        return self._board.is_game_over()

    def move_count(self) -> int:
        return len(self._board.move_stack)
