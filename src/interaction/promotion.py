"""
Pawn promotion sub-flow.

Entered when the selected pawn is sent to its back rank. The move is held here until the user picks a piece kind,
and there is no way back out other than making that choice (or an undo / reset of the whole session).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.chess.engine import MoveResult, RulesEngine
from src.chess.pieces import PIECE_GLYPHS, Piece, promotion_rank
from src.chess.square import Square
from src.core.exceptions import PromotionError
from src.core.shared_types import Color, PieceKind
from src.interaction.history import HistoryLog

logger = logging.getLogger(__name__)

PROMOTION_CHOICES: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


@dataclass(frozen=True)
class PromotionOption:
    """One entry of the promotion dialog. Not a board piece, just the color and kind on offer."""

    color: Color
    kind: PieceKind

    @property
    def glyph(self) -> str:
        return PIECE_GLYPHS[self.color][self.kind]


@dataclass(frozen=True)
class PromotionRequest:
    from_square: Square
    to_square: Square
    color: Color

    def options(self) -> list[PromotionOption]:
        return [PromotionOption(color=self.color, kind=kind) for kind in PROMOTION_CHOICES]


def requires_promotion(piece: Optional[Piece], to_square: Square) -> bool:
    """A pawn landing on the back rank of its own color's direction"""
    if piece is None or piece.kind != PieceKind.PAWN:
        return False
    return to_square.rank == promotion_rank(piece.color)


class PromotionFlow:
    def __init__(self, engine: RulesEngine, history: HistoryLog) -> None:
        self._engine = engine
        self._history = history
        self.request: Optional[PromotionRequest] = None

    @property
    def is_pending(self) -> bool:
        return self.request is not None

    def begin(self, request: PromotionRequest) -> None:
        if self.request is not None:
            raise PromotionError(
                f"A promotion is already pending: {self.request.from_square}-{self.request.to_square}"
            )
        logger.debug(
            "promotion pending for %s %s-%s",
            request.color,
            request.from_square,
            request.to_square,
        )
        self.request = request

    def choose(self, kind: PieceKind) -> MoveResult:
        """
        Finish the pending move with the chosen piece kind.
        ---

        * Success: the move goes into the history.
        * Failure: the request is dropped anyway and the history is left alone.
        """
        request = self.request
        if request is None:
            raise PromotionError("No promotion is pending.")
        if kind not in PROMOTION_CHOICES:
            raise PromotionError(
                f"Cannot promote to {kind}. Pick one of {', '.join(PROMOTION_CHOICES)}."
            )

        result = self._engine.apply_move(request.from_square, request.to_square, kind)
        self.request = None
        if result.ok:
            assert result.move is not None
            self._history.append(result.move)
            logger.info("played %s", result.move.san)
        else:
            logger.warning("promotion move failed: %s", result.error)
        return result

    def clear(self) -> None:
        self.request = None
