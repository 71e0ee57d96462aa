"""
Selection state machine: turns square clicks into selections and move attempts.

States: Idle | Selected(origin, legal_destinations). Starts Idle and never terminates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from src.chess.engine import MoveResult, RulesEngine
from src.chess.square import Square
from src.interaction.history import HistoryLog
from src.interaction.promotion import PromotionFlow, PromotionRequest, requires_promotion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    legal_destinations: frozenset[Square] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Selected:
    origin: Square
    legal_destinations: frozenset[Square]


SelectionState = Union[Idle, Selected]

IDLE = Idle()


class SelectionController:
    def __init__(
        self, engine: RulesEngine, history: HistoryLog, promotion: PromotionFlow
    ) -> None:
        self._engine = engine
        self._history = history
        self._promotion = promotion
        self.state: SelectionState = IDLE

    def click(self, square: Square) -> Optional[MoveResult]:
        """
        Handle one click on a square.
        ---

        Rules, in order:

        1. Promotion pending? --> drop the click.
        2. Click on a legal destination of the selected piece? --> move attempt (or start the promotion flow).
        3. Anything else --> select the clicked piece if it belongs to the side to move, otherwise deselect.

        Returns the MoveResult if the rules engine was asked to play a move, None otherwise.
        """
        if self._promotion.is_pending:
            logger.debug("promotion pending, ignoring click on %s", square)
            return None

        state = self.state
        if isinstance(state, Selected) and square in state.legal_destinations:
            return self._attempt_move(state.origin, square)

        piece = self._engine.piece_at(square)
        if piece is not None and piece.color == self._engine.turn_to_move():
            self.state = Selected(
                origin=square,
                legal_destinations=frozenset(self._engine.legal_destinations(square)),
            )
            logger.debug("selected %s", square)
        else:
            self.clear()
        return None

    def clear(self) -> None:
        self.state = IDLE

    # -- Internal helpers --
    def _attempt_move(self, origin: Square, target: Square) -> Optional[MoveResult]:
        moving_piece = self._engine.piece_at(origin)

        # Move is held back until a piece kind is picked. Selection goes away so only one gate is active.
        if requires_promotion(moving_piece, target):
            assert moving_piece is not None
            self._promotion.begin(
                PromotionRequest(
                    from_square=origin, to_square=target, color=moving_piece.color
                )
            )
            self.clear()
            return None

        result = self._engine.apply_move(origin, target)
        self.clear()
        if result.ok:
            assert result.move is not None
            self._history.append(result.move)
            logger.info("played %s", result.move.san)
        else:
            logger.warning("move %s-%s failed: %s", origin, target, result.error)
        return result
