"""
The GameSession is the single entrypoint for presenters.

It owns the one rules engine instance of the session and hands it (by reference) to the selection controller
and the promotion flow. Presenters send clicks / commands in, and get a fresh SessionSnapshot pushed to them
after every state change.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from src.chess.engine import Move, MoveResult, PythonChessEngine, RulesEngine
from src.chess.pieces import Piece
from src.chess.square import ALL_SQUARES, Square
from src.core.config import SessionConfig
from src.core.exceptions import InvalidSquareError
from src.core.shared_types import Color, Orientation, PieceKind
from src.interaction.history import HistoryLog
from src.interaction.promotion import PromotionFlow, PromotionRequest
from src.interaction.selection import SelectionController, SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameStatus:
    turn: Color
    in_check: bool
    is_over: bool

    def describe(self) -> str:
        if self.is_over:
            return "Game over"
        text = f"{self.turn.capitalize()} to move"
        return f"{text} (check)" if self.in_check else text


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a presenter needs to draw the board. Built fresh after every change."""

    pieces: dict[Square, Piece]
    selection: SelectionState
    promotion: Optional[PromotionRequest]
    history: tuple[Move, ...]
    move_rows: tuple[str, ...]
    status: GameStatus
    orientation: Orientation

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None


Listener = Callable[[SessionSnapshot], None]


class GameSession:
    def __init__(
        self,
        engine: Optional[RulesEngine] = None,
        config: Optional[SessionConfig] = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.engine: RulesEngine = engine or PythonChessEngine(self.config.starting_fen)
        self.history = HistoryLog()
        self.promotion = PromotionFlow(self.engine, self.history)
        self.selection = SelectionController(self.engine, self.history, self.promotion)
        self.orientation = self.config.orientation
        self._listeners: list[Listener] = []

    # --- PRESENTER INPUT ---
    def click(self, square: Square) -> Optional[MoveResult]:
        if not square.is_within_bounds():
            raise InvalidSquareError(f"{square!r} is not on the board.")
        result = self.selection.click(square)
        self._publish()
        return result

    def choose_promotion(self, kind: PieceKind) -> MoveResult:
        result = self.promotion.choose(kind)
        self.selection.clear()
        self._publish()
        return result

    def undo(self) -> bool:
        """Take back the last move. Nothing changes at all if there is nothing to take back."""
        if not self.engine.undo_last_move():
            logger.debug("nothing to undo")
            return False
        self.history.truncate_last()
        self._clear_ephemeral_state()
        logger.info("undid last move, %d moves left", len(self.history))
        self._publish()
        return True

    def reset(self) -> None:
        self.engine.reset_to_start()
        self.history.clear()
        self._clear_ephemeral_state()
        logger.info("reset to starting position")
        self._publish()

    def flip_orientation(self) -> Orientation:
        return self.set_orientation(self.orientation.flipped())

    def set_orientation(self, orientation: Orientation) -> Orientation:
        self.orientation = orientation
        logger.info("orientation set to %s", orientation)
        self._publish()
        return orientation

    # --- DERIVED STATE ---
    @property
    def status(self) -> GameStatus:
        """Recomputed from the engine on every call"""
        return GameStatus(
            turn=self.engine.turn_to_move(),
            in_check=self.engine.is_in_check(),
            is_over=self.engine.is_game_over(),
        )

    @property
    def pending_promotion(self) -> Optional[PromotionRequest]:
        return self.promotion.request

    def snapshot(self) -> SessionSnapshot:
        pieces: dict[Square, Piece] = {}
        for square in ALL_SQUARES:
            piece = self.engine.piece_at(square)
            if piece is not None:
                pieces[square] = piece

        return SessionSnapshot(
            pieces=pieces,
            selection=self.selection.state,
            promotion=self.promotion.request,
            history=self.history.moves(),
            move_rows=tuple(self.history.numbered_rows()),
            status=self.status,
            orientation=self.orientation,
        )

    # --- LISTENERS ---
    def subscribe(self, listener: Listener) -> None:
        """Register a presenter. It gets the current snapshot straight away and a new one after every change."""
        self._listeners.append(listener)
        listener(self.snapshot())

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # -- Internal helpers --
    def _clear_ephemeral_state(self) -> None:
        self.selection.clear()
        self.promotion.clear()

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in tuple(self._listeners):
            listener(snapshot)
