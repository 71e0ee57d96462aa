"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable, Optional

import pytest

from src.chess.engine import MoveResult, PythonChessEngine
from src.chess.square import Square
from src.core.config import SessionConfig
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import PieceKind
from src.interaction.session import GameSession


class RejectingEngine(PythonChessEngine):
    """Reports legal destinations as usual, but refuses to play (some of) the moves it is asked to apply."""

    def __init__(self, fen: Optional[str] = None, reject_promotions_only: bool = False) -> None:
        super().__init__(fen)
        self.reject_promotions_only = reject_promotions_only
        self.rejected: list[tuple[Square, Square, Optional[PieceKind]]] = []

    def apply_move(
        self,
        from_square: Square,
        to_square: Square,
        promotion: Optional[PieceKind] = None,
    ) -> MoveResult:
        if self.reject_promotions_only and promotion is None:
            return super().apply_move(from_square, to_square, promotion)
        self.rejected.append((from_square, to_square, promotion))
        return MoveResult.failure(
            IllegalMoveError(f"Move not allowed: {from_square}{to_square}")
        )


@pytest.fixture
def session() -> GameSession:
    """Fresh session from the standard starting position"""
    return GameSession()


@pytest.fixture
def session_from_fen() -> Callable[[str], GameSession]:
    """Call the inner function with the FEN the session should start from"""

    def _create_session(fen: str) -> GameSession:
        return GameSession(config=SessionConfig(starting_fen=fen))

    return _create_session


@pytest.fixture
def rejecting_session() -> Callable[..., GameSession]:
    """Session on top of a RejectingEngine. Keyword arguments go to the engine."""

    def _create_session(**engine_kwargs) -> GameSession:
        return GameSession(engine=RejectingEngine(**engine_kwargs))

    return _create_session


@pytest.fixture
def engine() -> PythonChessEngine:
    return PythonChessEngine()
