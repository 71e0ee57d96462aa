"""Unit tests for /src/interaction/selection.py"""

import logging
from unittest.mock import Mock

import pytest

from src.chess.engine import PythonChessEngine
from src.chess.pieces import Piece
from src.chess.square import ALL_SQUARES, Square
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import Color, PieceKind
from src.interaction.history import HistoryLog
from src.interaction.promotion import PromotionFlow
from src.interaction.selection import IDLE, Idle, Selected, SelectionController

WHITE_PROMOTION_FEN = "4k3/P7/8/8/8/8/8/4K3 w - - 0 1"


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def build_controller(
    engine: PythonChessEngine,
) -> tuple[SelectionController, HistoryLog, PromotionFlow]:
    history = HistoryLog()
    promotion = PromotionFlow(engine, history)
    return SelectionController(engine, history, promotion), history, promotion


@pytest.fixture
def controller(
    engine: PythonChessEngine,
) -> tuple[SelectionController, HistoryLog, PromotionFlow]:
    return build_controller(engine)


def test_starts_idle(controller) -> None:
    selection, _, _ = controller
    assert selection.state == IDLE
    assert selection.state.legal_destinations == frozenset()


@pytest.mark.parametrize(
    "square",
    [s for s in ALL_SQUARES if s.rank >= 2],
    ids=lambda s: s.to_algebraic(),
)
def test_empty_or_opponent_square_gives_idle(controller, square: Square) -> None:
    """At the start every square from rank 3 up is either empty or holds a black piece"""
    selection, _, _ = controller
    selection.click(sq("e2"))
    selection.click(sq("a1"))  # own blocked rook: still a valid selection with no destinations

    result = selection.click(square)
    assert result is None
    assert isinstance(selection.state, Idle)
    assert selection.state.legal_destinations == frozenset()


def test_select_own_piece(controller) -> None:
    selection, _, _ = controller
    selection.click(sq("e2"))
    assert selection.state == Selected(
        origin=sq("e2"), legal_destinations=frozenset({sq("e3"), sq("e4")})
    )


def test_reselecting_same_square_is_idempotent(controller) -> None:
    selection, _, _ = controller
    selection.click(sq("g1"))
    first = selection.state
    selection.click(sq("g1"))
    assert selection.state == first


def test_switch_selection_to_other_own_piece(controller) -> None:
    selection, _, _ = controller
    selection.click(sq("e2"))
    selection.click(sq("g1"))
    assert selection.state == Selected(
        origin=sq("g1"), legal_destinations=frozenset({sq("f3"), sq("h3")})
    )


def test_non_legal_square_deselects_instead_of_moving(controller, engine) -> None:
    selection, history, _ = controller
    selection.click(sq("e2"))
    result = selection.click(sq("e5"))

    assert result is None
    assert selection.state == IDLE
    assert len(history) == 0
    assert engine.piece_at(sq("e2")) == Piece(Color.WHITE, PieceKind.PAWN)


def test_move_to_legal_destination(controller, engine) -> None:
    selection, history, _ = controller
    selection.click(sq("e2"))
    result = selection.click(sq("e4"))

    assert result is not None and result.ok
    assert selection.state == IDLE
    assert history.san_list() == ["e4"]
    assert engine.turn_to_move() == Color.BLACK
    assert len(history) == engine.move_count()


def test_cannot_select_after_turn_passed(controller) -> None:
    selection, _, _ = controller
    selection.click(sq("e2"))
    selection.click(sq("e4"))
    selection.click(sq("d2"))
    assert selection.state == IDLE

    selection.click(sq("e7"))
    assert isinstance(selection.state, Selected)
    assert selection.state.origin == sq("e7")


def test_destinations_come_from_the_engine_at_selection_time() -> None:
    engine = Mock()
    engine.turn_to_move.return_value = Color.WHITE
    engine.piece_at.return_value = Piece(Color.WHITE, PieceKind.ROOK)
    engine.legal_destinations.return_value = {sq("a5")}

    history = HistoryLog()
    selection = SelectionController(engine, history, PromotionFlow(engine, history))
    selection.click(sq("a1"))

    engine.legal_destinations.assert_called_once_with(sq("a1"))
    assert selection.state == Selected(origin=sq("a1"), legal_destinations=frozenset({sq("a5")}))


def test_rejected_move_is_reported_and_recovered(
    rejecting_session, caplog: pytest.LogCaptureFixture
) -> None:
    session = rejecting_session()
    selection = session.selection
    selection.click(sq("e2"))

    with caplog.at_level(logging.WARNING):
        result = selection.click(sq("e4"))

    assert result is not None
    assert not result.ok
    assert isinstance(result.error, IllegalMoveError)
    assert selection.state == IDLE
    assert len(session.history) == 0
    assert session.engine.move_count() == 0
    assert "failed" in caplog.text
    assert session.engine.rejected == [(sq("e2"), sq("e4"), None)]


def test_pawn_to_back_rank_starts_promotion_without_moving() -> None:
    engine = PythonChessEngine(WHITE_PROMOTION_FEN)
    selection, history, promotion = build_controller(engine)

    selection.click(sq("a7"))
    result = selection.click(sq("a8"))

    assert result is None
    assert promotion.request is not None
    assert promotion.request.color == Color.WHITE
    assert selection.state == IDLE
    assert len(history) == 0
    assert engine.move_count() == 0
    assert engine.piece_at(sq("a7")) == Piece(Color.WHITE, PieceKind.PAWN)


def test_clicks_ignored_while_promotion_pending() -> None:
    engine = PythonChessEngine(WHITE_PROMOTION_FEN)
    selection, history, promotion = build_controller(engine)
    selection.click(sq("a7"))
    selection.click(sq("a8"))
    request = promotion.request

    for name in ["e1", "a7", "a8", "e8", "d4"]:
        assert selection.click(sq(name)) is None
        assert selection.state == IDLE
        assert promotion.request == request
    assert len(history) == 0
