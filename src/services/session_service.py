"""Orchestration of communication from API router to the game session (and the reverse direction)."""

from typing import Optional

from src.api.models import (
    ClickRequest,
    OrientationRequest,
    PieceView,
    PromotionChoiceRequest,
    PromotionView,
    SelectionView,
    SessionResponse,
    SquareView,
    StatusView,
)
from src.chess.engine import MoveResult
from src.chess.pieces import Piece
from src.chess.square import Square
from src.interaction.selection import Selected
from src.interaction.session import GameSession, SessionSnapshot
from src.presenters.grid import CellView, build_cells


class SessionService:
    """Orchestration of layers for a local chess session."""

    def __init__(self, session: GameSession) -> None:
        self.session = session

    # -- API routes logic ---
    def get_state(self) -> SessionResponse:
        return self._create_response(self.session.snapshot())

    def click(self, request: ClickRequest) -> SessionResponse:
        """Forward a square click. A rejected move is reported in last_error, not raised."""
        result = self.session.click(Square.from_algebraic(request.square))
        return self._create_response(self.session.snapshot(), result)

    def choose_promotion(self, request: PromotionChoiceRequest) -> SessionResponse:
        result = self.session.choose_promotion(request.kind)
        return self._create_response(self.session.snapshot(), result)

    def undo(self) -> SessionResponse:
        self.session.undo()
        return self.get_state()

    def reset(self) -> SessionResponse:
        self.session.reset()
        return self.get_state()

    def set_orientation(self, request: OrientationRequest) -> SessionResponse:
        self.session.set_orientation(request.orientation)
        return self.get_state()

    def flip_orientation(self) -> SessionResponse:
        self.session.flip_orientation()
        return self.get_state()

    # -- Internal helpers --
    def _create_response(
        self, snapshot: SessionSnapshot, result: Optional[MoveResult] = None
    ) -> SessionResponse:
        selection = snapshot.selection
        promotion = snapshot.promotion
        status = snapshot.status

        return SessionResponse(
            orientation=snapshot.orientation,
            board=[
                [_square_view(cell) for cell in row] for row in build_cells(snapshot)
            ],
            selection=SelectionView(
                origin=selection.origin.to_algebraic()
                if isinstance(selection, Selected)
                else None,
                legal_destinations=sorted(
                    square.to_algebraic() for square in selection.legal_destinations
                ),
            ),
            promotion=PromotionView(
                from_square=promotion.from_square.to_algebraic(),
                to_square=promotion.to_square.to_algebraic(),
                color=promotion.color,
                choices=[
                    PieceView(color=option.color, kind=option.kind, glyph=option.glyph)
                    for option in promotion.options()
                ],
            )
            if promotion is not None
            else None,
            move_history=[move.san for move in snapshot.history],
            move_rows=list(snapshot.move_rows),
            status=StatusView(
                turn=status.turn,
                in_check=status.in_check,
                is_over=status.is_over,
                text=status.describe(),
            ),
            last_error=str(result.error) if result is not None and result.error else None,
        )


def _piece_view(piece: Piece) -> PieceView:
    return PieceView(color=piece.color, kind=piece.kind, glyph=piece.glyph)


def _square_view(cell: CellView) -> SquareView:
    return SquareView(
        square=cell.square.to_algebraic(),
        piece=_piece_view(cell.piece) if cell.piece else None,
        is_light=cell.is_light,
        is_selected=cell.is_selected,
        is_legal_destination=cell.is_legal_destination,
        is_capture_hint=cell.is_capture_hint,
        is_last_move=cell.is_last_move_from or cell.is_last_move_to,
        file_label=cell.file_label,
        rank_label=cell.rank_label,
    )
