"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.square import Square
from src.core.exceptions import InvalidRequestError, InvalidSquareError
from src.core.shared_types import Color, Orientation, PieceKind
from src.interaction.promotion import PROMOTION_CHOICES

SquareName = str


# --- REQUEST MODELS ---
class ClickRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        try:
            Square.from_algebraic(value)
        except InvalidSquareError as exc:
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            ) from exc
        return value


class PromotionChoiceRequest(BaseModel):
    kind: PieceKind

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: PieceKind) -> PieceKind:
        if value not in PROMOTION_CHOICES:
            raise InvalidRequestError(
                f"Cannot promote to {value}. Pick one of {', '.join(PROMOTION_CHOICES)}."
            )
        return value


class OrientationRequest(BaseModel):
    orientation: Orientation


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    color: Color
    kind: PieceKind
    glyph: str


class SquareView(BaseModel):
    square: SquareName
    piece: Optional[PieceView]
    is_light: bool
    is_selected: bool
    is_legal_destination: bool
    is_capture_hint: bool
    is_last_move: bool
    file_label: Optional[str]
    rank_label: Optional[str]


class SelectionView(BaseModel):
    origin: Optional[SquareName]
    legal_destinations: list[SquareName]


class PromotionView(BaseModel):
    from_square: SquareName
    to_square: SquareName
    color: Color
    choices: list[PieceView]


class StatusView(BaseModel):
    turn: Color
    in_check: bool
    is_over: bool
    text: str


class SessionResponse(BaseModel):
    orientation: Orientation
    # top row first, as the board should be drawn for the current orientation
    board: list[list[SquareView]]
    selection: SelectionView
    promotion: Optional[PromotionView]
    move_history: list[str]
    move_rows: list[str]
    status: StatusView
    last_error: Optional[str] = None
